from dataclasses import dataclass, field
from typing import Any

from exchange_data.enums import OrderType, wire_value


@dataclass
class OfferingInfo:
    offering_name: str | None = None
    description: str | None = None
    asset_info: dict[str, Any] = field(default_factory=dict)
    supplier_fee_rate: float | None = None

    @staticmethod
    def from_dict(d: dict[str, Any]) -> "OfferingInfo":
        d = d or {}
        return OfferingInfo(
            offering_name=d.get("offering_name"),
            description=d.get("description"),
            asset_info=d.get("asset_info"),
            supplier_fee_rate=d.get("supplier_fee_rate"),
        )

    def to_payload(self) -> dict[str, Any]:
        return {
            "offering_name": self.offering_name,
            "description": self.description,
            "asset_info": self.asset_info,
            "supplier_fee_rate": self.supplier_fee_rate,
        }


@dataclass
class OrderInfo:
    order_type: OrderType | str | None = None
    unit_count: int | None = None
    unit_price: float | None = None
    expiration: str | None = None

    @staticmethod
    def from_dict(d: dict[str, Any]) -> "OrderInfo":
        d = d or {}
        return OrderInfo(
            order_type=d.get("order_type"),
            unit_count=d.get("unit_count"),
            unit_price=d.get("unit_price"),
            expiration=d.get("expiration"),
        )

    def to_payload(self) -> dict[str, Any]:
        return {
            "order_type": wire_value(self.order_type),
            "unit_count": self.unit_count,
            "unit_price": self.unit_price,
            "expiration": self.expiration,
        }
