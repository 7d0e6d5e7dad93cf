from enum import Enum


class FundingAction(str, Enum):
    DEPOSIT_DIRECT = "deposit.direct"
    WITHDRAW_DIRECT = "withdraw.direct"


class OrderType(str, Enum):
    BUY = "buy"
    SELL = "sell"


def wire_value(value):
    """Return the wire string for an enum member, or the value untouched."""
    return value.value if isinstance(value, Enum) else value
