"""
Offerings API module for managing an account's offerings.
"""
from typing import TYPE_CHECKING, Any

from exchange_api import endpoints
from exchange_data.models.options import CallOptions
from exchange_data.models.trading import OfferingInfo

if TYPE_CHECKING:
    from exchange_api.client import ExchangeClient


class OfferingsAPI:
    """Offering endpoints."""

    def __init__(self, client: "ExchangeClient"):
        self.client = client

    async def list(self, account_id, call_options: CallOptions | None = None) -> Any:
        """List an account's offerings (POST /Offerings)."""
        body = {"account_id": account_id}
        return await self.client.dispatcher.dispatch(endpoints.OFFERINGS, body, call_options)

    async def get(self, offering_id, call_options: CallOptions | None = None) -> Any:
        """Fetch a single offering (POST /Offering)."""
        body = {"offering_id": offering_id}
        return await self.client.dispatcher.dispatch(endpoints.OFFERING, body, call_options)

    async def create(self, account_id, asset_type: str, call_options: CallOptions | None = None) -> Any:
        """Create an offering (POST /Offering/Create)."""
        body = {"account_id": account_id, "asset_type": asset_type}
        return await self.client.dispatcher.dispatch(endpoints.OFFERING_CREATE, body, call_options)

    async def destroy(self, offering_id, call_options: CallOptions | None = None) -> Any:
        """Delete an offering (POST /Offering/Delete)."""
        body = {"offering_id": offering_id}
        return await self.client.dispatcher.dispatch(endpoints.OFFERING_DELETE, body, call_options)

    async def update(
        self,
        offering_id,
        offering_info: OfferingInfo | dict,
        call_options: CallOptions | None = None,
    ) -> Any:
        """Save an offering's editable fields (POST /Offering/Save)."""
        if not isinstance(offering_info, OfferingInfo):
            offering_info = OfferingInfo.from_dict(offering_info)
        body = {"offering_id": offering_id, **offering_info.to_payload()}
        return await self.client.dispatcher.dispatch(endpoints.OFFERING_SAVE, body, call_options)

    async def activate(self, offering_id, call_options: CallOptions | None = None) -> Any:
        """Activate an offering (POST /Offering/Activate)."""
        body = {"offering_id": offering_id}
        return await self.client.dispatcher.dispatch(endpoints.OFFERING_ACTIVATE, body, call_options)

    async def pause(self, offering_id, call_options: CallOptions | None = None) -> Any:
        """Pause an offering (POST /Offering/Pause)."""
        body = {"offering_id": offering_id}
        return await self.client.dispatcher.dispatch(endpoints.OFFERING_PAUSE, body, call_options)
