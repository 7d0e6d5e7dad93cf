"""
Public offerings API module for browsing active offerings and their markets.
"""
from typing import TYPE_CHECKING, Any

from exchange_api import endpoints
from exchange_data.models.options import CallOptions

if TYPE_CHECKING:
    from exchange_api.client import ExchangeClient


class PublicOfferingsAPI:
    """Public offering endpoints."""

    def __init__(self, client: "ExchangeClient"):
        self.client = client

    async def list(self, call_options: CallOptions | None = None) -> Any:
        """List public offerings (POST /PublicOfferings)."""
        return await self.client.dispatcher.dispatch(endpoints.PUBLIC_OFFERINGS, {}, call_options)

    async def get(self, offering_id, call_options: CallOptions | None = None) -> Any:
        """Fetch a public offering (POST /PublicOffering)."""
        body = {"offering_id": offering_id}
        return await self.client.dispatcher.dispatch(endpoints.PUBLIC_OFFERING, body, call_options)

    async def get_market(self, offering_id, call_options: CallOptions | None = None) -> Any:
        """Fetch the market for a public offering (POST /PublicOffering/Market)."""
        body = {"offering_id": offering_id}
        return await self.client.dispatcher.dispatch(endpoints.PUBLIC_OFFERING_MARKET, body, call_options)
