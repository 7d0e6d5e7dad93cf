"""
Server API module for session metadata, asset type specifications and user lookup.
"""
from typing import TYPE_CHECKING, Any

from exchange_api import endpoints
from exchange_data.models.options import CallOptions

if TYPE_CHECKING:
    from exchange_api.client import ExchangeClient


class ServerAPI:
    """Server endpoints."""

    def __init__(self, client: "ExchangeClient"):
        self.client = client

    async def get_server_info(self, call_options: CallOptions | None = None) -> Any:
        """Fetch server information (POST /Session/ServerInfo)."""
        return await self.client.dispatcher.dispatch(endpoints.SESSION_SERVER_INFO, {}, call_options)

    async def get_server_error(self, call_options: CallOptions | None = None) -> Any:
        """Ask the server to produce an error (POST /Session/ServerError)."""
        return await self.client.dispatcher.dispatch(endpoints.SESSION_SERVER_ERROR, {}, call_options)

    async def get_asset_type(self, asset_type: str, call_options: CallOptions | None = None) -> Any:
        """Fetch an asset type specification (POST /AssetTypeSpecifications)."""
        body = {"asset_type": asset_type}
        return await self.client.dispatcher.dispatch(endpoints.ASSET_TYPE_SPECIFICATIONS, body, call_options)

    async def get_user(self, call_options: CallOptions | None = None) -> Any:
        """Fetch the current user (POST /User)."""
        return await self.client.dispatcher.dispatch(endpoints.USER, {}, call_options)

    async def lookup_user(self, email_address: str, call_options: CallOptions | None = None) -> Any:
        """Look up a user by email address (POST /User/Lookup)."""
        body = {"email_address": email_address}
        return await self.client.dispatcher.dispatch(endpoints.USER_LOOKUP, body, call_options)
