"""
Permissions API module for granting and revoking per-account user permissions.
"""
from typing import TYPE_CHECKING, Any

from exchange_api import endpoints
from exchange_data.models.options import CallOptions

if TYPE_CHECKING:
    from exchange_api.client import ExchangeClient


class PermissionsAPI:
    """Permission endpoints."""

    def __init__(self, client: "ExchangeClient"):
        self.client = client

    async def list(self, account_id, call_options: CallOptions | None = None) -> Any:
        """List permissions on an account (POST /Permissions)."""
        body = {"account_id": account_id}
        return await self.client.dispatcher.dispatch(endpoints.PERMISSIONS, body, call_options)

    async def set(self, account_id, user_id, permission: str, call_options: CallOptions | None = None) -> Any:
        """Grant a permission to a user (POST /SetPermission)."""
        body = {"account_id": account_id, "user_id": user_id, "permission": permission}
        return await self.client.dispatcher.dispatch(endpoints.SET_PERMISSION, body, call_options)

    async def unset(self, account_id, user_id, permission: str, call_options: CallOptions | None = None) -> Any:
        """Revoke a permission from a user (POST /UnsetPermission)."""
        body = {"account_id": account_id, "user_id": user_id, "permission": permission}
        return await self.client.dispatcher.dispatch(endpoints.UNSET_PERMISSION, body, call_options)
