"""
Accounts API module for account lifecycle, asset queries, audits and funding.
"""
import copy
from typing import TYPE_CHECKING, Any

from exchange_api import endpoints
from exchange_data.enums import FundingAction, wire_value
from exchange_data.models.options import CallOptions

if TYPE_CHECKING:
    from exchange_api.client import ExchangeClient


class AccountsAPI:
    """Account endpoints."""

    def __init__(self, client: "ExchangeClient"):
        self.client = client

    async def list(self, call_options: CallOptions | None = None) -> Any:
        """List accounts visible to the current user (POST /Accounts)."""
        return await self.client.dispatcher.dispatch(endpoints.ACCOUNTS, {}, call_options)

    async def get(self, account_id, call_options: CallOptions | None = None) -> Any:
        """Fetch a single account (POST /Account)."""
        body = {"account_id": account_id}
        return await self.client.dispatcher.dispatch(endpoints.ACCOUNT, body, call_options)

    async def create(self, call_options: CallOptions | None = None) -> Any:
        """Create an account (POST /Account/Create)."""
        return await self.client.dispatcher.dispatch(endpoints.ACCOUNT_CREATE, {}, call_options)

    async def destroy(self, account_id, call_options: CallOptions | None = None) -> Any:
        """Destroy an account (POST /Account/Destroy)."""
        body = {"account_id": account_id}
        return await self.client.dispatcher.dispatch(endpoints.ACCOUNT_DESTROY, body, call_options)

    async def rename(self, account_id, account_name: str, call_options: CallOptions | None = None) -> Any:
        """Rename an account (POST /Account/Rename)."""
        body = {"account_id": account_id, "account_name": account_name}
        return await self.client.dispatcher.dispatch(endpoints.ACCOUNT_RENAME, body, call_options)

    async def get_assets(self, account_id, call_options: CallOptions | None = None) -> Any:
        """Fetch the assets held by an account (POST /Account/Assets)."""
        body = {"account_id": account_id}
        return await self.client.dispatcher.dispatch(endpoints.ACCOUNT_ASSETS, body, call_options)

    async def get_asset_summary(self, account_id, resolve_fields=None, call_options: CallOptions | None = None) -> Any:
        """Fetch an account's asset summary (POST /Account/AssetSummary)."""
        body = {"account_id": account_id, "ResolveFields": resolve_fields}
        return await self.client.dispatcher.dispatch(endpoints.ACCOUNT_ASSET_SUMMARY, body, call_options)

    async def get_audits(self, account_id, call_options: CallOptions | None = None) -> Any:
        """Fetch an account's audit trail (POST /Account/Audits)."""
        body = {"account_id": account_id}
        return await self.client.dispatcher.dispatch(endpoints.ACCOUNT_AUDITS, body, call_options)

    async def funding(
        self,
        account_id,
        funding_action: FundingAction | str,
        funding_info: dict | None = None,
        call_options: CallOptions | None = None,
    ) -> Any:
        """Run a funding action against an account (POST /Account/Funding).

        ``funding_info`` is copied, never mutated; ``account_id`` and
        ``funding_action`` are merged on top of it.
        """
        body = copy.deepcopy(dict(funding_info or {}))
        body["account_id"] = account_id
        body["funding_action"] = wire_value(funding_action)
        return await self.client.dispatcher.dispatch(endpoints.ACCOUNT_FUNDING, body, call_options)

    async def test_deposit(self, account_id, amount_cents: int, call_options: CallOptions | None = None) -> Any:
        """Deposit directly into an account, for test environments (POST /Account/Funding)."""
        body = {
            "funding_action": FundingAction.DEPOSIT_DIRECT.value,
            "account_id": account_id,
            "amount_cents": amount_cents,
        }
        return await self.client.dispatcher.dispatch(endpoints.ACCOUNT_FUNDING, body, call_options)

    async def test_withdraw(self, account_id, amount_cents: int, call_options: CallOptions | None = None) -> Any:
        """Withdraw directly from an account, for test environments (POST /Account/Funding)."""
        body = {
            "funding_action": FundingAction.WITHDRAW_DIRECT.value,
            "account_id": account_id,
            "amount_cents": amount_cents,
        }
        return await self.client.dispatcher.dispatch(endpoints.ACCOUNT_FUNDING, body, call_options)
