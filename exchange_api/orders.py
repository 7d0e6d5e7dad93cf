"""
Orders API module for placing, closing and inspecting orders.
"""
from typing import TYPE_CHECKING, Any

from exchange_api import endpoints
from exchange_api.errors import PreconditionError
from exchange_data.models.options import CallOptions
from exchange_data.models.trading import OrderInfo

if TYPE_CHECKING:
    from exchange_api.client import ExchangeClient


class OrdersAPI:
    """Order endpoints."""

    def __init__(self, client: "ExchangeClient"):
        self.client = client

    async def list(self, account_id, include_closed: bool = False, call_options: CallOptions | None = None) -> Any:
        """List an account's orders (POST /Orders)."""
        body = {"account_id": account_id, "include_closed": include_closed}
        return await self.client.dispatcher.dispatch(endpoints.ORDERS, body, call_options)

    async def get(self, order_id, call_options: CallOptions | None = None) -> Any:
        """Fetch a single order (POST /Order)."""
        body = {"order_id": order_id}
        return await self.client.dispatcher.dispatch(endpoints.ORDER, body, call_options)

    async def create(
        self,
        account_id,
        offering_id,
        order_info: OrderInfo | dict,
        call_options: CallOptions | None = None,
    ) -> Any:
        """Place an order on behalf of the authenticated user (POST /Order/Create).

        Raises PreconditionError without contacting the server when no user is
        authenticated.
        """
        user = self.client.state.user
        if user is None:
            raise PreconditionError("You must call authenticate() or connect() before creating orders.")
        if not isinstance(order_info, OrderInfo):
            order_info = OrderInfo.from_dict(order_info)
        body = {
            "user_id": user.user_id,
            "account_id": account_id,
            "offering_id": offering_id,
            **order_info.to_payload(),
        }
        return await self.client.dispatcher.dispatch(endpoints.ORDER_CREATE, body, call_options)

    async def close(self, order_id, call_options: CallOptions | None = None) -> Any:
        """Close an order (POST /Order/Close)."""
        body = {"order_id": order_id}
        return await self.client.dispatcher.dispatch(endpoints.ORDER_CLOSE, body, call_options)

    async def get_transactions(self, order_id, call_options: CallOptions | None = None) -> Any:
        """Fetch an order's transactions (POST /Order/Transactions)."""
        body = {"order_id": order_id}
        return await self.client.dispatcher.dispatch(endpoints.ORDER_TRANSACTIONS, body, call_options)
