"""
Exchange client module providing centralized access to the exchange API endpoints.
Orchestrates sub-API modules for server, accounts, permissions, offerings and orders.
"""
import logging

from exchange_api import endpoints
from exchange_api.accounts import AccountsAPI
from exchange_api.dispatcher import Dispatcher
from exchange_api.handle_requests import RequestHandler
from exchange_api.offerings import OfferingsAPI
from exchange_api.orders import OrdersAPI
from exchange_api.permissions import PermissionsAPI
from exchange_api.public_offerings import PublicOfferingsAPI
from exchange_api.server import ServerAPI
from exchange_api.session import SessionState
from exchange_data.models.options import ClientOptions, IdentityDelegate
from exchange_data.models.session import Session, User


class ExchangeClient:
    """Root client that centralizes sub-APIs and holds shared HTTP/session state."""

    def __init__(self, server_url: str, options: ClientOptions | None = None):
        if not server_url:
            raise ValueError("server_url is required")
        self.options = options or ClientOptions()
        self.http = RequestHandler(server_url, timeout=self.options.timeout)
        self.state = SessionState(delegate_tokens=self.options.delegate_tokens)
        self.dispatcher = Dispatcher(self.http, self.state, self.options)
        self.server = ServerAPI(self)
        self.accounts = AccountsAPI(self)
        self.permissions = PermissionsAPI(self)
        self.offerings = OfferingsAPI(self)
        self.public_offerings = PublicOfferingsAPI(self)
        self.orders = OrdersAPI(self)

    @property
    def user(self) -> User | None:
        return self.state.user

    async def authenticate(self, identifier: str, secret: str) -> User | None:
        """Sign in with credentials and keep the returned session token for later calls."""
        result = await self.dispatcher.dispatch(
            endpoints.SESSION_SIGNIN,
            {"email_address": identifier, "password": secret},
        )
        session = Session.from_dict(result) if isinstance(result, dict) else None
        self.state.sign_in(session)
        if session is None or session.user is None:
            logging.info("Sign-in returned no session")
            return None
        logging.info(f"Signed in as {session.user.user_name}")
        return session.user

    async def connect(self, delegate: IdentityDelegate) -> User | None:
        """Authenticate through an identity delegate that issues tokens per call."""
        self.state.attach_delegate(delegate)
        result = await self.dispatcher.dispatch(endpoints.USER, {})
        user = User.from_dict(result) if isinstance(result, dict) else None
        self.state.set_user(user)
        if user is not None:
            logging.info(f"Connected as {user.user_name}")
        return user

    def sign_out(self):
        """Forget the local session and delegate. No request is sent."""
        self.state.clear()

    def close(self):
        self.http.close()
