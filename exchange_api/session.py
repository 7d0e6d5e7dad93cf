"""
Session state: the single identity context used to authorize requests.
"""
from exchange_data.models.options import IdentityDelegate
from exchange_data.models.session import Session, User

SERVICE_NAME = "ExchangeApi"


class SessionState:
    """Holds zero or one active session plus an optional identity delegate.

    Both identity modes are exclusive: switching from one to the other replaces
    the state outright. Nothing here is locked; calls already in flight keep
    whatever credential they resolved.
    """

    def __init__(self, delegate_tokens: bool = True):
        self.session: Session | None = None
        self.delegate: IdentityDelegate | None = None
        self.delegate_tokens = delegate_tokens

    @property
    def user(self) -> User | None:
        return self.session.user if self.session else None

    @property
    def is_authenticated(self) -> bool:
        return self.user is not None

    def sign_in(self, session: Session | None):
        self.session = session
        self.delegate = None

    def attach_delegate(self, delegate: IdentityDelegate):
        self.delegate = delegate
        self.session = Session()

    def set_user(self, user: User | None):
        if self.session is None:
            self.session = Session()
        self.session.user = user

    def clear(self):
        self.session = None
        self.delegate = None

    async def bearer_token(self) -> str | None:
        if self.session and self.session.session_token:
            return self.session.session_token
        if self.delegate is None or not self.delegate_tokens:
            return None
        return await self.delegate.get_token() or None

    def log_label(self) -> str:
        user = self.user
        if user is not None:
            return f"{SERVICE_NAME} as ({user.user_name})"
        return f"{SERVICE_NAME} as (anonymous)"
