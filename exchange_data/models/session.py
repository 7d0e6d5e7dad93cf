from dataclasses import dataclass
from typing import Any


@dataclass
class User:
    user_id: Any = None
    user_name: str | None = None
    email_address: str | None = None

    @staticmethod
    def from_dict(d: dict[str, Any]) -> "User":
        d = d or {}
        return User(
            user_id=d.get("user_id"),
            user_name=d.get("user_name"),
            email_address=d.get("email_address"),
        )


@dataclass
class Session:
    """Active identity context.

    Directly authenticated sessions carry a ``session_token``. Delegate-backed
    sessions only carry the user; their tokens are fetched fresh per call.
    """

    session_token: str | None = None
    user: User | None = None

    @staticmethod
    def from_dict(d: dict[str, Any]) -> "Session":
        d = d or {}
        user_dict = d.get("User")
        return Session(
            session_token=d.get("session_token"),
            user=User.from_dict(user_dict) if isinstance(user_dict, dict) else None,
        )
