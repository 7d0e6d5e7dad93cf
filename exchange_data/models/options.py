import os
from collections.abc import Awaitable, Callable, Mapping
from dataclasses import dataclass
from typing import Any, Protocol

# (error_message, result): exactly one of the two is set. May return an awaitable.
Callback = Callable[[str | None, Any], Awaitable[None] | None]


class IdentityDelegate(Protocol):
    """Host-supplied capability that produces a short-lived bearer token on demand."""

    async def get_token(self) -> str | None: ...


@dataclass
class CallOptions:
    callback: Callback | None = None


def _env_flag(value: str | None) -> bool:
    return (value or "").strip().lower() in ("1", "true", "yes", "on")


@dataclass
class ClientOptions:
    log_requests: bool = False
    log_responses: bool = False
    global_callback: Callback | None = None
    throw_handled_errors: bool = False
    # Whether the host runtime can supply delegate tokens. Fixed at construction.
    delegate_tokens: bool = True
    timeout: float | None = None

    @staticmethod
    def from_env(environ: Mapping[str, str] | None = None) -> "ClientOptions":
        env = os.environ if environ is None else environ
        timeout_raw = env.get("EXCHANGE_TIMEOUT")
        return ClientOptions(
            log_requests=_env_flag(env.get("EXCHANGE_LOG_REQUESTS")),
            log_responses=_env_flag(env.get("EXCHANGE_LOG_RESPONSES")),
            throw_handled_errors=_env_flag(env.get("EXCHANGE_THROW_HANDLED_ERRORS")),
            timeout=float(timeout_raw) if timeout_raw else None,
        )
