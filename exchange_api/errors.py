"""
Error taxonomy for the exchange client.

Every failure is an ExchangeClientError tagged with an ErrorKind. The
dispatcher normalizes failures into a CommandError whose message names the
command that failed.
"""
import errno
from enum import Enum


class ErrorKind(Enum):
    EMPTY_RESPONSE = "EmptyResponseError"
    NETWORK = "NetworkError"
    API = "ApiError"
    PRECONDITION = "PreconditionError"
    GENERIC = "GenericError"


class ExchangeClientError(Exception):
    def __init__(
        self,
        kind: ErrorKind,
        message: str,
        *,
        status_code: int | None = None,
        status_text: str | None = None,
        api_message: str | None = None,
        code: str | None = None,
    ):
        super().__init__(message)
        self.kind = kind
        self.message = message
        self.status_code = status_code
        self.status_text = status_text
        self.api_message = api_message
        self.code = code

    @classmethod
    def empty_response(cls, code: str | None = None) -> "ExchangeClientError":
        return cls(ErrorKind.EMPTY_RESPONSE, "Received an empty response from the server.", code=code)

    @classmethod
    def network(cls, status_code: int, status_text: str | None) -> "ExchangeClientError":
        return cls(
            ErrorKind.NETWORK,
            f"Network error: [{status_code}] {status_text or ''}".rstrip(),
            status_code=status_code,
            status_text=status_text,
        )

    @classmethod
    def api(cls, api_message: str) -> "ExchangeClientError":
        return cls(ErrorKind.API, api_message, api_message=api_message)

    @classmethod
    def generic(cls, message: str, code: str | None = None) -> "ExchangeClientError":
        return cls(ErrorKind.GENERIC, message, code=code)

    def compose(self, command: str) -> str:
        """Render the message reported to callbacks and callers."""
        message = f"In command [{command}]; {self.message}"
        if self.code and self.kind not in (ErrorKind.NETWORK, ErrorKind.API):
            message += f" [{self.code}]"
        return message


class PreconditionError(ExchangeClientError):
    """A client-side guard failed before any request was sent."""

    def __init__(self, message: str):
        super().__init__(ErrorKind.PRECONDITION, message)


class CommandError(ExchangeClientError):
    """Normalized failure of a single dispatched command."""

    def __init__(self, command: str, error: ExchangeClientError):
        super().__init__(
            error.kind,
            error.compose(command),
            status_code=error.status_code,
            status_text=error.status_text,
            api_message=error.api_message,
            code=error.code,
        )
        self.command = command
        self.error = error


def os_error_code(exc: BaseException) -> str | None:
    """
    Find the first OS-level error code (e.g. ECONNREFUSED) in an exception chain.
    Follows __cause__/__context__, urllib3's ``reason`` and wrapped exception args.
    """
    seen: set[int] = set()
    pending: list[BaseException | None] = [exc]
    while pending:
        current = pending.pop(0)
        if current is None or id(current) in seen:
            continue
        seen.add(id(current))
        number = getattr(current, "errno", None)
        if isinstance(number, int):
            return errno.errorcode.get(number, str(number))
        reason = getattr(current, "reason", None)
        if isinstance(reason, BaseException):
            pending.append(reason)
        pending.extend(arg for arg in getattr(current, "args", ()) if isinstance(arg, BaseException))
        pending.append(current.__cause__)
        pending.append(current.__context__)
    return None
