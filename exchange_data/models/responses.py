from dataclasses import dataclass, field
from typing import Any


@dataclass
class ApiResponse:
    """Decoded wire body: ``{"result": ...}`` on success, ``{"error": "..."}`` on failure."""

    result: Any = None
    error: str | None = None
    body: dict[str, Any] = field(default_factory=dict, repr=False)

    @staticmethod
    def from_body(body: dict[str, Any]) -> "ApiResponse":
        error = body.get("error") or None
        # A populated error never reports a usable result.
        result = None if error else body.get("result")
        return ApiResponse(result=result, error=str(error) if error else None, body=body)
