"""Error taxonomy shared by the HTTP shell, handlers and the Discord client."""

from enum import Enum
from typing import Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from bookmarker.adapters.discord.messages import PlatformErrorResponse


class AuthFailure(Enum):
    MISSING_HEADER = "missing_header"
    MALFORMED_KEY = "malformed_key"
    MALFORMED_SIGNATURE = "malformed_signature"
    MISMATCH = "mismatch"


class AuthError(Exception):
    """The request signature could not be verified. Always answered with 401."""

    def __init__(self, reason: AuthFailure, detail: str = ""):
        self.reason = reason
        self.detail = detail
        super().__init__(f"{reason.value}: {detail}" if detail else reason.value)


class RequestShapeError(Exception):
    """The interaction payload is malformed or not one we handle. Answered with 400."""
    pass


class ApiErrorKind(Enum):
    TRANSPORT = "transport"
    SERVER_FAULT = "server_fault"
    REJECTED = "rejected"


class ApiError(Exception):
    """A call to the Discord REST API failed."""

    def __init__(
        self,
        kind: ApiErrorKind,
        detail: str,
        status: Optional[int] = None,
        error: Optional["PlatformErrorResponse"] = None,
    ):
        self.kind = kind
        self.detail = detail
        self.status = status
        self.error = error
        super().__init__(f"Discord API {kind.value} error: {detail}")

    @classmethod
    def transport(cls, detail: str) -> "ApiError":
        return cls(ApiErrorKind.TRANSPORT, detail)

    @classmethod
    def server_fault(cls, status: int) -> "ApiError":
        return cls(ApiErrorKind.SERVER_FAULT, f"HTTP {status}", status=status)

    @classmethod
    def rejected(
        cls,
        status: int,
        detail: str,
        error: Optional["PlatformErrorResponse"] = None,
    ) -> "ApiError":
        return cls(ApiErrorKind.REJECTED, f"HTTP {status}: {detail}", status=status, error=error)
