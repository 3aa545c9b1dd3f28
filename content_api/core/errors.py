"""Error Hierarchy — typed exceptions for every Content API failure mode.

Invariants:
    - Every error has a code (str), message (str) and http_status (int)
    - to_response() always produces the {"message": ...} envelope
    - 5xx errors never expose their internal message to clients
    - Store failures carry a StoreErrorKind; only NOT_FOUND maps to 404

Design Decisions:
    - Single hierarchy with ContentApiError base: one global handler catches all
    - StoreErrorKind enum instead of matching driver-specific error codes
"""

from enum import Enum


INTERNAL_ERROR_MESSAGE = "internal error"


class StoreErrorKind(str, Enum):
    """Classified failure of a Content Store operation."""
    NOT_FOUND = "not_found"
    CONSTRAINT_VIOLATION = "constraint_violation"
    CONNECTION_FAILURE = "connection_failure"
    UNKNOWN = "unknown"


class ContentApiError(Exception):
    """Base exception for all Content API errors."""

    def __init__(self, message: str, code: str, http_status: int = 500):
        super().__init__(message)
        self.message = message
        self.code = code
        self.http_status = http_status

    @property
    def is_server_error(self) -> bool:
        return self.http_status >= 500

    def to_response(self) -> dict:
        """Convert to the REST error envelope."""
        if self.is_server_error:
            return {"message": INTERNAL_ERROR_MESSAGE}
        return {"message": self.message}


# ─── Validation Errors (400) ────────────────────────────────────

class InvalidIdError(ContentApiError):
    """Path id is not a whole integer."""
    def __init__(self, raw_id: str):
        super().__init__("invalid id", "INVALID_ID", 400)
        self.raw_id = raw_id


class TitleRequiredError(ContentApiError):
    """Create/replace payload has no usable title."""
    def __init__(self):
        super().__init__("title is required", "TITLE_REQUIRED", 400)


class InvalidBodyError(ContentApiError):
    """Request body could not be decoded into a content payload."""
    def __init__(self, reason: str = ""):
        super().__init__("invalid request body", "INVALID_BODY", 400)
        self.reason = reason


# ─── Not Found (404) ────────────────────────────────────────────

class ContentNotFoundError(ContentApiError):
    """No content exists for the requested id."""
    def __init__(self, content_id: int):
        super().__init__("not found", "NOT_FOUND", 404)
        self.content_id = content_id


# ─── Store Errors ───────────────────────────────────────────────

class ContentStoreError(ContentApiError):
    """Content Store operation failed."""

    def __init__(
        self,
        kind: StoreErrorKind,
        operation: str,
        detail: str = "",
        content_id: int | None = None,
    ):
        if kind is StoreErrorKind.NOT_FOUND:
            message, http_status = "not found", 404
        else:
            message = f"Store {operation} failed ({kind.value})"
            if detail:
                message = f"{message}: {detail}"
            http_status = 500
        super().__init__(message, f"STORE_{kind.name}", http_status)
        self.kind = kind
        self.operation = operation
        self.content_id = content_id


# ─── Startup Errors ─────────────────────────────────────────────

class ConfigurationError(Exception):
    """Settings could not be loaded from the environment."""

    def __init__(self, message: str, fields: list[str] | None = None):
        super().__init__(message)
        self.message = message
        self.fields = fields or []
