# =============================================================================
# core/errors.py  —  Error taxonomy for the holiday service
# =============================================================================
#
# Every error raised by core/ derives from HolidayServiceError, so the tools
# layer can catch one type and turn it into an {"error": ...} dict.
#
#   ConfigurationError  missing API credential (fatal, never retried)
#   TransportError      HTTP-level failure talking to Calendarific
#   ProviderError       Calendarific answered, but with a failure code
#   ValidationError     structured input rejected before any network call
#   OperationError      wrapper added once at the query-operation boundary
# =============================================================================

from typing import Any, Optional


class HolidayServiceError(RuntimeError):
    """Base error for the holiday core."""


class ConfigurationError(HolidayServiceError):
    """Required configuration (the Calendarific API key) is missing."""


class TransportError(HolidayServiceError):
    """The provider could not be reached or returned a non-2xx response."""

    def __init__(self, status: Optional[int], body: str = ""):
        self.status = status
        self.body = body
        if status is None:
            message = f"Calendarific request failed: {body}"
        else:
            message = f"Calendarific API error: HTTP {status}. {body}".rstrip()
        super().__init__(message)


class ProviderError(HolidayServiceError):
    """The provider responded, but the payload signals a logical failure."""

    def __init__(self, message: str, code: Optional[int] = None):
        self.code = code
        super().__init__(message)


class ValidationError(HolidayServiceError):
    """Structured tool input failed its schema constraints."""

    def __init__(self, message: str, errors: Optional[list[dict[str, Any]]] = None):
        self.errors = errors or []
        super().__init__(message)


class OperationError(HolidayServiceError):
    """A query operation failed; carries the operation name and the cause."""

    def __init__(self, operation: str, cause: BaseException):
        self.operation = operation
        self.cause = cause
        super().__init__(f"Failed to {operation}: {cause}")
