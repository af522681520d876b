"""
Domain Exceptions

Every failure that leaves the package is raised as one of these. Transport
and XML errors are translated at the infrastructure boundary.
"""

from typing import Any


class VatError(Exception):
    """
    Base exception for all eu_vat errors.
    """

    def __init__(self, message: str, code: str | None = None, details: dict[str, Any] | None = None):
        """
        Initialize error.

        Args:
            message: Human-readable error message
            code: Machine-readable error code (e.g., "MS_UNAVAILABLE")
            details: Additional context about the error
        """
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__.upper()
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to dictionary for API responses."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }


class VatException(VatError):
    """
    Raised when the VAT service cannot be reached or answers with a fault.

    Covers both client construction (WSDL loading) and lookups. The
    original fault text is embedded in the message.
    """

    def __init__(self, message: str, *, fault: str | None = None, code: str | None = None):
        details = {"fault": fault} if fault is not None else None
        super().__init__(message, code or "VAT_SERVICE_ERROR", details)
        self.fault = fault
