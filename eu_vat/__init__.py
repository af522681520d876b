"""EU VAT number validation against the VIES SOAP service."""

__version__ = "1.0.0"

from .domain import NOT_AVAILABLE, NOT_PROVIDED, VatDetails, VatError, VatException, VatProvider  # noqa: E402
from .infrastructure.europa import EuropaVatClient  # noqa: E402
from .validator import VatValidator  # noqa: E402

__all__ = [
    "__version__",
    "EuropaVatClient",
    "VatDetails",
    "VatError",
    "VatException",
    "VatProvider",
    "VatValidator",
    "NOT_AVAILABLE",
    "NOT_PROVIDED",
]
