"""Domain layer: result entity, errors and the provider port."""

from .entities import NOT_AVAILABLE, NOT_PROVIDED, VatDetails
from .exceptions import VatError, VatException
from .ports import VatProvider

__all__ = [
    "NOT_AVAILABLE",
    "NOT_PROVIDED",
    "VatDetails",
    "VatError",
    "VatException",
    "VatProvider",
]
