"""
VAT Validator

Convenience facade over a VatProvider: sanitizes the VAT number, runs
the lookup once and exposes the result through simple accessors.

Example:
    validator = VatValidator(EuropaVatClient(), "FR 123 456 789", "fr")
    if validator.is_valid():
        print(validator.get_name())
"""

import logging

from .domain import VatDetails, VatProvider
from .infrastructure.europa.normalizers import normalize_country_code, sanitize_vat_number

logger = logging.getLogger(__name__)


class VatValidator:
    """Validates one VAT number against a provider."""

    def __init__(self, provider: VatProvider, vat_number: str, country_code: str):
        """
        Initialize validator.

        Args:
            provider: Lookup backend (e.g. EuropaVatClient)
            vat_number: VAT number, with or without country prefix and separators
            country_code: Two-letter country code (any case)
        """
        self._provider = provider
        self._country_code = normalize_country_code(country_code)
        self._vat_number = sanitize_vat_number(vat_number, self._country_code)
        self._details: VatDetails | None = None

    @property
    def vat_number(self) -> str:
        """Sanitized VAT number sent to the provider."""
        return self._vat_number

    @property
    def country_code(self) -> str:
        """Normalized country code sent to the provider."""
        return self._country_code

    def check(self) -> VatDetails:
        """
        Run the lookup and cache its result.

        Raises:
            VatException: If the provider cannot answer
        """
        logger.debug(f"Checking VAT number {self._country_code}{self._vat_number}")
        self._details = self._provider.get_resource(self._vat_number, self._country_code)
        return self._details

    def get_details(self) -> VatDetails:
        """Cached result, looked up on first access."""
        if self._details is None:
            return self.check()
        return self._details

    def is_valid(self) -> bool:
        return self.get_details().valid

    def get_name(self) -> str:
        return self.get_details().name

    def get_address(self) -> str:
        return self.get_details().address

    def get_request_date(self) -> str | None:
        return self.get_details().request_date

    def get_country_code(self) -> str | None:
        return self.get_details().country_code

    def get_vat_number(self) -> str | None:
        return self.get_details().vat_number

    def get_consultation_number(self) -> str | None:
        return self.get_details().consultation_number
