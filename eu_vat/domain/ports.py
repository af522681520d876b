# ============================================================================
# SCOPE: DOMAIN LAYER
# Description: VAT provider port.
# ============================================================================
"""VAT Provider Port.

Defines the interface that VAT lookup backends implement.
"""

from typing import Protocol, runtime_checkable

from .entities import VatDetails


@runtime_checkable
class VatProvider(Protocol):
    """Interface for VAT lookup providers.

    Implementations: EuropaVatClient
    """

    def get_resource(self, vat_number: str, country_code: str) -> VatDetails:
        """Look up a VAT number.

        Args:
            vat_number: VAT number without country prefix.
            country_code: Two-letter country code (any case).

        Returns:
            VatDetails for the number.

        Raises:
            VatException: If the provider cannot answer.
        """
        ...
