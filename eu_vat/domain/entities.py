# ============================================================================
# SCOPE: DOMAIN LAYER
# Description: VAT lookup result entity.
# ============================================================================
"""
VAT Details Entity

Immutable snapshot of a single VIES lookup. Produced once per request,
it has no lifecycle of its own.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

NOT_AVAILABLE = "N/A"
NOT_PROVIDED = "Not provided"


@dataclass(frozen=True)
class VatDetails:
    """
    Result of a VAT number lookup.

    Attributes:
        country_code: Country code echoed by the service
        vat_number: VAT number echoed by the service
        request_date: Date of the request as returned by VIES (e.g. "2024-05-02+02:00")
        valid: Whether the VAT number is registered and active
        name: Registered trader name, "N/A" when the service omits it
        address: Registered trader address, "N/A" when the service omits it
        consultation_number: Approximate-match request identifier,
            "Not provided" when no consultation was requested or returned
    """

    country_code: str | None
    vat_number: str | None
    request_date: str | None
    valid: bool
    name: str = NOT_AVAILABLE
    address: str = NOT_AVAILABLE
    consultation_number: str | None = NOT_PROVIDED

    @classmethod
    def from_response(
        cls,
        check_vat: Mapping[str, Any],
        approx: Mapping[str, Any] | None = None,
    ) -> "VatDetails":
        """
        Build details from parsed checkVat / checkVatApprox responses.

        Args:
            check_vat: Fields of the checkVat response
            approx: Fields of the checkVatApprox response, if one was made

        Returns:
            VatDetails with missing fields replaced by their defaults
        """
        consultation_number = None
        if approx is not None:
            consultation_number = approx.get("requestIdentifier")

        return cls(
            country_code=check_vat.get("countryCode"),
            vat_number=check_vat.get("vatNumber"),
            request_date=check_vat.get("requestDate"),
            valid=_as_bool(check_vat.get("valid")),
            name=_or_default(check_vat.get("name"), NOT_AVAILABLE),
            address=_or_default(check_vat.get("address"), NOT_AVAILABLE),
            consultation_number=_or_default(consultation_number, NOT_PROVIDED),
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to a plain mapping using the service's field names."""
        return {
            "countryCode": self.country_code,
            "vatNumber": self.vat_number,
            "requestDate": self.request_date,
            "valid": self.valid,
            "name": self.name,
            "address": self.address,
            "consultationNumber": self.consultation_number,
        }


def _or_default(value: Any, default: str) -> str:
    return default if value is None else value


def _as_bool(value: Any) -> bool:
    # xsd:boolean allows "true"/"false" and "1"/"0"
    if value is None:
        return False
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() in ("true", "1")
