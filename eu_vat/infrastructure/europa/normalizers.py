# ============================================================================
# SCOPE: INFRASTRUCTURE LAYER (Europa VIES)
# Description: Input normalization for VIES requests
# ============================================================================
"""Input normalization for the VIES client.

VIES expects upper-case two-letter country codes and bare VAT numbers
(no country prefix, no separators).
"""

import re

_SEPARATORS = re.compile(r"[\s.,\-]")


def normalize_country_code(country_code: str) -> str:
    """Normalize a country code for transmission.

    Args:
        country_code: Country code in any case.

    Returns:
        Upper-cased country code without surrounding whitespace.
    """
    return country_code.strip().upper()


def sanitize_vat_number(vat_number: str, country_code: str | None = None) -> str:
    """Strip separators and a leading country prefix from a VAT number.

    Args:
        vat_number: VAT number as typed by a user (e.g. "FR 12-345.678").
        country_code: Country code whose prefix should be removed.

    Returns:
        Bare VAT number (e.g. "12345678").
    """
    cleaned = _SEPARATORS.sub("", vat_number)

    if country_code:
        prefix = normalize_country_code(country_code)
        if cleaned.upper().startswith(prefix):
            cleaned = cleaned[len(prefix):]

    return cleaned
