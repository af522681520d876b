# ============================================================================
# SCOPE: INFRASTRUCTURE LAYER (Europa VIES)
# Description: VIES SOAP client module.
# ============================================================================
"""Europa VIES SOAP Client Module.

Provides the SOAP client for the EU VIES checkVatService.

Components:
- EuropaVatClient: Main client implementing VatProvider
- SoapRequestBuilder: Builds SOAP XML envelopes
- SoapResponseParser: Parses SOAP XML responses
- WsdlLoader: Resolves the endpoint from the service WSDL
- OperationRegistry: Operation request shapes

Usage:
    from eu_vat.infrastructure.europa import EuropaVatClient

    with EuropaVatClient() as client:
        details = client.get_resource_with_requester(
            "123456789", "fr",
            requester_vat_number="009444452B01",
            requester_country_code="nl",
        )
"""

from .client import EuropaVatClient
from .normalizers import normalize_country_code, sanitize_vat_number
from .operation_registry import (
    CHECK_VAT,
    CHECK_VAT_APPROX,
    OperationConfig,
    OperationRegistry,
    get_default_registry,
)
from .response_parser import SoapFault, SoapResponseParser
from .soap_builder import SoapRequestBuilder
from .wsdl_loader import WsdlDescription, WsdlLoader

__all__ = [
    "EuropaVatClient",
    "SoapRequestBuilder",
    "SoapResponseParser",
    "SoapFault",
    "WsdlLoader",
    "WsdlDescription",
    "OperationRegistry",
    "OperationConfig",
    "get_default_registry",
    "CHECK_VAT",
    "CHECK_VAT_APPROX",
    "normalize_country_code",
    "sanitize_vat_number",
]
