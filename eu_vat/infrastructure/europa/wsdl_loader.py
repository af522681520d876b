# ============================================================================
# SCOPE: INFRASTRUCTURE LAYER (Europa VIES)
# Description: WSDL loading for the checkVatService.
# ============================================================================
"""WSDL Loader.

Fetches the service WSDL and extracts what the client needs from it:
the SOAP endpoint address and the declared operation names.
"""

import logging
from dataclasses import dataclass
from xml.etree import ElementTree

import httpx

from .response_parser import SoapFault

logger = logging.getLogger(__name__)

WSDL_NS = "http://schemas.xmlsoap.org/wsdl/"
WSDL_SOAP_NS = "http://schemas.xmlsoap.org/wsdl/soap/"


@dataclass(frozen=True)
class WsdlDescription:
    """Service description extracted from a WSDL document.

    Attributes:
        endpoint: SOAP endpoint URL (soap:address location).
        operations: Operation names declared by the port type.
    """

    endpoint: str
    operations: frozenset[str]

    def supports(self, operation: str) -> bool:
        return operation in self.operations


class WsdlLoader:
    """Loads and parses a WSDL document over HTTP."""

    def __init__(self, http_client: httpx.Client) -> None:
        self._http = http_client

    def load(self, wsdl_url: str) -> WsdlDescription:
        """Fetch and parse a WSDL.

        Args:
            wsdl_url: WSDL location.

        Returns:
            WsdlDescription with endpoint and operations.

        Raises:
            httpx.HTTPError: If the WSDL cannot be fetched.
            SoapFault: If the document is not a usable WSDL.
        """
        logger.debug(f"Loading WSDL from {wsdl_url}")
        response = self._http.get(wsdl_url, follow_redirects=True)
        response.raise_for_status()
        return self.parse(response.text)

    def parse(self, wsdl_text: str) -> WsdlDescription:
        """Parse a WSDL document.

        Raises:
            SoapFault: If the XML is malformed or declares no SOAP address.
        """
        try:
            root = ElementTree.fromstring(wsdl_text)
        except ElementTree.ParseError as e:
            raise SoapFault(f"Parsing WSDL: {e}") from e

        address = root.find(f".//{{{WSDL_NS}}}service/{{{WSDL_NS}}}port/{{{WSDL_SOAP_NS}}}address")
        endpoint = address.get("location") if address is not None else None
        if not endpoint:
            raise SoapFault("Parsing WSDL: no soap:address location found")

        operations = frozenset(
            op.get("name", "")
            for op in root.iterfind(f".//{{{WSDL_NS}}}portType/{{{WSDL_NS}}}operation")
        )

        logger.debug(f"WSDL endpoint {endpoint}, operations: {sorted(operations)}")
        return WsdlDescription(endpoint=endpoint, operations=operations)
