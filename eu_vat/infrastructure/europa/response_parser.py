# ============================================================================
# SCOPE: INFRASTRUCTURE LAYER (Europa VIES)
# Description: SOAP response parser for the checkVatService.
# ============================================================================
"""SOAP Response Parser.

Parses SOAP XML responses from VIES.
Single responsibility: XML response parsing and fault detection.
"""

import logging
from xml.etree import ElementTree

logger = logging.getLogger(__name__)


class SoapFault(Exception):
    """SOAP-level failure (fault body, malformed XML or missing result).

    Internal to the infrastructure layer; the client translates it into
    VatException.
    """

    def __init__(self, faultstring: str, faultcode: str | None = None) -> None:
        self.faultstring = faultstring
        self.faultcode = faultcode
        super().__init__(faultstring)


class SoapResponseParser:
    """Parses SOAP XML responses.

    Extracts the fields of an operation response and detects SOAP faults.
    """

    def parse(self, xml_text: str, response_element: str) -> dict[str, str]:
        """Parse a SOAP response.

        Args:
            xml_text: Raw XML response text.
            response_element: Local name of the response element
                (e.g. "checkVatResponse").

        Returns:
            Mapping of child local name to text. Empty elements map to ""
            and elements missing from the response are left out.

        Raises:
            SoapFault: If the body holds a fault, the XML is malformed or
                the response element is missing.
        """
        try:
            root = ElementTree.fromstring(xml_text)
        except ElementTree.ParseError as e:
            logger.error(f"Error parsing SOAP XML: {e}")
            raise SoapFault(f"Invalid XML in SOAP response: {e}") from e

        self.raise_for_fault(root)

        result_elem = self._find_element(root, response_element)
        if result_elem is None:
            raise SoapFault(f"No {response_element} element in SOAP response")

        return {self._get_local_tag(child.tag): child.text or "" for child in result_elem}

    def find_fault(self, xml_text: str) -> SoapFault | None:
        """Return the fault carried by a response body, if any.

        Bodies that are not XML yield None.
        """
        try:
            root = ElementTree.fromstring(xml_text)
        except ElementTree.ParseError:
            return None
        return self._extract_soap_fault(root)

    def raise_for_fault(self, root: ElementTree.Element) -> None:
        """Raise the SOAP fault contained in a parsed envelope, if any."""
        fault = self._extract_soap_fault(root)
        if fault is not None:
            raise fault

    def _extract_soap_fault(self, root: ElementTree.Element) -> SoapFault | None:
        fault_elem = self._find_element(root, "Fault")
        if fault_elem is None:
            return None

        faultcode = None
        faultstring = ""
        for child in fault_elem:
            child_tag = self._get_local_tag(child.tag)
            if child_tag == "faultcode":
                faultcode = (child.text or "").strip() or None
            elif child_tag == "faultstring":
                faultstring = (child.text or "").strip()

        return SoapFault(faultstring, faultcode)

    def _find_element(
        self,
        root: ElementTree.Element,
        local_name: str,
    ) -> ElementTree.Element | None:
        for elem in root.iter():
            if self._get_local_tag(elem.tag) == local_name:
                return elem
        return None

    @staticmethod
    def _get_local_tag(tag: str) -> str:
        """Get local name from qualified XML tag.

        Args:
            tag: Qualified tag name.

        Returns:
            Local tag name without namespace.
        """
        return tag.split("}")[-1] if "}" in tag else tag
