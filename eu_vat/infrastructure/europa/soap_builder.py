# ============================================================================
# SCOPE: INFRASTRUCTURE LAYER (Europa VIES)
# Description: SOAP request builder for the checkVatService.
# ============================================================================
"""SOAP Request Builder.

Builds SOAP 1.1 document/literal envelopes for VIES calls.
Single responsibility: XML envelope construction.
"""

from typing import Any

SOAP_ENV_NS = "http://schemas.xmlsoap.org/soap/envelope/"
VIES_TYPES_NS = "urn:ec.europa.eu:taxud:vies:services:checkVat:types"


class SoapRequestBuilder:
    """Builds SOAP XML envelopes.

    Handles XML escaping and parameter serialization for SOAP requests.
    """

    NAMESPACE = VIES_TYPES_NS

    def build_envelope(self, operation: str, params: dict[str, Any]) -> str:
        """Build a SOAP envelope for an operation call.

        Args:
            operation: SOAP operation name (request element).
            params: Dictionary of parameters, in schema order.

        Returns:
            Complete SOAP XML envelope as string.
        """
        params_xml = "\n      ".join(
            self._serialize_param(k, v) for k, v in params.items() if v is not None
        )

        return f"""<?xml version="1.0" encoding="UTF-8"?>
<soap:Envelope xmlns:soap="{SOAP_ENV_NS}" xmlns:tns="{self.NAMESPACE}">
  <soap:Body>
    <tns:{operation}>
      {params_xml}
    </tns:{operation}>
  </soap:Body>
</soap:Envelope>"""

    def _serialize_param(self, key: str, value: Any) -> str:
        if isinstance(value, bool):
            return f"<tns:{key}>{str(value).lower()}</tns:{key}>"
        return f"<tns:{key}>{self._escape_xml(value)}</tns:{key}>"

    @staticmethod
    def _escape_xml(value: Any) -> str:
        """Escape XML special characters.

        Args:
            value: Value to escape.

        Returns:
            XML-safe string.
        """
        s = str(value)
        return (
            s.replace("&", "&amp;")
            .replace("<", "&lt;")
            .replace(">", "&gt;")
            .replace('"', "&quot;")
            .replace("'", "&apos;")
        )
