"""Unit tests for SoapRequestBuilder."""

from xml.etree import ElementTree

from eu_vat.infrastructure.europa import SoapRequestBuilder

SOAP_NS = "http://schemas.xmlsoap.org/soap/envelope/"
TYPES_NS = "urn:ec.europa.eu:taxud:vies:services:checkVat:types"


def _body_request(envelope: str) -> ElementTree.Element:
    root = ElementTree.fromstring(envelope.encode("utf-8"))
    body = root.find(f"{{{SOAP_NS}}}Body")
    assert body is not None
    return body[0]


class TestSoapRequestBuilder:
    def test_builds_well_formed_envelope(self) -> None:
        envelope = SoapRequestBuilder().build_envelope(
            "checkVat", {"countryCode": "FR", "vatNumber": "123456789"}
        )

        request = _body_request(envelope)
        assert request.tag == f"{{{TYPES_NS}}}checkVat"
        assert [child.tag for child in request] == [
            f"{{{TYPES_NS}}}countryCode",
            f"{{{TYPES_NS}}}vatNumber",
        ]
        assert request.findtext(f"{{{TYPES_NS}}}countryCode") == "FR"
        assert request.findtext(f"{{{TYPES_NS}}}vatNumber") == "123456789"

    def test_escapes_special_characters(self) -> None:
        envelope = SoapRequestBuilder().build_envelope(
            "checkVatApprox", {"traderName": "Smith & Sons <Ltd>"}
        )

        assert "Smith &amp; Sons &lt;Ltd&gt;" in envelope
        request = _body_request(envelope)
        assert request.findtext(f"{{{TYPES_NS}}}traderName") == "Smith & Sons <Ltd>"

    def test_omits_none_values(self) -> None:
        envelope = SoapRequestBuilder().build_envelope(
            "checkVatApprox", {"countryCode": "FR", "traderName": None}
        )
        assert "traderName" not in envelope

    def test_serializes_booleans_lowercase(self) -> None:
        envelope = SoapRequestBuilder().build_envelope("op", {"flag": True})
        assert "<tns:flag>true</tns:flag>" in envelope

    def test_escape_xml_quotes(self) -> None:
        assert SoapRequestBuilder._escape_xml("a\"b'c") == "a&quot;b&apos;c"
