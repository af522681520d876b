"""
Shared pytest fixtures for all tests.

Provides settings isolated from the environment, canned VIES documents
(WSDL, responses, faults) and a mocked httpx transport.
"""

from collections.abc import Callable
from unittest.mock import MagicMock

import httpx
import pytest

from eu_vat.config import Settings, reset_settings

VIES_ENDPOINT = "https://ec.europa.eu/taxation_customs/vies/services/checkVatService"

SAMPLE_WSDL = f"""<?xml version="1.0" encoding="UTF-8"?>
<wsdl:definitions xmlns:wsdl="http://schemas.xmlsoap.org/wsdl/"
                  xmlns:wsdlsoap="http://schemas.xmlsoap.org/wsdl/soap/"
                  xmlns:impl="urn:ec.europa.eu:taxud:vies:services:checkVat"
                  targetNamespace="urn:ec.europa.eu:taxud:vies:services:checkVat">
  <wsdl:portType name="checkVatPortType">
    <wsdl:operation name="checkVat">
      <wsdl:input name="checkVatRequest" message="impl:checkVatRequest"/>
      <wsdl:output name="checkVatResponse" message="impl:checkVatResponse"/>
    </wsdl:operation>
    <wsdl:operation name="checkVatApprox">
      <wsdl:input name="checkVatApproxRequest" message="impl:checkVatApproxRequest"/>
      <wsdl:output name="checkVatApproxResponse" message="impl:checkVatApproxResponse"/>
    </wsdl:operation>
  </wsdl:portType>
  <wsdl:service name="checkVatService">
    <wsdl:port name="checkVatPort" binding="impl:checkVatBinding">
      <wsdlsoap:address location="{VIES_ENDPOINT}"/>
    </wsdl:port>
  </wsdl:service>
</wsdl:definitions>"""


def build_soap_response(operation: str, **fields: str) -> str:
    """Build a VIES response envelope with the given result fields."""
    children = "".join(f"<ns2:{key}>{value}</ns2:{key}>" for key, value in fields.items())
    return (
        '<env:Envelope xmlns:env="http://schemas.xmlsoap.org/soap/envelope/">'
        "<env:Header/><env:Body>"
        f'<ns2:{operation}Response xmlns:ns2="urn:ec.europa.eu:taxud:vies:services:checkVat:types">'
        f"{children}"
        f"</ns2:{operation}Response>"
        "</env:Body></env:Envelope>"
    )


def build_soap_fault(faultstring: str, faultcode: str = "env:Server") -> str:
    """Build a SOAP fault envelope."""
    return (
        '<env:Envelope xmlns:env="http://schemas.xmlsoap.org/soap/envelope/">'
        "<env:Body><env:Fault>"
        f"<faultcode>{faultcode}</faultcode>"
        f"<faultstring>{faultstring}</faultstring>"
        "</env:Fault></env:Body></env:Envelope>"
    )


def make_response(text: str, status_code: int = 200) -> MagicMock:
    """Mock httpx.Response with text, status and raise_for_status."""
    response = MagicMock()
    response.text = text
    response.status_code = status_code
    if status_code >= 400:
        response.raise_for_status.side_effect = httpx.HTTPStatusError(
            message=f"Server error '{status_code}' for url '{VIES_ENDPOINT}'",
            request=MagicMock(),
            response=response,
        )
    return response


@pytest.fixture(autouse=True)
def _reset_settings_cache():
    """Keep the cached settings from leaking between tests."""
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def settings() -> Settings:
    """Default settings, ignoring any local .env file."""
    return Settings(_env_file=None)


@pytest.fixture
def soap_response() -> Callable[..., str]:
    return build_soap_response


@pytest.fixture
def soap_fault() -> Callable[..., str]:
    return build_soap_fault


@pytest.fixture
def http_response() -> Callable[..., MagicMock]:
    return make_response


@pytest.fixture
def mock_http_client() -> MagicMock:
    """Mocked httpx.Client serving the sample WSDL."""
    client = MagicMock()
    client.is_closed = False
    client.get.return_value = make_response(SAMPLE_WSDL)
    return client


@pytest.fixture
def sample_wsdl() -> str:
    return SAMPLE_WSDL
