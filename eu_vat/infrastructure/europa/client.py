# ============================================================================
# SCOPE: INFRASTRUCTURE LAYER (Europa VIES)
# Description: VIES checkVatService SOAP client implementation.
# ============================================================================
"""Europa VIES SOAP Client.

Client for the EU VAT Information Exchange System (VIES) checkVatService.
Loads the service WSDL on construction and calls checkVat, plus
checkVatApprox when a requester VAT number is given.

Components:
- WsdlLoader: Resolves the SOAP endpoint from the WSDL
- SoapRequestBuilder: Builds SOAP envelopes
- SoapResponseParser: Parses SOAP responses and faults
- OperationRegistry: checkVat / checkVatApprox request shapes
"""

import logging
from types import TracebackType
from typing import Any

import httpx

from ...config import Settings, get_settings
from ...domain import VatDetails, VatException
from .normalizers import normalize_country_code
from .operation_registry import CHECK_VAT, CHECK_VAT_APPROX, OperationRegistry, get_default_registry
from .response_parser import SoapFault, SoapResponseParser
from .soap_builder import SoapRequestBuilder
from .wsdl_loader import WsdlDescription, WsdlLoader

logger = logging.getLogger(__name__)

IMPOSSIBLE_CONNECT_API_MESSAGE = "Impossible to connect to the Europa SOAP: {}"
IMPOSSIBLE_RETRIEVE_DATA_MESSAGE = "Impossible to retrieve the VAT details: {}"

# Translated into VatException at the client boundary
TRANSPORT_ERRORS = (httpx.HTTPError, SoapFault)


class EuropaVatClient:
    """SOAP client for the VIES checkVatService.

    Implements the VatProvider interface. One HTTP transport is created
    per instance and reused for every call.

    Example:
        with EuropaVatClient() as client:
            details = client.get_resource("123456789", "fr")
    """

    def __init__(
        self,
        settings: Settings | None = None,
        http_client: httpx.Client | None = None,
        request_builder: SoapRequestBuilder | None = None,
        response_parser: SoapResponseParser | None = None,
        operation_registry: OperationRegistry | None = None,
    ):
        """Initialize the client and load the service WSDL.

        Args:
            settings: Optional settings (defaults to get_settings()).
            http_client: Optional HTTP transport. Not closed by close().
            request_builder: Optional custom request builder.
            response_parser: Optional custom response parser.
            operation_registry: Optional custom operation registry.

        Raises:
            VatException: If the WSDL cannot be fetched or parsed.
        """
        self._settings = settings or get_settings()
        self._builder = request_builder or SoapRequestBuilder()
        self._parser = response_parser or SoapResponseParser()
        self._registry = operation_registry or get_default_registry()

        self._owns_client = http_client is None
        self._client = http_client or self._create_client()

        try:
            self._wsdl: WsdlDescription = WsdlLoader(self._client).load(self.get_api_url())
        except TRANSPORT_ERRORS as e:
            fault = _fault_message(e)
            logger.error(f"Could not load VIES WSDL from {self.get_api_url()}: {fault}")
            self.close()
            raise VatException(IMPOSSIBLE_CONNECT_API_MESSAGE.format(fault), fault=fault) from e

    def _create_client(self) -> httpx.Client:
        """Create the HTTP transport."""
        kwargs: dict[str, Any] = {"headers": self._default_headers()}
        if self._settings.VIES_TIMEOUT is not None:
            kwargs["timeout"] = httpx.Timeout(self._settings.VIES_TIMEOUT)
        return httpx.Client(**kwargs)

    def _default_headers(self) -> dict[str, str]:
        return {
            "Content-Type": "text/xml; charset=utf-8",
            "Accept": "text/xml",
            "User-Agent": self._settings.VIES_USER_AGENT,
        }

    def get_api_url(self) -> str:
        """Full URL of the service WSDL."""
        return self._settings.vies_wsdl_url

    @property
    def endpoint(self) -> str:
        """SOAP endpoint resolved from the WSDL."""
        return self._wsdl.endpoint

    def close(self) -> None:
        """Close the HTTP transport if this client created it."""
        if self._owns_client and not self._client.is_closed:
            self._client.close()

    def __enter__(self) -> "EuropaVatClient":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        self.close()

    def get_resource(self, vat_number: str, country_code: str) -> VatDetails:
        """Look up a VAT number with checkVat.

        Args:
            vat_number: VAT number without country prefix.
            country_code: Two-letter country code (any case).

        Returns:
            VatDetails for the number.

        Raises:
            VatException: On transport errors or SOAP faults.
        """
        return self.get_resource_with_requester(vat_number, country_code)

    def get_resource_with_requester(
        self,
        vat_number: str,
        country_code: str,
        requester_vat_number: str | None = None,
        requester_country_code: str | None = None,
    ) -> VatDetails:
        """Look up a VAT number, confirming the requester when given.

        checkVat is always called. checkVatApprox is called as well when a
        requester VAT number is given, and its request identifier becomes
        the consultation number.

        Args:
            vat_number: VAT number without country prefix.
            country_code: Two-letter country code (any case).
            requester_vat_number: Requester's VAT number (optional).
            requester_country_code: Requester's country code (optional).

        Returns:
            VatDetails for the number.

        Raises:
            VatException: On transport errors or SOAP faults.
        """
        details: dict[str, str] = {
            "countryCode": normalize_country_code(country_code),
            "vatNumber": vat_number,
        }
        if requester_vat_number and requester_country_code:
            details["requesterCountryCode"] = normalize_country_code(requester_country_code)
            details["requesterVatNumber"] = requester_vat_number

        try:
            business_response = self._call(
                CHECK_VAT,
                countryCode=details["countryCode"],
                vatNumber=details["vatNumber"],
            )

            consultation_response = None
            if requester_vat_number:
                consultation_response = self._call(CHECK_VAT_APPROX, **details)

        except TRANSPORT_ERRORS as e:
            fault = _fault_message(e)
            logger.error(f"VIES lookup failed for {details['countryCode']}{vat_number}: {fault}")
            raise VatException(IMPOSSIBLE_RETRIEVE_DATA_MESSAGE.format(fault), fault=fault) from e

        return VatDetails.from_response(business_response, consultation_response)

    def _call(self, operation: str, **kwargs: Any) -> dict[str, str]:
        """Call a registered SOAP operation.

        Args:
            operation: Operation name.
            **kwargs: Operation parameters.

        Returns:
            Fields of the operation response.

        Raises:
            SoapFault: If the service answers with a fault or the operation
                is not offered by the WSDL.
            httpx.HTTPError: On transport errors.
        """
        if not self._wsdl.supports(operation):
            raise SoapFault(f'Function ("{operation}") is not a valid method for this service')

        config = self._registry.get(operation)
        envelope = self._builder.build_envelope(operation, config.build_params(**kwargs))

        logger.debug(f"Calling VIES {operation} at {self.endpoint}")
        response = self._client.post(
            self.endpoint,
            content=envelope.encode("utf-8"),
            headers={**self._default_headers(), "SOAPAction": '""'},
        )

        # VIES reports faults with HTTP 500 and a Fault body
        fault = self._parser.find_fault(response.text)
        if fault is not None:
            logger.warning(f"VIES {operation} fault: {fault.faultcode} {fault.faultstring}")
            raise fault

        response.raise_for_status()
        return self._parser.parse(response.text, config.response_element)


def _fault_message(error: Exception) -> str:
    """Human-readable text of a transport or SOAP error."""
    if isinstance(error, SoapFault):
        return error.faultstring
    return str(error) or error.__class__.__name__
