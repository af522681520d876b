"""Unit tests for the VatDetails entity and domain exceptions."""

from dataclasses import FrozenInstanceError

import pytest

from eu_vat.domain import NOT_AVAILABLE, NOT_PROVIDED, VatDetails, VatError, VatException


class TestVatDetailsFromResponse:
    """Tests for building details from parsed responses."""

    def test_full_response(self) -> None:
        details = VatDetails.from_response(
            {
                "countryCode": "FR",
                "vatNumber": "123456789",
                "requestDate": "2024-05-02+02:00",
                "valid": "true",
                "name": "ACME",
                "address": "1 Rue X",
            }
        )

        assert details.country_code == "FR"
        assert details.vat_number == "123456789"
        assert details.request_date == "2024-05-02+02:00"
        assert details.valid is True
        assert details.name == "ACME"
        assert details.address == "1 Rue X"
        assert details.consultation_number == NOT_PROVIDED

    def test_empty_response_uses_defaults(self) -> None:
        details = VatDetails.from_response({})

        assert details.country_code is None
        assert details.vat_number is None
        assert details.request_date is None
        assert details.valid is False
        assert details.name == "N/A"
        assert details.address == "N/A"
        assert details.consultation_number == "Not provided"

    def test_empty_name_is_kept(self) -> None:
        """Only a missing field falls back to N/A."""
        details = VatDetails.from_response({"name": "", "address": "---"})
        assert details.name == ""
        assert details.address == "---"

    @pytest.mark.parametrize("raw", ["false", "0", "", "FALSE"])
    def test_falsy_valid_values(self, raw: str) -> None:
        assert VatDetails.from_response({"valid": raw}).valid is False

    @pytest.mark.parametrize("raw", ["true", "1", "True", True])
    def test_truthy_valid_values(self, raw) -> None:
        assert VatDetails.from_response({"valid": raw}).valid is True

    def test_consultation_number_from_approx(self) -> None:
        details = VatDetails.from_response({"valid": "true"}, {"requestIdentifier": "WAPIAAAAYJ8_9Xk3"})
        assert details.consultation_number == "WAPIAAAAYJ8_9Xk3"

    def test_approx_without_identifier_uses_sentinel(self) -> None:
        details = VatDetails.from_response({"valid": "true"}, {"valid": "true"})
        assert details.consultation_number == NOT_PROVIDED


class TestVatDetailsShape:
    """Tests for immutability and the mapping representation."""

    def test_is_immutable(self) -> None:
        details = VatDetails.from_response({"valid": "true"})
        with pytest.raises(FrozenInstanceError):
            details.valid = False  # type: ignore[misc]

    def test_to_dict_keys(self) -> None:
        data = VatDetails.from_response({}).to_dict()
        assert list(data) == [
            "countryCode",
            "vatNumber",
            "requestDate",
            "valid",
            "name",
            "address",
            "consultationNumber",
        ]

    def test_to_dict_values(self) -> None:
        details = VatDetails(
            country_code="BE",
            vat_number="0123456789",
            request_date="2024-01-01+01:00",
            valid=True,
            name="Foo SA",
            address="Rue 1",
            consultation_number="ID",
        )
        assert details.to_dict() == {
            "countryCode": "BE",
            "vatNumber": "0123456789",
            "requestDate": "2024-01-01+01:00",
            "valid": True,
            "name": "Foo SA",
            "address": "Rue 1",
            "consultationNumber": "ID",
        }

    def test_constructor_defaults(self) -> None:
        details = VatDetails(country_code=None, vat_number=None, request_date=None, valid=False)
        assert details.name == NOT_AVAILABLE
        assert details.address == NOT_AVAILABLE
        assert details.consultation_number == NOT_PROVIDED


class TestVatException:
    """Tests for the domain error."""

    def test_is_vat_error(self) -> None:
        assert issubclass(VatException, VatError)

    def test_carries_fault(self) -> None:
        error = VatException("Impossible to retrieve the VAT details: TIMEOUT", fault="TIMEOUT")
        assert error.message == "Impossible to retrieve the VAT details: TIMEOUT"
        assert error.fault == "TIMEOUT"
        assert error.code == "VAT_SERVICE_ERROR"

    def test_to_dict(self) -> None:
        error = VatException("boom", fault="MS_UNAVAILABLE")
        assert error.to_dict() == {
            "error": "VAT_SERVICE_ERROR",
            "message": "boom",
            "details": {"fault": "MS_UNAVAILABLE"},
        }

    def test_fault_and_code_are_keyword_only(self) -> None:
        with pytest.raises(TypeError):
            VatException("boom", "MS_UNAVAILABLE")

    def test_base_error_default_code(self) -> None:
        assert VatError("x").code == "VATERROR"
