"""Unit tests for the address parsing and formatting use cases."""

import logging
from unittest.mock import MagicMock

import pytest

from app.mailer.application.dto.address_dto import (
    FormatAddressRequest,
    ParseAddressListRequest,
    ParseAddressRequest,
)
from app.mailer.application.exceptions import AddressBatchTooLargeError, AddressRejectedError
from app.mailer.application.use_cases.parse_addresses import (
    FormatAddressUseCase,
    ParseAddressListUseCase,
    ParseAddressUseCase,
)
from app.mailer.domain.exceptions import InvalidAddressError
from app.mailer.domain.validators import AddressValidator


class TestParseAddressUseCase:
    """Tests for ParseAddressUseCase."""

    def test_execute_parses_full_address(self, stub_validator: AddressValidator) -> None:
        """Test successful parsing of the bracket form."""
        use_case = ParseAddressUseCase(validator=stub_validator)

        result = use_case.execute(ParseAddressRequest(address="'Jane Doe' <jane@example.com>"))

        assert result.email == "jane@example.com"
        assert result.name == "Jane Doe"
        assert result.formatted == '"Jane Doe" <jane@example.com>'

    def test_execute_raises_address_rejected(
        self, rejecting_validator: AddressValidator
    ) -> None:
        """Test that domain errors are wrapped with the original email."""
        use_case = ParseAddressUseCase(validator=rejecting_validator)

        with pytest.raises(AddressRejectedError) as exc_info:
            use_case.execute(ParseAddressRequest(address="Jane < jane@example.com >"))

        assert exc_info.value.email == "jane@example.com"
        assert exc_info.value.code == "INVALID_ADDRESS"
        assert isinstance(exc_info.value.__cause__, InvalidAddressError)

    def test_execute_uses_injected_validator(self) -> None:
        """Test that the use case never falls back to another validator."""
        validator = MagicMock(spec=AddressValidator)
        validator.check.return_value = True

        ParseAddressUseCase(validator=validator).execute(ParseAddressRequest(address="x@y.com"))

        validator.check.assert_called_once_with("x@y.com", "required|valid_email")


class TestParseAddressListUseCase:
    """Tests for ParseAddressListUseCase."""

    def test_execute_collapses_single_csv(self, stub_validator: AddressValidator) -> None:
        """Test that one comma-separated entry is parsed as many addresses."""
        use_case = ParseAddressListUseCase(validator=stub_validator)

        result = use_case.execute(ParseAddressListRequest(addresses=["a@x.com, b@y.com"]))

        assert result.total == 2
        assert [dto.email for dto in result.addresses] == ["a@x.com", "b@y.com"]

    def test_execute_logs_csv_collapse_once(
        self, stub_validator: AddressValidator, caplog: pytest.LogCaptureFixture
    ) -> None:
        """Test that the collapse of a single comma-separated entry is logged."""
        use_case = ParseAddressListUseCase(validator=stub_validator)

        with caplog.at_level(logging.DEBUG, logger="app.mailer.domain.factories.address_factory"):
            use_case.execute(ParseAddressListRequest(addresses=["a@x.com,b@y.com"]))

        assert caplog.text.count("Collapsed comma-separated input into 2 addresses") == 1

    def test_execute_keeps_order_and_names(self, stub_validator: AddressValidator) -> None:
        """Test that every entry is parsed in input order."""
        use_case = ParseAddressListUseCase(validator=stub_validator)

        result = use_case.execute(
            ParseAddressListRequest(addresses=["Bob <b@y.com>", "a@x.com"])
        )

        assert [dto.formatted for dto in result.addresses] == ['"Bob" <b@y.com>', "a@x.com"]

    def test_execute_rejects_whole_list(self, stub_validator: AddressValidator) -> None:
        """Test that an invalid entry fails the request with no partial result."""
        use_case = ParseAddressListUseCase(validator=stub_validator)

        with pytest.raises(AddressRejectedError) as exc_info:
            use_case.execute(ParseAddressListRequest(addresses=["a@x.com", "not-an-email"]))

        assert exc_info.value.email == "not-an-email"

    def test_execute_enforces_batch_limit_after_collapse(
        self, stub_validator: AddressValidator
    ) -> None:
        """Test that the limit counts addresses, not request entries."""
        use_case = ParseAddressListUseCase(validator=stub_validator, max_batch_size=2)

        with pytest.raises(AddressBatchTooLargeError) as exc_info:
            use_case.execute(ParseAddressListRequest(addresses=["a@x.com,b@y.com,c@z.com"]))

        assert exc_info.value.size == 3
        assert exc_info.value.limit == 2
        assert stub_validator.calls == []

    def test_execute_with_zero_limit_is_unbounded(
        self, stub_validator: AddressValidator
    ) -> None:
        """Test that a limit of 0 disables the check."""
        use_case = ParseAddressListUseCase(validator=stub_validator, max_batch_size=0)
        addresses = [f"user{i}@example.com" for i in range(250)]

        result = use_case.execute(ParseAddressListRequest(addresses=addresses))

        assert result.total == 250


class TestFormatAddressUseCase:
    """Tests for FormatAddressUseCase."""

    def test_execute_formats_named_address(self, stub_validator: AddressValidator) -> None:
        """Test the bracket form output."""
        use_case = FormatAddressUseCase(validator=stub_validator)

        result = use_case.execute(FormatAddressRequest(email=" jane@example.com ", name='"Jane"'))

        assert result.email == "jane@example.com"
        assert result.name == "Jane"
        assert result.formatted == '"Jane" <jane@example.com>'

    def test_execute_formats_bare_address(self, stub_validator: AddressValidator) -> None:
        """Test that a blank name yields the bare email."""
        use_case = FormatAddressUseCase(validator=stub_validator)

        result = use_case.execute(FormatAddressRequest(email="jane@example.com", name=" ' "))

        assert result.name is None
        assert result.formatted == "jane@example.com"

    def test_execute_raises_address_rejected(
        self, rejecting_validator: AddressValidator
    ) -> None:
        """Test that the untrimmed email is reported."""
        use_case = FormatAddressUseCase(validator=rejecting_validator)

        with pytest.raises(AddressRejectedError) as exc_info:
            use_case.execute(FormatAddressRequest(email=" nope "))

        assert exc_info.value.email == " nope "
