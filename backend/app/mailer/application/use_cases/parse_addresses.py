"""Use cases for parsing and formatting mail header addresses.

Implements the address operations by orchestrating:
- Address grammar via the domain parser and formatter
- Email validation via the injected AddressValidator
- Address construction via AddressFactory
"""

import logging

from app.mailer.application.dto.address_dto import (
    AddressDTO,
    AddressListDTO,
    FormatAddressRequest,
    ParseAddressListRequest,
    ParseAddressRequest,
)
from app.mailer.application.exceptions import AddressBatchTooLargeError, AddressRejectedError
from app.mailer.domain.exceptions import InvalidAddressError
from app.mailer.domain.factories.address_factory import AddressFactory
from app.mailer.domain.validators import AddressValidator
from app.mailer.domain.value_objects.address import Address

logger = logging.getLogger(__name__)


class ParseAddressUseCase:
    """Application service for parsing one raw address string."""

    def __init__(self, validator: AddressValidator) -> None:
        """Initialize the use case with required dependencies.

        Args:
            validator: Validator applied to the parsed email.
        """
        self._factory = AddressFactory(validator)

    def execute(self, request: ParseAddressRequest) -> AddressDTO:
        """Execute the address parsing.

        Args:
            request: ParseAddressRequest with the raw address.

        Returns:
            AddressDTO for the parsed address.

        Raises:
            AddressRejectedError: If the parsed email is invalid.
        """
        try:
            address = self._factory.create(request.address)
        except InvalidAddressError as e:
            raise AddressRejectedError(e.email) from e

        return AddressDTO.from_address(address)


class ParseAddressListUseCase:
    """Application service for parsing a list of raw address strings.

    The whole list is rejected on the first invalid entry; there are no
    partial results.
    """

    def __init__(self, validator: AddressValidator, max_batch_size: int = 0) -> None:
        """Initialize the use case with required dependencies.

        Args:
            validator: Validator applied to every parsed email.
            max_batch_size: Most addresses accepted per request, 0 for no limit.
        """
        self._factory = AddressFactory(validator)
        self._max_batch_size = max_batch_size

    def execute(self, request: ParseAddressListRequest) -> AddressListDTO:
        """Execute the address list parsing.

        Args:
            request: ParseAddressListRequest with the raw addresses.

        Returns:
            AddressListDTO with one entry per address, in input order.

        Raises:
            AddressBatchTooLargeError: If there are more addresses than allowed.
            AddressRejectedError: If any parsed email is invalid.
        """
        # 1. Apply the single comma-separated entry rule
        working = self._factory.collapse(request.addresses)

        # 2. Enforce the batch limit on what will actually be parsed
        if self._max_batch_size and len(working) > self._max_batch_size:
            raise AddressBatchTooLargeError(len(working), self._max_batch_size)

        # 3. Build all addresses or none
        try:
            addresses = [self._factory.create(address) for address in working]
        except InvalidAddressError as e:
            raise AddressRejectedError(e.email) from e

        logger.info(f"Parsed {len(addresses)} addresses")

        return AddressListDTO(
            addresses=[AddressDTO.from_address(address) for address in addresses],
            total=len(addresses),
        )


class FormatAddressUseCase:
    """Application service for building the canonical header form."""

    def __init__(self, validator: AddressValidator) -> None:
        """Initialize the use case with required dependencies.

        Args:
            validator: Validator applied to the email.
        """
        self._validator = validator

    def execute(self, request: FormatAddressRequest) -> AddressDTO:
        """Execute the address formatting.

        Args:
            request: FormatAddressRequest with email and optional name.

        Returns:
            AddressDTO whose ``formatted`` field is the header form.

        Raises:
            AddressRejectedError: If the email is invalid.
        """
        try:
            address = Address(request.email, request.name, validator=self._validator)
        except InvalidAddressError as e:
            raise AddressRejectedError(e.email) from e

        return AddressDTO.from_address(address)
