"""Address factory binding a validator to Address construction."""

import logging
from typing import Optional, Sequence

from app.mailer.domain.exceptions import InvalidAddressError
from app.mailer.domain.services.address_parser import collapse_address_list
from app.mailer.domain.validators import AddressValidator, get_default_validator
from app.mailer.domain.value_objects.address import Address

logger = logging.getLogger(__name__)


class AddressFactory:
    """Builds Address value objects from raw address strings.

    The validator is injected once so callers never resolve it from
    global state. Without one, the default email-validator backed
    implementation is used.
    """

    def __init__(self, validator: Optional[AddressValidator] = None) -> None:
        """Initialize the factory with the validator to apply.

        Args:
            validator: Validator used for every Address this factory creates.
        """
        self._validator = validator if validator is not None else get_default_validator()

    @property
    def validator(self) -> AddressValidator:
        """Return the validator bound to this factory."""
        return self._validator

    def create(self, address: str) -> Address:
        """Create one Address from a simple or full address string.

        Raises:
            InvalidAddressError: If the parsed email is invalid.
        """
        try:
            return Address.create(address, self._validator)
        except InvalidAddressError as e:
            logger.warning(f"Rejected address: {e.email!r}")
            raise

    def create_array(self, addresses: Sequence[str]) -> list[Address]:
        """Create Addresses from raw strings, collapsing a lone CSV entry.

        Args:
            addresses: Raw address strings.

        Returns:
            One Address per working-list entry, in order.

        Raises:
            InvalidAddressError: On the first invalid email.
        """
        return [self.create(address) for address in self.collapse(addresses)]

    def collapse(self, addresses: Sequence[str]) -> list[str]:
        """Return the working list, expanding a lone comma-separated entry.

        Args:
            addresses: Raw address strings.

        Returns:
            The raw address strings that create_array would build, in order.
        """
        working = collapse_address_list(addresses)
        if len(addresses) == 1 and working != list(addresses):
            logger.debug(f"Collapsed comma-separated input into {len(working)} addresses")

        return working
