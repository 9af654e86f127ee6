"""Address value object pairing a validated email with a display name."""

from dataclasses import InitVar, dataclass
from typing import Optional, Self, Sequence

from app.mailer.domain.exceptions import InvalidAddressError
from app.mailer.domain.services.address_formatter import merge_address
from app.mailer.domain.services.address_parser import (
    EMAIL_TRIM_CHARS,
    NAME_TRIM_CHARS,
    collapse_address_list,
    split_address,
)
from app.mailer.domain.validators import (
    VALID_EMAIL_RULE,
    AddressValidator,
    get_default_validator,
)


@dataclass(frozen=True)
class Address:
    """Immutable value object representing a mail header address.

    Equality and hashing use ``email`` and ``name`` only.

    Attributes:
        email: The email, trimmed of whitespace and always valid.
        name: The display name, or None. Never empty and never starts
            or ends with a space, apostrophe or double quote.
        validator: Init-only validator used to check the email. Falls
            back to the default email-validator backed implementation.
    """

    email: str
    name: Optional[str] = None
    validator: InitVar[Optional[AddressValidator]] = None

    def __post_init__(self, validator: Optional[AddressValidator]) -> None:
        """Validate the email and normalize both fields.

        Raises:
            InvalidAddressError: If the trimmed email fails validation.
        """
        email = self.email.strip(EMAIL_TRIM_CHARS)
        if validator is None:
            validator = get_default_validator()

        if not validator.check(email, VALID_EMAIL_RULE):
            raise InvalidAddressError(self.email)

        name = self.name.strip(NAME_TRIM_CHARS) if self.name is not None else None

        # Use object.__setattr__ because dataclass is frozen
        object.__setattr__(self, "email", email)
        object.__setattr__(self, "name", name or None)

    @classmethod
    def create(cls, address: str, validator: Optional[AddressValidator] = None) -> Self:
        """Create an Address from a simple or full address string.

        Args:
            address: e.g. ``user@example.com`` or ``"User" <user@example.com>``.
            validator: Optional validator to check the email with.

        Returns:
            A new Address instance.

        Raises:
            InvalidAddressError: If the parsed email is invalid.
        """
        email, name = split_address(address)
        return cls(email, name, validator=validator)

    @classmethod
    def create_array(
        cls,
        addresses: Sequence[str],
        validator: Optional[AddressValidator] = None,
    ) -> list[Self]:
        """Create Addresses from a list of raw address strings.

        A list holding a single comma-separated string is treated as a
        list of the addresses in that string.

        Args:
            addresses: Raw address strings.
            validator: Optional validator to check each email with.

        Returns:
            One Address per working-list entry, in order.

        Raises:
            InvalidAddressError: On the first invalid email. No partial
                list is returned.
        """
        return [cls.create(address, validator) for address in collapse_address_list(addresses)]

    def __str__(self) -> str:
        return merge_address(self.email, self.name)
