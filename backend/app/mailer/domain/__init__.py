# Domain layer - pure business rules, no framework dependencies

from app.mailer.domain.exceptions import DomainError, InvalidAddressError
from app.mailer.domain.factories import AddressFactory
from app.mailer.domain.services import (
    EMAIL_TRIM_CHARS,
    NAME_TRIM_CHARS,
    collapse_address_list,
    merge_address,
    split_address,
)
from app.mailer.domain.validators import (
    VALID_EMAIL_RULE,
    AddressValidator,
    EmailRuleValidator,
    get_default_validator,
)
from app.mailer.domain.value_objects import Address

__all__ = [
    # Value objects and factory
    "Address",
    "AddressFactory",
    # Address grammar
    "EMAIL_TRIM_CHARS",
    "NAME_TRIM_CHARS",
    "split_address",
    "merge_address",
    "collapse_address_list",
    # Validation
    "VALID_EMAIL_RULE",
    "AddressValidator",
    "EmailRuleValidator",
    "get_default_validator",
    # Exceptions
    "DomainError",
    "InvalidAddressError",
]
