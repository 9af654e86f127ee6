"""Validator port and its default email-validator implementation."""

from app.mailer.domain.validators.address_validator import VALID_EMAIL_RULE, AddressValidator
from app.mailer.domain.validators.email_rule_validator import (
    EmailRuleValidator,
    get_default_validator,
)

__all__ = [
    "VALID_EMAIL_RULE",
    "AddressValidator",
    "EmailRuleValidator",
    "get_default_validator",
]
