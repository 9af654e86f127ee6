"""Rule-based validator backed by the email-validator library."""

from functools import lru_cache
from typing import Callable

from email_validator import EmailNotValidError, validate_email

from app.mailer.domain.validators.address_validator import AddressValidator


class EmailRuleValidator(AddressValidator):
    """Evaluates ``|``-separated rule strings against a value.

    Supported tokens:
    - ``required``: the value is non-empty after whitespace trimming.
    - ``valid_email``: the value is a syntactically valid ASCII email
      address. No DNS lookups are made.

    Attributes:
        allow_quoted_local: Accept quoted local parts ("a b"@example.com).
        allow_domain_literal: Accept domain literals (user@[192.0.2.1]).
    """

    def __init__(
        self,
        allow_quoted_local: bool = False,
        allow_domain_literal: bool = False,
    ) -> None:
        self.allow_quoted_local = allow_quoted_local
        self.allow_domain_literal = allow_domain_literal
        self._checks: dict[str, Callable[[str], bool]] = {
            "required": self._is_present,
            "valid_email": self._is_valid_email,
        }

    def check(self, value: str, rule: str) -> bool:
        """Check a value against every token of a rule string.

        Args:
            value: The value to validate.
            rule: Rule tokens joined with ``|``. Empty tokens are ignored.

        Returns:
            True if every token passes.

        Raises:
            ValueError: If the rule contains an unknown token.
        """
        tokens = [token.strip() for token in rule.split("|") if token.strip()]

        for token in tokens:
            if token not in self._checks:
                raise ValueError(f"Unknown validation rule: {token}")

        return all(self._checks[token](value) for token in tokens)

    @staticmethod
    def _is_present(value: str) -> bool:
        return isinstance(value, str) and value.strip() != ""

    def _is_valid_email(self, value: str) -> bool:
        if not isinstance(value, str):
            return False

        try:
            validate_email(
                value,
                check_deliverability=False,
                allow_smtputf8=False,
                allow_quoted_local=self.allow_quoted_local,
                allow_domain_literal=self.allow_domain_literal,
                allow_display_name=False,
            )
        except EmailNotValidError:
            return False
        return True


@lru_cache
def get_default_validator() -> EmailRuleValidator:
    """Get the cached validator used when none is injected."""
    return EmailRuleValidator()
