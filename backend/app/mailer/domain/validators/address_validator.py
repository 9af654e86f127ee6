"""Address validator interface consumed by the Address value object."""

from abc import ABC, abstractmethod

# Rule checked against every email before an Address is created
VALID_EMAIL_RULE = "required|valid_email"


class AddressValidator(ABC):
    """Abstract base class for rule-based value validators.

    The domain only needs a boolean predicate; concrete implementations
    decide how each rule token is evaluated.
    """

    @abstractmethod
    def check(self, value: str, rule: str) -> bool:
        """Check a value against a rule string.

        Args:
            value: The value to validate.
            rule: A rule string such as ``"required|valid_email"``.

        Returns:
            True if the value satisfies every token of the rule.
        """
        ...
