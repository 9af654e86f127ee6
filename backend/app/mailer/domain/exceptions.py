"""Domain-layer exceptions raised by value objects and domain services.

These exceptions signal that domain data violates an invariant. The
application layer wraps them into its own error types before they reach
the presentation layer.
"""


class DomainError(Exception):
    """Base class for all domain-layer exceptions."""

    def __init__(self, message: str, code: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__


class InvalidAddressError(DomainError, ValueError):
    """Raised when an email address fails the validity check.

    The ``email`` attribute holds the input exactly as it was given,
    before any trimming, so diagnostics show what the caller sent.
    """

    def __init__(self, email: str) -> None:
        super().__init__(
            message=f"Invalid email address: {email}",
            code="INVALID_ADDRESS"
        )
        self.email = email
