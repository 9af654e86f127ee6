"""Application-layer exceptions for use case error handling.

These exceptions represent request-level errors that can occur during
use case execution. They are designed to be caught and mapped to
appropriate HTTP responses by the presentation layer.
"""


class ApplicationError(Exception):
    """Base class for all application-layer exceptions."""

    def __init__(self, message: str, code: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__


class AddressRejectedError(ApplicationError):
    """Raised when a submitted address fails email validation."""

    def __init__(self, email: str) -> None:
        super().__init__(
            message=f"Invalid email address: {email}",
            code="INVALID_ADDRESS"
        )
        self.email = email


class AddressBatchTooLargeError(ApplicationError):
    """Raised when an address list exceeds the configured batch size."""

    def __init__(self, size: int, limit: int) -> None:
        super().__init__(
            message=f"Address list has {size} entries; at most {limit} are allowed",
            code="BATCH_TOO_LARGE"
        )
        self.size = size
        self.limit = limit
