"""Application layer - use cases and orchestration.

This layer contains:
- DTOs: Data Transfer Objects for API input/output
- Use Cases: Application services that orchestrate domain logic
- Exceptions: Application-level error types
"""

from app.mailer.application.dto import (
    AddressDTO,
    AddressListDTO,
    FormatAddressRequest,
    ParseAddressListRequest,
    ParseAddressRequest,
)
from app.mailer.application.exceptions import (
    AddressBatchTooLargeError,
    AddressRejectedError,
    ApplicationError,
)
from app.mailer.application.use_cases import (
    FormatAddressUseCase,
    ParseAddressListUseCase,
    ParseAddressUseCase,
)

__all__ = [
    # DTOs
    "ParseAddressRequest",
    "ParseAddressListRequest",
    "FormatAddressRequest",
    "AddressDTO",
    "AddressListDTO",
    # Use Cases
    "ParseAddressUseCase",
    "ParseAddressListUseCase",
    "FormatAddressUseCase",
    # Exceptions
    "ApplicationError",
    "AddressRejectedError",
    "AddressBatchTooLargeError",
]
