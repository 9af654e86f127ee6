"""Data transfer objects for application layer."""

from app.mailer.application.dto.address_dto import (
    AddressDTO,
    AddressListDTO,
    FormatAddressRequest,
    ParseAddressListRequest,
    ParseAddressRequest,
)

__all__ = [
    # Requests
    "ParseAddressRequest",
    "ParseAddressListRequest",
    "FormatAddressRequest",
    # Responses
    "AddressDTO",
    "AddressListDTO",
]
