"""Data Transfer Objects for address-related API requests and responses.

These DTOs represent the external contract for address operations exposed
through the API layer. They are decoupled from the Address value object
and optimized for JSON serialization.
"""

from typing import Optional, Self

from pydantic import BaseModel, Field

from app.mailer.domain.value_objects.address import Address


class ParseAddressRequest(BaseModel):
    """Request payload for parsing a single raw address."""

    address: str = Field(
        description="Simple or full address, e.g. 'Jane <jane@example.com>'"
    )


class ParseAddressListRequest(BaseModel):
    """Request payload for parsing a list of raw addresses.

    A list with a single comma-separated entry is parsed as the
    addresses in that entry.
    """

    addresses: list[str] = Field(
        min_length=1,
        description="Raw addresses, or one comma-separated string",
    )


class FormatAddressRequest(BaseModel):
    """Request payload for formatting an email and display name."""

    email: str = Field(description="Email address")
    name: Optional[str] = Field(default=None, description="Optional display name")


class AddressDTO(BaseModel):
    """Response DTO for one validated address."""

    email: str
    name: Optional[str]
    formatted: str = Field(description="Canonical header form of the address")

    @classmethod
    def from_address(cls, address: Address) -> Self:
        """Build the DTO from an Address value object."""
        return cls(email=address.email, name=address.name, formatted=str(address))


class AddressListDTO(BaseModel):
    """Response DTO for a parsed address list."""

    addresses: list[AddressDTO]
    total: int
