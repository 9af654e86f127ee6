"""Application use cases for orchestrating domain logic."""

from app.mailer.application.use_cases.parse_addresses import (
    FormatAddressUseCase,
    ParseAddressListUseCase,
    ParseAddressUseCase,
)

__all__ = [
    "ParseAddressUseCase",
    "ParseAddressListUseCase",
    "FormatAddressUseCase",
]
