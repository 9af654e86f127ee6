"""Address parsing API endpoints.

Implements the address grammar over HTTP:
- POST /api/addresses/parse - Parse one raw address
- POST /api/addresses/parse-list - Parse a list of raw addresses
- POST /api/addresses/format - Format an email and display name
"""

from fastapi import APIRouter, Depends, HTTPException, status

from app.core.config import Settings, get_settings
from app.core.logging import get_logger
from app.mailer.application.dto.address_dto import (
    AddressDTO,
    AddressListDTO,
    FormatAddressRequest,
    ParseAddressListRequest,
    ParseAddressRequest,
)
from app.mailer.application.exceptions import AddressBatchTooLargeError, AddressRejectedError
from app.mailer.application.use_cases.parse_addresses import (
    FormatAddressUseCase,
    ParseAddressListUseCase,
    ParseAddressUseCase,
)
from app.mailer.domain.validators import AddressValidator
from app.mailer.presentation.api.dependencies import get_address_validator

logger = get_logger(__name__)

router = APIRouter()


@router.post("/addresses/parse", response_model=AddressDTO)
async def parse_address(
    request: ParseAddressRequest,
    validator: AddressValidator = Depends(get_address_validator),
) -> AddressDTO:
    """Parse a simple or full address into email and display name.

    Args:
        request: Parse request with the raw address.
        validator: Email validator (injected).

    Returns:
        AddressDTO with the parsed parts and canonical form.

    Raises:
        HTTPException: 422 if the email is invalid.
    """
    use_case = ParseAddressUseCase(validator=validator)

    try:
        return use_case.execute(request)
    except AddressRejectedError as e:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_CONTENT,
            detail=e.message,
        ) from e


@router.post("/addresses/parse-list", response_model=AddressListDTO)
async def parse_address_list(
    request: ParseAddressListRequest,
    validator: AddressValidator = Depends(get_address_validator),
    settings: Settings = Depends(get_settings),
) -> AddressListDTO:
    """Parse a list of addresses, or a single comma-separated string.

    Args:
        request: Parse request with the raw addresses.
        validator: Email validator (injected).
        settings: Application settings (injected).

    Returns:
        AddressListDTO with every parsed address in input order.

    Raises:
        HTTPException: 422 if any email is invalid or the list is too long.
    """
    use_case = ParseAddressListUseCase(
        validator=validator,
        max_batch_size=settings.max_batch_size,
    )

    try:
        return use_case.execute(request)
    except (AddressRejectedError, AddressBatchTooLargeError) as e:
        logger.info(f"Address list rejected: {e.code}")
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_CONTENT,
            detail=e.message,
        ) from e


@router.post("/addresses/format", response_model=AddressDTO)
async def format_address(
    request: FormatAddressRequest,
    validator: AddressValidator = Depends(get_address_validator),
) -> AddressDTO:
    """Format an email and optional display name as a header address.

    Args:
        request: Format request with email and optional name.
        validator: Email validator (injected).

    Returns:
        AddressDTO whose ``formatted`` field is the header form.

    Raises:
        HTTPException: 422 if the email is invalid.
    """
    use_case = FormatAddressUseCase(validator=validator)

    try:
        return use_case.execute(request)
    except AddressRejectedError as e:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_CONTENT,
            detail=e.message,
        ) from e
