"""FastAPI dependencies shared by the address routers."""

from fastapi import Depends

from app.core.config import Settings, get_settings
from app.mailer.domain.validators import AddressValidator, EmailRuleValidator


def get_address_validator(settings: Settings = Depends(get_settings)) -> AddressValidator:
    """Build the validator from the configured email-validator options."""
    return EmailRuleValidator(
        allow_quoted_local=settings.email_allow_quoted_local,
        allow_domain_literal=settings.email_allow_domain_literal,
    )
