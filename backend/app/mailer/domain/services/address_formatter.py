"""Formatting of email and display name parts into a header address."""

from typing import Optional

from app.mailer.domain.services.address_parser import EMAIL_TRIM_CHARS, NAME_TRIM_CHARS


def merge_address(email: str, name: Optional[str] = None) -> str:
    """Combine an email and an optional display name into one address.

    Wraps the name in double quotes and the email in angle brackets.
    Trims content but does no validation or encoding.

    Args:
        email: The email address.
        name: The display name, or None for a bare address.

    Returns:
        ``email`` when name is None, ``<email>`` when the name trims to
        nothing, otherwise ``"name" <email>``.
    """
    if name is None:
        return email.strip(EMAIL_TRIM_CHARS)

    bracketed = f"<{email}>"

    name = name.strip(NAME_TRIM_CHARS)
    if not name:
        return bracketed

    return f'"{name}" {bracketed}'
