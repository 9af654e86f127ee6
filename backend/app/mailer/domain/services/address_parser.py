"""Parsing of raw address strings into email and display name parts.

Parsing trims content but does no validation or encoding. The functions
here never raise; malformed input yields a best-effort result.
"""

import re
from typing import Optional, Sequence

# Whitespace stripped from both ends of an email, including NUL and vertical tab
EMAIL_TRIM_CHARS = " \t\n\r\0\x0b"

# Characters stripped from both ends of a display name
NAME_TRIM_CHARS = " '\""

# Greedy: spans from the first "<" to the last ">"
_BRACKET_PATTERN = re.compile(r"<(.*)>")

_LIST_DELIMITER_PATTERN = re.compile(r"[\s,]")


def split_address(address: str) -> tuple[str, Optional[str]]:
    """Split an address into an email and an optional display name.

    For the bracket form (``"Name" <email>``) the name is whatever
    precedes the bracketed span, measured by the span's length from the
    end of the string. Text following the closing bracket therefore
    shifts the cut and leaks part of the email into the name.

    Args:
        address: A simple (``user@example.com``) or full address string.

    Returns:
        A ``(email, name)`` tuple. ``name`` is None when there are no
        brackets and may be an empty string when nothing precedes them.
    """
    match = _BRACKET_PATTERN.search(address)
    if match is None:
        return address.strip(EMAIL_TRIM_CHARS), None

    email = match.group(1).strip(EMAIL_TRIM_CHARS)
    name = address[: -len(match.group(0))].strip(NAME_TRIM_CHARS)
    return email, name


def collapse_address_list(addresses: Sequence[str]) -> list[str]:
    """Expand a lone comma-separated string into separate addresses.

    Only a list holding exactly one string that contains a comma is
    re-split, on commas and whitespace. Any other list is returned as-is.

    Args:
        addresses: Raw address strings.

    Returns:
        The working list of raw address strings, in input order.
    """
    if len(addresses) == 1:
        element = addresses[0]
        if isinstance(element, str) and "," in element:
            return [token for token in _LIST_DELIMITER_PATTERN.split(element) if token]

    return list(addresses)
