"""Domain services implementing the address grammar.

These are pure functions with no infrastructure dependencies:
- split_address / collapse_address_list: raw string -> parts
- merge_address: parts -> header address string
"""

from app.mailer.domain.services.address_formatter import merge_address
from app.mailer.domain.services.address_parser import (
    EMAIL_TRIM_CHARS,
    NAME_TRIM_CHARS,
    collapse_address_list,
    split_address,
)

__all__ = [
    "EMAIL_TRIM_CHARS",
    "NAME_TRIM_CHARS",
    "collapse_address_list",
    "merge_address",
    "split_address",
]
