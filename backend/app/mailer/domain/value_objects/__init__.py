"""Domain value objects for the mailer.

This module exports immutable value objects used throughout the domain layer:
- Address: Validated email address with an optional display name
"""

from app.mailer.domain.value_objects.address import Address

__all__ = ["Address"]
