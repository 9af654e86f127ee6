"""Shared fixtures for address tests."""

import pytest

from app.mailer.domain.validators import AddressValidator


class StubValidator(AddressValidator):
    """Validator that accepts anything shaped like local@domain.

    Records every (value, rule) pair it is asked about.
    """

    def __init__(self) -> None:
        self.calls: list[tuple[str, str]] = []

    def check(self, value: str, rule: str) -> bool:
        self.calls.append((value, rule))
        local, at, domain = value.partition("@")
        return bool(at and local and domain) and not any(c in value for c in " <>,")


class RejectingValidator(AddressValidator):
    """Validator that rejects every value."""

    def check(self, value: str, rule: str) -> bool:
        return False


@pytest.fixture
def stub_validator() -> StubValidator:
    """Create a permissive validator that records its calls."""
    return StubValidator()


@pytest.fixture
def rejecting_validator() -> RejectingValidator:
    """Create a validator that rejects everything."""
    return RejectingValidator()
