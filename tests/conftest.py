"""Test configuration and fixtures."""

from datetime import datetime
from typing import Optional

import logfire
import pytest

from depot.domain.value import ProviderIdentity

# Keep spans local and quiet during tests
logfire.configure(send_to_logfire=False, console=False)


def make_identity(
    external_id: int = 1001,
    login: str = "alice",
    email: Optional[str] = "alice@example.com",
    name: Optional[str] = "Alice",
    avatar_url: Optional[str] = "https://avatars.example.com/alice",
    access_token: str = "gho_first",
) -> ProviderIdentity:
    """Build a provider identity with sensible defaults."""
    return ProviderIdentity(
        external_id=external_id,
        login=login,
        email=email,
        name=name,
        avatar_url=avatar_url,
        access_token=access_token,
    )


@pytest.fixture
def t0() -> datetime:
    """Fixed reference time for ordering-sensitive tests."""
    return datetime(2026, 1, 1, 12, 0, 0)
