"""Test harness for unit, integration and e2e tests."""

import pytest_asyncio
from fastapi import FastAPI

from depot.interface.api.app import create_app
from depot.util.di import Component
from tests.di import build_test_container


def create_env_fixture(unmock: set[Component] | None = None):
    """Factory for creating test environment fixtures.

    The fixture builds a fresh container for every test and yields a
    request-scoped child of it, so services resolve exactly as they do
    inside an HTTP request.

    Args:
        unmock: Components to use real implementations for

    Returns:
        Pytest fixture function that yields AsyncContainer

    Usage:
        unit_env = create_env_fixture()

        @pytest.mark.asyncio
        async def test_follow(unit_env):
            service = await unit_env.get(FollowService)
            await service.follow(AccountId(1), PackageId(1))
    """

    @pytest_asyncio.fixture
    async def _test_environment():
        container = build_test_container(unmock=unmock or set())

        async with container() as request_container:
            yield request_container

        await container.close()

    return _test_environment


def create_test_app(unmock: set[Component] | None = None) -> FastAPI:
    """Build the API over a test container.

    The container stays reachable as ``app.state.dishka_container``.
    """
    return create_app(container=build_test_container(unmock=unmock or set()))
