"""Test harness for unit and end-to-end tests.

All external components (database, word list) are mocked unless unmocked.
"""

import pytest_asyncio

from trasher.util.di import Component
from tests.di import build_test_container


def create_env_fixture(unmock: set[Component] | None = None):
    """Factory for creating test environment fixtures.

    Creates a pytest fixture that:
    - Builds a test container with specified unmocking
    - Yields request-scoped container for service access

    Args:
        unmock: Components to use real implementations for

    Returns:
        Pytest fixture function that yields AsyncContainer

    Usage:
        # Unit tests - everything mocked
        unit_env = create_env_fixture()

        # Real word list, in-memory stores
        censor_env = create_env_fixture(unmock={"censor"})

        @pytest.mark.asyncio
        async def test_remove(unit_env):
            service = await unit_env.get(ModerationService)
            await service.remove(CommentId(7))
    """

    @pytest_asyncio.fixture
    async def _test_environment():
        container = build_test_container(unmock=unmock or set())

        async with container() as request_container:
            yield request_container

        await container.close()

    return _test_environment
