"""Mock providers for testing."""

from .censor import MockCensorProvider
from .persistence import MockPersistenceProvider, UnavailablePersistenceProvider
from .container import build_store_outage_container, build_test_container

__all__ = [
    "MockCensorProvider",
    "MockPersistenceProvider",
    "UnavailablePersistenceProvider",
    "build_store_outage_container",
    "build_test_container",
]
