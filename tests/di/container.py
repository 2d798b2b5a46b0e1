"""Test container builder with selective unmocking."""

from dishka import AsyncContainer, make_async_container

from trasher.util.di import PROVIDERS, Component, PersistenceProvider, get_provider

from .persistence import UnavailablePersistenceProvider


def build_test_container(unmock: set[Component] | None = None) -> AsyncContainer:
    """Build test container with selective unmocking.

    Args:
        unmock: Components to use production implementations for.
                All others use mocks if available.

    Returns:
        Configured test container

    Raises:
        ValueError: If unknown components are requested

    Examples:
        # Unit tests - all mocks
        container = build_test_container()

        # Real profanity word list
        container = build_test_container(unmock={"censor"})
    """
    unmock = unmock or set()
    _validate_unmock(unmock)

    provider_instances = []
    for base in PROVIDERS:
        is_mockable = bool(base.__subclasses__())

        if not is_mockable:
            # Concrete provider - always use as-is
            provider_class = get_provider(base, use_mock=False)
        else:
            component_name = getattr(base, "__mock_component__", None)
            use_mock = component_name not in unmock if component_name else False
            provider_class = get_provider(base, use_mock=use_mock)

        # All providers instantiated without arguments (Settings comes from DI)
        provider_instances.append(provider_class())

    return make_async_container(*provider_instances)


def _validate_unmock(unmock: set[Component]) -> None:
    """Validate unmock configuration.

    Args:
        unmock: Set of components to unmock

    Raises:
        ValueError: If unknown components
    """
    mockable_providers = [p for p in PROVIDERS if p.__subclasses__()]
    all_components = {
        getattr(p, "__mock_component__")
        for p in mockable_providers
        if hasattr(p, "__mock_component__")
    }

    unknown = unmock - all_components
    if unknown:
        raise ValueError(f"Unknown components: {unknown}")


def build_store_outage_container() -> AsyncContainer:
    """Build a test container whose stores fail every write.

    Reads still work, so the queue can be checked after a failed command.

    Returns:
        Configured test container
    """
    provider_instances = []
    for base in PROVIDERS:
        if base is PersistenceProvider:
            provider_instances.append(UnavailablePersistenceProvider())
        else:
            provider_instances.append(
                get_provider(base, use_mock=bool(base.__subclasses__()))()
            )

    return make_async_container(*provider_instances)
