"""Test container builder with selective unmocking."""

from dishka import AsyncContainer, make_async_container

from showcase.util.di import PROVIDERS, Component, get_provider


def _mockable_components() -> set[str]:
    return {
        base.__mock_component__
        for base in PROVIDERS
        if base.__subclasses__() and base.__mock_component__
    }


def build_test_container(unmock: set[Component] | None = None) -> AsyncContainer:
    """Build a container where mockable components default to their mocks.

    Settings still come from environment variables.

    Args:
        unmock: Components that should use their production provider

    Returns:
        Configured test container

    Raises:
        ValueError: If `unmock` names a component that has no mock

    Examples:
        # Unit and E2E tests: in-memory repositories
        container = build_test_container()

        # Integration tests: PostgreSQL
        container = build_test_container(unmock={"persistence"})
    """
    unmock = unmock or set()
    unknown = unmock - _mockable_components()
    if unknown:
        raise ValueError(f"Unknown components: {unknown}")

    providers = []
    for base in PROVIDERS:
        use_mock = (
            bool(base.__subclasses__())
            and base.__mock_component__ is not None
            and base.__mock_component__ not in unmock
        )
        providers.append(get_provider(base, use_mock=use_mock)())

    return make_async_container(*providers)
