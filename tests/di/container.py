"""Test container builder with selective unmocking."""

from dishka import AsyncContainer, make_async_container

from forum.util.di import PROVIDERS, Component, get_provider, is_component, mockable_components


def build_test_container(unmock: set[Component] | None = None) -> AsyncContainer:
    """Build a container where every component is mocked unless unmocked.

    Examples:
        # In-memory backend and token store
        container = build_test_container()

        # Token file on disk, in-memory backend
        container = build_test_container(unmock={"persistence"})

    Raises:
        ValueError: If an unknown component is named
    """
    unmock = unmock or set()
    unknown = unmock - mockable_components()
    if unknown:
        raise ValueError(f"Unknown components: {sorted(unknown)}")

    providers = [
        get_provider(
            base,
            use_mock=is_component(base) and base.__mock_component__ not in unmock,
        )()
        for base in PROVIDERS
    ]
    return make_async_container(*providers)
