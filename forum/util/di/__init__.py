"""Dependency injection module.

Providers come in two kinds. Layer providers (config, domain, application)
have a single implementation. Component providers (``backend``,
``persistence``) are abstract bases whose subclasses are the production and
mock implementations; tests pick one per component.
"""

from typing import Type

from forum.util.di.application import ProdApplicationProvider
from forum.util.di.base import Component, ProviderBase
from forum.util.di.core import ProdConfigProvider
from forum.util.di.domain import ProdDomainProvider
from forum.util.di.infrastructure import (
    BackendProvider,
    PersistenceProvider,
    ProdBackendProvider,
    ProdPersistenceProvider,
)
from forum.util.error import ConfigurationError

PROVIDERS: list[Type[ProviderBase]] = [
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    BackendProvider,
    PersistenceProvider,
]


def is_component(base: Type[ProviderBase]) -> bool:
    """Whether a provider is a swappable component rather than a layer provider."""
    return base.__mock_component__ is not None


def mockable_components() -> set[Component]:
    """Names of all swappable components."""
    return {base.__mock_component__ for base in PROVIDERS if is_component(base)}


def get_provider(
    base: Type[ProviderBase], use_mock: bool = False
) -> Type[ProviderBase]:
    """Resolve a provider entry to the class to instantiate.

    Layer providers are returned as-is. For a component, the subclass whose
    ``__is_mock__`` matches ``use_mock`` is returned; mock subclasses only
    exist once ``tests.di`` has been imported.

    Raises:
        ConfigurationError: If the component has no such implementation
    """
    if not is_component(base):
        return base

    implementations = {
        impl.__is_mock__: impl for impl in base.__subclasses__()
    }
    impl = implementations.get(use_mock)
    if impl is None:
        kind = "mock" if use_mock else "production"
        raise ConfigurationError(
            f"No {kind} implementation for component '{base.__mock_component__}'"
        )
    return impl


__all__ = [
    "Component",
    "ProviderBase",
    "PROVIDERS",
    "get_provider",
    "is_component",
    "mockable_components",
    "ProdConfigProvider",
    "ProdDomainProvider",
    "ProdApplicationProvider",
    "BackendProvider",
    "PersistenceProvider",
    "ProdBackendProvider",
    "ProdPersistenceProvider",
]
