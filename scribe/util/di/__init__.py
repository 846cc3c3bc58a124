"""Dependency injection: provider registry and component selection."""

from typing import Type

from scribe.util.di.application import ProdApplicationProvider
from scribe.util.di.base import Component, ProviderBase
from scribe.util.di.core import ProdConfigProvider
from scribe.util.di.domain import ProdDomainProvider
from scribe.util.di.infrastructure import (
    EmailProvider,
    PersistenceProvider,
    ProdEmailProvider,
    ProdPersistenceProvider,
    ProdStorageProvider,
    StorageProvider,
)

# Installed in this order by create_container and build_test_container
PROVIDERS: list[Type[ProviderBase]] = [
    # Always real
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    # Swappable for in-memory or recording versions in tests
    PersistenceProvider,
    StorageProvider,
    EmailProvider,
]


def get_provider(
    base: Type[ProviderBase], use_mock: bool = False
) -> Type[ProviderBase]:
    """Pick the provider class to install for ``base``.

    A provider with no subclasses is installed as-is. A mockable component
    (persistence, storage, email) has one production and one mock subclass,
    told apart by ``__is_mock__``.

    Raises:
        ValueError: If the component lacks the requested implementation
    """
    implementations = base.__subclasses__()
    if not implementations:
        return base

    for impl in implementations:
        if getattr(impl, "__is_mock__", False) == use_mock:
            return impl

    component = getattr(base, "__mock_component__", base.__name__)
    raise ValueError(
        f"No {'mock' if use_mock else 'production'} implementation for {component}"
    )


__all__ = [
    "Component",
    "ProviderBase",
    "PROVIDERS",
    "get_provider",
    # Core providers
    "ProdConfigProvider",
    "ProdDomainProvider",
    "ProdApplicationProvider",
    # Infrastructure base classes
    "EmailProvider",
    "PersistenceProvider",
    "StorageProvider",
    # Infrastructure implementations
    "ProdEmailProvider",
    "ProdPersistenceProvider",
    "ProdStorageProvider",
]
