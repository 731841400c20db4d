"""Dependency injection wiring for the comments service.

Providers are listed once in ``PROVIDERS``. A provider class with no
subclasses is used as is; a class with subclasses is a swappable component
(only persistence today) and the concrete subclass is picked by its
``__is_mock__`` flag.
"""

from typing import Type

from inkwell.util.di.application import ProdApplicationProvider
from inkwell.util.di.base import Component, ProviderBase
from inkwell.util.di.core import ProdConfigProvider
from inkwell.util.di.domain import ProdDomainProvider
from inkwell.util.di.infrastructure import (
    PersistenceProvider,
    ProdPersistenceProvider,
)
from inkwell.util.error import DependencyInjectionError

PROVIDERS: list[Type[ProviderBase]] = [
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    PersistenceProvider,
]


def get_provider(
    base: Type[ProviderBase], use_mock: bool = False
) -> Type[ProviderBase]:
    """Pick the provider class to instantiate for a ``PROVIDERS`` entry.

    Raises:
        DependencyInjectionError: If a swappable component lacks the
            requested implementation
    """
    implementations = {
        getattr(cls, "__is_mock__", False): cls for cls in base.__subclasses__()
    }
    if not implementations:
        return base

    try:
        return implementations[use_mock]
    except KeyError:
        kind = "mock" if use_mock else "production"
        component = base.__mock_component__ or base.__name__
        raise DependencyInjectionError(f"No {kind} provider for {component}")


def mockable_components() -> set[Component]:
    """Names of the components that tests may swap for in-memory versions."""
    return {
        base.__mock_component__
        for base in PROVIDERS
        if base.__subclasses__() and base.__mock_component__
    }


__all__ = [
    "Component",
    "PROVIDERS",
    "PersistenceProvider",
    "ProdApplicationProvider",
    "ProdConfigProvider",
    "ProdDomainProvider",
    "ProdPersistenceProvider",
    "ProviderBase",
    "get_provider",
    "mockable_components",
]
