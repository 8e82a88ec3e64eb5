"""Dependency injection wiring.

Every provider class is listed once in `PROVIDERS`. Swappable components
(identity, persistence) resolve to their production implementation unless
the caller asks for mocks.
"""

from collections.abc import Collection

from dishka import Provider

from hive.util.di.application import ProdApplicationProvider
from hive.util.di.base import COMPONENTS, Component, ProviderBase
from hive.util.di.core import ProdConfigProvider
from hive.util.di.domain import ProdDomainProvider
from hive.util.di.infrastructure import (
    IdentityProvider,
    PersistenceProvider,
    ProdIdentityProvider,
    ProdPersistenceProvider,
    ProdRealtimeProvider,
)

PROVIDERS: list[type[ProviderBase]] = [
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    ProdRealtimeProvider,
    IdentityProvider,
    PersistenceProvider,
]


def build_providers(mocked: Collection[Component] = ()) -> list[Provider]:
    """Instantiate one provider per entry of `PROVIDERS`.

    Args:
        mocked: Components to serve from their mock implementation

    Raises:
        ValueError: If `mocked` names an unknown component
    """
    unknown = set(mocked) - COMPONENTS
    if unknown:
        raise ValueError(f"Unknown components: {sorted(unknown)}")
    return [
        base.select(use_mock=base.__mock_component__ in mocked)()
        for base in PROVIDERS
    ]


__all__ = [
    "COMPONENTS",
    "Component",
    "PROVIDERS",
    "ProviderBase",
    "build_providers",
    "ProdApplicationProvider",
    "ProdConfigProvider",
    "ProdDomainProvider",
    "ProdRealtimeProvider",
    "IdentityProvider",
    "PersistenceProvider",
    "ProdIdentityProvider",
    "ProdPersistenceProvider",
]
