"""Infrastructure providers.

The production implementations are imported here so that they are
registered as subclasses before any container is built.
"""

from .identity import IdentityProvider, ProdIdentityProvider
from .persistence import PersistenceProvider, ProdPersistenceProvider
from .realtime import ProdRealtimeProvider

__all__ = [
    "IdentityProvider",
    "PersistenceProvider",
    "ProdIdentityProvider",
    "ProdPersistenceProvider",
    "ProdRealtimeProvider",
]
