"""Mock implementations of the swappable components.

Importing this package registers them as subclasses of the component
providers, which is how `build_providers` finds them.
"""

from .container import build_test_container
from .identity import MockIdentityProvider
from .persistence import MockPersistenceProvider

__all__ = ["MockIdentityProvider", "MockPersistenceProvider", "build_test_container"]
