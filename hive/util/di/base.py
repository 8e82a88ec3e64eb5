"""Provider base class and implementation selection."""

from typing import ClassVar, Literal, get_args

from dishka import Provider

# Infrastructure that tests swap for in-memory or local fakes
Component = Literal["identity", "persistence"]
COMPONENTS: frozenset[str] = frozenset(get_args(Component))


class ProviderBase(Provider):
    """Base for every provider in the container.

    A provider that sets `__mock_component__` is the abstract base of a
    swappable component. Its subclasses are the implementations, told apart
    by `__is_mock__`; mock implementations live with the tests.
    """

    __mock_component__: ClassVar[Component | None] = None
    __is_mock__: ClassVar[bool] = False

    @classmethod
    def select(cls, use_mock: bool = False) -> type["ProviderBase"]:
        """Pick the implementation to instantiate.

        Providers without a component are concrete and return themselves.

        Raises:
            LookupError: If no implementation of the requested kind is loaded
        """
        if cls.__mock_component__ is None:
            return cls
        for implementation in cls.__subclasses__():
            if implementation.__is_mock__ == use_mock:
                return implementation
        kind = "mock" if use_mock else "production"
        raise LookupError(
            f"No {kind} implementation of {cls.__mock_component__!r} is loaded"
        )
