"""Errors raised by adapters talking to external systems."""


class AdapterError(Exception):
    """Base adapter error."""


class ProviderError(AdapterError):
    """An external provider could not be reached or answered garbage.

    Attributes:
        provider: Short provider name, e.g. ``"identity"``
    """

    def __init__(self, provider: str, message: str) -> None:
        super().__init__(message)
        self.provider = provider
