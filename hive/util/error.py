"""Errors raised while wiring the application from settings."""


class ConfigurationError(Exception):
    """A required setting is missing or still holds its placeholder.

    Attributes:
        setting: Environment variable that needs a real value
    """

    def __init__(self, setting: str, message: str) -> None:
        super().__init__(f"{setting}: {message}")
        self.setting = setting
