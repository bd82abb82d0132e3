"""Configuration related exceptions."""

from .base import DefineException


class ConfigFileError(DefineException):
    """Raised when the config file cannot be read or parsed.

    The message is deliberately generic; the underlying error is kept
    as ``__cause__`` for debugging.
    """

    def __init__(self, message: str = "error reading config file"):
        super().__init__(message)


class RequiredConfigError(DefineException):
    """Raised when a required provider configuration key is blank."""

    def __init__(self, key: str):
        self.key = key
        super().__init__(f"Required configuration key {key!r} is missing")
