"""Provider registry exceptions."""

from .base import DefineException


class DuplicateProviderError(DefineException):
    """Raised when a provider identifier is registered twice."""

    def __init__(self, identifier: str):
        self.identifier = identifier
        super().__init__(f"provider {identifier!r} is already registered")


class ProviderNotFoundError(DefineException):
    """Raised when no registered provider matches a configuration key."""

    def __init__(self, identifier: str):
        self.identifier = identifier
        super().__init__(f"provider/source {identifier!r} does not exist")
