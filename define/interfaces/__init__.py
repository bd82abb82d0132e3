"""Interface protocols for Define."""

from .presenter import PresenterProtocol
from .provider import ProviderConfiguration, RegisterFunc, SourceProvider
from .source import Source

__all__ = [
    "PresenterProtocol",
    "ProviderConfiguration",
    "RegisterFunc",
    "Source",
    "SourceProvider",
]
