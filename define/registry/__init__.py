"""Source provider registry for Define."""

from .default import create_default_registry
from .registry import ProviderRegistry

__all__ = ["ProviderRegistry", "create_default_registry"]
