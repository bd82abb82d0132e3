"""Registry populated with the built-in providers."""

from define.services.providers import free_dictionary, glosbe, merriam_webster, oxford

from .registry import ProviderRegistry


def create_default_registry() -> ProviderRegistry:
    """Create a registry with every built-in provider.

    Glosbe is registered first, so it is the fallback source when no
    preferred source is configured.
    """
    registry = ProviderRegistry()
    registry.register(glosbe.JSON_KEY, glosbe.register)
    registry.register(oxford.JSON_KEY, oxford.register)
    registry.register(merriam_webster.JSON_KEY, merriam_webster.register)
    registry.register(free_dictionary.JSON_KEY, free_dictionary.register)
    return registry
