"""CLI command for listing the available sources."""

from define.interfaces import PresenterProtocol
from define.registry import ProviderRegistry


def list_sources_command(registry: ProviderRegistry, presenter: PresenterProtocol) -> int:
    """Print the display names of all configured providers.

    Returns:
        Exit code (always 0)
    """
    presenter.show_sources(registry.provider_names())
    return 0
