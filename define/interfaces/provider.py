"""Protocols for source providers and their configurations."""

import argparse
from collections.abc import Callable
from typing import Protocol

from .source import Source


class ProviderConfiguration(Protocol):
    """Configuration owned by a single provider.

    Implementations are dataclasses; the JSON name of each field is taken
    from its ``json`` metadata entry.
    """

    @property
    def json_key(self) -> str:
        """Key identifying the provider, also used in serialized configuration."""
        ...


class SourceProvider(Protocol):
    """Interface for a pluggable provider of one dictionary source."""

    @property
    def name(self) -> str:
        """Display name of the source this provider builds."""
        ...

    def finalize(self, config: ProviderConfiguration) -> None:
        """Fill in or check the configuration after all layers were merged."""
        ...

    def provide(self, config: ProviderConfiguration) -> Source:
        """Construct the live source.

        Raises:
            RequiredConfigError: If a mandatory configuration field is blank.
        """
        ...


# Declares the provider's flags on the parser and returns the provider with
# its initial (flag-bound) configuration.
RegisterFunc = Callable[[argparse.ArgumentParser], tuple[SourceProvider, ProviderConfiguration]]
