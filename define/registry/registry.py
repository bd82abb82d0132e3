"""Registry of pluggable source providers."""

import argparse
import logging

from define.exceptions import DuplicateProviderError, ProviderNotFoundError
from define.interfaces import ProviderConfiguration, RegisterFunc, Source, SourceProvider

logger = logging.getLogger(__name__)


class ProviderRegistry:
    """Collection of source providers keyed by identifier.

    Providers go through two phases. ``configure_providers`` lets each one
    declare its flags and hand back an initial configuration; after the
    configuration layers have been merged, ``finalize`` and ``provide``
    complete the configuration and build the live source.

    The entry point owns one registry and passes it down, so tests can
    build registries with any subset of providers.
    """

    def __init__(self):
        """Initialize an empty registry."""
        self._registrations: dict[str, RegisterFunc] = {}
        self._providers: dict[str, SourceProvider] = {}
        self._config_types: dict[str, type] = {}

    def register(self, identifier: str, register_func: RegisterFunc) -> None:
        """Register a provider under an identifier.

        Args:
            identifier: Unique provider identifier (its JSON key)
            register_func: Function declaring flags and returning the
                provider with its initial configuration

        Raises:
            DuplicateProviderError: If the identifier is already registered.
                The first registration is kept.
        """
        if identifier in self._registrations:
            raise DuplicateProviderError(identifier)

        self._registrations[identifier] = register_func

    def identifiers(self) -> list[str]:
        """Get registered identifiers in registration order."""
        return list(self._registrations)

    def configure_providers(
        self, parser: argparse.ArgumentParser
    ) -> dict[str, ProviderConfiguration]:
        """Run every registration function.

        Each provider may add its own flags to the parser. Call this once
        per parser.

        Args:
            parser: Shared parser that providers add flags to

        Returns:
            Initial provider configurations keyed by their JSON key
        """
        configs: dict[str, ProviderConfiguration] = {}

        for identifier, register_func in self._registrations.items():
            provider, config = register_func(parser)
            json_key = config.json_key

            if json_key != identifier:
                logger.debug(f"Provider {identifier!r} reports JSON key {json_key!r}")

            self._providers[json_key] = provider
            self._config_types[json_key] = type(config)
            configs[json_key] = config

        return configs

    def configuration_types(self) -> dict[str, type]:
        """Get provider configuration classes keyed by JSON key.

        Empty until ``configure_providers`` has run.
        """
        return dict(self._config_types)

    def finalize(self, config: ProviderConfiguration) -> None:
        """Let the owning provider complete a merged configuration.

        Raises:
            ProviderNotFoundError: If no configured provider owns the configuration
        """
        self._provider_for(config).finalize(config)

    def provide(self, config: ProviderConfiguration) -> Source:
        """Build the live source for a configuration.

        Raises:
            ProviderNotFoundError: If no configured provider owns the configuration
            RequiredConfigError: If a mandatory field is blank
        """
        provider = self._provider_for(config)
        logger.debug(f"Providing source {provider.name!r}")
        return provider.provide(config)

    def provider_names(self) -> list[str]:
        """Get display names of configured providers in registration order."""
        return [provider.name for provider in self._providers.values()]

    def provider_name(self, config: ProviderConfiguration) -> str:
        """Get the display name of the provider owning a configuration."""
        return self._provider_for(config).name

    def _provider_for(self, config: ProviderConfiguration) -> SourceProvider:
        try:
            return self._providers[config.json_key]
        except KeyError:
            raise ProviderNotFoundError(config.json_key) from None

    def __len__(self) -> int:
        return len(self._registrations)

    def __contains__(self, identifier: object) -> bool:
        return identifier in self._registrations
