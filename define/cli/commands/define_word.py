"""CLI command for defining a word."""

import logging

from define.config import Configuration
from define.exceptions import DefineException, ProviderNotFoundError
from define.interfaces import PresenterProtocol, ProviderConfiguration
from define.registry import ProviderRegistry
from define.services import validate_and_return_result

logger = logging.getLogger(__name__)


def select_provider_config(config: Configuration) -> ProviderConfiguration:
    """Pick the configuration of the source to use.

    The preferred source wins when set; otherwise the first registered
    provider is used.

    Raises:
        ProviderNotFoundError: If the preferred source isn't registered, or
            there are no providers at all
    """
    if config.preferred_source:
        try:
            return config.provider_configs[config.preferred_source]
        except KeyError:
            raise ProviderNotFoundError(config.preferred_source) from None

    for provider_config in config.provider_configs.values():
        return provider_config

    raise ProviderNotFoundError("")


def define_word_command(
    word: str,
    config: Configuration,
    registry: ProviderRegistry,
    presenter: PresenterProtocol,
) -> int:
    """Execute a word lookup.

    Args:
        word: Word to define
        config: Effective configuration with finalized provider configurations
        registry: Configured provider registry
        presenter: Output presenter

    Returns:
        Exit code (0 = success, 1 = failure)
    """
    try:
        provider_config = select_provider_config(config)
    except ProviderNotFoundError as e:
        presenter.show_error(f"preferred provider/source {e.identifier!r} does not exist")
        return 1

    try:
        source = registry.provide(provider_config)
    except DefineException as e:
        presenter.show_error(
            f"source {registry.provider_name(provider_config)!r} "
            f"failed to initialize with error: {e}"
        )
        return 1

    try:
        result = validate_and_return_result(source.define(word))
    except DefineException as e:
        presenter.show_error(str(e))
        return 1
    except Exception as e:
        logger.debug("Unexpected error during lookup", exc_info=True)
        presenter.show_error(f"unexpected error: {e}")
        return 1

    presenter.show_result(result, source.name)
    return 0
