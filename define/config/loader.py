"""Build the runtime configuration from flags, file, environment and defaults."""

from __future__ import annotations

import argparse
import json
import logging
import os
from collections.abc import Mapping
from dataclasses import replace
from pathlib import Path
from typing import TYPE_CHECKING

from define.exceptions import ConfigFileError

from .config import Configuration
from .merge import merge_configurations

if TYPE_CHECKING:
    from define.interfaces import ProviderConfiguration
    from define.registry import ProviderRegistry

logger = logging.getLogger(__name__)

INDENT_SIZE_ENV_VAR = "DEFINE_APP_INDENT_SIZE"
PREFERRED_SOURCE_ENV_VAR = "DEFINE_APP_PREFERRED_SOURCE"


def _non_negative_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid int value: {value!r}") from None
    if number < 0:
        raise argparse.ArgumentTypeError(f"must not be negative: {value!r}")
    return number


def add_configuration_arguments(parser: argparse.ArgumentParser) -> None:
    """Declare the global configuration flags.

    Args:
        parser: Parser to add the flags to
    """
    parser.add_argument(
        "-c",
        "--config-file",
        default="",
        metavar="PATH",
        help="The location of the config file to use",
    )
    parser.add_argument(
        "--indent-size",
        type=_non_negative_int,
        default=0,
        metavar="N",
        help="The number of spaces to indent output by",
    )
    parser.add_argument(
        "--preferred-source",
        default="",
        metavar="SOURCE",
        help="The preferred source to use, if available",
    )


def command_line_configuration(args: argparse.Namespace) -> Configuration:
    """Build the configuration layer given on the command line."""
    return Configuration(
        indentation_size=args.indent_size,
        preferred_source=args.preferred_source,
        config_file_location=args.config_file,
    )


def file_configuration(location: str | Path, registry: ProviderRegistry) -> Configuration:
    """Load the configuration layer from a JSON file.

    An empty file is an empty configuration.

    Args:
        location: Path to the config file (``~`` is expanded)
        registry: Configured provider registry, used to decode provider sections

    Returns:
        Configuration read from the file

    Raises:
        ConfigFileError: If the file can't be read or parsed
    """
    path = Path(location).expanduser()

    try:
        contents = path.read_text(encoding="utf-8")
        if not contents.strip():
            return Configuration()
        return Configuration.from_json(contents, registry)
    except (OSError, json.JSONDecodeError, TypeError, ValueError) as e:
        logger.debug(f"Failed to load config file {path}: {e}")
        raise ConfigFileError() from e


def environment_configuration(environ: Mapping[str, str] | None = None) -> Configuration:
    """Build the configuration layer from environment variables.

    An indent size that isn't a non-negative integer is ignored.

    Args:
        environ: Environment mapping (defaults to os.environ)
    """
    if environ is None:
        environ = os.environ

    indentation_size = 0
    raw_indent = environ.get(INDENT_SIZE_ENV_VAR, "")
    if raw_indent:
        try:
            indentation_size = _non_negative_int(raw_indent)
        except argparse.ArgumentTypeError:
            logger.warning(f"Ignoring invalid {INDENT_SIZE_ENV_VAR} value: {raw_indent!r}")

    return Configuration(
        indentation_size=indentation_size,
        preferred_source=environ.get(PREFERRED_SOURCE_ENV_VAR, ""),
    )


def resolve_config_file_location(
    explicit_location: str, default_location: str | None
) -> str:
    """Decide which config file to read, if any.

    An explicit location is always used (and must exist). Otherwise the
    default location is used only if it exists.

    Returns:
        Location to load, or an empty string when there is none
    """
    if explicit_location:
        return explicit_location

    if default_location:
        default_path = Path(default_location).expanduser()
        if default_path.exists():
            return str(default_path)
        logger.debug(f"No config file at default location {default_path}")

    return ""


def load_configuration(
    args: argparse.Namespace,
    registry: ProviderRegistry,
    provider_configs: dict[str, ProviderConfiguration],
    default_config_file_location: str | None,
    defaults: Configuration,
    environ: Mapping[str, str] | None = None,
) -> Configuration:
    """Build the effective configuration by merging all sources.

    The merging of values from different sources takes this priority:
    1. Command line arguments
    2. A loaded config file, if available
    3. Environment variables
    4. Passed in default values

    Provider configurations bound to command-line flags are merged over the
    matching sections of the config file. Environment variables for
    providers are applied later, by each provider's finalize step.

    Args:
        args: Parsed command-line arguments
        registry: Configured provider registry
        provider_configs: Provider configurations from ``configure_providers``
        default_config_file_location: Config file to use when none is given
        defaults: Configuration holding default values

    Returns:
        The merged configuration with provider configurations attached

    Raises:
        ConfigFileError: If a config file exists but can't be read
    """
    command_line_config = command_line_configuration(args)

    location = resolve_config_file_location(
        command_line_config.config_file_location, default_config_file_location
    )

    file_config = Configuration()
    if location:
        logger.debug(f"Loading config file {location}")
        file_config = file_configuration(location, registry)

    merged = merge_configurations(
        command_line_config,
        file_config,
        environment_configuration(environ),
        defaults,
    )

    merged_provider_configs = {}
    for json_key, provider_config in provider_configs.items():
        file_provider_config = file_config.provider_configs.get(json_key)
        if file_provider_config is not None:
            provider_config = merge_configurations(provider_config, file_provider_config)
        merged_provider_configs[json_key] = provider_config

    return replace(
        merged,
        config_file_location=location,
        provider_configs=merged_provider_configs,
    )
