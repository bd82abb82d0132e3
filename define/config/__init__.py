"""Configuration management for Define."""

from .config import Configuration
from .defaults import (
    DEFAULT_CONFIG_FILE_LOCATION,
    DEFAULT_INDENTATION_SIZE,
    DEFAULT_PREFERRED_SOURCE,
    create_default_config,
)
from .loader import (
    add_configuration_arguments,
    command_line_configuration,
    environment_configuration,
    file_configuration,
    load_configuration,
)
from .merge import merge_configurations

__all__ = [
    "Configuration",
    "DEFAULT_CONFIG_FILE_LOCATION",
    "DEFAULT_INDENTATION_SIZE",
    "DEFAULT_PREFERRED_SOURCE",
    "create_default_config",
    "add_configuration_arguments",
    "command_line_configuration",
    "environment_configuration",
    "file_configuration",
    "load_configuration",
    "merge_configurations",
]
