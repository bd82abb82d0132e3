"""CLI command for printing the effective configuration."""

from define.config import Configuration
from define.interfaces import PresenterProtocol


def print_config_command(config: Configuration, presenter: PresenterProtocol) -> int:
    """Print the configuration as JSON, in the config file format.

    Returns:
        Exit code (always 0)
    """
    presenter.show_info(config.to_json(indent=4))
    return 0
