"""Default configuration values for Define."""

from .config import Configuration

DEFAULT_CONFIG_FILE_LOCATION = "~/.define.conf.json"
DEFAULT_INDENTATION_SIZE = 2
DEFAULT_PREFERRED_SOURCE = "Glosbe"


def create_default_config(**overrides) -> Configuration:
    """Create a default configuration with optional overrides.

    Args:
        **overrides: Keyword arguments to override default values

    Returns:
        Configuration with defaults and overrides applied

    Example:
        config = create_default_config(preferred_source="OxfordDictionary")
    """
    values = {
        "indentation_size": DEFAULT_INDENTATION_SIZE,
        "preferred_source": DEFAULT_PREFERRED_SOURCE,
    }
    values.update(overrides)
    return Configuration(**values)
