"""Configuration classes for Define."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING, Any

from . import serialization
from .serialization import public_fields

if TYPE_CHECKING:
    from define.interfaces import ProviderConfiguration
    from define.registry import ProviderRegistry

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Configuration:
    """Immutable application configuration.

    Built once per run by merging flags, the config file, environment
    variables and defaults. Provider configurations are opaque here; they
    are attached after the merge and serialized under their own JSON key.
    """

    indentation_size: int = field(default=0, metadata={"json": "IndentationSize"})
    preferred_source: str = field(default="", metadata={"json": "PreferredSource"})

    # Not serialized or merged
    config_file_location: str = field(default="", metadata={"internal": True})
    provider_configs: dict[str, ProviderConfiguration] = field(
        default_factory=dict, metadata={"internal": True}, compare=False
    )

    def __post_init__(self):
        if self.indentation_size < 0:
            raise ValueError("IndentationSize must not be negative")

    def provider_config_list(self) -> list[ProviderConfiguration]:
        """Get the attached provider configurations in registration order."""
        return list(self.provider_configs.values())

    def to_json_dict(self) -> dict[str, Any]:
        """Convert to a flat JSON-ready dict.

        Base fields come first, followed by one nested object per provider
        configuration that has any fields.
        """
        data = serialization.to_json_dict(self)

        for provider_config in self.provider_configs.values():
            if provider_config is None or not public_fields(provider_config):
                continue
            data[provider_config.json_key] = serialization.to_json_dict(provider_config)

        return data

    def to_json(self, indent: int | None = None) -> str:
        """Serialize to a JSON string."""
        return json.dumps(self.to_json_dict(), indent=indent)

    @classmethod
    def from_json_dict(cls, data: dict[str, Any], registry: ProviderRegistry) -> Configuration:
        """Build a configuration from a decoded JSON object.

        Provider sub-objects are decoded for every JSON key the registry
        knows; other unknown keys are ignored.

        Args:
            data: Decoded JSON object
            registry: Configured provider registry

        Raises:
            TypeError: If a value has the wrong type
            ValueError: If a value is out of range
        """
        base = serialization.from_json_dict(cls, data)

        config_types = registry.configuration_types()
        provider_configs = {}
        for json_key, config_type in config_types.items():
            # A null section is the same as a missing one
            if data.get(json_key) is not None:
                provider_configs[json_key] = serialization.from_json_dict(
                    config_type, data[json_key]
                )

        unknown = set(data) - {serialization.json_name(f) for f in public_fields(cls)}
        unknown -= set(config_types)
        if unknown:
            logger.debug(f"Ignoring unknown configuration keys: {sorted(unknown)}")

        return replace(base, provider_configs=provider_configs)

    @classmethod
    def from_json(cls, text: str, registry: ProviderRegistry) -> Configuration:
        """Deserialize from a JSON string.

        Raises:
            json.JSONDecodeError: If the text is not valid JSON
            TypeError: If the JSON is not an object or a value has the wrong type
        """
        return cls.from_json_dict(json.loads(text), registry)

    def __str__(self) -> str:
        return (
            f"Configuration(indent={self.indentation_size}, "
            f"source='{self.preferred_source}', providers={len(self.provider_configs)})"
        )
