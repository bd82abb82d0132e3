"""Helpers for binding command-line flags to configuration objects."""

import argparse
from typing import Any


class BindToConfig(argparse.Action):
    """argparse action that stores the flag value onto a configuration object.

    Lets a provider declare its own flags without knowing how the parsed
    namespace is consumed.

    Example:
        parser.add_argument(
            "--oxford-dictionary-app-id",
            action=BindToConfig,
            target=config,
            attribute="app_id",
        )
    """

    def __init__(self, option_strings, dest, target: Any, attribute: str, **kwargs):
        self.target = target
        self.attribute = attribute
        kwargs.setdefault("default", argparse.SUPPRESS)
        super().__init__(option_strings, dest, **kwargs)

    def __call__(self, parser, namespace, values, option_string=None):
        setattr(self.target, self.attribute, values)
