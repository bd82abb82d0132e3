"""Utility functions for Define."""

from .flags import BindToConfig
from .text_utils import clean_text, strip_markup

__all__ = [
    "BindToConfig",
    "clean_text",
    "strip_markup",
]
