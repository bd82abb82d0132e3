"""Custom exceptions for Define."""

from .base import DefineException
from .config import ConfigFileError, RequiredConfigError
from .registry import DuplicateProviderError, ProviderNotFoundError
from .source import (
    EmptyResultError,
    InvalidResponseError,
    ResponseDecodeError,
    SourceRequestError,
    UnexpectedContentTypeError,
    UnexpectedStatusError,
)

__all__ = [
    "DefineException",
    "ConfigFileError",
    "RequiredConfigError",
    "DuplicateProviderError",
    "ProviderNotFoundError",
    "EmptyResultError",
    "InvalidResponseError",
    "ResponseDecodeError",
    "SourceRequestError",
    "UnexpectedContentTypeError",
    "UnexpectedStatusError",
]
