"""Source services for Define."""

from .providers import FreeDictionarySource, GlosbeSource, MerriamWebsterSource, OxfordSource
from .validation import validate_and_return_result, validate_http_response, validate_result

__all__ = [
    "FreeDictionarySource",
    "GlosbeSource",
    "MerriamWebsterSource",
    "OxfordSource",
    "validate_result",
    "validate_and_return_result",
    "validate_http_response",
]
