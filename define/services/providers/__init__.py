"""Dictionary provider implementations."""

from .free_dictionary import FreeDictionarySource
from .glosbe import GlosbeSource
from .merriam_webster import MerriamWebsterSource
from .oxford import OxfordSource

__all__ = ["FreeDictionarySource", "GlosbeSource", "MerriamWebsterSource", "OxfordSource"]
