"""Protocol for dictionary sources."""

from typing import Protocol

from define.models import Result


class Source(Protocol):
    """Interface for a live dictionary client that can define a word.

    Sources are built on demand by a provider and live for a single
    lookup.
    """

    @property
    def name(self) -> str:
        """Human-readable name for this source (e.g., 'Glosbe API')."""
        ...

    def define(self, word: str) -> Result:
        """Look up a word.

        Args:
            word: The word to define.

        Returns:
            A validated Result.

        Raises:
            EmptyResultError: If the source has no content for the word.
            SourceRequestError: If the request fails.
            InvalidResponseError: If the response has an unexpected status or type.
            ResponseDecodeError: If the response body can't be decoded.
        """
        ...
