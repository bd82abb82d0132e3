"""Presenter protocol for output abstraction."""

from typing import Protocol

from define.models import Result


class PresenterProtocol(Protocol):
    """Interface for presenting output to the user.

    Commands only talk to this protocol, so tests can record output
    instead of writing to the terminal.
    """

    def show_info(self, message: str) -> None:
        """Display an informational message.

        Args:
            message: The informational message to display
        """
        ...

    def show_error(self, message: str) -> None:
        """Display an error message.

        Args:
            message: The error message to display
        """
        ...

    def show_result(self, result: Result, source_name: str) -> None:
        """Display a lookup result.

        Args:
            result: The validated result to display
            source_name: Name of the source that produced it
        """
        ...

    def show_sources(self, names: list[str]) -> None:
        """Display the available source names.

        Args:
            names: Display names of registered sources
        """
        ...
