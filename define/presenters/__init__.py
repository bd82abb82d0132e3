"""Presenter implementations for output handling."""

from .console_presenter import ConsolePresenter, IndentedWriter, ResultPrinter

__all__ = ["ConsolePresenter", "IndentedWriter", "ResultPrinter"]
