"""Console presenter for CLI output."""

import sys
from typing import TextIO

from define.models import DictionaryEntry, Result, Sense, ThesaurusEntry


class IndentedWriter:
    """Write lines to a text stream with a fixed indentation.

    Nested writers from ``indented`` add to the current indentation.
    """

    def __init__(self, stream: TextIO, spaces: int = 0):
        self._stream = stream
        self._spaces = spaces

    @property
    def spaces(self) -> int:
        return self._spaces

    def write_line(self, text: str = "") -> None:
        """Write one indented line (blank lines are not indented)."""
        if text:
            self._stream.write(" " * self._spaces + text + "\n")
        else:
            self._stream.write("\n")

    def write_new_line(self) -> None:
        self.write_line()

    def write_padded_line(self, text: str, padding: int = 1) -> None:
        """Write a line surrounded by blank lines."""
        for _ in range(padding):
            self.write_new_line()
        self.write_line(text)
        for _ in range(padding):
            self.write_new_line()

    def indented(self, spaces: int) -> "IndentedWriter":
        """Get a writer indented by additional spaces."""
        return IndentedWriter(self._stream, self._spaces + spaces)


class ResultPrinter:
    """Print a Result as indented text."""

    def __init__(self, writer: IndentedWriter, indent_size: int):
        """Initialize the printer.

        Args:
            writer: Writer for the output stream
            indent_size: Spaces per nesting level
        """
        self._writer = writer
        self._indent = indent_size

    def print_result(self, result: Result) -> None:
        writer = self._writer.indented(self._indent)

        heading = result.head
        if result.language:
            heading = f"{heading} ({result.language})"
        writer.write_padded_line(heading)

        for entry in result.entries:
            self._print_entry(writer, entry)

    def print_source_name(self, source_name: str) -> None:
        writer = self._writer.indented(self._indent)
        writer.write_padded_line(f"Results provided by: {source_name}")

    def _print_entry(self, writer: IndentedWriter, entry) -> None:
        if not entry.has_content:
            return

        header = [entry.word_class] if entry.word_class else []
        if isinstance(entry, DictionaryEntry) and entry.pronunciation:
            header.append(f"/{entry.pronunciation.strip('/')}/")
        if header:
            writer.write_line("  ".join(header))

        body = writer.indented(self._indent)

        if isinstance(entry, DictionaryEntry):
            if entry.audio_url:
                body.write_line(f"Audio: {entry.audio_url}")
            for number, sense in enumerate(entry.senses, 1):
                self._print_sense(body, number, sense)

        if isinstance(entry, ThesaurusEntry):
            self._print_words(body, "Synonyms", entry.synonyms)
            self._print_words(body, "Antonyms", entry.antonyms)

        writer.write_new_line()

    def _print_sense(self, writer: IndentedWriter, number: int, sense: Sense) -> None:
        prefix = f"{number}. "
        definitions = sense.definitions or ("",)

        writer.write_line(f"{prefix}{definitions[0]}".rstrip())

        details = writer.indented(len(prefix))
        for definition in definitions[1:]:
            details.write_line(definition)
        for example in sense.examples:
            details.write_line(f'"{example}"')
        self._print_words(details, "Synonyms", sense.synonyms)
        self._print_words(details, "Antonyms", sense.antonyms)

    @staticmethod
    def _print_words(writer: IndentedWriter, label: str, words: tuple[str, ...]) -> None:
        if words:
            writer.write_line(f"{label}: {', '.join(words)}")


class ConsolePresenter:
    """Present output to console (CLI implementation)."""

    def __init__(
        self,
        indent_size: int,
        stdout: TextIO | None = None,
        stderr: TextIO | None = None,
    ):
        """Initialize the presenter.

        Args:
            indent_size: Spaces per indentation level
            stdout: Stream for regular output (defaults to sys.stdout)
            stderr: Stream for errors (defaults to sys.stderr)
        """
        self.indent_size = indent_size
        self._out = IndentedWriter(stdout or sys.stdout)
        self._err = IndentedWriter(stderr or sys.stderr)

    def show_info(self, message: str) -> None:
        """Display an informational message."""
        self._out.write_line(message)

    def show_error(self, message: str) -> None:
        """Display an error message, capitalized and padded."""
        if not message:
            return
        message = message[:1].upper() + message[1:]
        self._err.indented(self.indent_size).write_padded_line(message)

    def show_result(self, result: Result, source_name: str) -> None:
        """Display a lookup result followed by its source."""
        printer = ResultPrinter(self._out, self.indent_size)
        printer.print_result(result)
        printer.print_source_name(source_name)

    def show_sources(self, names: list[str]) -> None:
        """Display a numbered list of source names."""
        writer = self._out.indented(self.indent_size)
        writer.write_padded_line("Available sources:")
        for number, name in enumerate(names, 1):
            writer.write_line(f'{number}. "{name}"')
        writer.write_new_line()
