"""Error types and the scanner's error-reporting collaborator."""

from __future__ import annotations

from typing import TextIO

from loxscan.tokens import Token


class LexError(Exception):
    """A single lexical error, with line/column and source context."""

    def __init__(self, message: str, line: int, column: int, source: str) -> None:
        self.message = message
        self.line = line
        self.column = column
        self.source = source
        super().__init__(self.report())

    def report(self, where: str = "") -> str:
        """Return the one-line diagnostic written to the error channel."""
        return f"[line {self.line}] Error {where}: {self.message}"

    def format(self, filename: str = "<script>") -> str:
        lines = self.source.splitlines(keepends=True)
        line_idx = self.line - 1
        col = self.column

        # Build the source line (strip trailing newline for display)
        if 0 <= line_idx < len(lines):
            source_line = lines[line_idx].rstrip("\n").rstrip("\r")
        else:
            source_line = ""

        pad = " " * (col - 1)

        line_num = str(self.line)
        gutter_width = len(line_num) + 1

        blank_gutter = " " * gutter_width + "|"
        line_gutter = f"{line_num:>{gutter_width - 1}} |"

        return (
            f"error: {self.message}\n"
            f"{' ' * gutter_width}--> {filename}:{self.line}:{col}\n"
            f"{blank_gutter}\n"
            f"{line_gutter} {source_line}\n"
            f"{blank_gutter} {pad}^"
        )


class ScanError(Exception):
    """Raised by tokenize() when scanning collected one or more lexical errors."""

    def __init__(self, errors: list[LexError], tokens: list[Token]) -> None:
        self.errors = errors
        self.tokens = tokens
        super().__init__("\n".join(err.report() for err in errors))


class ErrorReporter:
    """Collect lexical errors, echoing each report line to *file* when one is given."""

    def __init__(self, source: str, *, file: TextIO | None = None) -> None:
        self._source = source
        self._file = file
        self.errors: list[LexError] = []

    @property
    def had_error(self) -> bool:
        return bool(self.errors)

    def error(self, line: int, message: str, column: int = 1) -> LexError:
        err = LexError(message, line, column, self._source)
        self.errors.append(err)
        if self._file is not None:
            print(err.report(), file=self._file)
        return err
