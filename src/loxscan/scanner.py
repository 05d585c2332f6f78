"""Lox scanner: converts source text into a flat token stream."""

from __future__ import annotations

import sys
from dataclasses import dataclass

from loxscan.errors import ErrorReporter, LexError, ScanError
from loxscan.tokens import KEYWORDS, Token, TokenType, is_alpha, is_alphanumeric, is_digit

_SINGLE_CHAR = {
    "(": TokenType.LEFT_PAREN,
    ")": TokenType.RIGHT_PAREN,
    "{": TokenType.LEFT_BRACE,
    "}": TokenType.RIGHT_BRACE,
    ",": TokenType.COMMA,
    ".": TokenType.DOT,
    "-": TokenType.MINUS,
    "+": TokenType.PLUS,
    ";": TokenType.SEMICOLON,
    "*": TokenType.STAR,
}

# (kind without "=", kind with "=")
_ONE_OR_TWO = {
    "!": (TokenType.BANG, TokenType.BANG_EQUAL),
    "=": (TokenType.EQUAL, TokenType.EQUAL_EQUAL),
    "<": (TokenType.LESS, TokenType.LESS_EQUAL),
    ">": (TokenType.GREATER, TokenType.GREATER_EQUAL),
}


class Scanner:
    """Scan Lox source text into a list of Token objects.

    Lexical errors are reported through the ErrorReporter and scanning carries
    on with the next character; the malformed lexeme produces no token.
    """

    def __init__(self, source: str, reporter: ErrorReporter | None = None) -> None:
        self._source = source
        if reporter is None:
            reporter = ErrorReporter(source, file=sys.stderr)
        self._reporter = reporter
        self._tokens: list[Token] = []
        self._start = 0
        self._current = 0
        self._line = 1
        self._line_start = 0  # offset of the first character on the current line
        self._start_line = 1
        self._start_column = 1

    @property
    def errors(self) -> list[LexError]:
        return self._reporter.errors

    def scan_tokens(self) -> list[Token]:
        """Scan the full source and return the token list, terminated by EOF."""
        while not self._is_at_end():
            self._start = self._current
            self._start_line = self._line
            self._start_column = self._current - self._line_start + 1
            self._scan_token()

        self._tokens.append(Token(TokenType.EOF, "", None, self._line))
        return self._tokens

    # ------------------------------------------------------------------
    # Cursor helpers
    # ------------------------------------------------------------------

    def _is_at_end(self) -> bool:
        return self._current >= len(self._source)

    def _advance(self) -> str:
        assert self._current < len(self._source), f"advance past end at offset {self._current}"
        ch = self._source[self._current]
        self._current += 1
        if ch == "\n":
            self._line += 1
            self._line_start = self._current
        return ch

    def _match(self, expected: str) -> bool:
        if self._is_at_end() or self._source[self._current] != expected:
            return False
        self._current += 1
        return True

    def _peek(self, offset: int = 0) -> str:
        idx = self._current + offset
        if idx < len(self._source):
            return self._source[idx]
        return ""

    def _text(self) -> str:
        return self._source[self._start : self._current]

    def _add_token(self, tt: TokenType, literal: str | None = None) -> None:
        self._tokens.append(Token(tt, self._text(), literal, self._start_line))

    def _error(self, message: str) -> None:
        self._reporter.error(self._start_line, message, self._start_column)

    # ------------------------------------------------------------------
    # Dispatch
    # ------------------------------------------------------------------

    def _scan_token(self) -> None:
        ch = self._advance()

        if ch in _SINGLE_CHAR:
            self._add_token(_SINGLE_CHAR[ch])
            return

        if ch in _ONE_OR_TWO:
            single, double = _ONE_OR_TWO[ch]
            self._add_token(double if self._match("=") else single)
            return

        if ch == "/":
            if self._match("/"):
                # Line comment; the newline is left for the next lexeme
                while self._peek() != "\n" and not self._is_at_end():
                    self._advance()
            else:
                self._add_token(TokenType.SLASH)
            return

        if ch in " \r\t\n":
            return

        if ch == '"':
            self._string()
            return

        if is_digit(ch):
            self._number()
            return

        if is_alpha(ch):
            self._identifier()
            return

        self._error(f"Unexpected character '{ch}'")

    # ------------------------------------------------------------------
    # Literals
    # ------------------------------------------------------------------

    def _string(self) -> None:
        while self._peek() != '"' and not self._is_at_end():
            self._advance()

        if self._is_at_end():
            self._error("Unterminated string")
            return

        self._advance()  # closing quote
        self._add_token(TokenType.STRING, self._source[self._start + 1 : self._current - 1])

    def _number(self) -> None:
        while is_digit(self._peek()):
            self._advance()

        # A trailing "." is only part of the number when a digit follows it
        if self._peek() == "." and is_digit(self._peek(1)):
            self._advance()
            while is_digit(self._peek()):
                self._advance()

        text = self._text()
        float(text)  # digits with at most one interior point always parse
        self._add_token(TokenType.NUMBER, text)

    def _identifier(self) -> None:
        while is_alphanumeric(self._peek()):
            self._advance()
        self._add_token(KEYWORDS.get(self._text(), TokenType.IDENTIFIER))


@dataclass(frozen=True, slots=True)
class ScanResult:
    """Tokens from a scan together with every lexical error it reported."""

    tokens: list[Token]
    errors: list[LexError]

    @property
    def ok(self) -> bool:
        return not self.errors


def scan(source: str, reporter: ErrorReporter | None = None) -> ScanResult:
    """Scan source without raising; errors are returned alongside the tokens."""
    if reporter is None:
        reporter = ErrorReporter(source)
    scanner = Scanner(source, reporter)
    tokens = scanner.scan_tokens()
    return ScanResult(tokens, list(scanner.errors))


def tokenize(source: str) -> list[Token]:
    """Convenience function: scan source and return tokens, raising ScanError on errors."""
    result = scan(source)
    if not result.ok:
        raise ScanError(result.errors, result.tokens)
    return result.tokens
