"""Shared test fixtures and helpers."""

from __future__ import annotations

import pytest

from loxscan.errors import ErrorReporter
from loxscan.scanner import ScanResult, scan
from loxscan.tokens import Token, TokenType


@pytest.fixture
def lex():
    """Return a helper that scans error-free source and returns tokens (excluding EOF)."""

    def _lex(source: str) -> list[Token]:
        result = scan(source)
        assert result.ok, f"Unexpected errors: {[e.report() for e in result.errors]}"
        # Strip trailing EOF for convenience
        return [t for t in result.tokens if t.type != TokenType.EOF]

    return _lex


@pytest.fixture
def scan_source():
    """Return a helper that scans source silently and returns the full ScanResult."""

    def _scan(source: str) -> ScanResult:
        return scan(source, ErrorReporter(source))

    return _scan


def assert_types(tokens: list[Token], expected: list[TokenType]) -> None:
    """Assert that the token types match the expected list."""
    actual = [t.type for t in tokens]
    assert actual == expected, f"Expected {expected}, got {actual}"


def assert_lexemes(tokens: list[Token], expected: list[str]) -> None:
    """Assert that the token lexemes match the expected list."""
    actual = [t.lexeme for t in tokens]
    assert actual == expected, f"Expected {expected}, got {actual}"
