"""Lexical scanner for the Lox scripting language."""

from __future__ import annotations

from loxscan.errors import ErrorReporter, LexError, ScanError
from loxscan.scanner import Scanner, ScanResult, scan, tokenize
from loxscan.tokens import KEYWORDS, Token, TokenType

__version__ = "0.1.0"

__all__ = [
    "KEYWORDS",
    "ErrorReporter",
    "LexError",
    "ScanError",
    "ScanResult",
    "Scanner",
    "Token",
    "TokenType",
    "scan",
    "tokenize",
]
