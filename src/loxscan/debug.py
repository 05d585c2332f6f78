"""--debug token dump and JSON token records."""

from __future__ import annotations

import sys
from typing import Any, TextIO

from loxscan.tokens import Token


def dump_tokens(tokens: list[Token], *, file: TextIO | None = None) -> None:
    """Print one token per line to *file* (stderr by default), tagged with its line."""
    f = file if file is not None else sys.stderr
    width = len(str(tokens[-1].line)) if tokens else 1
    for tok in tokens:
        f.write(f"{tok.line:>{width}} | {tok}\n")


def tokens_to_json(tokens: list[Token]) -> list[dict[str, Any]]:
    return [
        {"type": tok.type.name, "lexeme": tok.lexeme, "literal": tok.literal, "line": tok.line}
        for tok in tokens
    ]
