"""Hook-driven scanner for a small Go-like language subset."""

from __future__ import annotations

from typing import TYPE_CHECKING

from flowscan.scanner import Scanner, from_file, tokenize
from flowscan.tokens import Token, TokenKind

if TYPE_CHECKING:
    from typing import TextIO

__version__ = "0.1.0"

__all__ = ["Scanner", "Token", "TokenKind", "analyze", "from_file", "tokenize"]


def analyze(source: bytes | str, *, file: TextIO | None = None, indent: int = 2) -> Scanner:
    """Scan source, print its indented token trace, and return the scanner."""
    from flowscan.render import render

    scanner = Scanner(source)
    render(scanner.tokenize(), file=file, indent=indent)
    return scanner
