"""Indented token trace: one line per token, nested by brace depth."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Iterator
from typing import TextIO

from flowscan.tokens import Token, TokenKind

DEFAULT_INDENT = 2


def _indent(depth: int, width: int = DEFAULT_INDENT) -> str:
    # Negative depth (more closes than opens) repeats to an empty string.
    return " " * width * depth


def step(depth: int, token: Token, indent: int = DEFAULT_INDENT) -> tuple[int, str]:
    """Return ``(new_depth, line)`` for one token at the given depth."""
    if token.kind is TokenKind.NOTES:
        return depth, f"{_indent(depth, indent)}// {token.text or ''}"
    if token.kind is TokenKind.LEFT_BRACE:
        return depth + 1, f"{_indent(depth, indent)}{token.kind.display}"
    if token.kind is TokenKind.RIGHT_BRACE:
        depth -= 1
        return depth, f"{_indent(depth, indent)}{token.kind.display}"
    return depth, f"{_indent(depth, indent)}{token.kind.display}"


def render_lines(tokens: Iterable[Token], indent: int = DEFAULT_INDENT) -> Iterator[str]:
    """Yield trace lines (without newlines) for a token sequence."""
    depth = 0
    for token in tokens:
        depth, line = step(depth, token, indent)
        yield line


def format_tokens(tokens: Iterable[Token], indent: int = DEFAULT_INDENT) -> str:
    """Return the full trace, each line newline-terminated."""
    return "".join(f"{line}\n" for line in render_lines(tokens, indent))


def render(
    tokens: Iterable[Token], *, file: TextIO | None = None, indent: int = DEFAULT_INDENT
) -> None:
    """Print the indented trace to *file* (stdout by default)."""
    if file is None:
        file = sys.stdout
    file.write(format_tokens(tokens, indent))


def format_token_dump(tokens: Iterable[Token]) -> str:
    """Return one ``KIND text`` line per token, for debugging."""
    lines = []
    for token in tokens:
        if token.text is None:
            lines.append(f"{token.kind.name}\n")
        else:
            lines.append(f"{token.kind.name} {token.text!r}\n")
    return "".join(lines)


def dump_tokens(tokens: Iterable[Token], *, file: TextIO | None = None) -> None:
    """Print the token dump to *file* (stderr by default)."""
    if file is None:
        file = sys.stderr
    file.write(format_token_dump(tokens))
