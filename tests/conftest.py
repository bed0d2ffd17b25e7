"""Shared test fixtures and helpers."""

from __future__ import annotations

import pytest

from flowscan.scanner import tokenize
from flowscan.tokens import Token, TokenKind


@pytest.fixture
def lex():
    """Return a helper that tokenizes source and returns the token list."""

    def _lex(source: bytes | str) -> list[Token]:
        return list(tokenize(source))

    return _lex


def assert_kinds(tokens: list[Token], expected: list[TokenKind]) -> None:
    """Assert that the token kinds match the expected list."""
    actual = [t.kind for t in tokens]
    assert actual == expected, f"Expected {expected}, got {actual}"

