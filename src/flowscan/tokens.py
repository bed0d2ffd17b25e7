"""Token kinds, token data structure, and byte classification helpers."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class TokenKind(Enum):
    # Member values are the display strings used for keyword matching and rendering.
    KEYWORD = "keyword"  # generic placeholder, never produced by built-in hooks

    # Keywords
    FOR = "for"
    IF = "if"
    ELSE = "else"
    INTERFACE = "interface{}"
    RETURN = "return"

    # Structural (single-character)
    LEFT_BRACE = "{"
    RIGHT_BRACE = "}"

    # Internal / payload-carrying
    IGNORE = ""  # recognized but never part of the output sequence
    NOTES = "notes"  # line comment, text is the trimmed body

    @property
    def display(self) -> str:
        """Canonical display string for this kind."""
        return self.value

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class Token:
    """A single scanner token. ``text`` is only set for NOTES tokens."""

    kind: TokenKind
    text: str | None = None


# Whitespace class of RE2 ``\s``: space, tab, newline, form feed, carriage return
_SPACE_BYTES = frozenset(b" \t\n\f\r")


def is_space(byte: int) -> bool:
    """Return True if byte is a whitespace byte."""
    return byte in _SPACE_BYTES


def is_lower_alpha(byte: int) -> bool:
    """Return True if byte is an ASCII lowercase letter."""
    return 0x61 <= byte <= 0x7A
