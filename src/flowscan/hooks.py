"""Hook results and the built-in recognizer hooks.

A hook is a plain function ``hook(source, index) -> HookResult``. It inspects
``source[index]`` (and may look further ahead) and reports how many bytes it
consumed. Hooks never mutate scanner state; the scan loop applies the advance.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from flowscan.tokens import Token, TokenKind, is_lower_alpha, is_space


class NoMatch:
    """Not this hook's byte; the dispatcher tries the next hook."""

    _instance: NoMatch | None = None

    def __new__(cls) -> NoMatch:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "NO_MATCH"


NO_MATCH = NoMatch()


@dataclass(frozen=True, slots=True)
class Skip:
    """Recognized and consumed, nothing to emit.

    ``text`` carries the literal consumed text for debug logging only.
    """

    consumed: int
    text: str | None = None


@dataclass(frozen=True, slots=True)
class Emit:
    """Recognized and consumed, append ``token`` to the output."""

    token: Token
    consumed: int


HookResult = NoMatch | Skip | Emit
Hook = Callable[[bytes, int], HookResult]


# ---------------------------------------------------------------------------
# Built-in hooks
# ---------------------------------------------------------------------------

_LPAREN, _RPAREN = ord("("), ord(")")
_LBRACE, _RBRACE = ord("{"), ord("}")
_SLASH = ord("/")
_NEWLINE = ord("\n")

# Unicode White_Space characters; narrower than str.strip(), which also
# strips the \x1c-\x1f separators.
_TRIM_CHARS = (
    "\t\n\v\f\r \x85\xa0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000"
)

_LEFT_BRACE = Token(TokenKind.LEFT_BRACE)
_RIGHT_BRACE = Token(TokenKind.RIGHT_BRACE)

# Compared by exact equality against the consumed lowercase run.
# INTERFACE's display string contains braces, so a run can never equal it.
_KEYWORDS: dict[str, TokenKind] = {
    kind.display: kind
    for kind in (
        TokenKind.FOR,
        TokenKind.ELSE,
        TokenKind.IF,
        TokenKind.RETURN,
        TokenKind.INTERFACE,
    )
}


def brace_hook(source: bytes, index: int) -> HookResult:
    """Braces become tokens; parentheses are consumed and dropped."""
    byte = source[index]
    if byte == _LPAREN or byte == _RPAREN:
        return Skip(1, chr(byte))
    if byte == _LBRACE:
        return Emit(_LEFT_BRACE, 1)
    if byte == _RBRACE:
        return Emit(_RIGHT_BRACE, 1)
    return NO_MATCH


def space_hook(source: bytes, index: int) -> HookResult:
    """Skip a single whitespace byte."""
    if is_space(source[index]):
        return Skip(1)
    return NO_MATCH


def comment_hook(source: bytes, index: int) -> HookResult:
    """Recognize a ``//`` line comment.

    The body runs up to, but not including, the next newline or the end of
    input. An empty body is skipped; anything else becomes a NOTES token with
    surrounding whitespace trimmed. The newline is left for ``space_hook``.
    """
    if source[index] != _SLASH:
        return NO_MATCH
    if index + 1 >= len(source) or source[index + 1] != _SLASH:
        return NO_MATCH

    start = index + 2
    end = source.find(_NEWLINE, start)
    if end == -1:
        end = len(source)
    body = source[start:end]

    if not body:
        return Skip(2)
    text = body.decode("utf-8", errors="replace").strip(_TRIM_CHARS)
    return Emit(Token(TokenKind.NOTES, text), 2 + len(body))


def keyword_hook(source: bytes, index: int) -> HookResult:
    """Consume a run of lowercase letters, emitting a token for keywords only."""
    if not is_lower_alpha(source[index]):
        return NO_MATCH

    end = index
    while end < len(source) and is_lower_alpha(source[end]):
        end += 1
    consumed = end - index
    run = source[index:end].decode("ascii")

    kind = _KEYWORDS.get(run)
    if kind is None:
        return Skip(consumed)
    if kind is TokenKind.INTERFACE:
        return Skip(consumed, kind.display)
    return Emit(Token(kind), consumed)


# Built-in order matters: first match wins at each position.
DEFAULT_HOOKS: tuple[Hook, ...] = (brace_hook, space_hook, comment_hook, keyword_hook)
