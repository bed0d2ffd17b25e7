"""Scanner: drives the hook chain over an input buffer to build a token list."""

from __future__ import annotations

import logging
from os import PathLike

from flowscan.errors import HookError, ScanFailedError, ScannerConsumedError, ScannerNotRunError
from flowscan.hooks import DEFAULT_HOOKS, NO_MATCH, Emit, Hook, HookResult, NoMatch, Skip
from flowscan.tokens import Token, TokenKind

logger = logging.getLogger(__name__)


class Scanner:
    """Tokenize a source buffer with an ordered chain of hooks.

    A Scanner is single-use: construct it, optionally register extra hooks,
    call ``tokenize()`` once, then read ``tokens``.
    """

    def __init__(self, source: bytes | str) -> None:
        if isinstance(source, str):
            source = source.encode("utf-8")
        self._source = bytes(source)
        self._index = 0
        self._tokens: list[Token] = []
        self._hooks: list[Hook] = list(DEFAULT_HOOKS)
        self._started = False
        self._failed = False
        self._done = False

    @property
    def source(self) -> bytes:
        return self._source

    @property
    def hooks(self) -> tuple[Hook, ...]:
        return tuple(self._hooks)

    @property
    def tokens(self) -> tuple[Token, ...]:
        """The token sequence produced by ``tokenize()``."""
        if self._failed:
            raise ScanFailedError()
        if not self._done:
            raise ScannerNotRunError()
        return tuple(self._tokens)

    def register(self, *hooks: Hook) -> None:
        """Append hooks after the existing chain."""
        if self._started:
            raise ScannerConsumedError("register hooks")
        self._hooks.extend(hooks)
        for hook in hooks:
            logger.debug("registered hook %s", _hook_name(hook))

    def tokenize(self) -> tuple[Token, ...]:
        """Run the scan loop over the whole input and return the tokens."""
        if self._started:
            raise ScannerConsumedError("tokenize")
        self._started = True

        source = self._source
        logger.debug("scanning %d bytes with %d hooks", len(source), len(self._hooks))

        while self._index < len(source):
            try:
                result = self._dispatch()
            except Exception:
                # A hook raised: no partial result is exposed.
                self._failed = True
                raise
            if isinstance(result, NoMatch):
                # Unrecognized byte: dropped silently.
                self._index += 1
            elif isinstance(result, Skip):
                if result.text is not None:
                    logger.debug("skip %r at %d", result.text, self._index)
                self._advance(result.consumed)
            else:
                token = result.token
                if token.kind is not TokenKind.IGNORE:
                    logger.debug("emit %s at %d", token.kind.name, self._index)
                    self._tokens.append(token)
                self._advance(result.consumed)

        self._done = True
        logger.debug("scan complete: %d tokens", len(self._tokens))
        return tuple(self._tokens)

    # ------------------------------------------------------------------
    # Dispatch helpers
    # ------------------------------------------------------------------

    def _dispatch(self) -> HookResult:
        """Try each hook in order at the current index; first match wins."""
        for hook in self._hooks:
            result = hook(self._source, self._index)
            if isinstance(result, NoMatch):
                continue
            if not isinstance(result, (Skip, Emit)):
                raise HookError(
                    f"expected a hook result, got {type(result).__name__}",
                    _hook_name(hook),
                    self._index,
                )
            if result.consumed < 1:
                raise HookError(
                    f"consumed must be at least 1, got {result.consumed}",
                    _hook_name(hook),
                    self._index,
                )
            return result
        return NO_MATCH

    def _advance(self, consumed: int) -> None:
        self._index = min(self._index + consumed, len(self._source))


def _hook_name(hook: Hook) -> str:
    return getattr(hook, "__qualname__", None) or repr(hook)


def tokenize(source: bytes | str) -> tuple[Token, ...]:
    """Convenience function: tokenize source and return the token tuple."""
    return Scanner(source).tokenize()


def from_file(path: str | PathLike[str]) -> Scanner:
    """Read a file as bytes and return a scanner that has already been run.

    I/O errors propagate to the caller.
    """
    with open(path, "rb") as f:
        content = f.read()
    scanner = Scanner(content)
    scanner.tokenize()
    return scanner
