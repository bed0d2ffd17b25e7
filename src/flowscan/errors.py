"""Error types."""

from __future__ import annotations


class FlowscanError(Exception):
    """Base class for all flowscan errors."""


class ScanError(FlowscanError):
    """Raised when a scan cannot proceed or a Scanner is used out of order."""


class ScannerConsumedError(ScanError):
    """Raised when tokenize() or register() is called on a finished scanner."""

    def __init__(self, operation: str) -> None:
        self.operation = operation
        super().__init__(f"cannot {operation}: scanner has already been run")


class ScannerNotRunError(ScanError):
    """Raised when tokens are read before tokenize() has been called."""

    def __init__(self) -> None:
        super().__init__("tokens are not available until tokenize() has been called")


class ScanFailedError(ScanError):
    """Raised when tokens are read from a scan that stopped on an error."""

    def __init__(self) -> None:
        super().__init__("tokens are not available: the scan stopped on an error")


class HookError(ScanError):
    """Raised when a hook breaks the dispatch contract."""

    def __init__(self, message: str, hook_name: str, offset: int) -> None:
        self.message = message
        self.hook_name = hook_name
        self.offset = offset
        super().__init__(self.format())

    def format(self) -> str:
        return f"hook {self.hook_name!r} at byte {self.offset}: {self.message}"


class ConfigError(FlowscanError):
    """Raised on invalid configuration file values."""

    def __init__(self, message: str, path: str | None = None) -> None:
        self.message = message
        self.path = path
        super().__init__(self.format())

    def format(self) -> str:
        if self.path is None:
            return f"config: {self.message}"
        return f"{self.path}: {self.message}"
