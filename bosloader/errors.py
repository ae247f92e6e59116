"""Exception types raised by the component loading pipeline."""

from __future__ import annotations

from pathlib import Path


class LoaderError(RuntimeError):
    """Base class for errors that should fail a request."""


class ConfigurationError(LoaderError):
    """Raised when a served directory or the config file cannot be used."""


class FileReadError(LoaderError):
    """Raised when a single component file cannot be read as text."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Failed to read file {path}: {reason}")
        self.path = path


class ReplacementsLoadError(LoaderError):
    """Raised when an explicitly configured replacements file is unusable."""


class AggregationError(LoaderError):
    """Raised when one configured account/path entry fails to load."""

    def __init__(self, account: str, path: Path, cause: Exception) -> None:
        super().__init__(
            f"Error handling request for account {account}, path {path}: {cause}"
        )
        self.account = account
        self.path = path


__all__ = [
    "AggregationError",
    "ConfigurationError",
    "FileReadError",
    "LoaderError",
    "ReplacementsLoadError",
]
