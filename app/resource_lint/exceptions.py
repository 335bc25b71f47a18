"""Custom exceptions used by the resource linter."""

from __future__ import annotations

from pathlib import Path


class ResourceLintError(Exception):
    """Base class for every linter failure."""


class ConfigError(ResourceLintError):
    """Raised when a lint options file cannot be read or validated."""


class ResourceFileError(ResourceLintError):
    """Raised when a single input file cannot be used."""

    def __init__(self, path: Path | str, reason: str) -> None:
        super().__init__(f"{path}: {reason}")
        self.path = str(path)
        self.reason = reason


class DictionaryParseError(ResourceFileError):
    """Raised when a resource dictionary is unreadable or not a JSON object."""


class SourceReadError(ResourceFileError):
    """Raised when a markup or logic file cannot be read."""


__all__ = [
    "ResourceLintError",
    "ConfigError",
    "ResourceFileError",
    "DictionaryParseError",
    "SourceReadError",
]
