"""Immutable records passed between the lint stages."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import FrozenSet, Tuple


@dataclass(frozen=True)
class ResourceDictionary:
    """Declared keys of one locale resource file, in declaration order."""

    name: str
    keys: Tuple[str, ...]
    _lookup: FrozenSet[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "keys", tuple(self.keys))
        object.__setattr__(self, "_lookup", frozenset(self.keys))

    def declares(self, key: str) -> bool:
        return key in self._lookup


@dataclass(frozen=True)
class SourceFile:
    """Raw text of a scanned markup or logic file.

    ``contents`` is an empty string when the file could not be read.
    """

    file_name: str
    contents: str
    path: str = ""


@dataclass(frozen=True)
class RawReference:
    file_name: str
    token: str
