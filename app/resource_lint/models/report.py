from __future__ import annotations

from dataclasses import dataclass, field
from typing import List


@dataclass(frozen=True)
class MissingEntry:
    dictionary_name: str
    file_name: str
    key: str


@dataclass(frozen=True)
class NonStandardEntry:
    dictionary_name: str
    file_name: str
    key: str


@dataclass(frozen=True)
class UnusedEntry:
    dictionary_name: str
    key: str


@dataclass
class MissingKeysResult:
    missing: List[MissingEntry] = field(default_factory=list)
    non_standard: List[NonStandardEntry] = field(default_factory=list)


@dataclass
class LintReport:
    missing: List[MissingEntry] = field(default_factory=list)
    non_standard: List[NonStandardEntry] = field(default_factory=list)
    unused: List[UnusedEntry] = field(default_factory=list)

    @property
    def has_findings(self) -> bool:
        return bool(self.missing or self.non_standard)
