from .records import RawReference, ResourceDictionary, SourceFile
from .report import (
    LintReport,
    MissingEntry,
    MissingKeysResult,
    NonStandardEntry,
    UnusedEntry,
)

__all__ = [
    "RawReference",
    "ResourceDictionary",
    "SourceFile",
    "LintReport",
    "MissingEntry",
    "MissingKeysResult",
    "NonStandardEntry",
    "UnusedEntry",
]
