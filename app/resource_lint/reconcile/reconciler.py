"""Reconciliation of extracted references against declared dictionaries."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Sequence, Set

from ..log_config import debug_verbose
from ..models import (
    LintReport,
    MissingEntry,
    MissingKeysResult,
    NonStandardEntry,
    RawReference,
    ResourceDictionary,
    SourceFile,
    UnusedEntry,
)
from .sanitize import first_quoted_literal, is_non_standard, sanitize


@dataclass(frozen=True)
class KeyResolution:
    key: str
    missing: bool
    non_standard: bool


def resolve_reference(token: str, dictionary: ResourceDictionary) -> KeyResolution:
    """Classify ``token`` against one dictionary.

    A missing, non-standard token falls back to its first single-quoted
    literal, which recovers conditionals like ``cond ? 'key_a' : 'key_b'``.
    Later literals are never inspected, so ``key_b`` goes unchecked.
    """
    key = sanitize(token)
    missing = not dictionary.declares(key)
    non_standard = is_non_standard(token)
    if missing and non_standard:
        literal = first_quoted_literal(token)
        if literal:
            key = sanitize(literal)
            missing = not dictionary.declares(key)
            non_standard = is_non_standard(literal)
    return KeyResolution(key=key, missing=missing, non_standard=non_standard)


def find_missing_keys(
    dictionaries: Sequence[ResourceDictionary],
    references: Sequence[RawReference],
) -> MissingKeysResult:
    result = MissingKeysResult()
    if not dictionaries or not references:
        return result

    seen_missing: Set[str] = set()
    seen_non_standard: Set[str] = set()
    for dictionary in dictionaries:
        for reference in references:
            resolution = resolve_reference(reference.token, dictionary)
            if not resolution.missing:
                continue
            if resolution.non_standard:
                if resolution.key in seen_non_standard:
                    continue
                seen_non_standard.add(resolution.key)
                result.non_standard.append(
                    NonStandardEntry(
                        dictionary_name=dictionary.name,
                        file_name=reference.file_name,
                        key=resolution.key,
                    )
                )
            else:
                if resolution.key in seen_missing:
                    continue
                seen_missing.add(resolution.key)
                result.missing.append(
                    MissingEntry(
                        dictionary_name=dictionary.name,
                        file_name=reference.file_name,
                        key=resolution.key,
                    )
                )
    return result


def find_unused_keys(
    dictionaries: Sequence[ResourceDictionary],
    files: Sequence[SourceFile],
) -> List[UnusedEntry]:
    """Keys whose sanitized text occurs in no scanned file.

    Plain substring containment over all contents, independent of the
    extracted references.
    """
    if not dictionaries or not files:
        return []

    unused: List[UnusedEntry] = []
    for dictionary in dictionaries:
        for raw_key in dictionary.keys:
            key = sanitize(raw_key)
            if any(key in source.contents for source in files):
                continue
            unused.append(UnusedEntry(dictionary_name=dictionary.name, key=key))
    return unused


def reconcile(
    dictionaries: Sequence[ResourceDictionary],
    files: Iterable[SourceFile],
    references: Sequence[RawReference],
) -> LintReport:
    scanned = list(files)
    missing_keys = find_missing_keys(dictionaries, references)
    unused = find_unused_keys(dictionaries, scanned)
    debug_verbose(
        "reconciled",
        {
            "missing": len(missing_keys.missing),
            "non_standard": len(missing_keys.non_standard),
            "unused": len(unused),
        },
    )
    return LintReport(
        missing=missing_keys.missing,
        non_standard=missing_keys.non_standard,
        unused=unused,
    )


__all__ = [
    "KeyResolution",
    "find_missing_keys",
    "find_unused_keys",
    "reconcile",
    "resolve_reference",
]
