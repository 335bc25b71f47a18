from .reconciler import (
    KeyResolution,
    find_missing_keys,
    find_unused_keys,
    reconcile,
    resolve_reference,
)
from .sanitize import first_quoted_literal, is_non_standard, sanitize

__all__ = [
    "KeyResolution",
    "find_missing_keys",
    "find_unused_keys",
    "reconcile",
    "resolve_reference",
    "first_quoted_literal",
    "is_non_standard",
    "sanitize",
]
