"""Canonicalization and classification of raw key tokens."""

from __future__ import annotations

import re
from typing import Optional

from ..config import KEY_ALPHABET, QUOTE_CHARS

_QUOTE_CLASS = "".join(sorted(QUOTE_CHARS))
_STRIPPABLE_RE = re.compile(rf"[{_QUOTE_CLASS}\s\\]")
_OUTSIDE_KEY_ALPHABET_RE = re.compile(rf"[^{KEY_ALPHABET}]")
_SINGLE_QUOTED_RE = re.compile(r"'(.*?)'")


def sanitize(token: str) -> str:
    """Strip quotes, whitespace and backslashes from ``token``."""
    return _STRIPPABLE_RE.sub("", token)


def looks_quoted(token: str) -> bool:
    return _STRIPPABLE_RE.search(token) is not None


def is_non_standard(token: str) -> bool:
    """True for identifiers/expressions and for literals off the key convention."""
    if not looks_quoted(token):
        return True
    return _OUTSIDE_KEY_ALPHABET_RE.search(sanitize(token)) is not None


def first_quoted_literal(token: str) -> Optional[str]:
    """Return the first single-quoted literal in ``token``, quotes included."""
    match = _SINGLE_QUOTED_RE.search(token)
    if match is None:
        return None
    return match.group(0)


__all__ = ["first_quoted_literal", "is_non_standard", "looks_quoted", "sanitize"]
