"""References made through the resource pipe filters in markup templates."""

from __future__ import annotations

import re
from typing import Iterable, List

from ..config import RESOURCE_FILTER_NAMES
from ..models import RawReference, SourceFile

_FILTER_ALTERNATION = "|".join(re.escape(name) for name in RESOURCE_FILTER_NAMES)
# The key run stops at "=", '"' and "{" so that bindings such as
# title="{{ 'key' | skyAppResources }}" capture only the literal.
MARKUP_REFERENCE_RE = re.compile(
    rf"([^=\"\s{{]+)\s+\|\s+(?:{_FILTER_ALTERNATION}) ", re.MULTILINE
)


def find_markup_tokens(contents: str) -> List[str]:
    return [match.group(1) for match in MARKUP_REFERENCE_RE.finditer(contents)]


def extract_markup_references(files: Iterable[SourceFile]) -> List[RawReference]:
    references: List[RawReference] = []
    for source in files:
        references.extend(
            RawReference(file_name=source.file_name, token=token)
            for token in find_markup_tokens(source.contents)
        )
    return references


__all__ = ["MARKUP_REFERENCE_RE", "extract_markup_references", "find_markup_tokens"]
