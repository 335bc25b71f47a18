"""References made through resource service lookups in logic files.

Extraction runs in two stateless passes over the raw text. The first pass
collects every local name annotated with a resource service type, e.g.
``private resources: SkyAppResourcesService``. The second pass looks for
``<name>.getString(...)`` calls on each collected name and keeps the text
between the parentheses.
"""

from __future__ import annotations

import re
from typing import Iterable, List

from ..config import LOOKUP_METHOD, RESOURCE_SERVICE_TYPES
from ..log_config import debug_verbose
from ..models import RawReference, SourceFile

_SERVICE_ALTERNATION = "|".join(re.escape(name) for name in RESOURCE_SERVICE_TYPES)
SERVICE_NAME_RE = re.compile(rf"\S*(?=:\s?(?:{_SERVICE_ALTERNATION}))")


def find_service_names(contents: str) -> List[str]:
    """Return the distinct names bound to a resource service, in order."""
    names: List[str] = []
    for match in SERVICE_NAME_RE.finditer(contents):
        name = match.group(0)
        if name and name not in names:
            names.append(name)
    return names


def lookup_pattern(service_name: str) -> re.Pattern[str]:
    return re.compile(
        rf"{re.escape(service_name)}\.{LOOKUP_METHOD}\((.*?)\)", re.DOTALL
    )


def key_argument(argument: str) -> str:
    """Drop interpolation arguments: only the first segment names the key."""
    if "," in argument:
        return argument.split(",", 1)[0]
    return argument


def find_lookup_arguments(contents: str, service_name: str) -> List[str]:
    pattern = lookup_pattern(service_name)
    return [key_argument(match.group(1)) for match in pattern.finditer(contents)]


def extract_logic_references(files: Iterable[SourceFile]) -> List[RawReference]:
    references: List[RawReference] = []
    for source in files:
        service_names = find_service_names(source.contents)
        if not service_names:
            continue
        tokens: List[str] = []
        for service_name in service_names:
            tokens.extend(find_lookup_arguments(source.contents, service_name))
        debug_verbose(
            "logic_references",
            {"file": source.file_name, "services": service_names, "count": len(tokens)},
        )
        references.extend(
            RawReference(file_name=source.file_name, token=token) for token in tokens
        )
    return references


__all__ = [
    "SERVICE_NAME_RE",
    "extract_logic_references",
    "find_lookup_arguments",
    "find_service_names",
    "key_argument",
    "lookup_pattern",
]
