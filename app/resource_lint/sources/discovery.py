"""Path discovery over the fixed web-project layout."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, Iterator, List, Tuple

from ..config import LintOptions
from ..log_config import debug_verbose


@dataclass(frozen=True)
class DiscoveredPaths:
    markup: List[Path] = field(default_factory=list)
    logic: List[Path] = field(default_factory=list)
    resources: List[Path] = field(default_factory=list)


def is_excluded(path: Path, excluded_suffixes: Iterable[str]) -> bool:
    return any(path.name.endswith(suffix) for suffix in excluded_suffixes)


def iter_matching_files(root: Path, pattern: str) -> Iterator[Path]:
    if not root.exists():
        return
    for path in root.glob(pattern):
        if path.is_file():
            yield path


def collect_paths(
    root: Path, pattern: str, excluded_suffixes: Tuple[str, ...] = ()
) -> List[Path]:
    paths = [
        path
        for path in iter_matching_files(root, pattern)
        if not is_excluded(path, excluded_suffixes)
    ]
    paths.sort(key=lambda p: p.as_posix())
    debug_verbose("discovered", {"pattern": pattern, "count": len(paths)})
    return paths


def discover_paths(options: LintOptions) -> DiscoveredPaths:
    root = options.root
    return DiscoveredPaths(
        markup=collect_paths(root, options.markup_pattern),
        logic=collect_paths(root, options.logic_pattern, options.excluded_suffixes),
        resources=collect_paths(root, options.resource_pattern),
    )


__all__ = ["DiscoveredPaths", "collect_paths", "discover_paths", "is_excluded"]
