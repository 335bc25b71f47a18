"""Run options for a lint pass.

Options only steer path discovery. Extraction and reconciliation are pure
functions of the discovered files and never consult them.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, Mapping, Optional, Tuple

from .environment import get_lint_environment, normalize_pattern


@dataclass(frozen=True)
class LintOptions:
    root: Path
    markup_pattern: str
    logic_pattern: str
    resource_pattern: str
    excluded_suffixes: Tuple[str, ...]

    @classmethod
    def from_environment(cls) -> "LintOptions":
        env = get_lint_environment()
        return cls(
            root=Path(env.root),
            markup_pattern=env.markup_pattern,
            logic_pattern=env.logic_pattern,
            resource_pattern=env.resource_pattern,
            excluded_suffixes=env.excluded_suffixes,
        )

    def with_overrides(self, overrides: Optional[Mapping[str, Any]]) -> "LintOptions":
        if not overrides:
            return self
        changes: dict[str, Any] = {}
        if overrides.get("root") is not None:
            changes["root"] = Path(overrides["root"])
        for name in ("markup_pattern", "logic_pattern", "resource_pattern"):
            value = overrides.get(name)
            if value:
                changes[name] = normalize_pattern(value)
        suffixes = overrides.get("excluded_suffixes")
        if suffixes is not None:
            changes["excluded_suffixes"] = tuple(suffixes)
        return replace(self, **changes)


__all__ = ["LintOptions"]
