from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Dict, Tuple

_DEFAULTS: Dict[str, str] = {
    "RESOURCE_LINT_ROOT": ".",
    "RESOURCE_LINT_MARKUP_PATTERN": "src/app/**/*.html",
    "RESOURCE_LINT_LOGIC_PATTERN": "src/app/**/*.ts",
    "RESOURCE_LINT_RESOURCE_PATTERN": "src/assets/locales/*.json",
    "RESOURCE_LINT_EXCLUDED_SUFFIXES": ".spec.ts,.mock.ts",
}


@dataclass(frozen=True)
class LintEnvironmentConfig:
    root: str
    markup_pattern: str
    logic_pattern: str
    resource_pattern: str
    excluded_suffixes: Tuple[str, ...]


def _coalesce_env(key: str) -> str:
    default = _DEFAULTS.get(key)
    value = os.getenv(key)
    if value is None:
        if default is None:
            raise RuntimeError(f"Missing environment variable '{key}'")
        return default
    trimmed = value.strip()
    if not trimmed:
        if default is not None:
            return default
        raise RuntimeError(f"Environment variable '{key}' cannot be empty")
    return trimmed


def _parse_suffixes(raw: str) -> Tuple[str, ...]:
    return tuple(item.strip() for item in raw.split(",") if item.strip())


def normalize_pattern(raw: str) -> str:
    trimmed = raw.strip()
    while trimmed.startswith("./"):
        trimmed = trimmed[2:]
    return trimmed.lstrip("/")


@lru_cache(maxsize=1)
def get_lint_environment() -> LintEnvironmentConfig:
    return LintEnvironmentConfig(
        root=_coalesce_env("RESOURCE_LINT_ROOT"),
        markup_pattern=normalize_pattern(_coalesce_env("RESOURCE_LINT_MARKUP_PATTERN")),
        logic_pattern=normalize_pattern(_coalesce_env("RESOURCE_LINT_LOGIC_PATTERN")),
        resource_pattern=normalize_pattern(
            _coalesce_env("RESOURCE_LINT_RESOURCE_PATTERN")
        ),
        excluded_suffixes=_parse_suffixes(
            _coalesce_env("RESOURCE_LINT_EXCLUDED_SUFFIXES")
        ),
    )


__all__ = ["LintEnvironmentConfig", "get_lint_environment", "normalize_pattern"]
