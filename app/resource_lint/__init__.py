"""Localization resource key linter."""

from .config import LintOptions  # noqa: F401
from .models import LintReport  # noqa: F401
from .pipeline import lint_resources, run_lint  # noqa: F401

__all__ = ["LintOptions", "LintReport", "lint_resources", "run_lint"]
