"""Linear lint pipeline: discover, load, extract, reconcile."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Optional, Union

from .config import LintOptions
from .extract import extract_logic_references, extract_markup_references
from .log_config import verbose_log
from .models import LintReport
from .reconcile import reconcile
from .sources import discover_paths, load_dictionaries, read_source_files

PathLike = Union[str, Path]


def run_lint(
    markup_paths: Iterable[PathLike],
    logic_paths: Iterable[PathLike],
    resource_paths: Iterable[PathLike],
) -> LintReport:
    dictionaries = load_dictionaries(resource_paths)
    markup_files = read_source_files(markup_paths)
    logic_files = read_source_files(logic_paths)
    verbose_log(
        "loaded",
        {
            "dictionaries": [dictionary.name for dictionary in dictionaries],
            "markup_files": len(markup_files),
            "logic_files": len(logic_files),
        },
    )

    references = extract_markup_references(markup_files)
    references.extend(extract_logic_references(logic_files))
    verbose_log("references", len(references))

    return reconcile(dictionaries, markup_files + logic_files, references)


def lint_resources(options: Optional[LintOptions] = None) -> LintReport:
    """Lint the project rooted at ``options.root``."""
    if options is None:
        options = LintOptions.from_environment()
    verbose_log("root", options.root)
    discovered = discover_paths(options)
    return run_lint(discovered.markup, discovered.logic, discovered.resources)


__all__ = ["lint_resources", "run_lint"]
