"""Command line entrypoint for the resource linter."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

from marshmallow import ValidationError

from .config import LintOptions
from .exceptions import ConfigError
from .log_config import error_log, set_verbose
from .pipeline import lint_resources
from .report import render_json, render_tables
from .schemas import load_option_overrides

EXIT_OK = 0
EXIT_FINDINGS = 1
EXIT_CONFIG_ERROR = 2


def load_config_file(path: Path) -> Dict[str, Any]:
    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigError(f"Unable to read config file {path}: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise ConfigError(f"Config file {path} is not valid JSON: {exc}") from exc
    if not isinstance(payload, dict):
        raise ConfigError(f"Config file {path} must hold a JSON object")
    try:
        return load_option_overrides(payload)
    except ValidationError as exc:
        raise ConfigError(f"Invalid config file {path}: {exc.messages}") from exc


def build_options(args: argparse.Namespace) -> LintOptions:
    options = LintOptions.from_environment()
    if args.config is not None:
        options = options.with_overrides(load_config_file(args.config))
    if args.root is not None:
        options = options.with_overrides({"root": args.root})
    return options


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="resource-lint",
        description=(
            "Report localization keys that are missing, non-standard or "
            "potentially unused in a web project."
        ),
    )
    parser.add_argument(
        "--root",
        type=Path,
        default=None,
        help="Project root to scan (default: RESOURCE_LINT_ROOT or cwd)",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="JSON file overriding the discovery patterns",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Emit a JSON object instead of tables",
    )
    parser.add_argument(
        "--fail-on-missing",
        action="store_true",
        help="Exit with status 1 when missing or non-standard keys are found",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log every pipeline stage to stderr",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    if args.verbose:
        set_verbose(True)

    try:
        options = build_options(args)
    except ConfigError as exc:
        error_log("config", exc)
        return EXIT_CONFIG_ERROR

    report = lint_resources(options)
    output = render_json(report) if args.json else render_tables(report)
    sys.stdout.write(output)

    if args.fail_on_missing and report.has_findings:
        return EXIT_FINDINGS
    return EXIT_OK


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
