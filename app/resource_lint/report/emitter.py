"""Console and JSON renderings of a lint report."""

from __future__ import annotations

import json
from typing import Any, Dict, List, Sequence

from prettytable import PrettyTable

from ..config import ReportSection
from ..models import LintReport
from ..schemas import (
    LintReportSchema,
    MissingEntrySchema,
    NonStandardEntrySchema,
    UnusedEntrySchema,
)

INDEX_COLUMN = "(index)"
EMPTY_MARKER = "(empty)"

_SECTION_SCHEMAS = {
    ReportSection.MISSING: MissingEntrySchema,
    ReportSection.NON_STANDARD: NonStandardEntrySchema,
    ReportSection.UNUSED: UnusedEntrySchema,
}


def _section_rows(report: LintReport, section: ReportSection) -> List[Dict[str, Any]]:
    entries = {
        ReportSection.MISSING: report.missing,
        ReportSection.NON_STANDARD: report.non_standard,
        ReportSection.UNUSED: report.unused,
    }[section]
    return _SECTION_SCHEMAS[section](many=True).dump(entries)


def format_table(rows: Sequence[Dict[str, Any]]) -> str:
    if not rows:
        return EMPTY_MARKER
    table = PrettyTable()
    table.field_names = [INDEX_COLUMN, *rows[0].keys()]
    table.align = "l"
    for index, row in enumerate(rows):
        table.add_row([index, *row.values()])
    return table.get_string()


def render_tables(report: LintReport) -> str:
    blocks = []
    for section in ReportSection:
        blocks.append(section.heading)
        blocks.append(format_table(_section_rows(report, section)))
    return "\n".join(blocks) + "\n"


def render_json(report: LintReport) -> str:
    payload = LintReportSchema().dump(report)
    return json.dumps(payload, ensure_ascii=False, indent=2) + "\n"


__all__ = ["format_table", "render_json", "render_tables"]
