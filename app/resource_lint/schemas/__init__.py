from .base import LintSchema, external_name
from .options import LintOptionsSchema, load_option_overrides
from .report import (
    LintReportSchema,
    MissingEntrySchema,
    NonStandardEntrySchema,
    UnusedEntrySchema,
)

__all__ = [
    "LintSchema",
    "external_name",
    "LintOptionsSchema",
    "load_option_overrides",
    "LintReportSchema",
    "MissingEntrySchema",
    "NonStandardEntrySchema",
    "UnusedEntrySchema",
]
