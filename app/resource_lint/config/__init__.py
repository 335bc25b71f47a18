from .constants import (
    KEY_ALPHABET,
    LOOKUP_METHOD,
    QUOTE_CHARS,
    RESOURCE_DICTIONARY_ENCODING,
    RESOURCE_FILE_ENCODING,
    RESOURCE_FILTER_NAMES,
    RESOURCE_SERVICE_TYPES,
    ReportSection,
)
from .environment import LintEnvironmentConfig, get_lint_environment
from .options import LintOptions

__all__ = [
    "KEY_ALPHABET",
    "LOOKUP_METHOD",
    "QUOTE_CHARS",
    "RESOURCE_DICTIONARY_ENCODING",
    "RESOURCE_FILE_ENCODING",
    "RESOURCE_FILTER_NAMES",
    "RESOURCE_SERVICE_TYPES",
    "ReportSection",
    "LintEnvironmentConfig",
    "get_lint_environment",
    "LintOptions",
]
