from __future__ import annotations

from enum import Enum
from typing import Final, FrozenSet, Tuple

# ---------------------------------------------------------------------------
# Resource filter / service vocabulary
# ---------------------------------------------------------------------------
RESOURCE_FILTER_NAMES: Final[Tuple[str, ...]] = (
    "skyAppResources",
    "skyLibResources",
)
RESOURCE_SERVICE_TYPES: Final[Tuple[str, ...]] = (
    "SkyAppResourcesService",
    "SkyLibResourcesService",
)
LOOKUP_METHOD: Final[str] = "getString"

# ---------------------------------------------------------------------------
# Key conventions
# ---------------------------------------------------------------------------
QUOTE_CHARS: Final[FrozenSet[str]] = frozenset({"'", '"'})
KEY_ALPHABET: Final[str] = "a-z0-9_"

RESOURCE_FILE_ENCODING: Final[str] = "utf-8"
# Dictionaries may start with a UTF-8 byte-order mark.
RESOURCE_DICTIONARY_ENCODING: Final[str] = "utf-8-sig"


class ReportSection(str, Enum):
    MISSING = "missing"
    NON_STANDARD = "nonStandard"
    UNUSED = "unused"

    @property
    def heading(self) -> str:
        return _SECTION_HEADINGS[self]

    def __str__(self) -> str:  # pragma: no cover - trivial
        return str(self.value)


_SECTION_HEADINGS = {
    ReportSection.MISSING: "Missing Keys",
    ReportSection.NON_STANDARD: "Non-standard Keys",
    ReportSection.UNUSED: "Potentially Unused Keys",
}
