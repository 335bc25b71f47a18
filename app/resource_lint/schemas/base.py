"""Shared Marshmallow base for report entries and option files.

Report JSON and ``--config`` files both spell fields in camelCase
(``dictionaryName``, ``fileName``, ``markupPattern``), while the dataclasses
use snake_case attributes. ``LintSchema`` derives the external name from the
attribute name unless a field sets ``data_key`` itself.
"""

from __future__ import annotations

from typing import Any

from marshmallow import EXCLUDE, Schema  # type: ignore[import-not-found]


def external_name(attribute: str) -> str:
    head, *rest = attribute.split("_")
    return head + "".join(part[:1].upper() + part[1:] for part in rest)


class LintSchema(Schema):
    """Report columns keep declaration order; stray option keys are dropped."""

    class Meta:
        ordered = True
        unknown = EXCLUDE

    def on_bind_field(self, field_name: str, field_obj: Any) -> None:  # type: ignore[override]
        super().on_bind_field(field_name, field_obj)
        if field_obj.data_key is None:
            field_obj.data_key = external_name(field_name)


__all__ = ["LintSchema", "external_name"]
