"""Validation of lint option files."""

from __future__ import annotations

from typing import Any, Mapping

from marshmallow import ValidationError, fields, validates

from .base import LintSchema


class LintOptionsSchema(LintSchema):
    """Overrides for :class:`~resource_lint.config.LintOptions`.

    Every field is optional; absent fields keep the environment defaults.
    """

    root = fields.String(load_default=None, allow_none=True)
    markup_pattern = fields.String(load_default=None, allow_none=True)
    logic_pattern = fields.String(load_default=None, allow_none=True)
    resource_pattern = fields.String(load_default=None, allow_none=True)
    excluded_suffixes = fields.List(fields.String(), load_default=None, allow_none=True)

    @validates("excluded_suffixes")
    def _validate_suffixes(self, value: Any, **_: Any) -> None:
        if value is None:
            return
        if any(not item.strip() for item in value):
            raise ValidationError("suffixes cannot be blank")


def load_option_overrides(payload: Mapping[str, Any]) -> dict[str, Any]:
    return LintOptionsSchema().load(payload)


__all__ = ["LintOptionsSchema", "load_option_overrides"]
