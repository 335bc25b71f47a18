"""Serialization of lint reports."""

from __future__ import annotations

from marshmallow import fields

from .base import LintSchema


class MissingEntrySchema(LintSchema):
    dictionary_name = fields.String(required=True)
    file_name = fields.String(required=True)
    key = fields.String(required=True)


class NonStandardEntrySchema(MissingEntrySchema):
    pass


class UnusedEntrySchema(LintSchema):
    dictionary_name = fields.String(required=True)
    key = fields.String(required=True)


class LintReportSchema(LintSchema):
    missing = fields.List(fields.Nested(MissingEntrySchema))
    non_standard = fields.List(fields.Nested(NonStandardEntrySchema))
    unused = fields.List(fields.Nested(UnusedEntrySchema))


__all__ = [
    "LintReportSchema",
    "MissingEntrySchema",
    "NonStandardEntrySchema",
    "UnusedEntrySchema",
]
