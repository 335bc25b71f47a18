from .emitter import format_table, render_json, render_tables

__all__ = ["format_table", "render_json", "render_tables"]
