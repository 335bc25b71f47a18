from .helpers import base_name, now_iso

__all__ = ["base_name", "now_iso"]
