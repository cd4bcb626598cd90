"""Size formatting helpers."""

from .formatter import format_size

__all__ = ["format_size"]
