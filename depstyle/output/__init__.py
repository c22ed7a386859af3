"""Output formatting for style query results."""

from .formatter import format_attributes

__all__ = ["format_attributes"]
