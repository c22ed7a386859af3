"""Output formatting for attribute sets."""

import json
from typing import Literal

from ..style.attributes import AttributeSet


def format_attributes(
    attributes: AttributeSet,
    format: Literal["text", "json"] = "text",
) -> str:
    """Format an attribute set for output.

    Args:
        attributes: The attributes to format.
        format: Output format ("text" or "json").

    Returns:
        Formatted string representation.
    """
    if format == "json":
        return _format_json(attributes)
    return _format_text(attributes)


def _format_text(attributes: AttributeSet) -> str:
    """Format attributes as one ``name = value`` line each."""
    if not attributes:
        return "(none)"

    width = max(len(name) for name, _ in attributes)
    return "\n".join(f"{name.ljust(width)} = {value}" for name, value in attributes)


def _format_json(attributes: AttributeSet) -> str:
    """Format attributes as a JSON list of name/value pairs."""
    data = [{"name": name, "value": value} for name, value in attributes]
    return json.dumps(data, indent=2)
