"""Ordered attribute sets produced by style queries."""

from typing import Any, Iterator


class AttributeSet:
    """An ordered sequence of (name, value) string pairs.

    Values are meant to be embedded as-is into a graph description; turning
    the pairs into concrete syntax is left to the consumer.
    """

    def __init__(self) -> None:
        self._attributes: list[tuple[str, str]] = []

    def add(self, name: str, value: Any) -> "AttributeSet":
        """Append an attribute. ``None`` values are skipped."""
        if value is not None:
            if isinstance(value, bool):
                value = str(value).lower()
            self._attributes.append((name, str(value)))
        return self

    def extend(self, other: "AttributeSet") -> "AttributeSet":
        """Append all attributes of another set."""
        self._attributes.extend(other)
        return self

    def get(self, name: str) -> str | None:
        """Get the last value recorded for an attribute name."""
        value = None
        for attr_name, attr_value in self._attributes:
            if attr_name == name:
                value = attr_value
        return value

    def as_dict(self) -> dict[str, str]:
        """Get the attributes as a dictionary, keeping order."""
        return dict(self._attributes)

    def __iter__(self) -> Iterator[tuple[str, str]]:
        return iter(self._attributes)

    def __len__(self) -> int:
        return len(self._attributes)

    def __bool__(self) -> bool:
        return bool(self._attributes)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AttributeSet):
            return NotImplemented
        return self._attributes == other._attributes

    def __repr__(self) -> str:
        return f"AttributeSet({self._attributes!r})"
