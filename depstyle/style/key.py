"""Artifact coordinate keys used to match node style rules."""

from dataclasses import dataclass, fields
from typing import Any

WILDCARD = None
SEPARATOR = ":"


@dataclass(frozen=True)
class StyleKey:
    """A matcher over artifact coordinates.

    Each field is either a literal string or the wildcard (``None``). Keys
    built from real artifacts are fully literal and act as candidates; keys
    read from a style configuration act as patterns.
    """

    group_id: str | None = WILDCARD
    artifact_id: str | None = WILDCARD
    scope: str | None = WILDCARD
    type: str | None = WILDCARD
    version: str | None = WILDCARD

    @classmethod
    def create(
        cls,
        group_id: str | None = None,
        artifact_id: str | None = None,
        scope: str | None = None,
        type: str | None = None,
        version: str | None = None,
    ) -> "StyleKey":
        """Create a key, mapping absent or empty values to the wildcard."""
        return cls(
            group_id=group_id or WILDCARD,
            artifact_id=artifact_id or WILDCARD,
            scope=scope or WILDCARD,
            type=type or WILDCARD,
            version=version or WILDCARD,
        )

    @classmethod
    def pattern(
        cls,
        group_id: Any = None,
        artifact_id: Any = None,
        scope: Any = None,
        type: Any = None,
        version: Any = None,
    ) -> "StyleKey":
        """Create a pattern key from configuration values.

        Scalars are converted to strings; empty values and ``*`` are
        wildcards.

        Raises:
            ValueError: If a value is not a scalar.
        """
        return cls(
            group_id=_pattern_field(group_id),
            artifact_id=_pattern_field(artifact_id),
            scope=_pattern_field(scope),
            type=_pattern_field(type),
            version=_pattern_field(version),
        )

    @classmethod
    def from_string(cls, key_string: str) -> "StyleKey":
        """Parse ``group:artifact:scope:type:version`` notation.

        Missing trailing segments, empty segments and ``*`` are wildcards.

        Raises:
            ValueError: If the string has more than five segments.
        """
        parts = key_string.strip().split(SEPARATOR) if key_string else []
        if len(parts) > 5:
            raise ValueError(
                f"Style key has more than 5 segments: {key_string!r}"
            )

        return cls.pattern(*parts)

    def matches(self, candidate: "StyleKey") -> bool:
        """Check whether this pattern matches a literal candidate key."""
        for f in fields(self):
            pattern = getattr(self, f.name)
            if pattern is not WILDCARD and pattern != getattr(candidate, f.name):
                return False
        return True

    def __str__(self) -> str:
        parts = [getattr(self, f.name) or "" for f in fields(self)]
        return SEPARATOR.join(parts).rstrip(SEPARATOR)


def _pattern_field(value: Any) -> str | None:
    if value is None:
        return WILDCARD
    if isinstance(value, bool) or not isinstance(value, (str, int, float)):
        raise ValueError(f"Style key field must be a string: {value!r}")

    value = str(value).strip()
    return WILDCARD if value in ("", "*") else value
