"""Resolution kinds of dependency edges."""

from enum import Enum


class NodeResolution(str, Enum):
    """Why a dependency ended up in (or out of) the resolved graph.

    The values are the names used in style configuration files.
    """

    INCLUDED = "included"
    OMITTED_FOR_DUPLICATE = "omitted-for-duplicate"
    OMITTED_FOR_CONFLICT = "omitted-for-conflict"
    OMITTED_FOR_CYCLE = "omitted-for-cycle"
    PARENT = "parent"

    @classmethod
    def from_name(cls, name: str) -> "NodeResolution":
        """Resolve a configuration name or an enum member name.

        Raises:
            ValueError: If the name is not a known resolution.
        """
        try:
            return cls(name)
        except ValueError:
            pass

        member = cls.__members__.get(name.upper().replace("-", "_"))
        if member is None:
            raise ValueError(f"Unknown node resolution: {name}")
        return member
