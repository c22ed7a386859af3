"""Graph layer for representing dependency graphs as networkx graphs."""

from .dependency_graph import DependencyGraph
from .styler import apply_styles

__all__ = [
    "DependencyGraph",
    "apply_styles",
]
