"""Annotation of dependency graphs with style attributes."""

import logging

from ..style.configuration import StyleConfiguration
from .dependency_graph import DependencyGraph

logger = logging.getLogger(__name__)

ATTRIBUTES_KEY = "style_attributes"


def apply_styles(graph: DependencyGraph, config: StyleConfiguration) -> None:
    """Store the style attributes of every node and edge in the graph.

    Each node and edge gets a ``style_attributes`` entry holding the
    AttributeSet returned by the configuration for it. The configuration is
    only queried, never modified.

    Args:
        graph: The dependency graph to annotate.
        config: The effective style configuration.
    """
    nx_graph = graph.graph

    for node_id, data in nx_graph.nodes(data=True):
        scopes = data.get("scopes") or []
        data[ATTRIBUTES_KEY] = config.node_attributes(
            data["group_id"],
            data["artifact_id"],
            data.get("version"),
            data.get("type"),
            "/".join(scopes) or None,
            scopes[0] if scopes else None,
        )

    for from_id, to_id, data in nx_graph.edges(data=True):
        # Edges without their own scope use the target's effective scope
        scope = data.get("scope")
        if scope is None:
            target_scopes = nx_graph.nodes[to_id].get("scopes") or []
            scope = target_scopes[0] if target_scopes else None

        data[ATTRIBUTES_KEY] = config.edge_attributes(data["resolution"], scope)

    logger.debug(
        "Styled %d nodes and %d edges",
        nx_graph.number_of_nodes(),
        nx_graph.number_of_edges(),
    )
