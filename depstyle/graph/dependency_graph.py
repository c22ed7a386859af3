"""DependencyGraph wrapper around networkx."""

from typing import Any, Iterator

import networkx as nx

from ..style.resolution import NodeResolution


class DependencyGraph:
    """A graph of artifacts and the dependencies between them.

    Wraps a networkx DiGraph. Nodes are artifacts identified by
    ``group:artifact:version``; edges point from a dependent artifact to its
    dependency and carry the dependency's resolution and scope.
    """

    def __init__(self):
        """Initialize an empty dependency graph."""
        self._graph = nx.DiGraph()

    @property
    def graph(self) -> nx.DiGraph:
        """Get the underlying networkx graph."""
        return self._graph

    @staticmethod
    def node_id(group_id: str, artifact_id: str, version: str | None = None) -> str:
        """Build the node ID of an artifact."""
        return f"{group_id}:{artifact_id}:{version or ''}"

    def add_artifact(
        self,
        group_id: str,
        artifact_id: str,
        version: str | None = None,
        type: str | None = "jar",
        scopes: list[str] | None = None,
        **attrs: Any,
    ) -> str:
        """Add an artifact node to the graph.

        Args:
            group_id: The artifact's group.
            artifact_id: The artifact's name.
            version: The artifact's version.
            type: The artifact's packaging type.
            scopes: The scopes the artifact is used in. The first one is the
                effective scope.
            **attrs: Additional attributes for the node.

        Returns:
            The node ID.
        """
        node_id = self.node_id(group_id, artifact_id, version)
        self._graph.add_node(
            node_id,
            group_id=group_id,
            artifact_id=artifact_id,
            version=version,
            type=type,
            scopes=list(scopes or []),
            **attrs,
        )
        return node_id

    def add_dependency(
        self,
        from_id: str,
        to_id: str,
        resolution: NodeResolution = NodeResolution.INCLUDED,
        scope: str | None = None,
    ) -> None:
        """Add a dependency edge between two artifacts.

        Args:
            from_id: The dependent artifact's node ID.
            to_id: The dependency's node ID.
            resolution: How the dependency was resolved.
            scope: The scope of the dependency.

        Raises:
            KeyError: If either artifact is not in the graph.
        """
        for node_id in (from_id, to_id):
            if not self._graph.has_node(node_id):
                raise KeyError(f"Unknown artifact: {node_id}")

        self._graph.add_edge(from_id, to_id, resolution=resolution, scope=scope)

    def get_artifact(self, node_id: str) -> dict[str, Any] | None:
        """Get an artifact node by ID."""
        if self._graph.has_node(node_id):
            return dict(self._graph.nodes[node_id])
        return None

    def get_dependency(self, from_id: str, to_id: str) -> dict[str, Any] | None:
        """Get a dependency edge by its end points."""
        if self._graph.has_edge(from_id, to_id):
            return dict(self._graph.edges[from_id, to_id])
        return None

    def iter_artifacts(self) -> Iterator[tuple[str, dict[str, Any]]]:
        """Iterate over (node ID, node data) pairs."""
        yield from self._graph.nodes(data=True)

    def iter_dependencies(self) -> Iterator[tuple[str, str, dict[str, Any]]]:
        """Iterate over (from ID, to ID, edge data) triples."""
        yield from self._graph.edges(data=True)
