"""Layered style configuration: merging and per-entity queries."""

import json
import logging
from typing import Annotated, Any

from pydantic import (
    AliasChoices,
    BaseModel,
    ConfigDict,
    Field,
    PlainValidator,
    TypeAdapter,
    field_validator,
)

from .attributes import AttributeSet
from .key import StyleKey
from .models import Box, EdgeStyle, NodeStyle, NodeStyleVariant, overlay
from .resolution import NodeResolution

logger = logging.getLogger(__name__)

_node_style_adapter: TypeAdapter[NodeStyle] = TypeAdapter(NodeStyleVariant)


def _to_style_key(value: Any) -> StyleKey:
    if isinstance(value, StyleKey):
        return value
    if isinstance(value, str):
        return StyleKey.from_string(value)
    raise ValueError(f"Invalid style key: {value!r}")


def _to_resolution(value: Any) -> NodeResolution:
    if isinstance(value, NodeResolution):
        return value
    if isinstance(value, str):
        return NodeResolution.from_name(value)
    raise ValueError(f"Invalid node resolution: {value!r}")


StyleKeyField = Annotated[StyleKey, PlainValidator(_to_style_key)]
ResolutionField = Annotated[NodeResolution, PlainValidator(_to_resolution)]


def _key_from_match(match: Any) -> StyleKey:
    """Build a style key from the ``match`` part of a list-form rule."""
    if match is None:
        return StyleKey.create()
    if isinstance(match, str):
        return StyleKey.from_string(match)
    if not isinstance(match, dict):
        raise ValueError(f"Invalid rule match: {match!r}")

    return StyleKey.pattern(
        group_id=match.get("group-id", match.get("group_id")),
        artifact_id=match.get("artifact-id", match.get("artifact_id")),
        scope=match.get("scope"),
        type=match.get("type"),
        version=match.get("version"),
    )


class StyleConfiguration(BaseModel):
    """The effective style configuration of a dependency graph.

    Holds a default node and edge style, node style rules matched in
    declaration order, and edge styles by target scope and by resolution.
    A configuration is built by loading a resource and then only modified
    through :meth:`merge`; after loading it is queried read-only.
    """

    model_config = ConfigDict(populate_by_name=True)

    default_node: NodeStyleVariant = Field(
        default_factory=Box,
        validation_alias=AliasChoices("default-node", "default_node"),
    )
    default_edge: EdgeStyle = Field(
        default_factory=EdgeStyle,
        validation_alias=AliasChoices("default-edge", "default_edge"),
    )
    node_styles: dict[StyleKeyField, NodeStyleVariant] = Field(
        default_factory=dict,
        validation_alias=AliasChoices("node-styles", "node_styles"),
    )
    edge_scope_styles: dict[str, EdgeStyle] = Field(
        default_factory=dict,
        validation_alias=AliasChoices(
            "edge-styles-by-scope", "edge-scope-styles", "edge_scope_styles"
        ),
    )
    edge_resolution_styles: dict[ResolutionField, EdgeStyle] = Field(
        default_factory=dict,
        validation_alias=AliasChoices(
            "edge-styles-by-resolution",
            "edge-resolution-styles",
            "edge_resolution_styles",
        ),
    )

    @field_validator("default_node", "default_edge", mode="before")
    @classmethod
    def normalize_missing_default(cls, value: Any) -> Any:
        """Treat an explicit null default as an empty style."""
        return {} if value is None else value

    @field_validator("edge_scope_styles", "edge_resolution_styles", mode="before")
    @classmethod
    def normalize_edge_styles(cls, value: Any) -> Any:
        """Treat null edge styles as empty ones."""
        if value is None:
            return {}
        if isinstance(value, dict):
            return {k: {} if v is None else v for k, v in value.items()}
        return value

    @field_validator("node_styles", mode="before")
    @classmethod
    def normalize_node_styles(cls, value: Any) -> Any:
        """Normalize node style rules into an ordered key -> style mapping.

        Accepts a mapping from key notation to style, or a list of
        ``{match: ..., style: ...}`` pairs. Rules with equal keys are
        consolidated into the position of the first one.
        """
        if value is None:
            return {}

        if isinstance(value, dict):
            pairs = [(_to_style_key(k), v) for k, v in value.items()]
        elif isinstance(value, list):
            pairs = []
            for rule in value:
                if not isinstance(rule, dict):
                    raise ValueError(f"Node style rule must be a mapping: {rule!r}")
                pairs.append((_key_from_match(rule.get("match")), rule.get("style")))
        else:
            return value

        rules: dict[StyleKey, NodeStyle] = {}
        for key, style in pairs:
            node = _node_style_adapter.validate_python({} if style is None else style)
            if key in rules:
                rules[key] = overlay(rules[key], node)
            else:
                rules[key] = node
        return rules

    # -------------------------------------------------------------------------
    # Merging
    # -------------------------------------------------------------------------

    def merge(self, override: "StyleConfiguration") -> None:
        """Merge an override configuration into this one.

        Node styles are overlaid (see :func:`overlay`), so an override can
        either adjust a few fields of a same-shaped style or replace the
        style with a different shape. Edge styles are merged field by field.
        Rules already present keep their match position; new rules are
        appended in the override's order. ``override`` is not modified.
        """
        self.default_node = overlay(self.default_node, override.default_node)
        self.default_edge.merge(override.default_edge)

        for key, node in override.node_styles.items():
            if key in self.node_styles:
                logger.debug("Overlaying node style rule '%s'", key)
                self.node_styles[key] = overlay(self.node_styles[key], node)
            else:
                logger.debug("Adding node style rule '%s'", key)
                self.node_styles[key] = node.model_copy(deep=True)

        _merge_edge_styles(self.edge_resolution_styles, override.edge_resolution_styles)
        _merge_edge_styles(self.edge_scope_styles, override.edge_scope_styles)

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def default_node_attributes(self) -> AttributeSet:
        """Get the graph-wide default node attributes."""
        return self.default_node.create_attributes()

    def default_edge_attributes(self) -> AttributeSet:
        """Get the graph-wide default edge attributes."""
        return self.default_edge.create_attributes()

    def node_attributes(
        self,
        group_id: str,
        artifact_id: str,
        version: str | None,
        type: str | None,
        scopes: str | None,
        effective_scope: str | None,
    ) -> AttributeSet:
        """Get the attributes of an artifact node.

        The first rule matching the artifact wins, regardless of how specific
        later rules are. Without a match, the default node style is used.
        """
        candidate = StyleKey.create(group_id, artifact_id, effective_scope, type, version)
        node = self.find_node_style(candidate)
        has_custom_style = node is not None
        if node is None:
            node = self.default_node

        return node.create_node_attributes(
            group_id, artifact_id, version, scopes, has_custom_style
        )

    def find_node_style(self, candidate: StyleKey) -> NodeStyle | None:
        """Find the first node style rule matching a candidate key."""
        for key, node in self.node_styles.items():
            if key.matches(candidate):
                return node
        return None

    def edge_attributes(
        self, resolution: NodeResolution, target_scope: str | None
    ) -> AttributeSet:
        """Get the attributes of a dependency edge.

        A scope style wins over the style of the INCLUDED resolution, but not
        over the style of any other resolution.
        """
        edge = self.edge_resolution_styles.get(resolution)
        if resolution == NodeResolution.INCLUDED and target_scope in self.edge_scope_styles:
            edge = self.edge_scope_styles[target_scope]

        return edge.create_attributes() if edge is not None else AttributeSet()

    # -------------------------------------------------------------------------
    # Serialization
    # -------------------------------------------------------------------------

    def to_dict(self) -> dict[str, Any]:
        """Dump the configuration using the configuration file layout."""
        return {
            "default-node": self.default_node.dump(),
            "default-edge": self.default_edge.dump(),
            "node-styles": {
                str(key): node.dump() for key, node in self.node_styles.items()
            },
            "edge-styles-by-scope": {
                scope: edge.dump() for scope, edge in self.edge_scope_styles.items()
            },
            "edge-styles-by-resolution": {
                resolution.value: edge.dump()
                for resolution, edge in self.edge_resolution_styles.items()
            },
        }

    def to_json(self) -> str:
        """Serialize the configuration to pretty-printed JSON."""
        return json.dumps(self.to_dict(), indent=2)


def _merge_edge_styles(target: dict, source: dict) -> None:
    for name, edge in source.items():
        if name in target:
            target[name].merge(edge)
        else:
            target[name] = edge.model_copy(deep=True)
