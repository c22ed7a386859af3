"""Pydantic models for node and edge styles."""

from html import escape
from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Discriminator, Field, Tag

from .attributes import AttributeSet


def _kebab_case(name: str) -> str:
    return name.replace("_", "-")


class StyleModel(BaseModel):
    """Base for style records whose fields are all optional.

    A field set to ``None`` is unset and means "inherit or use the
    consumer's default".
    """

    model_config = ConfigDict(alias_generator=_kebab_case, populate_by_name=True)

    def merge(self, other: "StyleModel") -> None:
        """Overwrite this record's fields with every field set on ``other``."""
        for name in type(self).model_fields:
            value = getattr(other, name, None)
            if value is None:
                continue

            current = getattr(self, name)
            if isinstance(value, StyleModel):
                if current is None:
                    setattr(self, name, value.model_copy(deep=True))
                else:
                    current.merge(value)
            else:
                setattr(self, name, value)

    def dump(self) -> dict[str, Any]:
        """Dump the set fields using the configuration file names."""
        return self.model_dump(by_alias=True, exclude_none=True, mode="json")


class Font(StyleModel):
    """Font settings for a label or a label section."""

    color: str | None = None
    size: int | None = None
    name: str | None = None

    def add_attributes(self, attributes: AttributeSet) -> None:
        attributes.add("fontname", self.name)
        attributes.add("fontsize", self.size)
        attributes.add("fontcolor", self.color)

    def wrap(self, text: str) -> str:
        """Wrap escaped text into an HTML-like ``<font>`` element."""
        text = escape(text)
        font_attrs = []
        if self.color is not None:
            font_attrs.append(f'color="{escape(self.color)}"')
        if self.size is not None:
            font_attrs.append(f'point-size="{self.size}"')
        if self.name is not None:
            font_attrs.append(f'face="{escape(self.name)}"')

        if not font_attrs:
            return text
        return f"<font {' '.join(font_attrs)}>{text}</font>"


class NodeStyle(StyleModel):
    """Attributes shared by all node shapes.

    Node styles form a closed set of variants discriminated by ``type``.
    Field-wise merging only happens between styles of the same variant.
    """

    type: str
    color: str | None = None
    fill_color: str | None = None
    style: str | None = None
    default_font: Font | None = None
    group_id_font: Font | None = None
    artifact_id_font: Font | None = None
    version_font: Font | None = None
    scope_font: Font | None = None

    def merge(self, other: "StyleModel") -> None:
        """Merge a node style of the same variant into this one.

        Styles of a different variant are ignored; use :func:`overlay` to
        combine node styles of possibly different shapes.
        """
        if not isinstance(other, NodeStyle) or other.type != self.type:
            return
        super().merge(other)

    def create_attributes(self) -> AttributeSet:
        """Render the shape and style attributes of this node style."""
        attributes = AttributeSet()
        self._add_shape_attributes(attributes)
        attributes.add("color", self.color)
        attributes.add("fillcolor", self.fill_color)

        styles = self._styles()
        if styles:
            attributes.add("style", ",".join(styles))

        if self.default_font is not None:
            self.default_font.add_attributes(attributes)

        return attributes

    def create_node_attributes(
        self,
        group_id: str,
        artifact_id: str,
        version: str | None,
        scopes: str | None,
        has_custom_style: bool,
    ) -> AttributeSet:
        """Render the attributes of a single artifact node.

        The label is rendered unless every coordinate is empty. Style
        attributes are only rendered for custom styles, since the default node
        style is emitted once as the graph-wide node default.
        """
        attributes = AttributeSet()
        if has_custom_style:
            attributes.extend(self.create_attributes())

        attributes.add("label", self._label(group_id, artifact_id, version, scopes))
        return attributes

    def _add_shape_attributes(self, attributes: AttributeSet) -> None:
        attributes.add("shape", self.type)

    def _styles(self) -> list[str]:
        return [self.style] if self.style else []

    def _label(
        self,
        group_id: str,
        artifact_id: str,
        version: str | None,
        scopes: str | None,
    ) -> str | None:
        sections = [
            (group_id, self.group_id_font),
            (artifact_id, self.artifact_id_font),
            (version, self.version_font),
            (f"({scopes})" if scopes else None, self.scope_font),
        ]

        lines = []
        for text, font in sections:
            if not text:
                continue
            lines.append(font.wrap(text) if font is not None else escape(text))

        if not lines:
            return None
        return "<" + "<br/>".join(lines) + ">"


class Box(NodeStyle):
    """A rectangular node, optionally with rounded corners."""

    type: Literal["box"] = "box"
    rounded: bool | None = None

    def _styles(self) -> list[str]:
        styles = super()._styles()
        if self.rounded:
            styles.insert(0, "rounded")
        return styles


class Polygon(NodeStyle):
    """A polygon node."""

    type: Literal["polygon"] = "polygon"
    sides: int | None = None
    skew: float | None = None
    distortion: float | None = None

    def _add_shape_attributes(self, attributes: AttributeSet) -> None:
        super()._add_shape_attributes(attributes)
        attributes.add("sides", self.sides)
        attributes.add("skew", self.skew)
        attributes.add("distortion", self.distortion)


class Ellipse(NodeStyle):
    """An elliptic node."""

    type: Literal["ellipse"] = "ellipse"
    peripheries: int | None = None

    def _add_shape_attributes(self, attributes: AttributeSet) -> None:
        super()._add_shape_attributes(attributes)
        attributes.add("peripheries", self.peripheries)


def _node_type(value: Any) -> str | None:
    # Styles without an explicit type are boxes.
    if isinstance(value, dict):
        return value.get("type", "box")
    return getattr(value, "type", None)


NodeStyleVariant = Annotated[
    Union[
        Annotated[Box, Tag("box")],
        Annotated[Polygon, Tag("polygon")],
        Annotated[Ellipse, Tag("ellipse")],
    ],
    Discriminator(_node_type),
]


class EdgeStyle(StyleModel):
    """Style of a dependency edge. Edges have a single variant."""

    color: str | None = None
    style: str | None = None
    font: Font | None = None

    def create_attributes(self) -> AttributeSet:
        attributes = AttributeSet()
        attributes.add("style", self.style)
        attributes.add("color", self.color)
        if self.font is not None:
            self.font.add_attributes(attributes)
        return attributes


def overlay(base: NodeStyle, override: NodeStyle) -> NodeStyle:
    """Combine two node styles where ``override`` always keeps its variant.

    This is the two-pass merge: ``base`` absorbs ``override``, then
    ``override`` absorbs the combined ``base`` and takes its place. For the
    same variant, the result carries every field set on ``override`` plus the
    fields of ``base`` that ``override`` left unset. For different variants,
    nothing is inherited and the result equals ``override``.

    Neither argument is modified.
    """
    if base.type != override.type:
        return override.model_copy(deep=True)

    combined = base.model_copy(deep=True)
    combined.merge(override)
    return combined
