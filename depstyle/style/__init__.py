"""Style layer: rule matching and layered configuration merging."""

from .attributes import AttributeSet
from .configuration import StyleConfiguration
from .errors import StyleLoadError, StyleValidationError
from .key import StyleKey
from .loader import load, parse_config_from_string, read_config
from .models import Box, EdgeStyle, Ellipse, Font, NodeStyle, Polygon, overlay
from .resolution import NodeResolution
from .resource import (
    FileStyleResource,
    PackageStyleResource,
    StringStyleResource,
    StyleResource,
    default_style_resource,
)

__all__ = [
    "AttributeSet",
    "StyleConfiguration",
    "StyleLoadError",
    "StyleValidationError",
    "StyleKey",
    "load",
    "parse_config_from_string",
    "read_config",
    "Box",
    "EdgeStyle",
    "Ellipse",
    "Font",
    "NodeStyle",
    "Polygon",
    "overlay",
    "NodeResolution",
    "FileStyleResource",
    "PackageStyleResource",
    "StringStyleResource",
    "StyleResource",
    "default_style_resource",
]
