"""Shared fixtures for tests."""

import pytest

from depstyle.style.loader import parse_config_from_string


@pytest.fixture
def base_style_yaml() -> str:
    """Return a base style configuration."""
    return """
default-node:
  type: box
  color: red
  default-font:
    name: Helvetica
    size: 14

default-edge:
  color: black

node-styles:
  com.example:
    type: ellipse
    fill-color: yellow
  org.apache::test:
    type: box
    color: gray
    rounded: true

edge-styles-by-scope:
  test:
    style: dashed
    color: gray

edge-styles-by-resolution:
  included:
    color: blue
  omitted-for-conflict:
    style: dotted
    color: red
"""


@pytest.fixture
def override_style_yaml() -> str:
    """Return a style configuration meant to be merged on top of the base."""
    return """
default-node:
  type: box
  rounded: true

default-edge:
  style: bold

node-styles:
  org.apache::test:
    type: box
    fill-color: white
  com.example:artifact:
    type: polygon
    sides: 6

edge-styles-by-scope:
  test:
    color: green
  runtime:
    style: dashed

edge-styles-by-resolution:
  omitted-for-conflict:
    color: orange
  omitted-for-duplicate:
    style: dotted
"""


@pytest.fixture
def base_config(base_style_yaml):
    """Return a parsed base configuration."""
    return parse_config_from_string(base_style_yaml)


@pytest.fixture
def override_config(override_style_yaml):
    """Return a parsed override configuration."""
    return parse_config_from_string(override_style_yaml)


@pytest.fixture
def merged_config(base_config, override_config):
    """Return the base configuration with the override merged into it."""
    base_config.merge(override_config)
    return base_config
