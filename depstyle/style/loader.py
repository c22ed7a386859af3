"""Loading and merging of style configuration resources."""

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from .configuration import StyleConfiguration
from .errors import StyleLoadError, StyleValidationError
from .resource import FileStyleResource, StyleResource

logger = logging.getLogger(__name__)


def load(
    main: StyleResource | str | Path, *overrides: StyleResource | str | Path
) -> StyleConfiguration:
    """Load a style configuration and merge overrides into it.

    Overrides are merged in argument order, so ``load(main, o1, o2)`` is
    ``main`` merged with ``o1`` and the result merged with ``o2``.

    Args:
        main: The base configuration.
        *overrides: Configurations merged on top of the base.

    Returns:
        The effective configuration.

    Raises:
        StyleLoadError: If a resource cannot be read or parsed.
        StyleValidationError: If a resource does not fit the schema.
    """
    configuration = read_config(main)
    for override in overrides:
        override_config = read_config(override)
        logger.debug("Merging style configuration %s", override)
        configuration.merge(override_config)

    return configuration


def read_config(resource: StyleResource | str | Path) -> StyleConfiguration:
    """Read a single style configuration resource.

    Args:
        resource: The resource, or a path to a style file.

    Returns:
        The parsed configuration.

    Raises:
        StyleLoadError: If the resource cannot be read or parsed.
        StyleValidationError: If the data fails validation.
    """
    if not isinstance(resource, StyleResource):
        resource = FileStyleResource(resource)

    logger.debug("Reading style configuration %s", resource)
    data = _read_data(resource)
    return _parse_config_data(data, str(resource))


def parse_config_from_string(text: str) -> StyleConfiguration:
    """Parse a YAML or JSON string into a StyleConfiguration.

    Raises:
        StyleLoadError: If the text cannot be parsed.
        StyleValidationError: If the data fails validation.
    """
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise _syntax_error(e, "<string>") from e

    return _parse_config_data(_check_root(data, "<string>"), "<string>")


def _read_data(resource: StyleResource) -> dict:
    name = str(resource)
    try:
        with resource.open_stream() as stream:
            data = yaml.safe_load(stream)
    except yaml.YAMLError as e:
        raise _syntax_error(e, name) from e
    except (OSError, ImportError) as e:
        raise StyleLoadError(
            f"Unable to read style configuration {name}: {e}", name
        ) from e

    return _check_root(data, name)


def _check_root(data: Any, name: str) -> dict:
    if data is None:
        return {}

    if not isinstance(data, dict):
        raise StyleLoadError(
            f"Unable to read style configuration {name}.\n"
            f"Details: expected a mapping at root, got {type(data).__name__}",
            name,
        )

    return data


def _syntax_error(error: yaml.YAMLError, name: str) -> StyleLoadError:
    """Build a load error carrying the location of a YAML syntax error."""
    mark = getattr(error, "problem_mark", None)
    if mark is None:
        return StyleLoadError(
            f"Unable to read style configuration {name}.\nDetails: {error}", name
        )

    # PyYAML marks are 0-based
    line = mark.line + 1
    column = mark.column + 1
    details = getattr(error, "problem", None) or str(error)
    return StyleLoadError(
        f"Unable to read style configuration {name}.\n"
        f"Location: line {line}, column {column}\n"
        f"Details: {details}",
        name,
        line=line,
        column=column,
    )


def _parse_config_data(data: dict, name: str) -> StyleConfiguration:
    try:
        return StyleConfiguration.model_validate(data)
    except ValidationError as e:
        errors = [
            {
                "loc": ".".join(str(x) for x in err["loc"]),
                "msg": err["msg"],
                "type": err["type"],
            }
            for err in e.errors()
        ]
        raise StyleValidationError(
            f"Invalid style configuration {name}: "
            f"{len(errors)} validation error(s)",
            name,
            errors,
        ) from e
