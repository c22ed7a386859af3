"""Command-line interface for depstyle."""

import logging
import sys

import click

from .output.formatter import format_attributes
from .style.configuration import StyleConfiguration
from .style.errors import StyleLoadError, StyleValidationError
from .style.loader import load
from .style.resolution import NodeResolution
from .style.resource import default_style_resource

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _style_options(command):
    """Attach the options shared by all commands that load styles."""
    command = click.argument(
        "style_files", nargs=-1, type=click.Path(exists=True, dir_okay=False)
    )(command)
    command = click.option(
        "--style",
        "env_style",
        envvar="DEPSTYLE_STYLE",
        type=click.Path(exists=True, dir_okay=False),
        help="Extra style file merged last (defaults to DEPSTYLE_STYLE env var)",
    )(command)
    command = click.option(
        "--no-default",
        is_flag=True,
        default=False,
        help="Do not start from the bundled default style",
    )(command)
    return command


def _load_configuration(
    style_files: tuple[str, ...], env_style: str | None, no_default: bool
) -> StyleConfiguration:
    """Load the effective configuration or exit with code 2."""
    resources = list(style_files)
    if env_style:
        resources.append(env_style)
    if not no_default:
        resources.insert(0, default_style_resource())

    try:
        if not resources:
            return StyleConfiguration()
        return load(resources[0], *resources[1:])
    except StyleLoadError as e:
        click.echo(f"Error loading style: {e}", err=True)
        sys.exit(2)
    except StyleValidationError as e:
        click.echo(f"Style validation error: {e}", err=True)
        for err in e.errors:
            click.echo(f"  - {err['loc']}: {err['msg']}", err=True)
        sys.exit(2)


@click.group()
@click.version_option()
@click.option("--verbose", "-v", is_flag=True, default=False, help="Enable debug logging")
def main(verbose: bool):
    """depstyle: style resolution for dependency graphs."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=LOG_FORMAT,
    )


@main.command()
@_style_options
def show(style_files: tuple[str, ...], env_style: str | None, no_default: bool):
    """Print the effective style configuration as JSON.

    STYLE_FILES are merged on top of the default style, in order.

    Exit codes:
      0 - Success
      2 - Style file error
    """
    config = _load_configuration(style_files, env_style, no_default)
    click.echo(config.to_json())


@main.command()
@click.argument("group_id")
@click.argument("artifact_id")
@click.option("--version", "artifact_version", default=None, help="Artifact version")
@click.option("--type", "artifact_type", default="jar", help="Artifact type")
@click.option(
    "--scope",
    "scopes",
    multiple=True,
    help="Artifact scope; the first one is the effective scope (repeatable)",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format",
)
@_style_options
def node(
    group_id: str,
    artifact_id: str,
    artifact_version: str | None,
    artifact_type: str,
    scopes: tuple[str, ...],
    output_format: str,
    style_files: tuple[str, ...],
    env_style: str | None,
    no_default: bool,
):
    """Print the attributes of an artifact node.

    GROUP_ID and ARTIFACT_ID identify the artifact. STYLE_FILES are merged on
    top of the default style, in order.
    """
    config = _load_configuration(style_files, env_style, no_default)
    attributes = config.node_attributes(
        group_id,
        artifact_id,
        artifact_version,
        artifact_type,
        "/".join(scopes) or None,
        scopes[0] if scopes else None,
    )
    click.echo(format_attributes(attributes, output_format))  # type: ignore


@main.command()
@click.argument(
    "resolution",
    type=click.Choice([r.value for r in NodeResolution]),
)
@click.option("--scope", default=None, help="Scope of the dependency's target")
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format",
)
@_style_options
def edge(
    resolution: str,
    scope: str | None,
    output_format: str,
    style_files: tuple[str, ...],
    env_style: str | None,
    no_default: bool,
):
    """Print the attributes of a dependency edge.

    RESOLUTION is how the dependency was resolved. STYLE_FILES are merged on
    top of the default style, in order.
    """
    config = _load_configuration(style_files, env_style, no_default)
    attributes = config.edge_attributes(NodeResolution(resolution), scope)
    click.echo(format_attributes(attributes, output_format))  # type: ignore


if __name__ == "__main__":
    main()
