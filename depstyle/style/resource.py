"""Sources of style configuration data."""

import io
from abc import ABC, abstractmethod
from importlib import resources
from pathlib import Path
from typing import BinaryIO

DEFAULT_STYLE_PACKAGE = "depstyle.resources"
DEFAULT_STYLE_NAME = "default-style.yaml"


class StyleResource(ABC):
    """A readable style configuration resource.

    Only a byte stream is required; whether the data comes from a file, a
    package or memory is up to the implementation. ``str()`` identifies the
    resource in error messages.
    """

    @abstractmethod
    def open_stream(self) -> BinaryIO:
        """Open the resource for reading.

        Raises:
            OSError: If the resource cannot be opened.
        """


class FileStyleResource(StyleResource):
    """A style configuration file."""

    def __init__(self, path: str | Path):
        self.path = Path(path)

    def open_stream(self) -> BinaryIO:
        return open(self.path, "rb")

    def __str__(self) -> str:
        return f"file {self.path}"


class PackageStyleResource(StyleResource):
    """A style configuration shipped inside a Python package."""

    def __init__(self, package: str, name: str):
        self.package = package
        self.name = name

    def open_stream(self) -> BinaryIO:
        return resources.files(self.package).joinpath(self.name).open("rb")

    def __str__(self) -> str:
        return f"package resource {self.package}/{self.name}"


class StringStyleResource(StyleResource):
    """An in-memory style configuration."""

    def __init__(self, text: str, name: str = "<string>"):
        self.text = text
        self.name = name

    def open_stream(self) -> BinaryIO:
        return io.BytesIO(self.text.encode("utf-8"))

    def __str__(self) -> str:
        return self.name


def default_style_resource() -> StyleResource:
    """Get the bundled default style configuration."""
    return PackageStyleResource(DEFAULT_STYLE_PACKAGE, DEFAULT_STYLE_NAME)
