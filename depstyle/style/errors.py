"""Style configuration exceptions."""


class StyleLoadError(Exception):
    """Raised when a style resource cannot be read or parsed."""

    def __init__(
        self,
        message: str,
        resource: str | None = None,
        line: int | None = None,
        column: int | None = None,
    ):
        self.resource = resource
        self.line = line
        self.column = column
        super().__init__(message)


class StyleValidationError(Exception):
    """Raised when a parsed style resource does not fit the schema."""

    def __init__(
        self,
        message: str,
        resource: str | None = None,
        errors: list[dict] | None = None,
    ):
        self.resource = resource
        self.errors = errors or []
        super().__init__(message)
