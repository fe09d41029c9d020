"""Exceptions raised while converting WADL documents.

Every fatal condition of a conversion is one of these. A conversion either
returns a complete Swagger document or raises; there are no partial results.
"""


class Wadl2SwaggerError(Exception):
    """Base exception for all conversion errors."""

    def __init__(self, message: str, *args):
        self.message = message
        super().__init__(message, *args)


class WadlParseError(Wadl2SwaggerError):
    """The input could not be read as an XML document.

    Attributes:
        source: The file name (or ``<string>``) that failed to parse.
        cause: The underlying parser exception.
    """

    def __init__(self, source: str, cause: Exception | None = None):
        self.source = source
        self.cause = cause
        message = f"Failed to parse WADL from '{source}'"
        if cause:
            message += f": {cause}"
        super().__init__(message)


class InvalidWadlError(Wadl2SwaggerError):
    """An attribute value in the WADL document is malformed."""

    pass


class MalformedTemplateError(Wadl2SwaggerError):
    """A path template has unbalanced braces in a regex placeholder."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"Unmatched curly brackets in path: {path}")


class UnsupportedConstructError(Wadl2SwaggerError):
    """The WADL document uses something outside the supported subset."""

    def __init__(self, construct: str, detail: str | None = None):
        self.construct = construct
        self.detail = detail
        message = f"Unsupported WADL construct: {construct}"
        if detail:
            message += f" ({detail})"
        super().__init__(message)


class MergeConflictError(Wadl2SwaggerError):
    """The same path was reached with different inherited parameters."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(
            f"Path '{path}' is declared twice with different common parameters"
        )
