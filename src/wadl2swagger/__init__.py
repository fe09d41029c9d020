"""wadl2swagger - convert WADL API descriptions into Swagger 2.0 documents."""

from wadl2swagger.converter.resources import convert_to_swagger, convert_wadl
from wadl2swagger.errors import (
    InvalidWadlError,
    MalformedTemplateError,
    MergeConflictError,
    UnsupportedConstructError,
    Wadl2SwaggerError,
    WadlParseError,
)
from wadl2swagger.parser.wadl import parse_wadl, parse_wadl_string

__all__ = [
    "convert_wadl",
    "convert_to_swagger",
    "parse_wadl",
    "parse_wadl_string",
    "Wadl2SwaggerError",
    "WadlParseError",
    "InvalidWadlError",
    "MalformedTemplateError",
    "UnsupportedConstructError",
    "MergeConflictError",
]

__version__ = "0.1.0"
