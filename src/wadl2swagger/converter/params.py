"""WADL param to Swagger parameter conversion."""

import json
import logging
import re
from typing import Any

from wadl2swagger.converter.base import ExternalDocs, Parameter
from wadl2swagger.errors import InvalidWadlError, UnsupportedConstructError
from wadl2swagger.parser.base import DocNode, LinkedDoc, WadlNode

logger = logging.getLogger(__name__)

STYLE_MAP = {
    "query": "query",
    "header": "header",
    "template": "path",
    "plain": "body",
}

# keys are lowercase, lookup is case-insensitive
TYPE_MAP: dict[str, dict[str, Any]] = {
    "boolean": {"type": "boolean"},
    "string": {"type": "string"},
    "integer": {"type": "integer"},
    "double": {"type": "number"},
    "decimal": {"type": "number"},
    "int": {"type": "integer", "format": "int32"},
    "long": {"type": "integer", "format": "int64"},
    "positiveinteger": {"type": "integer", "minimum": 1},
    "anyuri": {"type": "string"},
    "date": {"type": "string"},
    "time": {"type": "string"},
    "date-time": {"type": "string"},
}

_TYPE_NAME = re.compile(r"^(?:[^:]+:)?(.+)$")


def convert_style(style: str | None) -> str:
    """Map a WADL param style to a Swagger ``in`` value."""
    if style not in STYLE_MAP:
        raise UnsupportedConstructError(f"parameter style {style!r}")
    return STYLE_MAP[style]


def convert_type(wadl_type: str | None) -> dict[str, Any]:
    """Map an XSD type name (e.g. ``xs:int``) to Swagger type keywords.

    Unknown types become ``string``. Returns ``{}`` when no type is given.
    """
    if wadl_type is None:
        return {}

    match = _TYPE_NAME.match(wadl_type)
    if not match:
        raise InvalidWadlError(f"Invalid parameter type: {wadl_type!r}")

    type_name = match.group(1).lower()
    if type_name not in TYPE_MAP:
        logger.warning("Unsupported type %r, falling back to string", wadl_type)
        return {"type": "string"}
    return dict(TYPE_MAP[type_name])


def parse_json_value(value: str, what: str) -> Any:
    try:
        return json.loads(value)
    except json.JSONDecodeError as e:
        raise InvalidWadlError(f"Invalid {what} value {value!r}: {e}") from e


def convert_default(wadl_default: str, swagger_type: str | None) -> Any:
    """Parse a default value; strings stay literal, anything else is JSON."""
    if swagger_type == "string":
        return wadl_default
    return parse_json_value(wadl_default, "default")


def convert_doc(docs: list[DocNode]) -> dict[str, Any]:
    """Collect ``description`` and ``externalDocs`` from doc nodes.

    Text of every doc is trimmed and joined with newlines, in document order.
    A doc with a ``url`` attribute (Apigee extension) becomes ``externalDocs``.
    """
    result: dict[str, Any] = {}
    texts = []
    for doc in docs:
        if isinstance(doc, LinkedDoc):
            if doc.url:
                result["externalDocs"] = ExternalDocs(url=doc.url)
            if doc.text is None:
                continue
        text = doc.text.strip()
        if text:
            texts.append(text)

    if texts:
        result["description"] = "\n".join(texts)
    return result


def _option_value(option: WadlNode, param_name: str) -> str:
    value = option.attr("value")
    if value is None:
        raise InvalidWadlError(f"<option> without value in parameter {param_name!r}")
    return value


def convert_parameter(wadl_param: WadlNode) -> Parameter:
    """Convert a WADL ``<param>`` into a Swagger parameter."""
    name = wadl_param.attr("name")
    if not name:
        raise InvalidWadlError("Parameter without a name")

    location = convert_style(wadl_param.attr("style"))
    if location == "path":
        required = True
    else:
        required = bool(parse_json_value(wadl_param.attr("required", "false"), "required"))

    fields: dict[str, Any] = {"type": "string"}
    fields.update(convert_type(wadl_param.attr("type")))

    wadl_default = wadl_param.attr("default")
    if wadl_default is not None:
        fields["default"] = convert_default(wadl_default, fields["type"])

    doc = convert_doc(wadl_param.docs())
    # externalDocs is not allowed on Swagger parameters
    if doc.pop("externalDocs", None):
        logger.debug("Dropping externalDocs of parameter %r", name)
    fields.update(doc)

    if wadl_param.has("option"):
        fields["enum"] = [_option_value(option, name) for option in wadl_param.all("option")]

    return Parameter(
        name=name,
        in_=location,
        required=required,
        **fields,
    )
