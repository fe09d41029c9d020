"""JSON-Schema construction from WADL representations.

Jersey describes JSON bodies as a flat list of ``plain`` params whose ``path``
attribute locates the value inside the document, e.g. ``order.items[n].sku``
(``[n]`` marks an array). Each param is expanded into a nested schema and the
results are deep-merged into one object schema.
"""

import copy
import logging
import re
from typing import Any

from wadl2swagger.converter.params import convert_type
from wadl2swagger.errors import InvalidWadlError
from wadl2swagger.parser.base import WadlNode

logger = logging.getLogger(__name__)

JSON_MEDIA_TYPE = "application/json"

_SEGMENT = re.compile(r"^([^.\[\]]+)(\[n\])?$")


def _parse_path(path: str) -> list[tuple[str, bool]]:
    """Split ``a.b[n].c`` into ``[("a", False), ("b", True), ("c", False)]``."""
    segments = []
    for part in path.split("."):
        match = _SEGMENT.match(part)
        if not match:
            raise InvalidWadlError(f"Malformed parameter path: {path!r}")
        segments.append((match.group(1), match.group(2) is not None))
    return segments


def build_schema(wadl_param: WadlNode) -> dict[str, Any]:
    """Build an object schema holding the single value described by a param.

    The param's ``path`` (or its ``name`` when there is no path) gives the
    location; its ``type`` gives the leaf schema.
    """
    path = wadl_param.attr("path") or wadl_param.attr("name")
    if not path:
        raise InvalidWadlError("Representation parameter without path or name")

    schema = convert_type(wadl_param.attr("type"))
    for name, is_array in reversed(_parse_path(path)):
        if is_array:
            schema = {"type": "array", "items": schema}
        schema = {"type": "object", "properties": {name: schema}}
    return schema


def merge_schemas(base: dict[str, Any], update: dict[str, Any]) -> dict[str, Any]:
    """Deep-merge two schema fragments into a new one.

    Nested dicts are merged key by key, so sibling properties survive at every
    depth; other values from ``update`` replace those in ``base``.
    """
    merged = dict(base)
    for key, value in update.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = merge_schemas(merged[key], value)
        else:
            merged[key] = copy.deepcopy(value)
    return merged


def convert_representations(wadl_representations: list[WadlNode]) -> dict[str, dict]:
    """Return ``{media_type: schema}`` for the representations we understand.

    Only ``application/json`` is supported; other media types are skipped.
    Representations without ``plain`` params produce no schema.
    """
    schema: dict[str, Any] = {}
    for representation in wadl_representations:
        media_type = representation.attr("mediaType")
        if media_type != JSON_MEDIA_TYPE:
            logger.debug("Ignoring representation with media type %r", media_type)
            continue

        for param in representation.all("param"):
            if param.attr("style") == "plain":
                schema = merge_schemas(schema, build_schema(param))

    if not schema:
        return {}
    return {JSON_MEDIA_TYPE: schema}
