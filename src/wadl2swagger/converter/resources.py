"""WADL resource tree to Swagger document conversion.

Resources are walked recursively. Each level converts its own methods,
recurses into its sub-resources and folds their paths into its own map,
prefixing them with its path segment and its common (inherited) parameters.
Recursion depth equals the resource nesting depth and is bounded only by the
interpreter's recursion limit.
"""

import logging
from pathlib import Path
from urllib.parse import urlparse

from wadl2swagger.converter.base import HTTP_METHODS, DEFAULT_TITLE, Info, PathItem, Swagger
from wadl2swagger.converter.operations import convert_method
from wadl2swagger.converter.params import convert_parameter
from wadl2swagger.converter.paths import join_path, normalize_path
from wadl2swagger.errors import MergeConflictError, UnsupportedConstructError
from wadl2swagger.parser.base import LinkedDoc, WadlNode
from wadl2swagger.parser.wadl import parse_wadl

logger = logging.getLogger(__name__)


def convert_resource(wadl_resource: WadlNode) -> dict[str, PathItem]:
    """Convert a ``<resource>`` and its sub-resources into Swagger paths."""
    # resource types would need their methods and params inlined
    if wadl_resource.has("resource_type") or wadl_resource.attr("type"):
        raise UnsupportedConstructError("resource_type", wadl_resource.attr("path"))

    resource_path = join_path("/", normalize_path(wadl_resource.attr("path", "")))
    logger.debug("Converting resource %s", resource_path)

    paths: dict[str, PathItem] = {}
    common_parameters = [convert_parameter(param) for param in wadl_resource.all("param")]

    item = PathItem()
    for wadl_method in wadl_resource.all("method"):
        setattr(item, _http_method(wadl_method), convert_method(wadl_method))

    if item.operations():
        item.parameters = list(common_parameters)
        paths[resource_path] = item

    for wadl_sub_resource in wadl_resource.all("resource"):
        sub_paths = {}
        for sub_path, sub_item in convert_resource(wadl_sub_resource).items():
            sub_item.parameters = common_parameters + sub_item.parameters
            sub_paths[join_path(resource_path, normalize_path(sub_path))] = sub_item
        merge_paths(paths, sub_paths)

    return paths


def _http_method(wadl_method: WadlNode) -> str:
    if wadl_method.attr("href"):
        raise UnsupportedConstructError("method reference", wadl_method.attr("href"))

    name = (wadl_method.attr("name") or "").lower()
    if name not in HTTP_METHODS:
        raise UnsupportedConstructError(f"HTTP method {wadl_method.attr('name')!r}")
    return name


def merge_paths(paths: dict[str, PathItem], paths_to_add: dict[str, PathItem]) -> None:
    """Merge ``paths_to_add`` into ``paths`` in place.

    A path present in both must carry the same common parameters; its
    operations are then combined, the incoming ones replacing existing ones.
    """
    for path, item in paths_to_add.items():
        existing = paths.get(path)
        if existing is None:
            paths[path] = item
            continue

        if existing.parameters != item.parameters:
            raise MergeConflictError(path)
        existing.update(item)


def _capitalize(word: str) -> str:
    return word[:1].upper() + word[1:]


def apply_schema_titles(paths: dict[str, PathItem]) -> None:
    """Give untitled body and response schemas a name derived from the path.

    ``/widgets/{id}`` with ``post`` gives ``WidgetsIdPostRequest`` for the
    body and ``WidgetsIdPost201Response`` for a 201 response.
    """
    for path, item in paths.items():
        plain_path = path.replace("{", "").replace("}", "")
        prefix = "".join(_capitalize(part) for part in plain_path.split("/") if part)

        for method, operation in item.operations():
            name = prefix + _capitalize(method)
            for parameter in operation.parameters or []:
                if parameter.in_ == "body" and parameter.schema_ and not parameter.schema_.get("title"):
                    parameter.schema_["title"] = f"{name}Request"
            for status, response in operation.responses.items():
                if response.schema_ and not response.schema_.get("title"):
                    response.schema_["title"] = f"{name}{status}Response"


def _base_url_fields(base: str | None) -> dict:
    if not base:
        return {}
    url = urlparse(base)
    # drop user info, keep the port
    host = url.netloc.rpartition("@")[2]
    return {
        "host": host or None,
        "basePath": url.path or None,
        "schemes": [url.scheme] if url.scheme else None,
    }


def _title(application: WadlNode) -> str:
    docs = application.docs()
    if docs and isinstance(docs[0], LinkedDoc) and docs[0].title:
        return docs[0].title
    return DEFAULT_TITLE


def convert_to_swagger(application: WadlNode) -> Swagger:
    """Convert a parsed WADL ``<application>`` into a Swagger document."""
    if application.tag != "application":
        raise UnsupportedConstructError(f"root element <{application.tag}>")

    root = application.one("resources")
    if root is None:
        raise UnsupportedConstructError("application without <resources>")

    swagger = Swagger(info=Info(title=_title(application)), **_base_url_fields(root.attr("base")))

    for wadl_resource in root.all("resource"):
        merge_paths(swagger.paths, convert_resource(wadl_resource))

    apply_schema_titles(swagger.paths)
    return swagger


def convert_wadl(file_path: Path) -> dict:
    """Parse a WADL file and return the Swagger 2.0 document as a dict."""
    return convert_to_swagger(parse_wadl(file_path)).to_dict()
