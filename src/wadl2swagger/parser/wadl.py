"""WADL XML parser.

Reads a WADL document with xmltodict and converts it into WadlNode trees.
Namespaces are not resolved: prefixes are simply stripped from tag and
attribute names, which is enough for the WADL vocabulary.
"""

from pathlib import Path
from xml.parsers.expat import ExpatError

import xmltodict

from wadl2swagger.errors import WadlParseError
from wadl2swagger.parser.base import WadlNode

WADL_VERSION = "1.0"


def parse_wadl(file_path: Path) -> WadlNode:
    """Parse a WADL file into its root WadlNode."""
    data = file_path.read_bytes()
    return parse_wadl_string(data, source=str(file_path))


def parse_wadl_string(text: str | bytes, source: str = "<string>") -> WadlNode:
    """Parse WADL text into its root WadlNode."""
    try:
        doc = xmltodict.parse(text, force_list=True, force_cdata=True)
    except ExpatError as e:
        raise WadlParseError(source, e) from e

    if not doc:
        raise WadlParseError(source)

    tag, values = next(iter(doc.items()))
    return _to_node(tag, values[0] if isinstance(values, list) else values)


def _strip_prefix(name: str) -> str:
    return name.rpartition(":")[2]


def _to_node(tag: str, value: dict | None) -> WadlNode:
    attributes: dict[str, str] = {}
    children: dict[str, list[WadlNode]] = {}
    text = None

    for key, item in (value or {}).items():
        if key.startswith("@"):
            name = key[1:]
            # namespace declarations
            if name == "xmlns" or name.startswith("xmlns:"):
                continue
            attributes[_strip_prefix(name)] = item
        elif key == "#text":
            text = "".join(item) if isinstance(item, list) else item
        else:
            child_tag = _strip_prefix(key)
            items = item if isinstance(item, list) else [item]
            children.setdefault(child_tag, []).extend(
                _to_node(child_tag, child) for child in items
            )

    return WadlNode(
        tag=_strip_prefix(tag),
        attributes=attributes,
        text=text,
        children=children,
    )
