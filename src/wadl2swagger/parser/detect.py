"""Auto-detect API description format."""

import json
from pathlib import Path

import yaml

from wadl2swagger.errors import WadlParseError
from wadl2swagger.parser.wadl import parse_wadl


def detect_format(file_path: Path) -> str:
    """Detect the format of an API description file.

    Returns: 'wadl', 'swagger', or 'unknown'.
    """
    # Try XML first
    try:
        root = parse_wadl(file_path)
        if root.tag == "application" and root.has("resources"):
            return "wadl"
        return "unknown"
    except WadlParseError:
        pass

    text = file_path.read_text(encoding="utf-8")

    # Try YAML/JSON parsing
    try:
        data = yaml.safe_load(text)
        if isinstance(data, dict) and ("swagger" in data or "openapi" in data):
            return "swagger"
    except yaml.YAMLError:
        pass

    # Try JSON specifically (for files not parseable as YAML)
    try:
        data = json.loads(text)
        if isinstance(data, dict) and ("swagger" in data or "openapi" in data):
            return "swagger"
    except (json.JSONDecodeError, ValueError):
        pass

    return "unknown"
