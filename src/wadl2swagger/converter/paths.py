"""Path template helpers.

Jersey extends WADL path templates with regex placeholders such as
``{id: [0-9]+}`` (see https://docs.oracle.com/cd/E19776-01/820-4867/6nga7f5nc/index.html).
Swagger only understands ``{id}``, so the regex part has to be cut out. The
tricky part is finding where the regex ends, because it may contain braces of
its own.
"""

import re

from wadl2swagger.errors import MalformedTemplateError

_PLACEHOLDER_WITH_REGEX = re.compile(r"\{([^{}:]+):")
_SLASHES = re.compile(r"/{2,}")


def join_path(left: str, right: str) -> str:
    """Join two path segments with exactly one slash between them."""
    return _SLASHES.sub("/", f"{left}/{right}")


def normalize_path(path: str) -> str:
    """Turn ``{name:regex}`` placeholders into plain ``{name}`` ones.

    Plain placeholders are left untouched, so normalizing twice is a no-op.
    Raises MalformedTemplateError if a regex has unbalanced brackets.
    """
    result = path
    match = _PLACEHOLDER_WITH_REGEX.search(result)
    while match:
        colon = match.end() - 1
        close = _find_regex_end(result, colon + 1)
        if close == -1 or not _groups_balanced(result[colon + 1 : close]):
            raise MalformedTemplateError(path)
        # the string changed, so search again from the start
        result = result[:colon] + result[close:]
        match = _PLACEHOLDER_WITH_REGEX.search(result)
    return result


def _is_escaped(text: str, pos: int) -> bool:
    """True if the character at ``pos`` follows an odd number of backslashes."""
    slashes = 0
    while pos - 1 - slashes >= 0 and text[pos - 1 - slashes] == "\\":
        slashes += 1
    return slashes % 2 == 1


def _find_regex_end(path: str, start: int) -> int:
    """Return the index of the brace closing the placeholder, or -1.

    ``start`` is the first character of the regex; the placeholder's own
    opening brace is already counted.
    """
    depth = 1
    for pos in range(start, len(path)):
        char = path[pos]
        if char not in "{}" or _is_escaped(path, pos):
            continue
        if char == "{":
            depth += 1
        else:
            depth -= 1
            if depth == 0:
                return pos
    return -1


def _groups_balanced(regex: str) -> bool:
    """False if the regex leaves a group or a character class open."""
    depth = 0
    in_class = False
    for pos, char in enumerate(regex):
        if _is_escaped(regex, pos):
            continue
        if in_class:
            if char == "]":
                in_class = False
        elif char == "[":
            in_class = True
        elif char == "(":
            depth += 1
        elif char == ")":
            depth -= 1
            if depth < 0:
                return False
    return depth == 0 and not in_class
