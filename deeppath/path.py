"""
Dotted path strings.

Converts strings like "servers[0].config.@name" into key lists understood by
the traversal engine, and renders key lists back for messages.

Syntax:
    a.b         plain keys "a" and "b"
    a[2]        plain key "a" followed by Index(2)
    a.load()    plain key "a" followed by Method("load")
    a.@host     plain key "a" followed by Attr("host")
"""

import re
from collections.abc import Iterable
from typing import Any

from .exceptions import InvalidKeyError
from .keys import Attr, Index, Key, KeyKind, Method

_INDEX_RE = re.compile(r"\[\s*(-?\d+)\s*\]")


def _parse_brackets(component: str, text: str) -> tuple[str, list[Key]]:
    """Split trailing [n] suffixes off a component."""
    start = component.find("[")
    if start == -1:
        if "]" in component:
            raise InvalidKeyError("unbalanced bracket in path", path=text)
        return component, []

    head, rest = component[:start], component[start:]
    indices: list[Key] = []
    pos = 0
    while pos < len(rest):
        match = _INDEX_RE.match(rest, pos)
        if match is None:
            raise InvalidKeyError("invalid index in path", path=text, at=rest[pos:])
        indices.append(Index(int(match.group(1))))
        pos = match.end()
    return head, indices


def _parse_name(name: str, text: str) -> Any:
    """Convert one bracket-free component to a key."""
    if name.endswith("()"):
        method = name[:-2]
        if not method:
            raise InvalidKeyError("empty method name in path", path=text)
        return Method(method)
    if name.startswith("@"):
        attr = name[1:]
        if not attr:
            raise InvalidKeyError("empty attribute name in path", path=text)
        return Attr(attr)
    return name


def parse_path(text: str) -> list[Any]:
    """
    Parse a dotted path string into a key list.

    Empty components are skipped, so "a..b" and ".a.b" equal "a.b".

    Args:
        text: Dotted path

    Returns:
        list: Plain string keys and Key descriptors

    Raises:
        InvalidKeyError: If the path is malformed
    """
    keys: list[Any] = []
    for component in text.split("."):
        if not component:
            continue
        head, indices = _parse_brackets(component, text)
        if head:
            keys.append(_parse_name(head, text))
        keys.extend(indices)
    return keys


def format_key(key: Any) -> str:
    """Render a single key."""
    if isinstance(key, Key):
        if key.kind is KeyKind.INDEX:
            return f"[{key.name}]"
        if key.kind is KeyKind.METHOD:
            return f".{key.name}()"
        if key.kind is KeyKind.ATTR:
            return f".@{key.name}"
        return f"[{key.name!r}]"
    return f".{key}"


def format_path(keys: Iterable[Any]) -> str:
    """
    Render a key list for log and error messages.

    Args:
        keys: Normalized keys

    Returns:
        str: Path text, "." for the empty path
    """
    text = "".join(format_key(key) for key in keys)
    if not text:
        return "."
    return text[1:] if text.startswith(".") else text
