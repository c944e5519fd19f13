"""
Path keys and descriptor normalization.

A path step is either a plain key, interpreted according to the runtime kind of
the container it is applied to, or a descriptor that forces one interpretation:

    MapKey("foo")   container["foo"], even on an object
    Index(1)        container[1], vivifies a list on write
    Method("foo")   container.foo() / container.foo(value)
    Attr("foo")     container.foo / container.foo = value

Descriptors may also be written as single-field dicts, e.g. {"index": 1}.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any

from .exceptions import InvalidKeyError


class KeyKind(Enum):
    """Interpretation forced by a descriptor key."""

    MAP = "key"
    INDEX = "index"
    METHOD = "method"
    ATTR = "attr"


# Precedence when strict_keys is off and several fields are present
_FIELDS: dict[str, KeyKind] = {kind.value: kind for kind in KeyKind}


@dataclass(frozen=True)
class Key:
    """
    Descriptor key forcing how a single path step is interpreted.

    Attributes:
        kind: Forced interpretation
        name: Map key, sequence index, or accessor name
    """

    kind: KeyKind
    name: Any

    def __post_init__(self) -> None:
        if self.kind is KeyKind.INDEX:
            if isinstance(self.name, bool) or not isinstance(self.name, int):
                raise InvalidKeyError(
                    "sequence index must be an integer", index=repr(self.name)
                )
        elif self.kind in (KeyKind.METHOD, KeyKind.ATTR):
            if not isinstance(self.name, str) or not self.name:
                raise InvalidKeyError(
                    "accessor name must be a non-empty string",
                    kind=self.kind.value,
                    name=repr(self.name),
                )

    def __repr__(self) -> str:
        return f"{_CONSTRUCTORS[self.kind]}({self.name!r})"


_CONSTRUCTORS = {
    KeyKind.MAP: "MapKey",
    KeyKind.INDEX: "Index",
    KeyKind.METHOD: "Method",
    KeyKind.ATTR: "Attr",
}


def MapKey(key: Any) -> Key:
    """Force a keyed lookup/assignment."""
    return Key(KeyKind.MAP, key)


def Index(index: int) -> Key:
    """Force an indexed lookup/assignment."""
    return Key(KeyKind.INDEX, index)


def Method(name: str) -> Key:
    """Force an accessor method call."""
    return Key(KeyKind.METHOD, name)


def Attr(name: str) -> Key:
    """Force an assignable attribute access."""
    return Key(KeyKind.ATTR, name)


def normalize_key(key: Any, strict: bool = True) -> Any:
    """
    Normalize a path step to a plain key or a Key descriptor.

    Args:
        key: Plain key, Key instance, or single-field descriptor dict
        strict: Reject descriptor dicts with unknown or multiple fields

    Returns:
        The plain key unchanged, or a Key

    Raises:
        InvalidKeyError: If a descriptor dict cannot be interpreted
    """
    if not isinstance(key, dict):
        return key

    recognized = [field for field in _FIELDS if field in key]
    if strict:
        unknown = sorted(str(field) for field in key if field not in _FIELDS)
        if unknown:
            raise InvalidKeyError(
                "unrecognized descriptor field", fields=",".join(unknown)
            )
        if len(recognized) > 1:
            raise InvalidKeyError(
                "descriptor must have exactly one field",
                fields=",".join(recognized),
            )
    if not recognized:
        raise InvalidKeyError(
            "descriptor has no recognized field",
            expected="|".join(_FIELDS),
        )

    field = recognized[0]
    return Key(_FIELDS[field], key[field])
