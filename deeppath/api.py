"""
Public entry points.

    exists(data, "a", 0, "b")           -> bool
    get(data, "a", 0, "b")              -> value or default
    set(cell, "a", Index(0), "b", 42)   -> 42
    delete(data, "a", 0, "b")           -> removed value or default
    ref(data, "a", 0, "b")              -> Ref, resolved on every access

All of them delegate to deeppath.engine.traverse() with a different mode.
"""

from typing import Any

from .config import AccessConfig
from .engine import Mode, traverse
from .path import format_path, parse_path


def exists(
    structure: Any,
    *keys: Any,
    config: AccessConfig | None = None,
    lg: Any | None = None,
) -> bool:
    """
    Check whether a path exists, without creating anything.

    A map key or sequence slot holding None exists. An object step exists if
    the object exposes an attribute of that name.

    Args:
        structure: Root value, or a Cell holding it
        *keys: Path keys
        config: Traversal settings
        lg: Logger for step tracing

    Returns:
        bool: True if every link of the path is present

    Raises:
        TraversalError: If the path descends into a terminal scalar
    """
    return bool(traverse(structure, keys, Mode.EXISTS, config=config, lg=lg))


def get(
    structure: Any,
    *keys: Any,
    default: Any = None,
    config: AccessConfig | None = None,
    lg: Any | None = None,
) -> Any:
    """
    Read the value at a path, without creating anything.

    Args:
        structure: Root value, or a Cell holding it
        *keys: Path keys
        default: Result when any link is missing
        config: Traversal settings
        lg: Logger for step tracing

    Returns:
        The located value, or default

    Raises:
        TraversalError: If the path descends into a terminal scalar
        InvocationError: If an accessor step targets a non-object
    """
    return traverse(structure, keys, Mode.GET, default=default, config=config, lg=lg)


def set(  # noqa: A001
    structure: Any,
    *keys_and_value: Any,
    config: AccessConfig | None = None,
    lg: Any | None = None,
) -> Any:
    """
    Write a value at a path, creating missing containers.

    The last positional argument is the value. Missing intermediate
    containers become lists when the following key is an Index, dicts
    otherwise. With no keys, structure must be a Cell and is overwritten.

    Args:
        structure: Root value, or a Cell holding it
        *keys_and_value: Path keys followed by the value
        config: Traversal settings
        lg: Logger for step tracing

    Returns:
        The value written

    Raises:
        TraversalError: If the path descends into a terminal scalar
        InvocationError: If an accessor step targets a non-object or the
            root must be replaced but is not a Cell
    """
    if not keys_and_value:
        raise TypeError("set() requires a value to write")
    *keys, value = keys_and_value
    return traverse(structure, keys, Mode.SET, value=value, config=config, lg=lg)


def delete(
    structure: Any,
    *keys: Any,
    default: Any = None,
    config: AccessConfig | None = None,
    lg: Any | None = None,
) -> Any:
    """
    Remove the value at a path.

    Args:
        structure: Root value, or a Cell holding it
        *keys: Path keys
        default: Result when any link is missing
        config: Traversal settings
        lg: Logger for step tracing

    Returns:
        The removed value, or default
    """
    return traverse(
        structure, keys, Mode.DELETE, default=default, config=config, lg=lg
    )


class Ref:
    """
    Deferred accessor for one path.

    The path is resolved again on every read or write, so a held Ref sees the
    structure as it is at access time.

    Example:
        >>> r = ref(cell, "servers", Index(0), "host")
        >>> r.value = "db1"
        >>> r.value
        'db1'
    """

    def __init__(
        self,
        structure: Any,
        keys: tuple[Any, ...] = (),
        config: AccessConfig | None = None,
        lg: Any | None = None,
    ) -> None:
        self._structure = structure
        self._keys = tuple(keys)
        self._config = config
        self._lg = lg

    @classmethod
    def from_path(
        cls,
        structure: Any,
        path: str,
        config: AccessConfig | None = None,
        lg: Any | None = None,
    ) -> "Ref":
        """Create a Ref from a dotted path string, see parse_path()."""
        return cls(structure, tuple(parse_path(path)), config, lg)

    @property
    def keys(self) -> tuple[Any, ...]:
        return self._keys

    def exists(self) -> bool:
        return exists(self._structure, *self._keys, config=self._config, lg=self._lg)

    def read(self, default: Any = None) -> Any:
        return get(
            self._structure,
            *self._keys,
            default=default,
            config=self._config,
            lg=self._lg,
        )

    def write(self, value: Any) -> Any:
        return set(
            self._structure, *self._keys, value, config=self._config, lg=self._lg
        )

    def delete(self, default: Any = None) -> Any:
        return delete(
            self._structure,
            *self._keys,
            default=default,
            config=self._config,
            lg=self._lg,
        )

    @property
    def value(self) -> Any:
        """Current value at the path (None if absent)."""
        return self.read()

    @value.setter
    def value(self, value: Any) -> None:
        self.write(value)

    def __getitem__(self, key: Any) -> "Ref":
        """Return a Ref one key deeper."""
        return Ref(self._structure, self._keys + (key,), self._config, self._lg)

    def __repr__(self) -> str:
        return f"Ref({format_path(self._keys)!r})"


def ref(
    structure: Any,
    *keys: Any,
    config: AccessConfig | None = None,
    lg: Any | None = None,
) -> Ref:
    """
    Create a deferred read/write accessor for a path.

    Args:
        structure: Root value, or a Cell holding it
        *keys: Path keys
        config: Traversal settings
        lg: Logger for step tracing

    Returns:
        Ref bound to (structure, keys)
    """
    return Ref(structure, keys, config, lg)
