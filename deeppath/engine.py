"""
Traversal engine.

A single routine walks a key list against a root value. At every step the
current value is classified once, the key (or its descriptor) selects how it
is accessed, and the mode decides what happens with missing links:

    EXISTS, GET, DELETE   stop and report "absent", never mutate
    SET                   create the missing container and link it in

The entry points in deeppath.api are thin wrappers around traverse().
"""

import copy
from collections.abc import MutableMapping, Sequence
from enum import Enum
from typing import Any

from .cell import Cell
from .config import AccessConfig
from .exceptions import InvalidKeyError, InvocationError, TraversalError
from .keys import Key, KeyKind, normalize_key
from .kinds import ContainerKind, classify, is_writable
from .path import format_key, format_path

_MISSING = object()


class Mode(Enum):
    """Traversal mode selected by the entry points."""

    EXISTS = "exists"
    GET = "get"
    SET = "set"
    DELETE = "delete"


class Access(Enum):
    """How a key is applied to the current value."""

    ITEM = "item"  # mapping key
    INDEX = "index"  # sequence index
    FIELD = "field"  # object instance __dict__
    ACCESSOR = "accessor"  # default object dispatch
    METHOD = "method"
    ATTR = "attr"


_FORCED_OBJECT = {KeyKind.METHOD: Access.METHOD, KeyKind.ATTR: Access.ATTR}


def _as_index(name: Any) -> int | None:
    """Interpret a key as a sequence index, or None if it cannot be one."""
    if isinstance(name, bool):
        return None
    if isinstance(name, int):
        return name
    if isinstance(name, str) and name.isascii() and name.isdigit():
        return int(name)
    return None


def _in_range(seq: Sequence, index: int | None) -> bool:
    return index is not None and -len(seq) <= index < len(seq)


class Walk:
    """
    One traversal of a key list in a given mode.

    Holds no state beyond the call; every public entry point creates a new
    Walk and runs it once.
    """

    def __init__(
        self,
        keys: Sequence[Any],
        mode: Mode,
        config: AccessConfig | None = None,
        lg: Any | None = None,
    ) -> None:
        self.config = config or AccessConfig()
        self.keys = [normalize_key(key, self.config.strict_keys) for key in keys]
        self.mode = mode
        self._lg = lg

    # -------------------------------------------------------------------------
    # Diagnostics
    # -------------------------------------------------------------------------

    def _context(self, depth: int, current: Any) -> dict[str, Any]:
        context = {"path": format_path(self.keys[: depth + 1])}
        if current is not None:
            context["type"] = type(current).__name__
        return context

    def _trace_step(self, depth: int, key: Any, kind: ContainerKind) -> None:
        if self._lg:
            self._lg.trace2(
                "step",
                extra={"depth": depth, "key": format_key(key), "kind": kind.value},
            )

    def _trace_vivified(self, depth: int, container: Any) -> None:
        if self._lg:
            self._lg.trace(
                "vivified",
                extra={
                    "path": format_path(self.keys[: depth + 1]),
                    "container": type(container).__name__,
                },
            )

    # -------------------------------------------------------------------------
    # Dispatch
    # -------------------------------------------------------------------------

    def _exposed(self, name: Any) -> bool:
        """Check whether an object attribute name may be used as an accessor."""
        if not isinstance(name, str):
            return False
        return self.config.private_names or not name.startswith("_")

    def _select(
        self, current: Any, kind: ContainerKind, key: Any, depth: int
    ) -> tuple[Access, Any]:
        """
        Choose how a key applies to a defined value.

        Descriptor keys override runtime classification. Raises
        InvocationError for accessor descriptors on non-objects and
        TraversalError for anything that cannot be descended into.
        """
        if isinstance(key, Key):
            if key.kind in _FORCED_OBJECT:
                if kind is not ContainerKind.OBJECT:
                    raise InvocationError(
                        "cannot invoke accessor: target is not an addressable object",
                        **self._context(depth, current),
                    )
                return _FORCED_OBJECT[key.kind], key.name
            if kind is ContainerKind.SCALAR:
                raise TraversalError(
                    "cannot traverse further: value at this point is a terminal scalar",
                    **self._context(depth, current),
                )
            if key.kind is KeyKind.INDEX:
                if kind is not ContainerKind.SEQUENCE:
                    raise TraversalError(
                        "cannot traverse further: value at this point is not a sequence",
                        **self._context(depth, current),
                    )
                return Access.INDEX, key.name
            # KeyKind.MAP
            if kind is ContainerKind.MAP:
                return Access.ITEM, key.name
            if kind is ContainerKind.OBJECT and hasattr(current, "__dict__"):
                return Access.FIELD, key.name
            raise TraversalError(
                "cannot traverse further: value at this point is not a map",
                **self._context(depth, current),
            )

        if kind is ContainerKind.MAP:
            return Access.ITEM, key
        if kind is ContainerKind.SEQUENCE:
            return Access.INDEX, key
        if kind is ContainerKind.OBJECT:
            return Access.ACCESSOR, key
        raise TraversalError(
            "cannot traverse further: value at this point is a terminal scalar",
            **self._context(depth, current),
        )

    # -------------------------------------------------------------------------
    # Terminal operations
    # -------------------------------------------------------------------------

    def _lookup(self, current: Any, access: Access, name: Any, depth: int) -> Any:
        """Read one step without mutating anything; _MISSING if absent."""
        if access is Access.ITEM:
            try:
                return current[name] if name in current else _MISSING
            except TypeError as e:
                raise InvalidKeyError(
                    "map key is not hashable", **self._context(depth, current)
                ) from e
        if access is Access.INDEX:
            index = _as_index(name)
            return current[index] if _in_range(current, index) else _MISSING
        if access is Access.FIELD:
            return vars(current).get(name, _MISSING)

        if not self._exposed(name):
            return _MISSING
        attr = getattr(current, name, _MISSING)
        if attr is _MISSING or access is Access.ATTR:
            return attr
        if callable(attr):
            return attr()
        if access is Access.METHOD:
            raise InvocationError(
                "cannot invoke accessor: attribute is not callable",
                **self._context(depth, current),
            )
        return attr

    def _contains(self, current: Any, access: Access, name: Any, depth: int) -> bool:
        """Check key presence, including keys that hold None."""
        if access is Access.ITEM:
            try:
                return name in current
            except TypeError as e:
                raise InvalidKeyError(
                    "map key is not hashable", **self._context(depth, current)
                ) from e
        if access is Access.INDEX:
            return _in_range(current, _as_index(name))
        if access is Access.FIELD:
            return name in vars(current)
        if not self._exposed(name):
            return False
        attr = getattr(current, name, _MISSING)
        if access is Access.METHOD:
            return callable(attr)
        return attr is not _MISSING

    def _check_writable(
        self, current: Any, kind: ContainerKind, access: Access, depth: int
    ) -> None:
        if access is Access.FIELD:
            writable = isinstance(vars(current), MutableMapping)
        else:
            writable = is_writable(current, kind)
        if not writable:
            raise InvocationError(
                "cannot invoke accessor: container is read-only",
                **self._context(depth, current),
            )

    def _assign_index(self, current: Any, name: Any, value: Any, depth: int) -> None:
        index = _as_index(name)
        if index is None:
            raise InvalidKeyError(
                "sequence index must be an integer", **self._context(depth, current)
            )
        size = len(current)
        if index < -size:
            raise InvalidKeyError(
                "sequence index out of range", **self._context(depth, current)
            )
        if index < size:
            current[index] = value
            return
        # Padded slots never share one fill object
        fill = self.config.sequence_fill
        current.extend(copy.copy(fill) for _ in range(index - size))
        current.append(value)

    def _set_attr(self, current: Any, name: Any, value: Any, depth: int) -> None:
        try:
            setattr(current, name, value)
        except AttributeError as e:
            raise InvocationError(
                "cannot invoke accessor: attribute is not assignable",
                **self._context(depth, current),
            ) from e

    def _assign(
        self,
        current: Any,
        kind: ContainerKind,
        access: Access,
        name: Any,
        value: Any,
        depth: int,
    ) -> None:
        """Write one step; object accessors perform the write themselves."""
        if access in (Access.ITEM, Access.INDEX, Access.FIELD):
            self._check_writable(current, kind, access, depth)
            if access is Access.INDEX:
                self._assign_index(current, name, value, depth)
                return
            target = vars(current) if access is Access.FIELD else current
            try:
                target[name] = value
            except TypeError as e:
                raise InvalidKeyError(
                    "map key is not hashable", **self._context(depth, current)
                ) from e
            return

        if not self._exposed(name):
            raise InvocationError(
                "cannot invoke accessor: name is not a public accessor",
                **self._context(depth, current),
            )
        if access is Access.ATTR:
            self._set_attr(current, name, value, depth)
            return

        attr = getattr(current, name, _MISSING)
        if attr is _MISSING:
            raise InvocationError(
                "cannot invoke accessor: object has no such accessor",
                **self._context(depth, current),
            )
        if callable(attr):
            attr(value)
        elif access is Access.METHOD:
            raise InvocationError(
                "cannot invoke accessor: attribute is not callable",
                **self._context(depth, current),
            )
        else:
            self._set_attr(current, name, value, depth)

    def _remove(
        self,
        current: Any,
        kind: ContainerKind,
        access: Access,
        name: Any,
        default: Any,
        depth: int,
    ) -> Any:
        """Delete one step and return the removed value."""
        if access is Access.METHOD:
            raise InvocationError(
                "cannot invoke accessor: accessors cannot be deleted",
                **self._context(depth, current),
            )
        if not self._contains(current, access, name, depth):
            return default

        if access in (Access.ITEM, Access.INDEX, Access.FIELD):
            self._check_writable(current, kind, access, depth)
            if access is Access.INDEX:
                return current.pop(_as_index(name))
            target = vars(current) if access is Access.FIELD else current
            return target.pop(name)

        old = getattr(current, name)
        if access is Access.ACCESSOR and callable(old):
            raise InvocationError(
                "cannot invoke accessor: accessors cannot be deleted",
                **self._context(depth, current),
            )
        try:
            delattr(current, name)
        except AttributeError as e:
            raise InvocationError(
                "cannot invoke accessor: attribute is not deletable",
                **self._context(depth, current),
            ) from e
        return old

    # -------------------------------------------------------------------------
    # Vivification
    # -------------------------------------------------------------------------

    @staticmethod
    def _new_container(key: Any) -> list | dict:
        if isinstance(key, Key) and key.kind is KeyKind.INDEX:
            return []
        return {}

    def _vivify_root(self, root: Any, key: Any) -> Any:
        """Create the root container inside its Cell."""
        if isinstance(key, Key) and key.kind in _FORCED_OBJECT:
            raise InvocationError(
                "cannot invoke accessor: target is not an addressable object",
                **self._context(0, None),
            )
        if not isinstance(root, Cell):
            raise InvocationError(
                "cannot invoke accessor: root is not an assignable Cell",
                **self._context(0, None),
            )
        root.value = self._new_container(key)
        self._trace_vivified(-1, root.value)
        return root.value

    def _vivify(
        self,
        current: Any,
        kind: ContainerKind,
        access: Access,
        name: Any,
        depth: int,
    ) -> Any:
        """Create the container for the next key and link it at this step."""
        if access in (Access.METHOD, Access.ACCESSOR):
            attr = getattr(current, name, _MISSING) if self._exposed(name) else _MISSING
            if attr is _MISSING and access is Access.METHOD:
                raise InvocationError(
                    "cannot invoke accessor: object has no such accessor",
                    **self._context(depth, current),
                )
            if callable(attr):
                # Accessor results are not fed back into the object
                raise InvocationError(
                    "cannot invoke accessor: accessor returned None, "
                    "cannot write through it",
                    **self._context(depth, current),
                )
        child = self._new_container(self.keys[depth + 1])
        self._assign(current, kind, access, name, child, depth)
        self._trace_vivified(depth, child)
        return child

    # -------------------------------------------------------------------------
    # Walk
    # -------------------------------------------------------------------------

    def _absent(self, default: Any) -> Any:
        return False if self.mode is Mode.EXISTS else default

    def _empty_path(self, root: Any, current: Any, value: Any, default: Any) -> Any:
        if self.mode is Mode.EXISTS:
            return True
        if self.mode is Mode.GET:
            return current
        if not isinstance(root, Cell):
            raise InvocationError(
                "cannot invoke accessor: root is not an assignable Cell",
                type=type(root).__name__,
            )
        if self.mode is Mode.SET:
            root.value = value
            return value
        old, root.value = root.value, None
        return old

    def _terminal(
        self,
        current: Any,
        kind: ContainerKind,
        access: Access,
        name: Any,
        depth: int,
        value: Any,
        default: Any,
    ) -> Any:
        if self.mode is Mode.EXISTS:
            return self._contains(current, access, name, depth)
        if self.mode is Mode.GET:
            found = self._lookup(current, access, name, depth)
            return default if found is _MISSING else found
        if self.mode is Mode.SET:
            self._assign(current, kind, access, name, value, depth)
            return value
        return self._remove(current, kind, access, name, default, depth)

    def run(self, root: Any, value: Any = None, default: Any = None) -> Any:
        """
        Walk the key list against root.

        Args:
            root: Root value, or a Cell holding it
            value: Value to write (SET mode)
            default: Result for a missing link (GET and DELETE modes)

        Returns:
            bool for EXISTS, the located value or default for GET, value for
            SET, the removed value or default for DELETE
        """
        current = root.value if isinstance(root, Cell) else root
        if not self.keys:
            return self._empty_path(root, current, value, default)

        last = len(self.keys) - 1
        for depth, key in enumerate(self.keys):
            kind = classify(current)
            self._trace_step(depth, key, kind)

            if kind is ContainerKind.ABSENT:
                # Deeper absent links are vivified one step ahead, so only
                # the root can be absent in SET mode
                if self.mode is not Mode.SET:
                    return self._absent(default)
                current = self._vivify_root(root, key)
                kind = classify(current)

            access, name = self._select(current, kind, key, depth)
            if depth == last:
                return self._terminal(
                    current, kind, access, name, depth, value, default
                )

            child = self._lookup(current, access, name, depth)
            if child is _MISSING or child is None:
                if self.mode is Mode.SET:
                    child = self._vivify(current, kind, access, name, depth)
                elif child is _MISSING:
                    return self._absent(default)
            current = child

        raise AssertionError("unreachable")  # pragma: no cover


def traverse(
    root: Any,
    keys: Sequence[Any],
    mode: Mode,
    value: Any = None,
    default: Any = None,
    config: AccessConfig | None = None,
    lg: Any | None = None,
) -> Any:
    """
    Run one traversal.

    Args:
        root: Root value, or a Cell holding it
        keys: Plain keys, Key descriptors or descriptor dicts
        mode: Traversal mode
        value: Value to write (SET mode)
        default: Result for a missing link (GET and DELETE modes)
        config: Traversal settings (default AccessConfig())
        lg: Logger with trace/trace2 methods (optional)

    Returns:
        Mode-dependent result, see Walk.run()
    """
    walk = Walk(keys, mode, config, lg)
    result = walk.run(root, value, default)
    if lg:
        lg.trace(
            mode.value,
            extra={"path": format_path(walk.keys), "result": type(result).__name__},
        )
    return result
