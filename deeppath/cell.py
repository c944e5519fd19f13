"""
Assignable root slot.

Python has no references to variables, so a location that an entry point may
overwrite (zero-key writes, vivifying an absent root) is passed as a Cell.
"""

from typing import Any


class Cell:
    """
    One-slot mutable box used as an assignable root.

    Example:
        >>> cell = Cell()
        >>> deeppath.set(cell, "foo", 42)
        42
        >>> cell.value
        {'foo': 42}
    """

    __slots__ = ("value",)

    def __init__(self, value: Any = None) -> None:
        self.value = value

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Cell):
            return bool(self.value == other.value)
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Cell({self.value!r})"
