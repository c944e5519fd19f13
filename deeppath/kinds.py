"""
Runtime container classification.

Each traversal step inspects the current value once and dispatches on the
resulting ContainerKind. Opaque value types are declared through the Scalar
ABC, so callers can mark their own types as terminal with Scalar.register().
"""

import datetime
import numbers
from abc import ABC
from collections.abc import Mapping, MutableMapping, MutableSequence, Sequence
from enum import Enum
from typing import Any


class ContainerKind(Enum):
    """Kind of the value a path step is applied to."""

    ABSENT = "absent"
    SCALAR = "scalar"
    MAP = "map"
    SEQUENCE = "sequence"
    OBJECT = "object"


class Scalar(ABC):
    """
    Virtual base class for values that cannot be traversed.

    Example:
        >>> Scalar.register(ipaddress.IPv4Address)
    """

    pass


for _cls in (
    str,
    bytes,
    bytearray,
    memoryview,
    numbers.Number,
    Enum,
    datetime.date,
    datetime.time,
    datetime.timedelta,
):
    Scalar.register(_cls)


def classify(value: Any) -> ContainerKind:
    """
    Classify a value for traversal.

    Scalars are checked before sequences so strings and bytes never count as
    sequences.

    Args:
        value: Current value of the walk

    Returns:
        ContainerKind: Kind of the value
    """
    if value is None:
        return ContainerKind.ABSENT
    if isinstance(value, Scalar):
        return ContainerKind.SCALAR
    if isinstance(value, Mapping):
        return ContainerKind.MAP
    if isinstance(value, Sequence):
        return ContainerKind.SEQUENCE
    return ContainerKind.OBJECT


def is_writable(value: Any, kind: ContainerKind) -> bool:
    """Check whether a map or sequence container accepts assignment."""
    if kind is ContainerKind.MAP:
        return isinstance(value, MutableMapping)
    if kind is ContainerKind.SEQUENCE:
        return isinstance(value, MutableSequence)
    return True
