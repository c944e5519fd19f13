"""
Tests for runtime container classification.
"""

import datetime
from collections import OrderedDict, UserDict, UserList
from decimal import Decimal
from enum import Enum
from types import MappingProxyType, SimpleNamespace

import pytest

from deeppath.kinds import ContainerKind, Scalar, classify, is_writable


class Color(Enum):
    RED = 1


class Opaque:
    pass


@pytest.mark.unit
class TestClassify:
    """Test classify() for each kind."""

    def test_none_is_absent(self):
        assert classify(None) is ContainerKind.ABSENT

    @pytest.mark.parametrize(
        "value",
        [
            "text",
            b"bytes",
            bytearray(b"x"),
            0,
            False,
            1.5,
            2j,
            Decimal("1.1"),
            Color.RED,
            datetime.date(2024, 1, 1),
            datetime.datetime(2024, 1, 1, 12, 0),
            datetime.timedelta(seconds=1),
        ],
    )
    def test_scalars(self, value):
        """Test builtin value types are terminal scalars."""
        assert classify(value) is ContainerKind.SCALAR

    @pytest.mark.parametrize(
        "value", [{}, OrderedDict(), UserDict(), MappingProxyType({})]
    )
    def test_maps(self, value):
        assert classify(value) is ContainerKind.MAP

    @pytest.mark.parametrize("value", [[], (), UserList(), range(3)])
    def test_sequences(self, value):
        assert classify(value) is ContainerKind.SEQUENCE

    @pytest.mark.parametrize("value", [Opaque(), SimpleNamespace(a=1), object()])
    def test_objects(self, value):
        assert classify(value) is ContainerKind.OBJECT

    def test_registered_scalar(self):
        """Test Scalar.register() makes a type terminal."""

        class Token:
            pass

        assert classify(Token()) is ContainerKind.OBJECT
        Scalar.register(Token)
        assert classify(Token()) is ContainerKind.SCALAR


@pytest.mark.unit
class TestIsWritable:
    """Test is_writable() for mutable and read-only containers."""

    def test_mutable_containers(self):
        assert is_writable({}, ContainerKind.MAP)
        assert is_writable([], ContainerKind.SEQUENCE)

    def test_read_only_containers(self):
        assert not is_writable(MappingProxyType({}), ContainerKind.MAP)
        assert not is_writable((1,), ContainerKind.SEQUENCE)

    def test_objects_are_writable(self):
        assert is_writable(Opaque(), ContainerKind.OBJECT)
