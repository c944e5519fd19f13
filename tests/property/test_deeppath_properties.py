"""Property-based tests for deeppath traversal."""

import contextlib
import copy

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

import deeppath
from deeppath import Cell, Index, TraversalError, delete, exists, get

_ABSENT = object()

name_key = st.text(alphabet="abcdefghijklmnopqrstuvwxyz", min_size=1, max_size=6)
index_key = st.integers(min_value=0, max_value=5).map(Index)
path_keys = st.lists(st.one_of(name_key, index_key), min_size=1, max_size=5)
read_keys = st.lists(
    st.one_of(name_key, st.integers(min_value=-3, max_value=5)), max_size=5
)

leaf = st.one_of(st.none(), st.integers(), st.text(max_size=5))
structures = st.recursive(
    leaf,
    lambda children: st.one_of(
        st.lists(children, max_size=4),
        st.dictionaries(name_key, children, max_size=4),
    ),
    max_leaves=12,
)


def _terminates_early(data, keys) -> bool:
    """Check whether a read would hit a scalar before the last key."""
    current = data
    for key in keys:
        if current is None:
            return False
        if isinstance(current, dict):
            if key not in current:
                return False
            current = current[key]
        elif isinstance(current, list):
            if not isinstance(key, int) or not -len(current) <= key < len(current):
                return False
            current = current[key]
        else:
            return True
    return False


@pytest.mark.property
@pytest.mark.unit
class TestReadProperties:
    """Property-based tests for exists() and get()."""

    @given(data=structures, keys=read_keys)
    @settings(max_examples=200)
    def test_exists_matches_get(self, data, keys) -> None:
        """exists() is false exactly when get() reports absence."""
        if _terminates_early(data, keys):
            with pytest.raises(TraversalError):
                exists(data, *keys)
            with pytest.raises(TraversalError):
                get(data, *keys)
            return
        found = get(data, *keys, default=_ABSENT)
        assert exists(data, *keys) == (found is not _ABSENT)

    @given(data=structures, keys=read_keys)
    def test_reads_do_not_mutate(self, data, keys) -> None:
        before = copy.deepcopy(data)
        with contextlib.suppress(TraversalError):
            exists(data, *keys)
            get(data, *keys)
        assert data == before

    @given(data=structures, keys=read_keys)
    def test_get_is_idempotent(self, data, keys) -> None:
        if _terminates_early(data, keys):
            return  # Raises, covered above
        assert get(data, *keys) == get(data, *keys)

    @given(data=structures)
    def test_zero_keys(self, data) -> None:
        assert exists(data)
        assert get(data) is data
        assert get(Cell(data)) is data


@pytest.mark.property
@pytest.mark.unit
class TestWriteProperties:
    """Property-based tests for set() and delete()."""

    @given(keys=path_keys, value=st.integers())
    @settings(max_examples=200)
    def test_set_get_roundtrip(self, keys, value) -> None:
        """A write into an empty Cell can be read back."""
        cell = Cell()
        assert deeppath.set(cell, *keys, value) == value
        assert get(cell, *keys) == value
        assert exists(cell, *keys)

    @given(keys=path_keys)
    def test_vivified_root_type(self, keys) -> None:
        """The root container follows the first key."""
        cell = Cell()
        deeppath.set(cell, *keys, 1)
        expected = list if isinstance(keys[0], Index) else dict
        assert type(cell.value) is expected

    @given(index=st.integers(min_value=0, max_value=20))
    def test_sparse_sequence(self, index) -> None:
        """Padding slots exist and read as None, slots past the end do not."""
        data: list = []
        deeppath.set(data, index, "x")
        assert len(data) == index + 1
        for i in range(index):
            assert exists(data, i)
            assert get(data, i, default=_ABSENT) is None
        assert not exists(data, index + 1)

    @given(keys=path_keys, value=st.integers())
    def test_delete_after_set(self, keys, value) -> None:
        cell = Cell()
        deeppath.set(cell, *keys, value)
        assert delete(cell, *keys) == value
        assert not exists(cell, *keys)
