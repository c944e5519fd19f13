"""
Tests for dotted path parsing and formatting.
"""

import pytest

from deeppath.exceptions import InvalidKeyError
from deeppath.keys import Attr, Index, MapKey, Method
from deeppath.path import format_path, parse_path

# =============================================================================
# Test parse_path
# =============================================================================


@pytest.mark.unit
class TestParsePath:
    """Test parse_path() syntax."""

    def test_plain_components(self):
        assert parse_path("database.host") == ["database", "host"]

    def test_empty_components_skipped(self):
        """Test leading, trailing and doubled dots are ignored."""
        assert parse_path(".a..b.") == ["a", "b"]
        assert parse_path("") == []

    def test_indices(self):
        assert parse_path("a.b[1].c") == ["a", "b", Index(1), "c"]

    def test_multiple_and_negative_indices(self):
        assert parse_path("grid[0][-1]") == ["grid", Index(0), Index(-1)]

    def test_bare_index(self):
        assert parse_path("[2].name") == [Index(2), "name"]

    def test_method(self):
        assert parse_path("a.b[1].c()") == ["a", "b", Index(1), Method("c")]

    def test_attribute(self):
        assert parse_path("server.@host") == ["server", Attr("host")]

    def test_digits_stay_plain(self):
        """Test numeric components remain plain string keys."""
        assert parse_path("items.0") == ["items", "0"]

    @pytest.mark.parametrize(
        "text", ["a[", "a]", "a[x]", "a[1]b", "a.()", "a.@", "a[1.5]"]
    )
    def test_malformed(self, text):
        """Test malformed paths raise InvalidKeyError."""
        with pytest.raises(InvalidKeyError):
            parse_path(text)


# =============================================================================
# Test format_path
# =============================================================================


@pytest.mark.unit
class TestFormatPath:
    """Test format_path() rendering."""

    def test_empty(self):
        assert format_path([]) == "."

    def test_mixed(self):
        keys = ["a", Index(0), Method("load"), Attr("host"), MapKey("k")]
        assert format_path(keys) == "a[0].load().@host['k']"

    def test_roundtrip_for_parseable_paths(self):
        """Test parse_path(format_path(keys)) for keys the syntax can express."""
        keys = ["a", Index(2), "b", Method("c")]
        assert parse_path(format_path(keys)) == keys
