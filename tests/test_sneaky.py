"""Tests for '..' traversal detection."""

import pytest
from hypothesis import given
from hypothesis import strategies as st
from refpath import POSIX, WINDOWS, is_sneaky

from tests.strategies import dotless_strings, sneaky_strings


class TestIsSneaky:
    """Tests for is_sneaky."""

    @pytest.mark.parametrize('path', ['..', '../etc', 'a/..', '/home/../etc', 'a/../b', '/..'])
    def test_posix_sneaky(self, path):
        assert is_sneaky(path, POSIX)

    @pytest.mark.parametrize('path', ['a..b', '...', '.../x', 'x/..y', 'x../', '.', './a', '..a/b', 'a\\..\\b'])
    def test_posix_not_sneaky(self, path):
        assert not is_sneaky(path, POSIX)

    @pytest.mark.parametrize(
        'path',
        ['..\\x', '../x', 'x\\..', 'x/..', 'a\\..\\b', 'a/../b', 'a\\../b', 'a/..\\b', 'C:\\a/..\\b'],
    )
    def test_windows_checks_both_separators(self, path):
        """All four separator combinations are caught."""
        assert is_sneaky(path, WINDOWS)

    @pytest.mark.parametrize('path', ['C:\\a..b', 'C:\\...\\x', '..x'])
    def test_windows_not_sneaky(self, path):
        assert not is_sneaky(path, WINDOWS)

    @given(st.data())
    def test_separator_bounded_parent_is_sneaky(self, policy, data):
        """'..' between two separators is always found."""
        assert is_sneaky(data.draw(sneaky_strings(policy)), policy)

    @given(dotless_strings)
    def test_dotless_paths_are_not_sneaky(self, path):
        assert not is_sneaky(path, POSIX)
        assert not is_sneaky(path, WINDOWS)
