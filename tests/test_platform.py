"""Tests for the POSIX and WINDOWS path policies."""

import os

import pytest
from refpath import POSIX, WINDOWS, PathPolicy, Platform, host_policy, policy_for


class TestPolicyLookup:
    """Tests for policy_for and host_policy."""

    def test_policy_for(self):
        assert policy_for(Platform.POSIX) is POSIX
        assert policy_for('windows') is WINDOWS

    def test_policy_for_unknown(self):
        with pytest.raises(ValueError):
            policy_for('vms')

    def test_host_policy(self):
        expected = WINDOWS if os.name == 'nt' else POSIX
        assert host_policy() is expected

    def test_policies_are_frozen(self):
        with pytest.raises(AttributeError):
            POSIX.separator = '\\'  # type: ignore[misc]

    def test_policy_is_hashable(self):
        assert isinstance(POSIX, PathPolicy)
        assert len({POSIX, WINDOWS, POSIX}) == 2


class TestSeparators:
    """Tests for separator handling."""

    def test_posix(self):
        assert POSIX.is_separator('/')
        assert not POSIX.is_separator('\\')
        assert POSIX.ends_in_separator('/srv/')
        assert not POSIX.ends_in_separator('/srv\\')

    def test_windows_accepts_both(self):
        assert WINDOWS.is_separator('\\')
        assert WINDOWS.is_separator('/')
        assert WINDOWS.ends_in_separator('C:\\srv/')

    def test_empty_never_ends_in_separator(self, policy):
        assert not policy.ends_in_separator('')


class TestRoots:
    """Tests for root detection."""

    @pytest.mark.parametrize(
        ('path', 'length'),
        [('/', 1), ('/srv/a', 1), ('//srv', 1), ('srv', 0), ('', 0), ('C:\\x', 0)],
    )
    def test_posix_root_length(self, path, length):
        assert POSIX.root_length(path) == length

    @pytest.mark.parametrize(
        ('path', 'length'),
        [
            ('C:\\', 3),
            ('C:/data', 3),
            ('C:', 2),
            ('\\data', 1),
            ('\\\\server\\share\\dir', 15),
            ('data\\x', 0),
        ],
    )
    def test_windows_root_length(self, path, length):
        assert WINDOWS.root_length(path) == length

    def test_is_rooted(self):
        assert POSIX.is_rooted('/x')
        assert not POSIX.is_rooted('x/')
        assert WINDOWS.is_rooted('D:\\x')
        assert not WINDOWS.is_rooted('x\\y')

    @pytest.mark.parametrize(
        ('path', 'expected'),
        [
            ('C:\\x', True),
            ('C:/', True),
            ('\\\\server\\share', True),
            ('C:x', False),
            ('C:', False),
            ('\\x', False),
            ('x', False),
        ],
    )
    def test_windows_fully_qualified(self, path, expected):
        assert WINDOWS.is_fully_qualified(path) is expected

    def test_posix_fully_qualified_is_rooted(self):
        assert POSIX.is_fully_qualified('/x')
        assert not POSIX.is_fully_qualified('x')


class TestSegments:
    """Tests for dirname, basename and trim_separators."""

    @pytest.mark.parametrize(
        ('path', 'expected'),
        [
            ('/', None),
            ('/srv', '/'),
            ('/srv/a', '/srv'),
            ('/srv//a', '/srv'),
            ('a/b', 'a'),
            ('a', ''),
            ('/srv/', '/srv'),
        ],
    )
    def test_posix_dirname(self, path, expected):
        assert POSIX.dirname(path) == expected

    @pytest.mark.parametrize(
        ('path', 'expected'),
        [('C:\\', None), ('C:\\a', 'C:\\'), ('C:\\a\\b', 'C:\\a'), ('C:/a/b', 'C:/a'), ('a\\b', 'a')],
    )
    def test_windows_dirname(self, path, expected):
        assert WINDOWS.dirname(path) == expected

    @pytest.mark.parametrize(
        ('path', 'expected'),
        [('/srv/a.txt', 'a.txt'), ('/srv/', ''), ('/', ''), ('a', 'a'), ('a\\b', 'a\\b')],
    )
    def test_posix_basename(self, path, expected):
        assert POSIX.basename(path) == expected

    def test_windows_basename(self):
        assert WINDOWS.basename('C:\\srv/a.txt') == 'a.txt'
        assert WINDOWS.basename('C:\\') == ''

    @pytest.mark.parametrize(
        ('path', 'expected'),
        [('/srv///', '/srv'), ('///', '/'), ('/', '/'), ('a/', 'a'), ('a', 'a')],
    )
    def test_posix_trim(self, path, expected):
        assert POSIX.trim_separators(path) == expected

    def test_windows_trim_keeps_root(self):
        assert WINDOWS.trim_separators('C:\\\\') == 'C:\\'
        assert WINDOWS.trim_separators('C:\\a\\/') == 'C:\\a'


class TestCharacters:
    """Tests for the invalid character sets."""

    def test_posix_path_chars(self):
        assert POSIX.first_invalid_path_char('/a|b*?') is None
        assert POSIX.first_invalid_path_char('/a\0b') == 2

    def test_windows_path_chars(self):
        assert WINDOWS.first_invalid_path_char('C:\\a|b') == 4
        assert WINDOWS.first_invalid_path_char('C:\\a*') == 4
        assert WINDOWS.first_invalid_path_char('C:\\a?') == 4
        assert WINDOWS.first_invalid_path_char('C:\\a\x1f') == 4
        assert WINDOWS.first_invalid_path_char('C:\\a b.txt') is None

    def test_posix_file_name_chars(self):
        assert POSIX.first_invalid_file_name_char('a:b') is None
        assert POSIX.first_invalid_file_name_char('a/b') == 1

    @pytest.mark.parametrize('char', list('"<>|:*?\\/') + ['\0', '\t'])
    def test_windows_file_name_chars(self, char):
        assert WINDOWS.first_invalid_file_name_char(f'ab{char}') == 2


class TestWindowsQuirks:
    """Tests for trailing period/space and case handling."""

    @pytest.mark.parametrize('path', ['C:\\a.', 'C:\\a ', 'C:\\data.\\', 'x..'])
    def test_trailing_period_or_space(self, path):
        assert WINDOWS.ends_with_period_or_space(path)

    @pytest.mark.parametrize('path', ['C:\\a', 'C:\\', '.', 'C:\\a\\.', 'a.b'])
    def test_no_trailing_period_or_space(self, path):
        assert not WINDOWS.ends_with_period_or_space(path)

    def test_only_windows_forbids(self):
        assert WINDOWS.forbids_trailing_period_or_space
        assert not POSIX.forbids_trailing_period_or_space

    def test_case(self):
        assert WINDOWS.same_path('C:\\Data', 'c:\\DATA')
        assert not POSIX.same_path('/Data', '/data')
        assert POSIX.normalize_case('/Data') == '/Data'
