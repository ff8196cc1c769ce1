"""Tests for EmptyPath and create_path."""

import msgspec
import pytest
from refpath import (
    POSIX,
    WINDOWS,
    AbsoluteDirectoryPath,
    EmptyPath,
    NoPath,
    NotRootedError,
    RelativeDirectoryPath,
    RelativeFilePath,
    SneakyTraversalError,
    SomeString,
    WhitespaceOnlyInputError,
    create_path,
)


class TestEmptyPath:
    """Tests for the NoPath marker."""

    def test_renders_as_nothing(self):
        assert str(NoPath) == ''
        assert len(NoPath) == 0
        assert not NoPath

    def test_value_semantics(self):
        assert NoPath == EmptyPath()
        assert hash(NoPath) == hash(EmptyPath())

    def test_frozen(self):
        with pytest.raises(AttributeError):
            NoPath.path = '/'

    def test_encodes_as_empty_object(self):
        assert msgspec.json.encode(NoPath) == b'{}'


class TestCreatePath:
    """Tests for create_path."""

    @pytest.mark.parametrize('raw', [None, ''])
    def test_nothing_is_no_path(self, raw):
        assert create_path(raw).unwrap() is NoPath

    def test_relative_directory(self):
        assert isinstance(create_path('docs/').unwrap(), RelativeDirectoryPath)

    def test_relative_file(self):
        assert isinstance(create_path(SomeString('docs/a.md')).unwrap(), RelativeFilePath)

    def test_absolute_directory(self):
        path = create_path('C:\\data\\', policy=WINDOWS).unwrap()
        assert isinstance(path, AbsoluteDirectoryPath)
        assert path.policy == WINDOWS

    def test_whitespace_is_not_nothing(self):
        assert isinstance(create_path('   ', policy=POSIX).error, WhitespaceOnlyInputError)

    def test_sneaky(self):
        assert isinstance(create_path('a/../b').error, SneakyTraversalError)

    def test_drive_relative(self):
        assert isinstance(create_path('C:x.txt', policy=WINDOWS).error, NotRootedError)
