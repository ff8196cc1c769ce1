"""Absolute paths: AbsolutePath, AbsoluteDirectoryPath, AbsoluteFilePath.

Example:
    ```python
    AbsolutePath.create('/home/user/file.txt')
    # Ok(AbsoluteFilePath('/home/user/file.txt'))

    AbsolutePath.create('/home/../etc/passwd')
    # Err(SneakyTraversalError(...))

    AbsoluteDirectoryPath.create('/srv').map(lambda d: d.combine_file_name(FileName.create('app.toml').unwrap()))
    # Ok(AbsoluteFilePath('/srv/app.toml'))
    ```
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import TYPE_CHECKING

from refpath.assertions import fail_if
from refpath.decorators import result
from refpath.errors import NoDirectoryOrFileSegmentError, PathError
from refpath.paths._pathstring import NonEmptyPathString
from refpath.paths.base import NonSneakyPath, not_absolute_error, parse_non_sneaky
from refpath.paths.filename import FileName
from refpath.paths.relative import RelativeDirectoryPath, RelativeFilePath, RelativePath
from refpath.result import Err, Ok, Result

if TYPE_CHECKING:
    from collections.abc import Callable

    from refpath.paths.existing import ExistingDirectoryPath, ExistingFilePath
    from refpath.platform import PathPolicy
    from refpath.strings import SomeString

__all__ = [
    'AbsoluteDirectoryPath',
    'AbsoluteFilePath',
    'AbsolutePath',
    'get_directory',
]


def _parse_absolute(
    raw: str | SomeString | None, policy: PathPolicy | None
) -> Result[NonEmptyPathString, PathError]:
    return parse_non_sneaky(raw, policy).and_then(
        fail_if(lambda parsed: not parsed.is_fully_qualified, not_absolute_error)
    )


@dataclass(frozen=True, slots=True, eq=False, repr=False)
class AbsolutePath(NonSneakyPath):
    """A non-sneaky path with a root that does not depend on a current drive or directory."""

    @classmethod
    def create(
        cls, raw: str | SomeString | None, *, policy: PathPolicy | None = None
    ) -> Result[AbsolutePath, PathError]:
        """Validate an absolute path; the trailing separator decides directory or file.

        Args:
            raw: The candidate path.
            policy: Platform rules; the configured default if None.

        Returns:
            Ok(AbsoluteDirectoryPath) when ``raw`` ends in a separator,
            Ok(AbsoluteFilePath) otherwise, or the Err of the first failed check.
        """
        return _parse_absolute(raw, policy).and_then(cls.from_parsed)

    @staticmethod
    def from_parsed(parsed: NonEmptyPathString) -> Result[AbsolutePath, PathError]:
        if parsed.ends_in_directory_separator():
            return AbsoluteDirectoryPath.from_parsed(parsed)
        return AbsoluteFilePath.from_parsed(parsed)


@dataclass(frozen=True, slots=True, eq=False, repr=False)
class AbsoluteDirectoryPath(AbsolutePath):
    """An absolute directory path; ``path`` always ends in a separator.

    Attributes:
        name: The last segment, or the whole path for a root.
        is_root: Whether the path is a filesystem root.
    """

    name: str
    is_root: bool

    @classmethod
    def create(
        cls, raw: str | SomeString | None, *, policy: PathPolicy | None = None
    ) -> Result[AbsoluteDirectoryPath, PathError]:
        """Validate an absolute directory path; a missing trailing separator is added.

        Example:
            ```python
            root = AbsoluteDirectoryPath.create('/').unwrap()
            root.is_root, root.name
            # (True, '/')
            ```
        """
        return _parse_absolute(raw, policy).and_then(cls.from_parsed)

    @classmethod
    def from_parsed(cls, parsed: NonEmptyPathString) -> Result[AbsoluteDirectoryPath, PathError]:
        if not parsed.ends_in_directory_separator():
            parsed = NonEmptyPathString.from_checked(parsed.with_separator_tail(), parsed.policy)
        if parsed.is_root:
            return Ok(cls._new(parsed, parsed.path, True))
        name = parsed.file_name_segment
        if not name:
            return Err(NoDirectoryOrFileSegmentError(parsed.path, 'has no directory name'))
        return Ok(cls._new(parsed, name, False))

    def combine(self, other: RelativeDirectoryPath) -> AbsoluteDirectoryPath:
        """Append a relative directory; total since both parts are validated."""
        return AbsoluteDirectoryPath._new(self.source.combine(other.path), other.name, False)

    def combine_file(self, other: RelativeFilePath) -> Result[AbsoluteFilePath, PathError]:
        """Append a relative file path, validating the combined path again."""
        return AbsoluteFilePath.create(self.source.combine(other.path).path, policy=self.policy)

    def combine_file_name(self, name: FileName) -> AbsoluteFilePath:
        """Append a file name."""
        return AbsoluteFilePath._new(self.source.combine(name.value), self, name)

    def combine_relative(self, other: RelativePath) -> Result[AbsolutePath, PathError]:
        """Append any relative path, keeping its directory or file kind."""
        match other:
            case RelativeDirectoryPath():
                return Ok(self.combine(other))
            case RelativeFilePath():
                return self.combine_file(other)
        return Err(TypeError(f'cannot combine {type(other).__name__} with a directory'))

    def get_parent_path(self) -> Result[AbsoluteDirectoryPath, PathError]:
        """The directory containing this one; a root has no parent."""
        if self.is_root:
            return Err(NoDirectoryOrFileSegmentError(self.path, 'is a root directory and has no parent'))
        parent = self.policy.dirname(self.trimmed_path)
        if not parent:
            return Err(NoDirectoryOrFileSegmentError(self.path, 'has no parent directory'))
        return AbsoluteDirectoryPath.from_parsed(NonEmptyPathString.from_checked(parent, self.policy))

    def exists(self) -> bool:
        """Whether a directory currently exists at this path."""
        return os.path.isdir(self.trimmed_path)

    def ensure_exists(self) -> Result[ExistingDirectoryPath, PathError]:
        """Create the directory if needed and return it as ExistingDirectoryPath."""
        return self.bind_existing_or_created(Ok)

    def bind_existing_or_created[T](
        self, f: Callable[[ExistingDirectoryPath], Result[T, BaseException]]
    ) -> Result[T, BaseException]:
        """Create the directory if absent, then pass it to ``f``.

        Fails with WrongKindError when a file occupies the path and with
        IoFailureError when creation fails. Exceptions raised by ``f`` are
        returned as Err.

        The existence guarantee holds at the moment of the check only.
        """
        from refpath.paths.existing import invoke_with_existing_directory

        return invoke_with_existing_directory(self, f, create=True)

    def bind_existing[T](
        self, f: Callable[[ExistingDirectoryPath], Result[T, BaseException]]
    ) -> Result[T, BaseException]:
        """Pass the directory to ``f`` if it exists.

        Fails with WrongKindError when a file occupies the path and with
        NotFoundError when nothing does.
        """
        from refpath.paths.existing import invoke_with_existing_directory

        return invoke_with_existing_directory(self, f, create=False)


@dataclass(frozen=True, slots=True, eq=False, repr=False)
class AbsoluteFilePath(AbsolutePath):
    """An absolute path to a file.

    Attributes:
        directory: The directory holding the file.
        name: The file name.
    """

    directory: AbsoluteDirectoryPath
    name: FileName

    @classmethod
    def create(
        cls, raw: str | SomeString | None, *, policy: PathPolicy | None = None
    ) -> Result[AbsoluteFilePath, PathError]:
        """Validate an absolute file path.

        A trailing separator is rejected since it denotes a directory.
        """
        return _parse_absolute(raw, policy).and_then(cls.from_parsed)

    @classmethod
    @result
    def from_parsed(cls, parsed: NonEmptyPathString) -> Result[AbsoluteFilePath, PathError]:
        policy = parsed.policy
        if parsed.ends_in_directory_separator():
            return Err(NoDirectoryOrFileSegmentError(parsed.path, 'ends in a directory separator'))

        parent = policy.dirname(parsed.path)
        if not parent:
            return Err(NoDirectoryOrFileSegmentError(parsed.path, 'references no file with a parent directory'))
        directory = AbsoluteDirectoryPath.from_parsed(NonEmptyPathString.from_checked(parent, policy)).bail()
        name = FileName.create(policy.basename(parsed.path), policy=policy).bail()
        return Ok(cls._new(parsed, directory, name))

    def exists(self) -> bool:
        """Whether a file currently exists at this path."""
        return os.path.isfile(self.trimmed_path)

    def bind_existing_file[T](
        self, f: Callable[[ExistingFilePath], Result[T, BaseException]]
    ) -> Result[T, BaseException]:
        """Pass the file to ``f`` if it exists.

        Fails with WrongKindError when a directory occupies the path and with
        NotFoundError when nothing does. Exceptions raised by ``f`` are
        returned as Err.
        """
        from refpath.paths.existing import invoke_with_existing_file

        return invoke_with_existing_file(self, f)


def get_directory(path: AbsolutePath) -> AbsoluteDirectoryPath:
    """The path itself for a directory, the containing directory for a file."""
    match path:
        case AbsoluteDirectoryPath():
            return path
        case AbsoluteFilePath():
            return path.directory
    raise TypeError(f'expected an absolute directory or file path, got {type(path).__name__}')
