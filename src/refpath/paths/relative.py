"""Relative paths: RelativePath, RelativeDirectoryPath, RelativeFilePath."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from refpath.assertions import fail_if
from refpath.decorators import result
from refpath.errors import IsRootedError, NoDirectoryOrFileSegmentError, PathError
from refpath.paths._pathstring import NonEmptyPathString
from refpath.paths.base import NonSneakyPath, parse_non_sneaky
from refpath.paths.filename import FileName
from refpath.result import Err, Ok, Result

if TYPE_CHECKING:
    from refpath.platform import PathPolicy
    from refpath.strings import SomeString

__all__ = [
    'RelativeDirectoryPath',
    'RelativeFilePath',
    'RelativePath',
]


def _parse_relative(
    raw: str | SomeString | None, policy: PathPolicy | None
) -> Result[NonEmptyPathString, PathError]:
    return parse_non_sneaky(raw, policy).and_then(
        fail_if(lambda parsed: parsed.is_rooted, lambda parsed: IsRootedError(parsed.path))
    )


@dataclass(frozen=True, slots=True, eq=False, repr=False)
class RelativePath(NonSneakyPath):
    """A non-sneaky path without a root."""

    @classmethod
    def create(
        cls, raw: str | SomeString | None, *, policy: PathPolicy | None = None
    ) -> Result[RelativePath, PathError]:
        """Validate a relative path; the trailing separator decides directory or file.

        Example:
            ```python
            RelativePath.create('/abs/path')
            # Err(IsRootedError("path '/abs/path' has a root directory and thus is no relative path"))
            ```
        """
        return _parse_relative(raw, policy).and_then(cls.from_parsed)

    @staticmethod
    def from_parsed(parsed: NonEmptyPathString) -> Result[RelativePath, PathError]:
        if parsed.ends_in_directory_separator():
            return RelativeDirectoryPath.from_parsed(parsed)
        return RelativeFilePath.from_parsed(parsed)


@dataclass(frozen=True, slots=True, eq=False, repr=False)
class RelativeDirectoryPath(RelativePath):
    """A relative directory path; ``path`` always ends in a separator.

    Attributes:
        name: The last segment.
    """

    name: str

    @classmethod
    def create(
        cls, raw: str | SomeString | None, *, policy: PathPolicy | None = None
    ) -> Result[RelativeDirectoryPath, PathError]:
        """Validate a relative directory path; a missing trailing separator is added."""
        return _parse_relative(raw, policy).and_then(cls.from_parsed)

    @classmethod
    def from_parsed(cls, parsed: NonEmptyPathString) -> Result[RelativeDirectoryPath, PathError]:
        if not parsed.ends_in_directory_separator():
            parsed = NonEmptyPathString.from_checked(parsed.with_separator_tail(), parsed.policy)
        name = parsed.file_name_segment
        if not name:
            return Err(NoDirectoryOrFileSegmentError(parsed.path, 'has no directory name'))
        return Ok(cls._new(parsed, name))

    def combine(self, other: RelativeDirectoryPath) -> RelativeDirectoryPath:
        """Append another relative directory."""
        return RelativeDirectoryPath._new(self.source.combine(other.path), other.name)

    def combine_file(self, other: RelativeFilePath) -> Result[RelativeFilePath, PathError]:
        """Append a relative file path, validating the result again."""
        return RelativeFilePath.create(self.source.combine(other.path).path, policy=self.policy)

    def combine_file_name(self, name: FileName) -> RelativeFilePath:
        """Append a file name."""
        return RelativeFilePath._new(self.source.combine(name.value), self, name)


@dataclass(frozen=True, slots=True, eq=False, repr=False)
class RelativeFilePath(RelativePath):
    """A relative path to a file.

    Attributes:
        directory: The relative directory holding the file, None for a bare name.
        name: The file name.
    """

    directory: RelativeDirectoryPath | None
    name: FileName

    @classmethod
    def create(
        cls, raw: str | SomeString | None, *, policy: PathPolicy | None = None
    ) -> Result[RelativeFilePath, PathError]:
        """Validate a relative file path.

        A trailing separator is rejected since it denotes a directory.
        """
        return _parse_relative(raw, policy).and_then(cls.from_parsed)

    @classmethod
    @result
    def from_parsed(cls, parsed: NonEmptyPathString) -> Result[RelativeFilePath, PathError]:
        policy = parsed.policy
        if parsed.ends_in_directory_separator():
            return Err(NoDirectoryOrFileSegmentError(parsed.path, 'ends in a directory separator'))

        parent = policy.dirname(parsed.path)
        directory = None
        if parent:
            directory = RelativeDirectoryPath.from_parsed(NonEmptyPathString.from_checked(parent, policy)).bail()
        name = FileName.create(policy.basename(parsed.path), policy=policy).bail()
        return Ok(cls._new(parsed, directory, name))
