"""FileName: a single path segment free of the platform's forbidden characters."""

from __future__ import annotations

import posixpath
from typing import TYPE_CHECKING

import msgspec

from refpath._config import default_policy
from refpath.errors import InvalidCharacterError, NoDirectoryOrFileSegmentError, PathError, SneakyTraversalError
from refpath.result import Err, Ok, Result
from refpath.strings import SomeString

if TYPE_CHECKING:
    from refpath.platform import PathPolicy

__all__ = ['FileName']

# Characters no platform allows in a file name
_ALWAYS_INVALID = frozenset('\0/')


class FileName(msgspec.Struct, frozen=True, gc=False):
    """The name of a file, without any directory part.

    Attributes:
        value: The validated name.
    """

    value: str

    def __post_init__(self) -> None:
        if not self.value or self.value.isspace() or self.value in ('.', '..'):
            raise ValueError(f'{self.value!r} is not a file name')
        if not _ALWAYS_INVALID.isdisjoint(self.value):
            raise ValueError(f'file name {self.value!r} contains a separator or NUL')

    def __str__(self) -> str:
        return self.value

    def __len__(self) -> int:
        return len(self.value)

    @property
    def stem(self) -> str:
        """The name without its extension."""
        return posixpath.splitext(self.value)[0]

    @property
    def extension(self) -> str:
        """The extension including its dot, '' if there is none.

        A leading dot starts a hidden name, not an extension.
        """
        return posixpath.splitext(self.value)[1]

    @classmethod
    def create(cls, raw: str | SomeString | None, *, policy: PathPolicy | None = None) -> Result[FileName, PathError]:
        """Validate a file name.

        Args:
            raw: The candidate name.
            policy: Platform rules; the configured default if None.

        Returns:
            Ok(FileName), or Err with NullOrEmptyInputError,
            WhitespaceOnlyInputError, InvalidCharacterError (reporting the
            first forbidden character and its position), SneakyTraversalError
            for '..' or NoDirectoryOrFileSegmentError for '.'.

        Example:
            ```python
            FileName.create('a/b')
            # Err(InvalidCharacterError("file name contains invalid character '/' at position 1"))
            ```
        """
        if policy is None:
            policy = default_policy()

        def check_chars(name: str) -> Result[FileName, PathError]:
            if name == '..':
                return Err(SneakyTraversalError(name))
            if name == '.':
                return Err(NoDirectoryOrFileSegmentError(name, 'refers to the directory itself'))
            position = policy.first_invalid_file_name_char(name)
            if position is not None:
                return Err(InvalidCharacterError(name, position, what='file name'))
            return Ok(cls(name))

        return SomeString.create(None if raw is None else str(raw), what='file name').map(str).and_then(check_chars)
