"""Validation error types: exceptions carried in Err, with struct records for serialization."""

from __future__ import annotations

from enum import StrEnum
from typing import ClassVar

import msgspec

__all__ = [
    'ErrorInfo',
    'ErrorKind',
    'InvalidCharacterError',
    'IoFailureError',
    'IsRootedError',
    'NoDirectoryOrFileSegmentError',
    'NotFoundError',
    'NotRootedError',
    'NullOrEmptyInputError',
    'PathError',
    'SneakyTraversalError',
    'TrailingPeriodOrSpaceError',
    'WhitespaceOnlyInputError',
    'WrongKindError',
]


class ErrorKind(StrEnum):
    """Why a string or path was rejected."""

    NULL_OR_EMPTY_INPUT = 'null_or_empty_input'
    WHITESPACE_ONLY_INPUT = 'whitespace_only_input'
    INVALID_CHARACTER = 'invalid_character'
    TRAILING_PERIOD_OR_SPACE = 'trailing_period_or_space'
    SNEAKY_TRAVERSAL = 'sneaky_traversal'
    NOT_ROOTED = 'not_rooted'
    IS_ROOTED = 'is_rooted'
    WRONG_KIND = 'wrong_kind'
    NOT_FOUND = 'not_found'
    NO_DIRECTORY_OR_FILE_SEGMENT = 'no_directory_or_file_segment'
    IO_FAILURE = 'io_failure'


class ErrorInfo(msgspec.Struct, frozen=True, gc=False, omit_defaults=True):
    """Serializable record of a PathError - struct variant for logs and wire formats."""

    kind: ErrorKind
    message: str
    path: str | None = None
    position: int | None = None
    char: str | None = None


class PathError(ValueError):
    """Base class of every validation failure.

    Instances are returned inside Err, never raised by the factories.
    """

    kind: ClassVar[ErrorKind]

    def __init__(self, message: str, path: str | None = None) -> None:
        self.path = path
        super().__init__(message)

    @property
    def message(self) -> str:
        """The human readable description."""
        return str(self)

    def to_struct(self) -> ErrorInfo:
        """Convert to struct for encoding."""
        return ErrorInfo(kind=self.kind, message=self.message, path=self.path)


class NullOrEmptyInputError(PathError):
    """Input was None or '' where characters were required."""

    kind = ErrorKind.NULL_OR_EMPTY_INPUT

    def __init__(self, what: str = 'value') -> None:
        super().__init__(f'{what} must neither be None nor empty')


class WhitespaceOnlyInputError(PathError):
    """Input consisted of whitespace only where actual characters were required."""

    kind = ErrorKind.WHITESPACE_ONLY_INPUT

    def __init__(self, what: str = 'value') -> None:
        super().__init__(f'{what} must contain at least one non-whitespace character')


class InvalidCharacterError(PathError):
    """A path or file name contained a character the platform forbids."""

    kind = ErrorKind.INVALID_CHARACTER

    def __init__(self, path: str, position: int, what: str = 'path') -> None:
        self.position = position
        self.char = path[position]
        super().__init__(f'{what} contains invalid character {self.char!r} at position {position}', path)

    def to_struct(self) -> ErrorInfo:
        """Convert to struct for encoding."""
        return ErrorInfo(
            kind=self.kind,
            message=self.message,
            path=self.path,
            position=self.position,
            char=self.char,
        )


class TrailingPeriodOrSpaceError(PathError):
    """The last path segment ends with '.' or ' ' (rejected by Windows)."""

    kind = ErrorKind.TRAILING_PERIOD_OR_SPACE

    def __init__(self, path: str) -> None:
        super().__init__(f"path {path!r} must not end with '.' or ' ' on this platform", path)


class SneakyTraversalError(PathError):
    """The path walks upwards with '..'."""

    kind = ErrorKind.SNEAKY_TRAVERSAL

    def __init__(self, path: str) -> None:
        super().__init__(f"path {path!r} is a sneaky path (contains '..'-notation)", path)


class NotRootedError(PathError):
    """An absolute path was required but the input is relative."""

    kind = ErrorKind.NOT_ROOTED

    def __init__(self, path: str, reason: str = 'has no root directory') -> None:
        super().__init__(f'path {path!r} {reason} and thus is no absolute path', path)


class IsRootedError(PathError):
    """A relative path was required but the input is rooted."""

    kind = ErrorKind.IS_ROOTED

    def __init__(self, path: str) -> None:
        super().__init__(f'path {path!r} has a root directory and thus is no relative path', path)


class WrongKindError(PathError):
    """The filesystem holds the other kind of entry at this path."""

    kind = ErrorKind.WRONG_KIND

    def __init__(self, path: str, expected: str, found: str) -> None:
        self.expected = expected
        self.found = found
        super().__init__(f'path {path!r} specifies an existing {found} rather than a {expected}', path)


class NotFoundError(PathError):
    """An existence-gated operation needed an entry that is absent."""

    kind = ErrorKind.NOT_FOUND

    def __init__(self, path: str, what: str = 'entry') -> None:
        super().__init__(f'{what} {path!r} does not exist', path)


class NoDirectoryOrFileSegmentError(PathError):
    """No leaf name or parent directory could be extracted from the path."""

    kind = ErrorKind.NO_DIRECTORY_OR_FILE_SEGMENT

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f'path {path!r} {reason}', path)


class IoFailureError(PathError):
    """A filesystem primitive failed; the OSError is kept as the cause."""

    kind = ErrorKind.IO_FAILURE

    def __init__(self, path: str, underlying: OSError) -> None:
        self.underlying = underlying
        super().__init__(f'filesystem operation on {path!r} failed: {underlying}', path)
        self.__cause__ = underlying
