"""Existence-gated paths and the binders that produce them.

ExistingDirectoryPath and ExistingFilePath carry a point-in-time guarantee:
the entry existed (with the right kind) when it was checked. Nothing stops
another process from removing it afterwards, so callers needing more must
synchronize externally, e.g. with a file lock.

Example:
    ```python
    from refpath import ExistingDirectoryPath, Ok

    ExistingDirectoryPath.bind_created('/tmp/cache/', lambda d: Ok(d.path))
    # Ok('/tmp/cache/')
    ```
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from refpath._logging import get_logger
from refpath.decorators import safe
from refpath.errors import IoFailureError, NotFoundError, PathError, WrongKindError
from refpath.paths._pathstring import NonEmptyPathString
from refpath.paths.absolute import AbsoluteDirectoryPath, AbsoluteFilePath
from refpath.propagate import Propagate
from refpath.result import Err, Ok, Result

if TYPE_CHECKING:
    from collections.abc import Callable

    from refpath.platform import PathPolicy
    from refpath.strings import SomeString

__all__ = [
    'ExistingDirectoryPath',
    'ExistingFilePath',
    'bind_existing',
    'bind_existing_file',
    'bind_existing_or_created',
]

logger = get_logger(__name__)

_make_dirs = safe(exceptions=(OSError,))(os.makedirs)


@dataclass(frozen=True, slots=True, eq=False, repr=False)
class ExistingDirectoryPath(AbsoluteDirectoryPath):
    """An absolute directory path that existed as a directory when checked."""

    @classmethod
    def of(cls, directory: AbsoluteDirectoryPath) -> ExistingDirectoryPath:
        return cls._new(directory.source, directory.name, directory.is_root)

    @classmethod
    def from_parsed(cls, parsed: NonEmptyPathString) -> Result[ExistingDirectoryPath, PathError]:
        return AbsoluteDirectoryPath.from_parsed(parsed).and_then(lambda d: check_directory(d, create=False))

    @staticmethod
    def bind_created[T](
        raw: str | SomeString | None,
        f: Callable[[ExistingDirectoryPath], Result[T, BaseException]],
        *,
        policy: PathPolicy | None = None,
    ) -> Result[T, BaseException]:
        """Validate ``raw`` as a directory, create it if needed and pass it to ``f``."""
        return bind_existing_or_created(AbsoluteDirectoryPath.create(raw, policy=policy), f)

    @staticmethod
    def bind_found[T](
        raw: str | SomeString | None,
        f: Callable[[ExistingDirectoryPath], Result[T, BaseException]],
        *,
        policy: PathPolicy | None = None,
    ) -> Result[T, BaseException]:
        """Validate ``raw`` as a directory and pass it to ``f`` if it exists."""
        return bind_existing(AbsoluteDirectoryPath.create(raw, policy=policy), f)


@dataclass(frozen=True, slots=True, eq=False, repr=False)
class ExistingFilePath(AbsoluteFilePath):
    """An absolute file path that existed as a file when checked."""

    @classmethod
    def of(cls, file: AbsoluteFilePath) -> ExistingFilePath:
        return cls._new(file.source, file.directory, file.name)

    @classmethod
    def from_parsed(cls, parsed: NonEmptyPathString) -> Result[ExistingFilePath, PathError]:
        return AbsoluteFilePath.from_parsed(parsed).and_then(check_file)

    @staticmethod
    def bind_found[T](
        raw: str | SomeString | None,
        f: Callable[[ExistingFilePath], Result[T, BaseException]],
        *,
        policy: PathPolicy | None = None,
    ) -> Result[T, BaseException]:
        """Validate ``raw`` as a file path and pass it to ``f`` if the file exists."""
        return bind_existing_file(AbsoluteFilePath.create(raw, policy=policy), f)


def _refuse(event: str, error: PathError, *, warn: bool = False) -> Err[PathError]:
    (logger.warning if warn else logger.debug)(event, path=error.path, error=error)
    return Err(error)


def check_directory(directory: AbsoluteDirectoryPath, *, create: bool) -> Result[ExistingDirectoryPath, PathError]:
    """Confirm (or create) the directory on disk.

    Args:
        directory: The directory to check.
        create: Create missing directories (including parents) instead of failing.

    Returns:
        Ok(ExistingDirectoryPath), or Err with WrongKindError, NotFoundError
        or IoFailureError.
    """
    path = directory.path
    # isfile() never matches a path ending in a separator
    if os.path.isfile(directory.trimmed_path):
        return _refuse('wrong_kind', WrongKindError(path, expected='directory', found='file'), warn=True)

    if create:
        return (
            _make_dirs(path, exist_ok=True)
            .map_err(lambda e: IoFailureError(path, e))
            .inspect_err(lambda e: logger.warning('directory_creation_failed', path=path, error=e))
            .inspect(lambda _: logger.debug('directory_ensured', path=path))
            .map(lambda _: ExistingDirectoryPath.of(directory))
        )

    if not os.path.isdir(directory.trimmed_path):
        return _refuse('directory_missing', NotFoundError(path, what='directory'))
    return Ok(ExistingDirectoryPath.of(directory))


def check_file(file: AbsoluteFilePath) -> Result[ExistingFilePath, PathError]:
    """Confirm that the file exists on disk.

    Returns:
        Ok(ExistingFilePath), or Err with WrongKindError or NotFoundError.
    """
    path = file.path
    if os.path.isdir(file.trimmed_path):
        return _refuse('wrong_kind', WrongKindError(path, expected='file', found='directory'), warn=True)
    if not os.path.isfile(file.trimmed_path):
        return _refuse('file_missing', NotFoundError(path, what='file'))
    return Ok(ExistingFilePath.of(file))


def _unwrap_propagate(error: BaseException) -> BaseException:
    # .bail() inside a callback without @result
    if isinstance(error, Propagate):
        return error.value.unwrap_err()
    return error


def _call[T](f: Callable[[Any], Result[T, BaseException]], existing: Any) -> Result[T, BaseException]:
    """Invoke a callback, folding raised exceptions and non-Result returns into Err."""
    if not callable(f):
        return Err(TypeError(f'callback must be callable, got {type(f).__name__}'))

    def flatten(returned: Any) -> Result[T, BaseException]:
        if isinstance(returned, Ok | Err):
            return returned
        return Err(TypeError(f'callback must return Ok or Err, got {type(returned).__name__}'))

    return (
        safe(f)(existing)
        .map_err(_unwrap_propagate)
        .and_then(flatten)
        .inspect_err(lambda e: logger.warning('callback_failed', path=existing.path, error=repr(e)))
    )


def invoke_with_existing_directory[T](
    directory: AbsoluteDirectoryPath,
    f: Callable[[ExistingDirectoryPath], Result[T, BaseException]],
    *,
    create: bool,
) -> Result[T, BaseException]:
    return check_directory(directory, create=create).and_then(lambda existing: _call(f, existing))


def invoke_with_existing_file[T](
    file: AbsoluteFilePath,
    f: Callable[[ExistingFilePath], Result[T, BaseException]],
) -> Result[T, BaseException]:
    return check_file(file).and_then(lambda existing: _call(f, existing))


def bind_existing_or_created[T](
    directory: Result[AbsoluteDirectoryPath, BaseException],
    f: Callable[[ExistingDirectoryPath], Result[T, BaseException]],
) -> Result[T, BaseException]:
    """Result-level form of AbsoluteDirectoryPath.bind_existing_or_created."""
    return directory.and_then(lambda d: d.bind_existing_or_created(f))


def bind_existing[T](
    directory: Result[AbsoluteDirectoryPath, BaseException],
    f: Callable[[ExistingDirectoryPath], Result[T, BaseException]],
) -> Result[T, BaseException]:
    """Result-level form of AbsoluteDirectoryPath.bind_existing."""
    return directory.and_then(lambda d: d.bind_existing(f))


def bind_existing_file[T](
    file: Result[AbsoluteFilePath, BaseException],
    f: Callable[[ExistingFilePath], Result[T, BaseException]],
) -> Result[T, BaseException]:
    """Result-level form of AbsoluteFilePath.bind_existing_file."""
    return file.and_then(lambda p: p.bind_existing_file(f))
