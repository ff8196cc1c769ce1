"""Abstract rungs of the path ladder (NonEmptyPath, NonSneakyPath) and the EmptyPath marker."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Self

import msgspec

from refpath.assertions import fail_if
from refpath.errors import NotRootedError, PathError, SneakyTraversalError
from refpath.paths._pathstring import NonEmptyPathString
from refpath.paths._sneaky import is_sneaky
from refpath.result import Err, Ok, Result

if TYPE_CHECKING:
    from refpath.paths.absolute import AbsolutePath
    from refpath.paths.relative import RelativePath
    from refpath.platform import PathPolicy
    from refpath.strings import SomeString

__all__ = [
    'AnyPath',
    'EmptyPath',
    'NoPath',
    'NonEmptyPath',
    'NonSneakyPath',
    'create_path',
    'not_absolute_error',
    'parse_non_sneaky',
]

# Passed by the factories only; direct construction without it is refused
_FACTORY = object()


def not_absolute_error(parsed: NonEmptyPathString) -> NotRootedError:
    if parsed.is_rooted:
        return NotRootedError(parsed.path, 'is relative to the current drive or directory')
    return NotRootedError(parsed.path)


def parse_non_sneaky(
    raw: str | SomeString | None, policy: PathPolicy | None = None
) -> Result[NonEmptyPathString, PathError]:
    """Parse ``raw`` and reject any '..' traversal."""
    return NonEmptyPathString.parse(raw, policy).and_then(
        fail_if(lambda parsed: is_sneaky(parsed.path, parsed.policy), lambda parsed: SneakyTraversalError(parsed.path))
    )


@dataclass(frozen=True, slots=True, eq=False, repr=False)
class NonEmptyPath:
    """A validated, non-empty path.

    Paths compare and hash by their text, case-insensitively when the
    policy says so, regardless of which rung of the ladder they sit on.
    Instances are obtained through the ``create`` factories only; calling
    a constructor directly raises TypeError.

    Attributes:
        source: The parsed path string.
    """

    source: NonEmptyPathString
    _factory: object = field(default=None, kw_only=True)

    def __post_init__(self) -> None:
        if self._factory is not _FACTORY:
            raise TypeError(f'{type(self).__name__} instances are created through {type(self).__name__}.create()')

    @classmethod
    def _new(cls, *fields: Any) -> Self:
        return cls(*fields, _factory=_FACTORY)

    @property
    def path(self) -> str:
        return self.source.path

    @property
    def trimmed_path(self) -> str:
        return self.source.trimmed_path

    @property
    def policy(self) -> PathPolicy:
        return self.source.policy

    @property
    def is_directory(self) -> bool:
        """True iff the path ends in a directory separator."""
        return self.source.ends_in_directory_separator()

    @property
    def is_rooted(self) -> bool:
        return self.source.is_rooted

    @property
    def is_relative(self) -> bool:
        return not self.source.is_rooted

    @property
    def is_sneaky(self) -> bool:
        return is_sneaky(self.path, self.policy)

    def __str__(self) -> str:
        return self.path

    def __fspath__(self) -> str:
        return self.path

    def __repr__(self) -> str:
        return f'{type(self).__name__}({self.path!r})'

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NonEmptyPath):
            return NotImplemented
        return self.policy.platform == other.policy.platform and self.policy.same_path(self.path, other.path)

    def __hash__(self) -> int:
        return hash(self.policy.normalize_case(self.path))


@dataclass(frozen=True, slots=True, eq=False, repr=False)
class NonSneakyPath(NonEmptyPath):
    """A path without '..' traversal, either absolute or relative."""

    @classmethod
    def create(
        cls, raw: str | SomeString | None, *, policy: PathPolicy | None = None
    ) -> Result[AbsolutePath | RelativePath, PathError]:
        """Validate ``raw`` and classify it as absolute or relative.

        Example:
            ```python
            NonSneakyPath.create('/srv/data/')
            # Ok(AbsoluteDirectoryPath('/srv/data/'))

            NonSneakyPath.create('docs/readme.md')
            # Ok(RelativeFilePath('docs/readme.md'))
            ```
        """
        return parse_non_sneaky(raw, policy).and_then(cls.classify_rooted)

    @staticmethod
    def classify_rooted(parsed: NonEmptyPathString) -> Result[AbsolutePath | RelativePath, PathError]:
        """Dispatch a parsed, non-sneaky path to the absolute or relative ladder."""
        from refpath.paths.absolute import AbsolutePath
        from refpath.paths.relative import RelativePath

        if parsed.is_fully_qualified:
            return AbsolutePath.from_parsed(parsed)
        if parsed.is_rooted:
            # drive-relative Windows paths are neither
            return Err(not_absolute_error(parsed))
        return RelativePath.from_parsed(parsed)


class EmptyPath(msgspec.Struct, frozen=True, gc=False):
    """The absence of a path, the counterpart of ``Empty`` for strings.

    Use the ``NoPath`` singleton. It is falsy and renders as ''.
    """

    def __str__(self) -> str:
        return ''

    def __len__(self) -> int:
        return 0


NoPath = EmptyPath()

type AnyPath = EmptyPath | AbsolutePath | RelativePath


def create_path(raw: str | SomeString | None, *, policy: PathPolicy | None = None) -> Result[AnyPath, PathError]:
    """Classify ``raw`` as no path at all or as a non-sneaky path.

    None and '' give Ok(NoPath); anything else must pass NonSneakyPath.create.

    Example:
        ```python
        create_path('')
        # Ok(EmptyPath())

        create_path('docs/')
        # Ok(RelativeDirectoryPath('docs/'))
        ```
    """
    if raw is None or not str(raw):
        return Ok(NoPath)
    return NonSneakyPath.create(raw, policy=policy)
