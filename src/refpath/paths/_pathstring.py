"""NonEmptyPathString: the parsed, character-checked form of a raw path."""

from __future__ import annotations

from typing import TYPE_CHECKING

import msgspec

from refpath._config import default_policy
from refpath.assertions import fail_if
from refpath.errors import InvalidCharacterError, PathError, TrailingPeriodOrSpaceError
from refpath.platform import PathPolicy
from refpath.result import Err, Ok, Result
from refpath.strings import SomeString

if TYPE_CHECKING:
    from collections.abc import Callable

__all__ = ['NonEmptyPathString']


class NonEmptyPathString(msgspec.Struct, frozen=True, gc=False):
    """A non-empty path free of invalid characters, with its root measured.

    Attributes:
        path: The path exactly as given.
        trimmed_path: ``path`` without trailing separators; a bare root keeps its separator.
        root_length: Length of the root prefix, 0 for relative paths.
        policy: The platform rules the path was checked against.
    """

    path: str
    trimmed_path: str
    root_length: int
    policy: PathPolicy

    def __post_init__(self) -> None:
        if not self.path or self.path.isspace():
            raise ValueError(f'{self.path!r} is not a path')
        if self.policy.first_invalid_path_char(self.path) is not None:
            raise ValueError(f'path {self.path!r} contains an invalid character')
        if (self.trimmed_path, self.root_length) != (
            self.policy.trim_separators(self.path),
            self.policy.root_length(self.path),
        ):
            raise ValueError(f'trimmed_path and root_length do not match {self.path!r}')

    def __str__(self) -> str:
        return self.path

    @classmethod
    def parse(
        cls, raw: str | SomeString | None, policy: PathPolicy | None = None
    ) -> Result[NonEmptyPathString, PathError]:
        """Check the characters of ``raw`` and compute its root and trimmed form.

        Args:
            raw: The candidate path.
            policy: Platform rules; the configured default if None.

        Returns:
            Ok(NonEmptyPathString), or Err with NullOrEmptyInputError,
            WhitespaceOnlyInputError, InvalidCharacterError or
            TrailingPeriodOrSpaceError.
        """
        if policy is None:
            policy = default_policy()
        return (
            SomeString.create(None if raw is None else str(raw), what='path')
            .map(str)
            .and_then(_reject_invalid_chars(policy))
            .and_then(
                fail_if(
                    lambda path: policy.forbids_trailing_period_or_space and policy.ends_with_period_or_space(path),
                    TrailingPeriodOrSpaceError,
                )
            )
            .map(lambda path: cls.from_checked(path, policy))
        )

    @classmethod
    def from_checked(cls, path: str, policy: PathPolicy) -> NonEmptyPathString:
        """Build from a string whose characters are already known to be valid."""
        return cls(
            path=path,
            trimmed_path=policy.trim_separators(path),
            root_length=policy.root_length(path),
            policy=policy,
        )

    def ends_in_directory_separator(self) -> bool:
        return self.policy.ends_in_separator(self.path)

    @property
    def is_rooted(self) -> bool:
        return self.root_length > 0

    @property
    def is_fully_qualified(self) -> bool:
        return self.policy.is_fully_qualified(self.path)

    @property
    def is_root(self) -> bool:
        """True when nothing but the root remains after trimming."""
        return self.is_rooted and len(self.trimmed_path) <= self.root_length

    @property
    def file_name_segment(self) -> str:
        """Last segment of the trimmed path, '' for a bare root."""
        return self.policy.basename(self.trimmed_path)

    def with_separator_tail(self) -> str:
        """The path guaranteed to end in a directory separator."""
        if self.ends_in_directory_separator():
            return self.path
        return self.path + self.policy.separator

    def combine(self, suffix: str | NonEmptyPathString) -> NonEmptyPathString:
        """Append ``suffix`` after a separator and re-trim.

        The suffix is not checked again: both parts were validated already.
        """
        head = self.trimmed_path
        if not self.policy.ends_in_separator(head):
            head += self.policy.separator
        return self.from_checked(head + str(suffix), self.policy)


def _reject_invalid_chars(policy: PathPolicy) -> Callable[[str], Result[str, InvalidCharacterError]]:
    def step(path: str) -> Result[str, InvalidCharacterError]:
        position = policy.first_invalid_path_char(path)
        if position is None:
            return Ok(path)
        return Err(InvalidCharacterError(path, position))

    return step
