"""Platform path policy: separators, roots and forbidden characters.

Every validation step asks a PathPolicy instead of the host OS, so the same
pipeline can be exercised against POSIX and Windows rules on any machine.
The two predefined policies reproduce the rules of the respective platform:

- POSIX: ``/`` separates, a leading ``/`` is the only root, NUL is the only
  invalid path character and file names additionally exclude ``/``.
- WINDOWS: ``\\`` and ``/`` both separate, roots are ``C:``, ``C:\\``, ``\\``
  and UNC shares, control characters, ``|`` and the wildcards are invalid in
  paths, file names additionally exclude ``" < > : \\ /``, names compare
  case-insensitively and a final segment must not end in ``.`` or space.
"""

from __future__ import annotations

import ntpath
import os
from enum import StrEnum

import msgspec

__all__ = [
    'POSIX',
    'WINDOWS',
    'PathPolicy',
    'Platform',
    'host_policy',
    'policy_for',
]


class Platform(StrEnum):
    """Path semantics a policy reproduces."""

    POSIX = 'posix'
    WINDOWS = 'windows'


class PathPolicy(msgspec.Struct, frozen=True, gc=False):
    """Platform primitives consumed by the validation pipeline.

    Attributes:
        platform: Which platform's rules are reproduced.
        separator: Primary directory separator, appended to directory paths.
        alt_separator: Alternative separator accepted on input.
        invalid_path_chars: Characters rejected anywhere in a path.
        invalid_file_name_chars: Characters rejected in a single file name.
        wildcard_chars: Additional characters rejected in paths.
        case_sensitive: Whether two paths differing in case are distinct.
        forbids_trailing_period_or_space: Whether the last segment may end in '.' or ' '.
    """

    platform: Platform
    separator: str
    alt_separator: str
    invalid_path_chars: frozenset[str]
    invalid_file_name_chars: frozenset[str]
    wildcard_chars: frozenset[str] = frozenset()
    case_sensitive: bool = True
    forbids_trailing_period_or_space: bool = False

    def is_separator(self, char: str) -> bool:
        return char in (self.separator, self.alt_separator)

    def ends_in_separator(self, path: str) -> bool:
        return bool(path) and self.is_separator(path[-1])

    def root_length(self, path: str) -> int:
        """Length of the root prefix, 0 for relative paths."""
        if self.platform is Platform.WINDOWS:
            drive, root, _ = ntpath.splitroot(path)
            return len(drive) + len(root)
        return 1 if path.startswith(self.separator) else 0

    def is_rooted(self, path: str) -> bool:
        return self.root_length(path) > 0

    def is_fully_qualified(self, path: str) -> bool:
        """Whether the root pins the path to one location.

        Windows drive-relative (``C:x``) and drive-root-relative (``\\x``) paths
        are rooted but depend on the current drive or directory.
        """
        if self.platform is Platform.WINDOWS:
            drive, root, _ = ntpath.splitroot(path)
            return bool(drive) and (bool(root) or self.is_separator(drive[0]))
        return self.is_rooted(path)

    def dirname(self, path: str) -> str | None:
        """Directory part of a path.

        Returns:
            None when the path is a bare root, '' when it has no directory part,
            otherwise the directory with trailing separators removed (a root
            keeps its separator).
        """
        root = self.root_length(path)
        if len(path) <= root:
            return None
        end = len(path)
        while end > root and not self.is_separator(path[end - 1]):
            end -= 1
        while end > root and self.is_separator(path[end - 1]):
            end -= 1
        return path[:end]

    def basename(self, path: str) -> str:
        """Last segment of a path; '' when the path ends in a separator."""
        root = self.root_length(path)
        start = len(path)
        while start > root and not self.is_separator(path[start - 1]):
            start -= 1
        return path[start:]

    def trim_separators(self, path: str) -> str:
        """Strip trailing separators, never cutting into the root."""
        root = self.root_length(path)
        end = len(path)
        while end > root and self.is_separator(path[end - 1]):
            end -= 1
        return path[:end]

    def first_invalid_path_char(self, path: str) -> int | None:
        for position, char in enumerate(path):
            if char in self.invalid_path_chars or char in self.wildcard_chars:
                return position
        return None

    def first_invalid_file_name_char(self, name: str) -> int | None:
        for position, char in enumerate(name):
            if char in self.invalid_file_name_chars:
                return position
        return None

    def ends_with_period_or_space(self, path: str) -> bool:
        """Whether the last segment ends in '.' or ' ' (single '.' is allowed)."""
        name = self.basename(self.trim_separators(path))
        return len(name) > 1 and name[-1] in '. '

    def normalize_case(self, path: str) -> str:
        return path if self.case_sensitive else path.casefold()

    def same_path(self, a: str, b: str) -> bool:
        return self.normalize_case(a) == self.normalize_case(b)


_CONTROL_CHARS = frozenset(chr(code) for code in range(32))

POSIX = PathPolicy(
    platform=Platform.POSIX,
    separator='/',
    alt_separator='/',
    invalid_path_chars=frozenset('\0'),
    invalid_file_name_chars=frozenset('\0/'),
)

WINDOWS = PathPolicy(
    platform=Platform.WINDOWS,
    separator='\\',
    alt_separator='/',
    invalid_path_chars=_CONTROL_CHARS | frozenset('|'),
    invalid_file_name_chars=_CONTROL_CHARS | frozenset('"<>|:*?\\/'),
    wildcard_chars=frozenset('*?'),
    case_sensitive=False,
    forbids_trailing_period_or_space=True,
)

_POLICIES = {
    Platform.POSIX: POSIX,
    Platform.WINDOWS: WINDOWS,
}


def policy_for(platform: Platform | str) -> PathPolicy:
    """Look up the predefined policy of a platform.

    Raises:
        ValueError: If the name is not a known platform.
    """
    return _POLICIES[Platform(platform)]


def host_policy() -> PathPolicy:
    """The policy matching the interpreter's operating system."""
    return WINDOWS if os.name == 'nt' else POSIX
