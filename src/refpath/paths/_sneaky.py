"""Detection of '..' traversal in paths."""

from __future__ import annotations

from refpath.platform import PathPolicy

__all__ = ['is_sneaky']

_PARENT = '..'


def is_sneaky(path: str, policy: PathPolicy) -> bool:
    """Whether ``path`` walks upwards with a '..' segment.

    Both separators of the policy are checked independently, so inputs that
    mix them (legal on Windows) are caught as well.
    """
    if path == _PARENT:
        return True
    separators = {policy.separator, policy.alt_separator}
    for sep in separators:
        if path.startswith(_PARENT + sep) or path.endswith(sep + _PARENT):
            return True
    return any(left + _PARENT + right in path for left in separators for right in separators)
