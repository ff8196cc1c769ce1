"""@result decorator for catching Propagate exceptions."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, ParamSpec, TypeVar

import wrapt

from refpath.propagate import Propagate
from refpath.result import Err, Ok

__all__ = ['result']

P = ParamSpec('P')
T = TypeVar('T')
E = TypeVar('E', bound=BaseException)


def result(func: Callable[P, Ok[T] | Err[E]]) -> Callable[P, Ok[T] | Err[E]]:
    """Decorator that catches Propagate exceptions for .bail() support.

    When a function decorated with @result calls .bail() on an Err,
    the Propagate exception is caught and the Err is returned.
    This enables Rust-like ? operator semantics.

    Args:
        func: The function to wrap. Must return a Result type.

    Returns:
        A wrapped function that catches Propagate and returns the contained Err.

    Example:
        ```python
        @result
        def config_file(raw_dir: str, raw_name: str) -> Result[AbsoluteFilePath, PathError]:
            directory = AbsoluteDirectoryPath.create(raw_dir).bail()
            name = FileName.create(raw_name).bail()
            return Ok(directory.combine_file_name(name))
        ```
    """

    @wrapt.decorator
    def sync_wrapper(
        wrapped: Callable[P, Ok[T] | Err[E]],
        instance: Any,  # noqa: ARG001
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
    ) -> Ok[T] | Err[E]:
        try:
            return wrapped(*args, **kwargs)
        except Propagate as p:
            return p.value  # type: ignore[no-any-return]

    return sync_wrapper(func)  # type: ignore[return-value]
