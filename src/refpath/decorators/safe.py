"""@safe decorator for catching exceptions (the Try monad)."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, ParamSpec, TypeVar, overload

import wrapt

from refpath.result import Err, Ok

__all__ = ['safe']

P = ParamSpec('P')
T = TypeVar('T')
E = TypeVar('E', bound=BaseException)


@overload
def safe[**P, T](
    func: Callable[P, T],
) -> Callable[P, Ok[T] | Err[Exception]]: ...


@overload
def safe[E: BaseException](
    *,
    exceptions: tuple[type[E], ...],
) -> Callable[[Callable[P, T]], Callable[P, Ok[T] | Err[E]]]: ...


@overload
def safe[E: BaseException](
    func: None = None,
    *,
    exceptions: tuple[type[E], ...] | None = None,
) -> Callable[[Callable[P, T]], Callable[P, Ok[T] | Err[E]]]: ...


def safe[**P, T](
    func: Callable[P, T] | None = None,
    *,
    exceptions: tuple[type[Any], ...] | None = None,
) -> Any:
    """Decorator that catches exceptions and returns Err.

    Wraps a function so that it returns Ok(value) on success and
    Err(exception) if an exception is raised.

    Can be used with or without arguments:
        @safe
        def risky(): ...

        @safe(exceptions=(OSError,))
        def touch_disk(): ...

    Args:
        func: The function to wrap (when used without parentheses).
        exceptions: Tuple of exception types to catch. Defaults to (Exception,).

    Returns:
        A wrapped function that returns Result[T, E] instead of T.

    Example:
        ```python
        make_dirs = safe(exceptions=(OSError,))(os.makedirs)
        make_dirs('/srv/data', exist_ok=True)
        # Ok(None)
        ```
    """
    catch = exceptions if exceptions is not None else (Exception,)

    @wrapt.decorator
    def wrapper(
        wrapped: Callable[P, T],
        instance: Any,  # noqa: ARG001
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
    ) -> Ok[T] | Err[Any]:
        try:
            result = wrapped(*args, **kwargs)
            return Ok(result)
        except catch as e:
            return Err(e)

    if func is not None:
        return wrapper(func)
    return wrapper
