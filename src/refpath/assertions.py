"""assert_result and fail_if: guard steps for validation pipelines.

- assert_result: Returns Result[None, E] based on a condition
- fail_if: Builds an and_then step that rejects values matching a predicate
"""

from __future__ import annotations

from collections.abc import Callable
from typing import overload

from refpath.result import Err, Ok, Result

__all__ = ['assert_result', 'fail_if']


@overload
def assert_result[E: BaseException](condition: bool, error: E) -> Result[None, E]: ...


@overload
def assert_result[E: BaseException](
    condition: bool, error: Callable[[], E], *, lazy: bool = True
) -> Result[None, E]: ...


def assert_result[E: BaseException](
    condition: bool,
    error: E | Callable[[], E],
    *,
    lazy: bool = False,
) -> Result[None, E]:
    """Return Ok(None) if condition is True, else Err(error).

    This is useful for validation pipelines where you want to short-circuit
    on the first failed condition using Result's and_then or the @result decorator.

    Args:
        condition: The condition to check.
        error: The error value, or a callable that produces it (if lazy=True).
        lazy: If True, treat error as a callable and only invoke it on failure.

    Returns:
        Ok(None) if condition is True, Err(error) if False.

    Example:
        ```python
        assert_result(True, ValueError('unused'))
        # Ok(None)

        assert_result(False, lambda: NotRootedError('docs'), lazy=True)
        # Err(NotRootedError(...))
        ```
    """
    if condition:
        return Ok(None)

    if lazy and callable(error):
        return Err(error())  # type: ignore[return-value]
    return Err(error)  # type: ignore[arg-type]


def fail_if[T, E: BaseException](
    predicate: Callable[[T], bool],
    error: E | Callable[[T], E],
) -> Callable[[T], Result[T, E]]:
    """Build a pipeline step that passes its input through unless predicate holds.

    Args:
        predicate: Rejects the value when it returns True.
        error: The error to return, or a factory receiving the rejected value.

    Returns:
        A function suitable for ``Result.and_then``.

    Example:
        ```python
        Ok(parsed).and_then(fail_if(lambda p: p.is_sneaky, lambda p: SneakyTraversalError(p.path)))
        ```
    """

    def step(value: T) -> Result[T, E]:
        if not predicate(value):
            return Ok(value)
        if isinstance(error, BaseException):
            return Err(error)
        return Err(error(value))

    return step
