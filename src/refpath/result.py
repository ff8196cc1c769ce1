"""Result[T, E]: the Ok / Err union every validating factory returns.

Validation stages are chained with ``and_then``; the first ``Err`` short-circuits
the rest of the pipeline, so no partially validated value ever reaches a caller.

Example:
    ```python
    from refpath import SomeString

    SomeString.create('docs').map(str.upper)
    # Ok('DOCS')

    SomeString.create('   ').map(str.upper)
    # Err(WhitespaceOnlyInputError(...))
    ```
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Any, NoReturn

from refpath.propagate import Propagate

__all__ = [
    'Err',
    'Ok',
    'Result',
    'partition_results',
    'sequence',
    'traverse',
]


@dataclass(slots=True, frozen=True)
class Ok[T]:
    """Represents a successful computation containing a value of type T.

    Attributes:
        value: The successful result value.
    """

    value: T
    __match_args__ = ('value',)

    def is_ok(self) -> bool:
        """Return True, indicating this is a successful result."""
        return True

    def is_err(self) -> bool:
        """Return False, indicating this is not an error result."""
        return False

    def is_ok_and(self, pred: Callable[[T], bool]) -> bool:
        """Test if the value satisfies a predicate.

        Args:
            pred: A callable that takes the value and returns a boolean.

        Returns:
            bool: True if the predicate returns True for the value, False otherwise.
        """
        return pred(self.value)

    def is_err_and(self, pred: Callable[[BaseException], bool]) -> bool:  # noqa: ARG002
        """Test if the error satisfies a predicate (always False for Ok)."""
        return False

    def map[U](self, f: Callable[[T], U]) -> Ok[U]:
        """Transform the value using a function.

        Args:
            f: A callable that takes the value and returns a new value of type U.

        Returns:
            Ok[U]: A new Ok containing the transformed value.
        """
        return Ok(f(self.value))

    def map_err[F: BaseException](self, f: Callable[[BaseException], F]) -> Ok[T]:  # noqa: ARG002
        """Transform the error (no-op for Ok)."""
        return self

    def map_or[U](self, default: U, f: Callable[[T], U]) -> U:  # noqa: ARG002
        """Apply function to value or return default (always applies function for Ok).

        Args:
            default: Default value to return if Err (unused for Ok).
            f: Function to apply to the value.

        Returns:
            U: The result of applying f to the value.
        """
        return f(self.value)

    def inspect(self, f: Callable[[T], Any]) -> Ok[T]:
        """Call a function with the value for side effects.

        Args:
            f: A callable that takes the value and performs side effects.

        Returns:
            Ok[T]: Returns self unchanged.
        """
        f(self.value)
        return self

    def inspect_err(self, f: Callable[[BaseException], Any]) -> Ok[T]:  # noqa: ARG002
        """Call a function with the error for side effects (no-op for Ok)."""
        return self

    def and_then[U, E: BaseException](self, f: Callable[[T], Ok[U] | Err[E]]) -> Ok[U] | Err[E]:
        """Chain a computation that may fail.

        Also known as bind or flatmap.

        Args:
            f: A callable that takes the value and returns a Result.

        Returns:
            Ok[U] | Err[E]: The result of applying f to the value.
        """
        return f(self.value)

    def or_else[F: BaseException](self, f: Callable[[BaseException], Ok[T] | Err[F]]) -> Ok[T]:  # noqa: ARG002
        """Handle error case (no-op for Ok)."""
        return self

    def unwrap(self) -> T:
        """Unwrap the value.

        Returns:
            T: The contained value.
        """
        return self.value

    def unwrap_or(self, default: T) -> T:  # noqa: ARG002
        """Unwrap the value or return a default (the value, for Ok)."""
        return self.value

    def unwrap_or_else(self, f: Callable[[BaseException], T]) -> T:  # noqa: ARG002
        """Unwrap the value or compute a default from an error (the value, for Ok)."""
        return self.value

    def unwrap_err(self) -> NoReturn:
        """Unwrap the error (panics for Ok).

        Raises:
            AssertionError: Always raised for Ok instances.
        """
        raise AssertionError(f'called unwrap_err() on Ok({self.value!r})')

    def expect(self, msg: str) -> T:  # noqa: ARG002
        """Unwrap the value with a custom error message (unused for Ok)."""
        return self.value

    def ok(self) -> T | None:
        """Convert to an optional value."""
        return self.value

    def err(self) -> None:
        """Convert to an optional error (None for Ok)."""
        return None

    def bail(self) -> T:
        """Return the contained value (no-op for Ok).

        This is the equivalent of Rust's ? operator. For Err it raises
        Propagate, which the @result decorator turns back into the Err.
        """
        return self.value

    def __repr__(self) -> str:
        """Return a string representation of the Ok instance."""
        return f'Ok({self.value!r})'


@dataclass(slots=True, frozen=True)
class Err[E: BaseException]:
    """Represents a failed computation containing an error of type E.

    Attributes:
        error: The exception describing why the computation failed.
    """

    error: E
    __match_args__ = ('error',)

    def is_ok(self) -> bool:
        """Return False, indicating this is not a successful result."""
        return False

    def is_err(self) -> bool:
        """Return True, indicating this is an error result."""
        return True

    def is_ok_and(self, pred: Callable[[Any], bool]) -> bool:  # noqa: ARG002
        """Test if the value satisfies a predicate (always False for Err)."""
        return False

    def is_err_and(self, pred: Callable[[E], bool]) -> bool:
        """Test if the error satisfies a predicate.

        Args:
            pred: A callable that takes the error and returns a boolean.

        Returns:
            bool: True if the predicate returns True for the error.
        """
        return pred(self.error)

    def map[U](self, f: Callable[[Any], U]) -> Err[E]:  # noqa: ARG002
        """Transform the value (no-op for Err)."""
        return self

    def map_err[F: BaseException](self, f: Callable[[E], F]) -> Err[F]:
        """Transform the error using a function.

        Args:
            f: A callable that takes the error and returns a new error.

        Returns:
            Err[F]: A new Err containing the transformed error.
        """
        return Err(f(self.error))

    def map_or[U](self, default: U, f: Callable[[Any], U]) -> U:  # noqa: ARG002
        """Return the default, since there is no value to map."""
        return default

    def inspect(self, f: Callable[[Any], Any]) -> Err[E]:  # noqa: ARG002
        """Call a function with the value for side effects (no-op for Err)."""
        return self

    def inspect_err(self, f: Callable[[E], Any]) -> Err[E]:
        """Call a function with the error for side effects.

        Args:
            f: A callable that takes the error and performs side effects.

        Returns:
            Err[E]: Returns self unchanged.
        """
        f(self.error)
        return self

    def and_then[U](self, f: Callable[[Any], Ok[U] | Err[E]]) -> Err[E]:  # noqa: ARG002
        """Chain a computation that may fail (short-circuits for Err)."""
        return self

    def or_else[T, F: BaseException](self, f: Callable[[E], Ok[T] | Err[F]]) -> Ok[T] | Err[F]:
        """Recover from the error.

        Args:
            f: A callable that takes the error and returns a new Result.

        Returns:
            Ok[T] | Err[F]: The Result returned by f.
        """
        return f(self.error)

    def unwrap(self) -> NoReturn:
        """Unwrap the value (panics for Err).

        Raises:
            RuntimeError: Always, chained to the contained error.
        """
        raise RuntimeError(f'called unwrap() on Err({self.error!r})') from self.error

    def unwrap_or[T](self, default: T) -> T:
        """Return the default value since this is Err."""
        return default

    def unwrap_or_else[T](self, f: Callable[[E], T]) -> T:
        """Compute a default value from the error."""
        return f(self.error)

    def unwrap_err(self) -> E:
        """Unwrap the error."""
        return self.error

    def expect(self, msg: str) -> NoReturn:
        """Raise with a custom message.

        Raises:
            RuntimeError: Always, with the custom message, chained to the error.
        """
        raise RuntimeError(f'{msg}: {self.error!r}') from self.error

    def ok(self) -> None:
        """Convert to an optional value (None for Err)."""
        return None

    def err(self) -> E:
        """Convert to an optional error."""
        return self.error

    def bail(self) -> NoReturn:
        """Raise Propagate to return this Err from the enclosing @result function.

        Raises:
            Propagate: Always, containing this Err.
        """
        raise Propagate(self)

    def __repr__(self) -> str:
        """Return a string representation of the Err instance."""
        return f'Err({self.error!r})'


type Result[T, E: BaseException] = Ok[T] | Err[E]


def sequence[T, E: BaseException](rs: Iterable[Result[T, E]]) -> Result[list[T], E]:
    """Collect values from an iterable of Results, short-circuiting on first Err.

    Args:
        rs: An iterable of Result instances.

    Returns:
        Result[list[T], E]: Ok with list of values if all Ok, otherwise first Err encountered.
    """
    out: list[T] = []
    for r in rs:
        if isinstance(r, Ok):
            out.append(r.value)
        else:
            return r
    return Ok(out)


def traverse[U, T, E: BaseException](xs: Iterable[U], f: Callable[[U], Result[T, E]]) -> Result[list[T], E]:
    """Map a function over an iterable and collect the results, short-circuiting on first Err.

    Example:
        ```python
        traverse(['/srv/a', '/srv/b'], AbsoluteDirectoryPath.create)
        # Ok([AbsoluteDirectoryPath('/srv/a/'), AbsoluteDirectoryPath('/srv/b/')])
        ```
    """
    return sequence(f(x) for x in xs)


def partition_results[T, E: BaseException](rs: Iterable[Result[T, E]]) -> tuple[list[T], list[E]]:
    """Separate an iterable of Results into successes and failures.

    Args:
        rs: An iterable of Result instances.

    Returns:
        tuple[list[T], list[E]]: A tuple of (successful_values, errors).
    """
    oks: list[T] = []
    errs: list[E] = []
    for r in rs:
        if isinstance(r, Ok):
            oks.append(r.value)
        else:
            errs.append(r.error)
    return oks, errs
