"""String refinement ladder: EmptyString, NonEmptyString, SomeString, WhitespaceString.

Every string (or its absence) falls into exactly one of three classes:

- ``Empty``: None or the zero-length string
- ``WhitespaceString``: at least one character, all of them whitespace
- ``SomeString``: at least one non-whitespace character

``NonEmptyString`` is the common base of the last two. Values are immutable
msgspec structs, compared and hashed by value. The factories return Err for
text of the wrong class; constructing a rung directly with such text raises
ValueError.

Example:
    ```python
    create_string('  ')
    # WhitespaceString(value='  ')

    SomeString.create('docs').map(len)
    # Ok(4)
    ```
"""

from __future__ import annotations

from typing import Self

import msgspec

from refpath.errors import InvalidCharacterError, NullOrEmptyInputError, WhitespaceOnlyInputError
from refpath.result import Err, Ok, Result

__all__ = [
    'AnyString',
    'Empty',
    'EmptyString',
    'NonEmptyString',
    'SomeString',
    'WhitespaceString',
    'create_string',
]


class _StringBase(msgspec.Struct, frozen=True, gc=False):
    """Text operations shared by every rung of the ladder."""

    def __len__(self) -> int:
        return len(str(self))

    def contains(self, sub: str | _StringBase) -> bool:
        return str(sub) in str(self)

    def starts_with(self, prefix: str | _StringBase) -> bool:
        return str(self).startswith(str(prefix))

    def ends_with(self, suffix: str | _StringBase) -> bool:
        return str(self).endswith(str(suffix))

    def index_of(self, sub: str | _StringBase) -> int | None:
        """Position of the first occurrence of ``sub``, None if absent."""
        position = str(self).find(str(sub))
        return None if position < 0 else position

    @property
    def last_char(self) -> str | None:
        text = str(self)
        return text[-1] if text else None

    def equals(self, other: str | _StringBase | None, *, ignore_case: bool = False) -> bool:
        """Compare the text with another string, optionally ignoring case.

        None is treated like the empty string.
        """
        a, b = str(self), str(other) if other is not None else ''
        if ignore_case:
            return a.casefold() == b.casefold()
        return a == b

    def concat(self, other: str | _StringBase | None) -> AnyString:
        """Concatenate and re-classify; the result is as strong as the inputs allow."""
        return create_string(str(self) + (str(other) if other is not None else ''))


class EmptyString(_StringBase, frozen=True, gc=False):
    """The absence of characters. Use the ``Empty`` singleton."""

    def __str__(self) -> str:
        return ''


Empty = EmptyString()


class NonEmptyString(_StringBase, frozen=True, gc=False):
    """A string of length > 0 with arbitrary content.

    Attributes:
        value: The wrapped text.
    """

    value: str

    def __post_init__(self) -> None:
        if not self.value:
            raise ValueError(f'{type(self).__name__} requires at least one character')

    def __str__(self) -> str:
        return self.value

    @classmethod
    def create(cls, raw: str | None) -> Result[NonEmptyString, NullOrEmptyInputError]:
        """Validate that ``raw`` has at least one character.

        Returns:
            Ok with the precise refinement (SomeString or WhitespaceString),
            or Err(NullOrEmptyInputError).
        """
        match create_string(raw):
            case EmptyString():
                return Err(NullOrEmptyInputError())
            case refined:
                return Ok(refined)


class SomeString(NonEmptyString, frozen=True, gc=False):
    """A string with at least one non-whitespace character."""

    def __post_init__(self) -> None:
        if not self.value or self.value.isspace():
            raise ValueError(f'SomeString requires a non-whitespace character, got {self.value!r}')

    @classmethod
    def create(
        cls, raw: str | None, what: str = 'value'
    ) -> Result[SomeString, NullOrEmptyInputError | WhitespaceOnlyInputError]:
        """Validate that ``raw`` contains actual characters.

        Args:
            raw: The candidate string.
            what: Name of the input used in error messages.
        """
        match create_string(raw):
            case EmptyString():
                return Err(NullOrEmptyInputError(what))
            case WhitespaceString():
                return Err(WhitespaceOnlyInputError(what))
            case SomeString() as some:
                return Ok(some)
        raise AssertionError('unreachable')  # pragma: no cover

    def concat(self, other: str | _StringBase | None) -> SomeString:
        return SomeString(self.value + (str(other) if other is not None else ''))

    def upper(self) -> Self:
        return type(self)(self.value.upper())

    def lower(self) -> Self:
        return type(self)(self.value.lower())


class WhitespaceString(NonEmptyString, frozen=True, gc=False):
    """A string of length > 0 made of whitespace only."""

    def __post_init__(self) -> None:
        if not self.value or not self.value.isspace():
            raise ValueError(f'WhitespaceString requires whitespace only, got {self.value!r}')

    @classmethod
    def create(cls, raw: str | None) -> Result[WhitespaceString, NullOrEmptyInputError | InvalidCharacterError]:
        """Validate that ``raw`` is non-empty whitespace.

        A non-whitespace character is reported with its position.
        """
        match create_string(raw):
            case EmptyString():
                return Err(NullOrEmptyInputError())
            case WhitespaceString() as whitespace:
                return Ok(whitespace)
            case some:
                text = str(some)
                position = next(i for i, char in enumerate(text) if not char.isspace())
                return Err(InvalidCharacterError(text, position, what='whitespace string'))


type AnyString = EmptyString | WhitespaceString | SomeString


def create_string(raw: str | None) -> AnyString:
    """Classify ``raw`` into exactly one rung of the ladder.

    Rules, in order: None or '' is Empty, all-whitespace is a WhitespaceString,
    everything else is a SomeString.
    """
    if not raw:
        return Empty
    if raw.isspace():
        return WhitespaceString(raw)
    return SomeString(raw)
