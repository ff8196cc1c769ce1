"""Propagate exception for .bail() mechanism."""

from typing import Any


class Propagate(Exception):  # noqa: N818
    """Exception raised by .bail() to propagate an Err up the call stack.

    This is caught by the @result decorator to return the contained error.
    Validation pipelines that read better top to bottom than as a chain of
    and_then calls use it to stop at the first failed stage.
    """

    __slots__ = ('_value',)

    def __init__(self, value: Any) -> None:
        """Initialize Propagate with the Err to propagate.

        Args:
            value: The Err value being propagated.
        """
        self._value = value
        super().__init__(f'Propagate({value!r})')

    @property
    def value(self) -> Any:
        """The Err value being propagated."""
        return self._value
