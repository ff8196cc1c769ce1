"""Decorators: @safe and @result."""

from refpath.decorators.result import result
from refpath.decorators.safe import safe

__all__ = [
    'result',
    'safe',
]
