"""
Abstract digit contract shared by every level of the counter.

A digit is anything that can report validity, reset to its minimum, report
whether it sits at its maximum, render itself, and advance one raw step.
The increment algorithm is implemented once here and reused by leaf digits,
group digits, and the whole counter.
"""

from abc import ABC, abstractmethod


class Digit(ABC):
    """
    Base class for all digit-like values.

    Subclasses implement the primitive operations; ``increment`` combines them
    into the carry-aware step:

    1. If at maximum, reset to minimum and record an overflow.
    2. Otherwise advance one raw step.
    3. Repeat until the value is valid, which skips excluded symbols.

    Overflow is returned from ``increment`` and also kept on ``overflowed``
    until the next call.
    """

    _overflowed: bool = False

    @abstractmethod
    def is_valid(self) -> bool:
        """Return True if the current value is permitted."""

    @abstractmethod
    def set_min(self) -> None:
        """Reset to the minimum value."""

    @abstractmethod
    def is_max(self) -> bool:
        """Return True if the current value is the maximum."""

    @abstractmethod
    def render(self) -> str:
        """Render the current value as text."""

    @abstractmethod
    def advance(self) -> None:
        """Move one raw step forward. Only called by ``increment``."""

    @property
    def overflowed(self) -> bool:
        """Whether the most recent ``increment`` wrapped around."""
        return self._overflowed

    def increment(self) -> bool:
        """
        Add one to the digit.

        Returns:
            True if the digit wrapped from its maximum back to its minimum
        """
        self._overflowed = False
        while True:
            if self.is_max():
                self.set_min()
                self._overflowed = True
            else:
                self.advance()
            if self.is_valid():
                return self._overflowed

    def __str__(self) -> str:
        return self.render()
