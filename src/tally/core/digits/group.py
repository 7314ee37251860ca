"""
Two-character group digit: one letter followed by one number.

Groups range from A1 to Z9. The number is the low-order half; when it wraps
from 9 back to 1 the letter is incremented, and when the letter wraps from Z
back to A the whole group has overflowed.

Example:
    >>> group = GroupDigit.parse("C9")
    >>> group.increment()
    False
    >>> str(group)
    'E1'
"""

from dataclasses import dataclass, field

from tally.core.digits.base import Digit
from tally.core.digits.leaf import LetterDigit, NumberDigit

GROUP_WIDTH = 2


@dataclass
class GroupDigit(Digit):
    """Composite digit rendered as letter then number."""

    letter: LetterDigit = field(default_factory=LetterDigit)
    number: NumberDigit = field(default_factory=NumberDigit)

    @classmethod
    def parse(cls, text: str) -> "GroupDigit":
        """
        Build a group from the first two characters of ``text``.

        The result is not validated here; missing or out-of-alphabet
        characters produce a group whose ``is_valid()`` is False.

        Args:
            text: Group text such as "H5"

        Returns:
            A new GroupDigit
        """
        return cls(letter=LetterDigit(text[0:1]), number=NumberDigit(text[1:2]))

    def is_valid(self) -> bool:
        return self.letter.is_valid() and self.number.is_valid()

    def set_min(self) -> None:
        self.letter.set_min()
        self.number.set_min()

    def is_max(self) -> bool:
        return self.letter.is_max() and self.number.is_max()

    def advance(self) -> None:
        if self.number.increment():
            if self.letter.increment():
                self._overflowed = True

    def render(self) -> str:
        return self.letter.render() + self.number.render()
