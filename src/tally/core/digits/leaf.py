"""Single-character digits backed by a symbol table."""

from dataclasses import dataclass
from typing import ClassVar

from tally.core.digits.alphabet import LETTERS, NUMBERS, Alphabet
from tally.core.digits.base import Digit


@dataclass
class SymbolDigit(Digit):
    """
    One character drawn from ``alphabet``.

    ``None`` means "start at the minimum". Any other string is stored as-is,
    so a digit built from bad input simply reports ``is_valid() == False``.
    """

    alphabet: ClassVar[Alphabet]

    value: str | None = None

    def __post_init__(self) -> None:
        if self.value is None:
            self.value = self.alphabet.minimum

    def is_valid(self) -> bool:
        return self.alphabet.contains(self.render())

    def set_min(self) -> None:
        self.value = self.alphabet.minimum

    def is_max(self) -> bool:
        return self.value == self.alphabet.maximum

    def advance(self) -> None:
        # Raw values above the maximum have no successor; they land on the
        # minimum and the increment loop accepts it.
        nxt = self.alphabet.successor(self.render())
        self.value = nxt if nxt is not None else self.alphabet.minimum

    def render(self) -> str:
        return self.value or ""


@dataclass
class LetterDigit(SymbolDigit):
    """Letter digit: A-Z without D, F, G, J, M, Q, V."""

    alphabet: ClassVar[Alphabet] = LETTERS


@dataclass
class NumberDigit(SymbolDigit):
    """Number digit: 1-9."""

    alphabet: ClassVar[Alphabet] = NUMBERS
