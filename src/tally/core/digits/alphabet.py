"""
Symbol tables for the two digit alphabets.

Each alphabet is an explicit, ordered table of the symbols a digit may take.
Successor lookup walks the table by ordinal value, so a symbol that is not in
the table (an excluded letter such as D) still has a well-defined successor:
the next permitted symbol above it.

Alphabets:
    - LETTERS: A-Z without D, F, G, J, M, Q, V (19 symbols)
    - NUMBERS: 1-9

Example:
    >>> LETTERS.successor("C")
    'E'
    >>> LETTERS.successor("Z") is None
    True
    >>> NUMBERS.minimum
    '1'
"""

from pydantic import BaseModel, ConfigDict, field_validator


class Alphabet(BaseModel):
    """
    Ordered table of single-character symbols.

    Symbols must be unique and strictly ascending by ordinal value; the first
    symbol is the minimum and the last is the maximum.
    """

    symbols: str

    model_config = ConfigDict(frozen=True)

    @field_validator("symbols")
    @classmethod
    def validate_symbols(cls, v: str) -> str:
        """Validate that symbols are non-empty and strictly ascending."""
        if not v:
            raise ValueError("Alphabet must contain at least one symbol")
        if any(a >= b for a, b in zip(v, v[1:])):
            raise ValueError(f"Alphabet symbols must be strictly ascending: {v!r}")
        return v

    @property
    def minimum(self) -> str:
        return self.symbols[0]

    @property
    def maximum(self) -> str:
        return self.symbols[-1]

    def contains(self, symbol: str) -> bool:
        """Check whether a single character is a permitted symbol."""
        return len(symbol) == 1 and symbol in self.symbols

    def successor(self, symbol: str) -> str | None:
        """
        Return the next permitted symbol strictly above ``symbol``.

        Args:
            symbol: Current symbol; does not need to be in the table

        Returns:
            The next permitted symbol, or None if ``symbol`` is at or past
            the maximum
        """
        for candidate in self.symbols:
            if candidate > symbol:
                return candidate
        return None

    def __len__(self) -> int:
        return len(self.symbols)

    def __str__(self) -> str:
        return self.symbols


# A, B, C, E, H, I, K, L, N, O, P, R, S, T, U, W, X, Y, Z
LETTERS = Alphabet(symbols="ABCEHIKLNOPRSTUWXYZ")

# 1 - 9
NUMBERS = Alphabet(symbols="123456789")
