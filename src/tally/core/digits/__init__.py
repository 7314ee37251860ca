"""
Digit system for hyphen-grouped letter/number counters.

Counter values look like "H5-T3-Z9": one to ten groups, each a letter
(A-Z without D, F, G, J, M, Q, V) followed by a digit (1-9), most-significant
group first. Incrementing carries from the number to the letter within a
group, then from group to group, growing the counter by one group when the
most-significant group overflows.

Public API:
    Alphabets:
        - Alphabet: Ordered table of permitted symbols
        - LETTERS: Letter alphabet (A..Z minus D, F, G, J, M, Q, V)
        - NUMBERS: Number alphabet (1..9)

    Digits:
        - Digit: Abstract digit contract with the shared increment algorithm
        - LetterDigit: Single letter digit
        - NumberDigit: Single number digit
        - GroupDigit: Letter + number pair (A1..Z9)
        - Counter: Thread-safe sequence of 1..MAX_GROUPS groups

    Parser functions:
        - parse_counter: Parse text into a Counter (lenient or strict)
        - validate_counter: Check if text is a valid counter
        - split_groups: Tokenize text into groups
        - CounterParseError: Exception for malformed text

Example:
    >>> from tally.core.digits import Counter
    >>> counter = Counter.parse("C9")
    >>> counter.increment()
    False
    >>> str(counter)
    'E1'
"""

from tally.core.digits.alphabet import LETTERS, NUMBERS, Alphabet
from tally.core.digits.base import Digit
from tally.core.digits.counter import GROUP_SEPARATOR, MAX_GROUPS, Counter, GroupSequence
from tally.core.digits.group import GroupDigit
from tally.core.digits.leaf import LetterDigit, NumberDigit
from tally.core.digits.parser import (
    CounterParseError,
    parse_counter,
    split_groups,
    validate_counter,
)

__all__ = [
    # Alphabets
    "Alphabet",
    "LETTERS",
    "NUMBERS",
    # Digits
    "Digit",
    "LetterDigit",
    "NumberDigit",
    "GroupDigit",
    "GroupSequence",
    "Counter",
    "MAX_GROUPS",
    "GROUP_SEPARATOR",
    # Parser functions
    "parse_counter",
    "validate_counter",
    "split_groups",
    "CounterParseError",
]
