"""
Text parsing and validation for counter values.

Counter text is one to ten two-character groups joined by "-", most
significant first:

    A1
    Z9-A1
    H5-T3-Z9

Each group is a letter from LETTERS followed by a digit from NUMBERS.

Parsing is all-or-nothing. A valid prefix followed by a bad group does not
produce a partial counter: lenient parsing falls back to the default value
(A1), strict parsing raises CounterParseError.

Public API:
    - parse_counter: Parse text into a Counter
    - validate_counter: Check whether text is a valid counter
    - split_groups: Tokenize text into validated GroupDigit values
    - CounterParseError: Raised for malformed text
"""

import logging
import re

from tally.core.digits.alphabet import LETTERS, NUMBERS
from tally.core.digits.counter import GROUP_SEPARATOR, MAX_GROUPS, Counter
from tally.core.digits.group import GROUP_WIDTH, GroupDigit

logger = logging.getLogger(__name__)

_GROUP_PATTERN = rf"[{LETTERS}][{NUMBERS}]"
_COUNTER_REGEX = re.compile(
    rf"{_GROUP_PATTERN}(?:{GROUP_SEPARATOR}{_GROUP_PATTERN}){{0,{MAX_GROUPS - 1}}}"
)


class CounterParseError(ValueError):
    """Raised when counter text is malformed."""

    def __init__(self, text: str, reason: str, position: int | None = None):
        self.text = text
        self.reason = reason
        self.position = position
        where = f" (group {position + 1})" if position is not None else ""
        super().__init__(f"Invalid counter {text!r}{where}: {reason}")


def split_groups(text: str) -> list[GroupDigit]:
    """
    Split counter text into groups, most-significant first.

    Args:
        text: Counter text such as "H5-T3-Z9"

    Returns:
        Parsed groups in text order

    Raises:
        CounterParseError: If the text is empty, has too many groups, or any
            group is not a letter followed by a digit

    Examples:
        >>> [str(g) for g in split_groups("H5-T3")]
        ['H5', 'T3']
        >>> split_groups("A1-")
        Traceback (most recent call last):
            ...
        CounterParseError: Invalid counter 'A1-' (group 2): empty group
    """
    if not text:
        raise CounterParseError(text, "empty text")

    tokens = text.split(GROUP_SEPARATOR)
    if len(tokens) > MAX_GROUPS:
        raise CounterParseError(text, f"more than {MAX_GROUPS} groups")

    groups: list[GroupDigit] = []
    for position, token in enumerate(tokens):
        if not token:
            raise CounterParseError(text, "empty group", position)
        if len(token) != GROUP_WIDTH:
            raise CounterParseError(
                text, f"group {token!r} must be exactly {GROUP_WIDTH} characters", position
            )
        group = GroupDigit.parse(token)
        if not group.is_valid():
            raise CounterParseError(
                text, f"group {token!r} is not a letter from {LETTERS} and a digit 1-9", position
            )
        groups.append(group)
    return groups


def parse_counter(text: str, *, strict: bool = False) -> Counter:
    """
    Parse counter text into a Counter.

    Empty text yields the default counter (A1) in both modes.

    Args:
        text: Counter text, most-significant group first
        strict: If True, raise on malformed text instead of falling back

    Returns:
        The parsed Counter

    Raises:
        CounterParseError: If strict and the text is malformed

    Examples:
        >>> str(parse_counter("H5-T3-Z9"))
        'H5-T3-Z9'
        >>> str(parse_counter("D1"))
        'A1'
    """
    if not text:
        return Counter()

    try:
        groups = split_groups(text)
    except CounterParseError as e:
        if strict:
            raise
        logger.debug("Falling back to default counter: %s", e)
        return Counter()
    return Counter(groups)


def validate_counter(text: str) -> bool:
    """
    Check whether text is a valid counter without building one.

    Examples:
        >>> validate_counter("Z9-A1")
        True
        >>> validate_counter("A0")
        False
    """
    return _COUNTER_REGEX.fullmatch(text) is not None
