"""
Multi-group counter.

A counter is a sequence of 1 to MAX_GROUPS group digits. Text lists groups
most-significant first ("H5-T3-Z9"); internally groups are kept
least-significant first so carries walk forward through the list.

When the most-significant group overflows the counter either grows by one
group (below MAX_GROUPS) or wraps back to a single minimum group and reports
overflow.

Example:
    >>> counter = Counter.parse("Z9-Z9")
    >>> counter.increment()
    False
    >>> str(counter)
    'A1-A1-A1'
"""

from __future__ import annotations

import copy
import logging
import threading
from collections.abc import Iterable

from tally.core.digits.base import Digit
from tally.core.digits.group import GroupDigit

logger = logging.getLogger(__name__)

MAX_GROUPS = 10
GROUP_SEPARATOR = "-"


class GroupSequence(Digit):
    """
    Unsynchronized group list implementing the digit contract.

    Groups are stored least-significant first. ``Counter`` wraps this with a
    lock; use it directly only from a single thread.
    """

    def __init__(self, groups: list[GroupDigit]) -> None:
        self.groups = groups or [GroupDigit()]

    def is_valid(self) -> bool:
        return all(group.is_valid() for group in self.groups)

    def set_min(self) -> None:
        self.groups = [GroupDigit()]

    def is_max(self) -> bool:
        return len(self.groups) == MAX_GROUPS and all(group.is_max() for group in self.groups)

    def advance(self) -> None:
        last = len(self.groups) - 1
        for i, group in enumerate(self.groups):
            if not group.increment():
                return
            if i < last:
                continue
            if len(self.groups) == MAX_GROUPS:
                self._overflowed = True
                self.set_min()
            else:
                self.groups.append(GroupDigit())
                logger.debug("Counter grew to %d groups", len(self.groups))
            return

    def render(self) -> str:
        return GROUP_SEPARATOR.join(group.render() for group in reversed(self.groups))


class Counter(Digit):
    """
    Thread-safe counter value.

    Every public operation holds one lock for its full duration, so readers
    never observe a half-carried sequence.

    Args:
        groups: Groups in text order (most-significant first). Defaults to a
            single minimum group. The counter keeps its own copies.

    Raises:
        ValueError: If more than MAX_GROUPS groups are given
    """

    def __init__(self, groups: Iterable[GroupDigit] = ()) -> None:
        ordered = [copy.deepcopy(group) for group in groups]
        if len(ordered) > MAX_GROUPS:
            raise ValueError(f"Counter supports at most {MAX_GROUPS} groups, got {len(ordered)}")
        ordered.reverse()
        self._sequence = GroupSequence(ordered)
        self._lock = threading.Lock()

    @classmethod
    def parse(cls, text: str, *, strict: bool = False) -> Counter:
        """
        Build a counter from text such as "H5-T3-Z9".

        Args:
            text: Counter text, most-significant group first
            strict: Raise instead of falling back to the default value

        Returns:
            The parsed counter, or the default counter (A1) on bad input
            when not strict

        Raises:
            CounterParseError: If strict and the text is malformed
        """
        from tally.core.digits.parser import parse_counter

        return parse_counter(text, strict=strict)

    @property
    def overflowed(self) -> bool:
        with self._lock:
            return self._sequence.overflowed

    @property
    def groups(self) -> tuple[str, ...]:
        """Group texts, most-significant first."""
        with self._lock:
            return tuple(group.render() for group in reversed(self._sequence.groups))

    def is_valid(self) -> bool:
        with self._lock:
            return self._sequence.is_valid()

    def set_min(self) -> None:
        with self._lock:
            self._sequence.set_min()

    def is_max(self) -> bool:
        with self._lock:
            return self._sequence.is_max()

    def advance(self) -> None:
        with self._lock:
            self._sequence.advance()

    def increment(self) -> bool:
        with self._lock:
            wrapped = self._sequence.increment()
        if wrapped:
            logger.debug("Counter wrapped around after %d groups", MAX_GROUPS)
        return wrapped

    def render(self) -> str:
        with self._lock:
            return self._sequence.render()

    def __len__(self) -> int:
        with self._lock:
            return len(self._sequence.groups)

    def __repr__(self) -> str:
        return f"Counter({self.render()!r})"
