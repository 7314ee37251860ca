"""
Tests for the multi-group counter.

Covers carry between groups, growth of the group sequence, wraparound at
MAX_GROUPS, and locking under concurrent increments.
"""

import threading

import pytest

from tally.core.digits import MAX_GROUPS, Counter, GroupDigit, GroupSequence


def _counter(text: str) -> Counter:
    return Counter(GroupDigit.parse(token) for token in text.split("-"))


class TestCounterConstruction:
    """Tests for building counters."""

    def test_default_is_a1(self) -> None:
        """Test that the default counter is a single A1 group."""
        counter = Counter()
        assert str(counter) == "A1"
        assert len(counter) == 1
        assert counter.is_valid() is True

    def test_groups_in_text_order(self) -> None:
        """Test that groups are given and reported most-significant first."""
        counter = _counter("H5-T3-Z9")
        assert counter.groups == ("H5", "T3", "Z9")
        assert counter.render() == "H5-T3-Z9"

    def test_too_many_groups(self) -> None:
        """Test that more than MAX_GROUPS groups are refused."""
        with pytest.raises(ValueError, match="at most 10 groups"):
            Counter(GroupDigit() for _ in range(MAX_GROUPS + 1))

    def test_invalid_group_reported(self) -> None:
        """Test that an unvalidated group makes the counter invalid."""
        counter = Counter([GroupDigit(), GroupDigit.parse("D1")])
        assert counter.is_valid() is False

    def test_same_group_passed_twice(self) -> None:
        """Test that one GroupDigit given twice becomes two independent groups."""
        group = GroupDigit.parse("Z9")
        counter = Counter([group, group])
        counter.increment()
        assert str(counter) == "A1-A1-A1"

    def test_caller_group_changes_do_not_leak(self) -> None:
        """Test that mutating a group after construction leaves the counter alone."""
        group = GroupDigit.parse("B2")
        counter = Counter([group])
        group.increment()
        assert str(group) == "B3"
        assert str(counter) == "B2"

    def test_repr(self) -> None:
        """Test the debug representation."""
        assert repr(_counter("B2-C3")) == "Counter('B2-C3')"


class TestCounterIncrement:
    """Tests for Counter.increment."""

    def test_low_group_step(self) -> None:
        """Test that only the least-significant group moves without a carry."""
        counter = _counter("H5-T3")
        assert counter.increment() is False
        assert str(counter) == "H5-T4"

    def test_carry_into_next_group(self) -> None:
        """Test that Z9 in the low group carries into the next group."""
        counter = _counter("H5-Z9")
        counter.increment()
        assert str(counter) == "H6-A1"

    def test_carry_through_several_groups(self) -> None:
        """Test that a carry ripples until a group absorbs it."""
        counter = _counter("C9-Z9-Z9")
        counter.increment()
        assert str(counter) == "E1-A1-A1"

    def test_growth_from_single_group(self) -> None:
        """Test that Z9 grows to A1-A1."""
        counter = _counter("Z9")
        assert counter.increment() is False
        assert str(counter) == "A1-A1"
        assert len(counter) == 2

    def test_growth_from_two_groups(self) -> None:
        """Test that Z9-Z9 grows to A1-A1-A1."""
        counter = _counter("Z9-Z9")
        assert counter.increment() is False
        assert str(counter) == "A1-A1-A1"
        assert counter.overflowed is False

    def test_growth_to_max_groups(self) -> None:
        """Test that nine maxed groups still grow to ten."""
        counter = Counter(GroupDigit.parse("Z9") for _ in range(MAX_GROUPS - 1))
        assert counter.increment() is False
        assert len(counter) == MAX_GROUPS
        assert counter.groups == ("A1",) * MAX_GROUPS

    def test_wraparound_at_max_groups(self, max_counter: Counter) -> None:
        """Test that ten Z9 groups wrap to the single-group default."""
        assert max_counter.is_max() is True
        assert max_counter.increment() is True
        assert max_counter.overflowed is True
        assert str(max_counter) == "A1"
        assert len(max_counter) == 1

    def test_overflow_flag_reset_on_next_increment(self, max_counter: Counter) -> None:
        """Test that overflow only reflects the most recent increment."""
        max_counter.increment()
        assert max_counter.increment() is False
        assert max_counter.overflowed is False
        assert str(max_counter) == "A2"

    def test_ten_groups_not_all_max_do_not_wrap(self) -> None:
        """Test that a maxed top group alone does not count as the maximum."""
        groups = [GroupDigit.parse("Z9")] + [GroupDigit() for _ in range(MAX_GROUPS - 1)]
        counter = Counter(groups)
        assert counter.is_max() is False
        assert counter.increment() is False
        assert counter.groups[0] == "Z9"
        assert counter.groups[-1] == "A2"

    def test_first_thirty_seven_values(self) -> None:
        """Test the progression A1..A9, B1.. with the D gap."""
        counter = Counter()
        values = [str(counter)]
        for _ in range(36):
            counter.increment()
            values.append(str(counter))
        assert values[:10] == ["A1", "A2", "A3", "A4", "A5", "A6", "A7", "A8", "A9", "B1"]
        assert values[27] == "E1"
        assert values[36] == "H1"

    def test_every_incremented_value_is_valid(self) -> None:
        """Test validity across a long run including growth."""
        counter = _counter("X9-Z1")
        for _ in range(500):
            counter.increment()
            assert counter.is_valid() is True

    def test_set_min(self) -> None:
        """Test resetting a multi-group counter."""
        counter = _counter("H5-T3-Z9")
        counter.set_min()
        assert str(counter) == "A1"


class TestGroupSequence:
    """Tests for the unsynchronized sequence used inside Counter."""

    def test_empty_list_defaults_to_minimum(self) -> None:
        """Test that an empty group list becomes a single A1."""
        assert GroupSequence([]).render() == "A1"

    def test_storage_is_least_significant_first(self) -> None:
        """Test that render reverses storage order."""
        sequence = GroupSequence([GroupDigit.parse("T3"), GroupDigit.parse("H5")])
        assert sequence.render() == "H5-T3"


class TestCounterConcurrency:
    """Tests for thread safety of a shared counter."""

    def test_concurrent_increments_are_not_lost(self) -> None:
        """Test that increments from several threads all apply."""
        threads_count = 8
        per_thread = 250
        shared = Counter()
        expected = Counter()
        for _ in range(threads_count * per_thread):
            expected.increment()

        def worker() -> None:
            for _ in range(per_thread):
                shared.increment()

        threads = [threading.Thread(target=worker) for _ in range(threads_count)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert str(shared) == str(expected)

    def test_readers_never_see_partial_carry(self) -> None:
        """Test that rendering during increments always yields a valid counter."""
        shared = _counter("Z9-Z9-Z8")
        seen: list[str] = []
        stop = threading.Event()

        def reader() -> None:
            while not stop.is_set():
                seen.append(shared.render())

        thread = threading.Thread(target=reader)
        thread.start()
        for _ in range(300):
            shared.increment()
        stop.set()
        thread.join()

        # Z9-Z9-Z9 can only be followed by A1-A1-A1-A1, never a mix
        for text in seen:
            assert Counter.parse(text, strict=True).is_valid()
            assert not text.startswith("Z9-Z9-A1")


class TestAdvance:
    """Tests for the raw advance step, including wraparound at MAX_GROUPS."""

    def test_counter_advance_steps_low_group(self) -> None:
        """Test that a single advance moves the least-significant group."""
        counter = _counter("H5-T3")
        counter.advance()
        assert str(counter) == "H5-T4"

    def test_counter_advance_wraps_at_max(self, max_counter: Counter) -> None:
        """Test that advancing ten Z9 groups resets to A1 and flags overflow."""
        max_counter.advance()
        assert str(max_counter) == "A1"
        assert max_counter.overflowed is True

    def test_sequence_advance_wraps_at_max(self) -> None:
        """Test the wrap branch on the unsynchronized sequence."""
        sequence = GroupSequence([GroupDigit.parse("Z9") for _ in range(MAX_GROUPS)])
        sequence.advance()
        assert sequence.render() == "A1"
        assert len(sequence.groups) == 1
        assert sequence.overflowed is True

    def test_sequence_advance_grows_below_max(self) -> None:
        """Test that the top carry appends a group below MAX_GROUPS."""
        sequence = GroupSequence([GroupDigit.parse("Z9"), GroupDigit.parse("Z9")])
        sequence.advance()
        assert sequence.render() == "A1-A1-A1"
        assert sequence.overflowed is False
