"""
Tests for terminal operations.
"""

import itertools
import operator
from collections import Counter

import pytest

import lazyseq
from lazyseq import (
    EmptySequenceError,
    ListSequence,
    choice,
    collect,
    contain,
    count,
    group_by,
    index,
    reduce,
    sequence_from_list,
    set_seed,
    shuffle,
    to_map,
)


class TestCollectReduce:
    """Tests for collect and reduce."""

    def test_collect(self):
        """Collect preserves order."""
        data = ["b", "a", "c"]
        assert collect(sequence_from_list(data)) == data

    def test_reduce(self):
        """Reduce folds left from the initial value."""
        assert reduce(sequence_from_list([1, 2, 3, 4]), operator.add, 0) == 10

    def test_reduce_order(self):
        """Non-commutative folds see elements in order."""
        result = reduce(
            sequence_from_list(["a", "b", "c"]), lambda acc, x: acc + x, ">"
        )
        assert result == ">abc"

    def test_reduce_empty(self):
        """Reducing nothing returns the initial value."""
        assert reduce(sequence_from_list([]), operator.add, 42) == 42

    def test_reduce_changes_type(self):
        """The accumulator type can differ from the element type."""
        result = reduce(
            sequence_from_list(["x", "yy"]),
            lambda acc, w: acc + [len(w)],
            [],
        )
        assert result == [1, 2]


class TestMinMaxSum:
    """Tests for max, min and sum."""

    def test_max(self):
        """Test max operation."""
        assert lazyseq.max(sequence_from_list([3, 9, 2, 9, 1])) == 9

    def test_min(self):
        """Test min operation."""
        assert lazyseq.min(sequence_from_list([3, 9, 2, 9, 1])) == 1

    def test_strings(self):
        """Strings use their natural ordering."""
        words = ["pear", "apple", "zucchini", "fig"]
        assert lazyseq.max(sequence_from_list(words)) == "zucchini"
        assert lazyseq.min(sequence_from_list(words)) == "apple"

    def test_empty_gives_zero(self):
        """Empty sequences return the zero value of the requested kind."""
        assert lazyseq.max(sequence_from_list([])) == 0
        assert lazyseq.min(sequence_from_list([])) == 0
        assert lazyseq.max(sequence_from_list([]), kind=str) == ""
        assert lazyseq.min(sequence_from_list([]), kind=float) == 0.0

    def test_negative_numbers(self):
        """The first element seeds the accumulator, not zero."""
        assert lazyseq.max(sequence_from_list([-5, -3, -8])) == -3
        assert lazyseq.min(sequence_from_list([5, 3, 8])) == 3

    def test_sum(self):
        """Test sum operation."""
        assert lazyseq.sum(sequence_from_list(range(-50, 50))) == -50
        assert lazyseq.sum(sequence_from_list([])) == 0

    def test_sum_floats(self):
        """Test sum with floats."""
        result = lazyseq.sum(sequence_from_list([1.5, 2.5, 3.5]), kind=float)
        assert abs(result - 7.5) < 1e-10

    def test_sum_strings(self):
        """Strings concatenate from the empty string."""
        assert lazyseq.sum(sequence_from_list(["a", "b", "c"]), kind=str) == "abc"
        assert lazyseq.sum(sequence_from_list([]), kind=str) == ""

    def test_sum_infers_zero_from_elements(self):
        """Without kind the zero comes from the element type."""
        assert lazyseq.sum(sequence_from_list(["a", "b"])) == "ab"
        result = lazyseq.sum(sequence_from_list([1.5, 2.5]))
        assert result == 4.0
        assert isinstance(result, float)

    def test_sum_empty_without_kind(self):
        """An empty sequence without kind sums to integer zero."""
        assert lazyseq.sum(sequence_from_list([])) == 0


class TestMappings:
    """Tests for to_map and group_by."""

    def test_to_map_last_write_wins(self):
        """Later elements overwrite earlier ones with the same key."""
        pairs = [("a", 1), ("b", 2), ("a", 3)]
        result = to_map(sequence_from_list(pairs), lambda p: p[0])
        assert result == {"a": ("a", 3), "b": ("b", 2)}

    def test_to_map_empty(self):
        """An empty sequence gives an empty mapping."""
        assert to_map(sequence_from_list([]), str) == {}

    def test_group_by(self):
        """Groups keep the original order of their elements."""
        result = group_by(sequence_from_list(["a", "bb", "cc", "d"]), len)
        assert result == {1: ["a", "d"], 2: ["bb", "cc"]}

    def test_group_by_parity(self):
        """Every element lands in exactly one group."""
        result = group_by(sequence_from_list(range(10)), lambda x: x % 2)
        assert result == {0: [0, 2, 4, 6, 8], 1: [1, 3, 5, 7, 9]}


class TestIndexContain:
    """Tests for index and contain."""

    def test_index(self):
        """Position of the first equal element."""
        assert index(sequence_from_list([3, 1, 4, 1, 5]), 4) == 2
        assert index(sequence_from_list([3, 1, 4, 1, 5]), 1) == 1

    def test_index_missing(self):
        """Missing values give -1."""
        assert index(sequence_from_list([3, 1, 4, 1, 5]), 9) == -1
        assert index(sequence_from_list([]), 9) == -1

    def test_index_partial_consumption(self):
        """Index stops right after the match."""
        seq = sequence_from_list([3, 1, 4, 1, 5])
        assert index(seq, 4) == 2
        assert collect(seq) == [1, 5]

    def test_index_on_infinite_generator(self):
        """Index terminates on an infinite sequence that contains the value."""
        seq, close = count(0, 3)
        try:
            assert index(seq, 27) == 9
        finally:
            close()

    def test_contain(self):
        """Contain is index != -1."""
        assert contain(sequence_from_list("hello"), "l") is True
        assert contain(sequence_from_list("hello"), "z") is False


class TestSlice:
    """Tests for slice."""

    def test_slice(self):
        """Elements in [start, end)."""
        result = lazyseq.slice(sequence_from_list([0, 1, 2, 3, 4, 5]), 2, 4)
        assert isinstance(result, ListSequence)
        assert collect(result) == [2, 3]

    def test_slice_past_end(self):
        """A short source returns what was available."""
        result = lazyseq.slice(sequence_from_list([0, 1, 2, 3, 4, 5]), 2, 100)
        assert collect(result) == [2, 3, 4, 5]

    def test_slice_start_past_end(self):
        """Skipping past the end gives an empty result."""
        result = lazyseq.slice(sequence_from_list([0, 1]), 5, 8)
        assert collect(result) == []

    def test_slice_empty_range(self):
        """start == end gives an empty result."""
        result = lazyseq.slice(sequence_from_list([0, 1, 2]), 1, 1)
        assert collect(result) == []

    def test_slice_reads_no_further(self):
        """Nothing after position end - 1 is consumed."""
        seq = sequence_from_list(range(10))
        lazyseq.slice(seq, 2, 4)
        assert collect(seq) == [4, 5, 6, 7, 8, 9]

    def test_invalid_bounds(self):
        """Negative bounds and start > end are rejected."""
        with pytest.raises(ValueError):
            lazyseq.slice(sequence_from_list([1]), -1, 2)
        with pytest.raises(ValueError):
            lazyseq.slice(sequence_from_list([1]), 3, 2)


class TestShuffle:
    """Tests for shuffle."""

    def test_permutation(self):
        """Shuffle returns the same multiset."""
        data = [5, 1, 1, 2, 8, 8, 8, 0]
        result = collect(shuffle(sequence_from_list(data)))
        assert sorted(result) == sorted(data)

    def test_empty_and_single(self):
        """Degenerate sizes are handled."""
        assert collect(shuffle(sequence_from_list([]))) == []
        assert collect(shuffle(sequence_from_list(["only"]))) == ["only"]

    def test_seeded_is_reproducible(self):
        """The same seed gives the same permutation."""
        set_seed(1234)
        first = collect(shuffle(sequence_from_list(range(50))))
        set_seed(1234)
        second = collect(shuffle(sequence_from_list(range(50))))
        assert first == second

    def test_uniform(self):
        """Every permutation of three elements is about equally likely."""
        set_seed(2024)
        trials = 6000
        counts = Counter(
            tuple(collect(shuffle(sequence_from_list([0, 1, 2]))))
            for _ in range(trials)
        )
        assert set(counts) == set(itertools.permutations([0, 1, 2]))
        for occurrences in counts.values():
            assert abs(occurrences - trials / 6) < 150


class TestChoice:
    """Tests for choice."""

    def test_choice_member(self):
        """The chosen element comes from the sequence."""
        set_seed(99)
        for _ in range(50):
            assert choice(sequence_from_list([10, 20, 30])) in (10, 20, 30)

    def test_choice_single(self):
        """A single element is always chosen."""
        assert choice(sequence_from_list(["x"])) == "x"

    def test_choice_empty(self):
        """An empty sequence raises an explicit error."""
        with pytest.raises(EmptySequenceError):
            choice(sequence_from_list([]))

    def test_choice_empty_is_value_error(self):
        """The error is also a ValueError."""
        with pytest.raises(ValueError, match="empty"):
            choice(sequence_from_list([]))

    def test_choice_covers_all(self):
        """Every element is eventually chosen."""
        set_seed(5)
        seen = {choice(sequence_from_list("abcd")) for _ in range(200)}
        assert seen == set("abcd")
