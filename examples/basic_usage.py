"""
Basic usage examples for lazyseq.

This demonstrates the core functionality of the lazy sequence library.
"""

import operator

import lazyseq
from lazyseq import (
    collect,
    count,
    cycle,
    group_by,
    lazy,
    repeat,
    sequence_from_list,
    set_seed,
)


def example_map_reduce():
    """Example: Map and reduce operations."""
    print("=== Map and Reduce Example ===")

    squares = lazyseq.map(sequence_from_list(range(10)), lambda x: x * x)
    print(f"Sum of squares 0-9: {lazyseq.reduce(squares, operator.add, 0)}")

    # Same pipeline, fluent style
    product = lazy(range(1, 11)).reduce(operator.mul, 1)
    print(f"Product of 1-10: {product}")


def example_filter():
    """Example: Filtering elements."""
    print("\n=== Filter Example ===")

    evens = lazyseq.filter(sequence_from_list(range(20)), lambda x: x % 2 == 0)
    print(f"Even numbers below 20: {collect(evens)}")

    total = lazy(range(100)).filter(lambda x: x % 3 == 0).sum()
    print(f"Sum of numbers divisible by 3 (0-99): {total}")


def example_grouping():
    """Example: Grouping and indexing."""
    print("\n=== Grouping Example ===")

    words = ["hello", "world", "lazy", "sequences", "in", "python"]
    print(f"Words by length: {group_by(sequence_from_list(words), len)}")
    print(f"Position of 'lazy': {lazy(words).index('lazy')}")
    print(f"Longest word: {lazy(words).max(kind=str)}")


def example_generators():
    """Example: Cancellable generators."""
    print("\n=== Generator Example ===")

    seq, close = count(0, 3)
    print(f"First five multiples of 3: {collect(lazyseq.slice(seq, 0, 5))}")
    close()

    # The context manager cancels the producer on exit
    with cycle(sequence_from_list("abc"))[0] as letters:
        print(f"Cycled letters: {lazy(letters).slice(0, 7).collect()}")

    seq, close = repeat("ping", 3)
    print(f"Repeated: {collect(seq)}")
    close()


def example_random():
    """Example: Shuffle and choice with a seeded random source."""
    print("\n=== Random Example ===")

    # You can also seed via environment variable:
    # export LAZYSEQ_SEED=7
    set_seed(7)
    print(f"Shuffled: {lazy(range(10)).shuffle().collect()}")
    print(f"Choice: {lazy(['red', 'green', 'blue']).choice()}")


def main():
    """Run all examples."""
    print("lazyseq - Lazy, pull-based sequences\n")

    example_map_reduce()
    example_filter()
    example_grouping()
    example_generators()
    example_random()

    print("\n=== All Examples Complete ===")


if __name__ == "__main__":
    main()
