"""Zero values and small mapping helpers."""

from collections.abc import Mapping
from typing import Any


def zero[T](kind: type[T]) -> T:
    """
    Return the zero value of a type: ``0``, ``0.0``, ``""``, ``False``...

    Args:
        kind: A type whose no-argument constructor yields its zero value

    Example:
        >>> zero(int), zero(str)
        (0, '')
    """
    return kind()


def is_zero(value: Any) -> bool:
    """Return True if the value equals the zero value of its own type."""
    return value == type(value)()


def keys[K](mapping: Mapping[K, Any]) -> list[K]:
    """Return the keys of a mapping as a list."""
    return list(mapping.keys())


def values[V](mapping: Mapping[Any, V]) -> list[V]:
    """Return the values of a mapping as a list."""
    return list(mapping.values())
