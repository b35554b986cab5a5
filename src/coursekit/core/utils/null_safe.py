"""Equality and cloning helpers that treat ``None`` as a legitimate value.

``None`` ("absent") and an empty sequence ("present but empty") are different
states. None of the helpers in this module ever conflates the two:

>>> null_safe_sequence_equals(None, None)
True
>>> null_safe_sequence_equals(None, [])
False
>>> null_safe_clone_sequence(None) is None
True
"""

from collections.abc import Iterable, Sequence
from typing import Any, Protocol, TypeVar, runtime_checkable

T = TypeVar("T")
C = TypeVar("C", bound="Cloneable")


@runtime_checkable
class Cloneable(Protocol):
    """Objects that can produce an independent copy of themselves."""

    def clone(self: C) -> C: ...


def null_safe_equals(a: Any, b: Any) -> bool:
    if a is None and b is None:
        return True
    if a is None or b is None:
        return False
    return a == b


def null_safe_sequence_equals(a: Sequence[T] | None, b: Sequence[T] | None) -> bool:
    """Compare two sequences element by element, in order.

    >>> null_safe_sequence_equals([1, 2], [1, 2])
    True
    >>> null_safe_sequence_equals([1, 2], [2, 1])
    False
    >>> null_safe_sequence_equals([], None)
    False
    """
    if a is None and b is None:
        return True
    if a is None or b is None:
        return False
    if len(a) != len(b):
        return False
    return all(null_safe_equals(x, y) for x, y in zip(a, b))


def null_safe_clone(value: C | None) -> C | None:
    if value is None:
        return None
    return value.clone()


def null_safe_clone_sequence(values: Iterable[C | None] | None) -> list[C | None] | None:
    """Return a new list containing clones of ``values``, or ``None``.

    Elements that are ``None`` stay ``None``; order is preserved.
    """
    if values is None:
        return None
    return [null_safe_clone(value) for value in values]


__all__ = [
    "Cloneable",
    "null_safe_clone",
    "null_safe_clone_sequence",
    "null_safe_equals",
    "null_safe_sequence_equals",
]
