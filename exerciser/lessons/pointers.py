"""Recursive lists and copy-on-write absolute values."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class Nil:
    """The end of a cons list."""


@dataclass(frozen=True)
class Cons:
    """A cons cell: a value followed by the rest of the list."""

    value: int
    next: Cons | Nil


def create_empty_list() -> Nil:
    return Nil()


def create_non_empty_list() -> Cons:
    return Cons(4, Nil())


def abs_all(values: Sequence[int]) -> Sequence[int]:
    """Make every value non-negative, copying only when needed.

    A list is owned and is changed in place and returned. Any other
    sequence is borrowed: it is returned unchanged if nothing is negative,
    otherwise a new list is returned.
    """
    if isinstance(values, list):
        values[:] = [abs(value) for value in values]
        return values
    if any(value < 0 for value in values):
        return [abs(value) for value in values]
    return values