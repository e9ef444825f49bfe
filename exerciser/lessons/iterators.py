"""Iterators: capitalising words, dividing lists and factorials."""

from __future__ import annotations

import math
from collections.abc import Iterable

_NUMBERS = (27, 297, 38502, 81)
_DIVISOR = 27


def capitalize_first(text: str) -> str:
    """Upper-case the first character: "hello" -> "Hello"."""
    return text[:1].upper() + text[1:]


def capitalize_words_vector(words: Iterable[str]) -> list[str]:
    """Capitalise every word: ["hello", "world"] -> ["Hello", "World"]."""
    return [capitalize_first(word) for word in words]


def capitalize_words_string(words: Iterable[str]) -> str:
    """Capitalise and join the words: ["hello", " ", "world"] -> "Hello World"."""
    return "".join(capitalize_first(word) for word in words if word)


class DivisionError(ArithmeticError):
    """A division that could not be carried out exactly."""


class NotDivisibleError(DivisionError):
    """The dividend is not evenly divisible by the divisor."""

    def __init__(self, dividend: int, divisor: int) -> None:
        super().__init__(f"{dividend} is not divisible by {divisor}")
        self.dividend = dividend
        self.divisor = divisor


class DivideByZeroError(DivisionError):
    """The divisor is zero."""

    def __init__(self) -> None:
        super().__init__("divide by zero")


def divide(a: int, b: int) -> int:
    """Return a / b when a is evenly divisible by b; raise otherwise."""
    if b == 0:
        raise DivideByZeroError()
    if a % b != 0:
        raise NotDivisibleError(a, b)
    return a // b


def result_with_list() -> list[int]:
    """Divide every number by 27, raising at the first failure."""
    return [divide(number, _DIVISOR) for number in _NUMBERS]


def _try_divide(a: int, b: int) -> int | DivisionError:
    try:
        return divide(a, b)
    except DivisionError as err:
        return err


def list_of_results() -> list[int | DivisionError]:
    """Divide every number by 27, keeping each failure in place of its result."""
    return [_try_divide(number, _DIVISOR) for number in _NUMBERS]


def factorial(num: int) -> int:
    """Return num!, with 0! == 1."""
    if num < 0:
        raise ValueError("factorial is not defined for negative numbers")
    return math.prod(range(1, num + 1))