"""Basics: conditionals, functions, strings, options, sequences and lifetimes."""

from __future__ import annotations

from collections.abc import Iterable

COLOR_WORDS = frozenset({"green", "blue", "red"})


def bigger(a: int, b: int) -> int:
    """Return the bigger of two numbers."""
    if a > b:
        return a
    return b


def foo_if_fizz(fizzish: str) -> str:
    """Map "fizz" to "foo", "fuzz" to "bar" and anything else to "baz"."""
    if fizzish == "fizz":
        return "foo"
    if fizzish == "fuzz":
        return "bar"
    return "baz"


def is_even(num: int) -> bool:
    return num % 2 == 0


def sale_price(price: int) -> int:
    """Even prices get 10 off, odd prices get 3 off."""
    if is_even(price):
        return price - 10
    return price - 3


def square(num: int) -> int:
    return num * num


def current_favorite_color() -> str:
    return "blue"


def is_a_color_word(attempt: str) -> bool:
    return attempt in COLOR_WORDS


def trim_me(text: str) -> str:
    """Remove whitespace from both ends."""
    return text.strip()


def compose_me(text: str) -> str:
    return text + " world!"


def replace_me(text: str) -> str:
    return text.replace("cars", "balloons")


def maybe_icecream(time_of_day: int) -> int | None:
    """Pieces of ice cream left at a given hour; None for an invalid hour."""
    if time_of_day > 23:
        return None
    if time_of_day < 22:
        return 5
    return 0


def array_and_vec() -> tuple[tuple[int, ...], list[int]]:
    """Return a fixed tuple and a list holding the same elements."""
    fixed = (10, 20, 30, 40)
    return fixed, list(fixed)


def vec_loop(values: list[int]) -> list[int]:
    """Double every element of the list in place and return it."""
    values[:] = [value * 2 for value in values]
    return values


def vec_map(values: Iterable[int]) -> list[int]:
    """Return a new list with every element doubled."""
    return [value * 2 for value in values]


def longest(x: str, y: str) -> str:
    """Return the string with more UTF-8 bytes; the second one on a tie."""
    if len(x.encode("utf-8")) > len(y.encode("utf-8")):
        return x
    return y