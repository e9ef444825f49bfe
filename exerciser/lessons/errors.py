"""Error handling: raising, wrapping and propagating errors."""

from __future__ import annotations

import re
from dataclasses import dataclass

_INTEGER = re.compile(r"[+-]?[0-9]+")


def _parse_int(text: str, bits: int) -> int:
    """Parse a signed integer of the given width strictly, like a typed parser."""
    if not text:
        raise ValueError("cannot parse integer from empty string")
    if not _INTEGER.fullmatch(text):
        raise ValueError("invalid digit found in string")
    value = int(text)
    limit = 1 << (bits - 1)
    if value >= limit:
        raise ValueError("number too large to fit in target type")
    if value < -limit:
        raise ValueError("number too small to fit in target type")
    return value


def generate_nametag_text(name: str) -> str:
    """Return nametag text; empty names are refused."""
    if not name:
        raise ValueError("`name` was empty; it must be nonempty.")
    return f"Hi! My name is {name}"


def total_cost(item_quantity: str) -> int:
    """Cost of buying items at 5 tokens each plus a 1 token fee."""
    processing_fee = 1
    cost_per_item = 5
    quantity = _parse_int(item_quantity, 32)
    return quantity * cost_per_item + processing_fee


def buy_items(tokens: int, item_quantity: str) -> int:
    """Buy items if affordable and return the tokens left."""
    try:
        cost = total_cost(item_quantity)
    except ValueError as err:
        raise ValueError("invalid operation") from err
    if cost > tokens:
        print("You can't afford that many!")
        return tokens
    tokens -= cost
    print(f"You now have {tokens} tokens.")
    return tokens


class CreationError(ValueError):
    """A value that cannot become a PositiveNonzeroInteger."""

    description = "invalid value"

    def __init__(self) -> None:
        super().__init__(self.description)


class NegativeError(CreationError):
    description = "number is negative"


class ZeroError(CreationError):
    description = "number is zero"


@dataclass(frozen=True)
class PositiveNonzeroInteger:
    """An integer that is strictly greater than zero."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise NegativeError()
        if self.value == 0:
            raise ZeroError()


class ParsePosNonzeroError(ValueError):
    """Parsing failed; `error` holds the parse or creation error behind it."""

    def __init__(self, error: ValueError) -> None:
        super().__init__(str(error))
        self.error = error


def parse_pos_nonzero(text: str) -> PositiveNonzeroInteger:
    """Parse text into a PositiveNonzeroInteger."""
    try:
        value = _parse_int(text, 64)
    except ValueError as err:
        raise ParsePosNonzeroError(err) from err
    try:
        return PositiveNonzeroInteger(value)
    except CreationError as err:
        raise ParsePosNonzeroError(err) from err