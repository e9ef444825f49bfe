"""Structs and enums: colours, orders, packages and a message-driven state."""

from __future__ import annotations

from dataclasses import dataclass
from typing import NamedTuple


@dataclass
class ColorClassicStruct:
    """A colour with named channels."""

    red: int
    blue: int
    green: int


class ColorTupleStruct(NamedTuple):
    """A colour whose channels are addressed by position."""

    red: int
    green: int
    blue: int


class UnitLikeStruct:
    """A type that carries no data."""

    def __repr__(self) -> str:
        return "UnitLikeStruct"

    def __eq__(self, other: object) -> bool:
        return isinstance(other, UnitLikeStruct)

    def __hash__(self) -> int:
        return hash(UnitLikeStruct)


@dataclass
class Order:
    """A customer order."""

    name: str
    year: int
    made_by_phone: bool
    made_by_mobile: bool
    made_by_email: bool
    item_number: int
    count: int


def create_order_template() -> Order:
    """Return the order that new orders are based on."""
    return Order(
        name="Bob",
        year=2019,
        made_by_phone=False,
        made_by_mobile=False,
        made_by_email=True,
        item_number=123,
        count=0,
    )


@dataclass
class Package:
    """A package to ship; its weight must be positive."""

    sender_country: str
    recipient_country: str
    weight_in_grams: int

    def __post_init__(self) -> None:
        if self.weight_in_grams <= 0:
            raise ValueError("Can not ship a weightless package.")

    def is_international(self) -> bool:
        return self.sender_country != self.recipient_country

    def get_fees(self, cents_per_gram: int) -> int:
        return self.weight_in_grams * cents_per_gram


@dataclass
class Point:
    """A position on a grid."""

    x: int
    y: int


@dataclass(frozen=True)
class ChangeColor:
    """Message: change the colour to (red, green, blue)."""

    red: int
    green: int
    blue: int


@dataclass(frozen=True)
class Echo:
    """Message: print the text."""

    text: str


@dataclass(frozen=True)
class Move:
    """Message: move to the point."""

    point: Point


@dataclass(frozen=True)
class Quit:
    """Message: stop."""


Message = ChangeColor | Echo | Move | Quit


@dataclass
class State:
    """State updated by processing messages."""

    color: tuple[int, int, int]
    position: Point
    has_quit: bool = False

    def change_color(self, color: tuple[int, int, int]) -> None:
        self.color = color

    def quit(self) -> None:
        self.has_quit = True

    def echo(self, text: str) -> None:
        print(text)

    def move_position(self, point: Point) -> None:
        self.position = point

    def process(self, message: Message) -> None:
        """Apply one message to the state."""
        match message:
            case Move(point=point):
                self.move_position(point)
            case ChangeColor(red=red, green=green, blue=blue):
                self.change_color((red, green, blue))
            case Echo(text=text):
                self.echo(text)
            case Quit():
                self.quit()
            case _:
                raise TypeError(f"unknown message: {message!r}")