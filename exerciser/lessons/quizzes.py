"""Quizzes: pricing apples, transforming strings and printing report cards."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar

APPLE_PRICE = 2
BULK_APPLE_PRICE = 1
BULK_THRESHOLD = 40


def calculate_price_of_apples(amount: int) -> int:
    """Apples cost 2 each, or 1 each when more than 40 are bought."""
    if amount > BULK_THRESHOLD:
        return amount * BULK_APPLE_PRICE
    return amount * APPLE_PRICE


class Command(Enum):
    """A transformation without arguments."""

    UPPERCASE = "uppercase"
    TRIM = "trim"


@dataclass(frozen=True)
class Append:
    """Append "bar" to the string `amount` times."""

    amount: int


def _apply(text: str, command: Command | Append) -> str:
    if isinstance(command, Append):
        return text + "bar" * command.amount
    if command is Command.UPPERCASE:
        return text.upper()
    if command is Command.TRIM:
        return text.strip()
    raise TypeError(f"unknown command: {command!r}")


def transformer(items: Iterable[tuple[str, Command | Append]]) -> list[str]:
    """Apply each command to its string and return the results in order."""
    return [_apply(text, command) for text, command in items]


GradeT = TypeVar("GradeT")


@dataclass
class ReportCard(Generic[GradeT]):
    """A report card whose grade may be numeric or alphabetical."""

    grade: GradeT
    student_name: str
    student_age: int

    def summary(self) -> str:
        return f"{self.student_name} ({self.student_age}) - achieved a grade of {self.grade}"