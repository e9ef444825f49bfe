"""Collections: fruit baskets, score tables and counting progress."""

from __future__ import annotations

import re
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from enum import Enum

_GOALS = re.compile(r"\+?[0-9]+")
_MAX_GOALS = 255


def fruit_basket() -> dict[str, int]:
    """Return a basket of at least three kinds and five pieces of fruit."""
    return {"banana": 2, "Pera": 1, "kiwi": 2}


class Fruit(Enum):
    """Kinds of fruit for the fruit cake."""

    APPLE = "apple"
    BANANA = "banana"
    MANGO = "mango"
    LYCHEE = "lychee"
    PINEAPPLE = "pineapple"


def fill_fruit_basket(basket: dict[Fruit, int]) -> None:
    """Add four of every fruit kind missing from the basket, leaving the rest alone."""
    for fruit in Fruit:
        basket.setdefault(fruit, 4)


@dataclass
class Team:
    """A team's name and its goal totals."""

    name: str
    goals_scored: int = 0
    goals_conceded: int = 0


def _parse_goals(text: str) -> int:
    if not _GOALS.fullmatch(text):
        raise ValueError(f"invalid goal count: {text!r}")
    goals = int(text)
    if goals > _MAX_GOALS:
        raise ValueError(f"goal count too large: {text!r}")
    return goals


def build_scores_table(results: str) -> dict[str, Team]:
    """Build a table of goals scored and conceded from lines of match results.

    Each line reads ``team_1,team_2,team_1_goals,team_2_goals``.
    """
    scores: dict[str, Team] = {}
    for line in results.splitlines():
        fields = line.split(",")
        if len(fields) < 4:
            raise ValueError(f"malformed result line: {line!r}")
        first_name, second_name = fields[0], fields[1]
        first_goals = _parse_goals(fields[2])
        second_goals = _parse_goals(fields[3])

        first = scores.setdefault(first_name, Team(first_name))
        first.goals_scored += first_goals
        first.goals_conceded += second_goals

        second = scores.setdefault(second_name, Team(second_name))
        second.goals_scored += second_goals
        second.goals_conceded += first_goals
    return scores


class Progress(Enum):
    """How far an exercise has progressed."""

    NONE = "none"
    SOME = "some"
    COMPLETE = "complete"


def count_for(mapping: Mapping[str, Progress], value: Progress) -> int:
    """Count entries with the given progress using an explicit loop."""
    count = 0
    for progress in mapping.values():
        if progress == value:
            count += 1
    return count


def count_iterator(mapping: Mapping[str, Progress], value: Progress) -> int:
    """Count entries with the given progress."""
    return sum(1 for progress in mapping.values() if progress == value)


def count_collection_for(collection: Iterable[Mapping[str, Progress]], value: Progress) -> int:
    """Count entries with the given progress across maps using explicit loops."""
    count = 0
    for mapping in collection:
        for progress in mapping.values():
            if progress == value:
                count += 1
    return count


def count_collection_iterator(
    collection: Iterable[Mapping[str, Progress]], value: Progress
) -> int:
    """Count entries with the given progress across maps."""
    return sum(count_iterator(mapping, value) for mapping in collection)