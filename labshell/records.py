"""Record and table exercises: grids, range sums and ranked people."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class Astronaut:
    """A candidate described by name, height, mass and age."""

    name: str
    height: int
    mass: int
    age: int

    def score(self) -> float:
        """Return mass times height divided by age."""
        return self.mass * self.height / self.age


@dataclass(frozen=True)
class Person:
    """A person with a name, an age and a height."""

    first_name: str
    last_name: str
    age: int
    height: float


def odd_cells(rows: Iterable[Iterable[int]]) -> list[tuple[int, int, int]]:
    """Return (value, column, row) for every odd cell, row by row, 1-based."""
    return [
        (value, column, row)
        for row, cells in enumerate(rows, 1)
        for column, value in enumerate(cells, 1)
        if value % 2
    ]


def range_sum(values: Sequence[int], a: int, b: int) -> int:
    """Return the sum of values from position a to b inclusive, 1-based."""
    if a < 1 or b > len(values):
        raise IndexError("range lies outside the values")
    return sum(values[a - 1 : b])


def mean_above_one(values: Sequence[int]) -> float:
    """Sum the values greater than 1 and divide by the count of all values."""
    if not values:
        return math.nan
    return sum(v for v in values if v > 1) / len(values)


def rank_astronauts(astronauts: Iterable[Astronaut]) -> list[Astronaut]:
    """Return the astronauts ordered by ascending score."""
    return sorted(astronauts, key=Astronaut.score)


def filter_people(
    people: Iterable[Person], age_threshold: int, height_threshold: float
) -> tuple[list[Person], list[Person]]:
    """Return those older than age_threshold and those shorter than height_threshold."""
    people = list(people)
    older = [p for p in people if p.age > age_threshold]
    shorter = [p for p in people if p.height < height_threshold]
    return older, shorter