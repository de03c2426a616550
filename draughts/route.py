from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

from .coordinate import Coordinate


@dataclass(frozen=True, slots=True)
class Route:
    """One capture chain: the origin followed by each landing square."""

    points: tuple[Coordinate, ...]

    def __post_init__(self) -> None:
        if not self.points:
            raise ValueError("Route must contain at least the starting square.")

    @classmethod
    def start(cls, point: Coordinate) -> "Route":
        return cls((point,))

    def add_point(self, point: Coordinate) -> "Route":
        return Route((*self.points, point))

    @property
    def first(self) -> Coordinate:
        return self.points[0]

    @property
    def last(self) -> Coordinate:
        return self.points[-1]

    def contains(self, point: Coordinate) -> bool:
        return point in self.points

    def after_first(self) -> tuple[Coordinate, ...]:
        return self.points[1:]

    def steps(self) -> Iterator[tuple[Coordinate, Coordinate]]:
        return zip(self.points, self.points[1:])

    @property
    def jumps(self) -> int:
        return len(self.points) - 1

    def __contains__(self, point: object) -> bool:
        return point in self.points

    def __iter__(self) -> Iterator[Coordinate]:
        return iter(self.points)

    def __len__(self) -> int:
        return len(self.points)

    def __str__(self) -> str:
        return " x ".join(f"{point.x},{point.y}" for point in self.points)
