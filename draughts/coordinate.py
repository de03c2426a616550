from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


@dataclass(frozen=True, slots=True)
class Coordinate:
    """A square on the board: ``x`` is the column, ``y`` the row.

    Construction does not check bounds; call :meth:`is_valid` before indexing.
    """

    x: int
    y: int

    def is_valid(self, size: int) -> bool:
        return 0 <= self.x < size and 0 <= self.y < size

    def add(self, other: "Coordinate") -> "Coordinate":
        return Coordinate(self.x + other.x, self.y + other.y)

    def subtract(self, other: "Coordinate") -> "Coordinate":
        return Coordinate(self.x - other.x, self.y - other.y)

    def scale(self, factor: int) -> "Coordinate":
        return Coordinate(self.x * factor, self.y * factor)

    def signum(self) -> "Coordinate":
        return Coordinate(_sign(self.x), _sign(self.y))

    def neighbours(self, size: int) -> list["Coordinate"]:
        return [point for point in (self.add(delta) for delta in DIAGONALS) if point.is_valid(size)]

    def ray(self, delta: "Coordinate", size: int) -> Iterator["Coordinate"]:
        point = self.add(delta)
        while point.is_valid(size):
            yield point
            point = point.add(delta)

    @property
    def is_dark(self) -> bool:
        return (self.x + self.y) % 2 == 1

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"


DIAGONALS: tuple[Coordinate, ...] = (
    Coordinate(-1, -1),
    Coordinate(1, -1),
    Coordinate(-1, 1),
    Coordinate(1, 1),
)
