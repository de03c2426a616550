from __future__ import annotations

from enum import Enum

from .pieces import Color


class Turn(Enum):
    LIGHT = "light"
    DARK = "dark"

    def next(self) -> "Turn":
        return Turn.DARK if self is Turn.LIGHT else Turn.LIGHT

    @property
    def color(self) -> Color:
        return Color(self.value)

    @classmethod
    def from_color(cls, color: Color) -> "Turn":
        return cls(color.value)

    def __str__(self) -> str:
        return self.value.capitalize()
