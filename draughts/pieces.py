from __future__ import annotations

from enum import Enum


class Color(Enum):
    LIGHT = "light"
    DARK = "dark"

    @property
    def opponent(self) -> "Color":
        return Color.DARK if self is Color.LIGHT else Color.LIGHT


class Piece(Enum):
    """Occupant of a square. The value doubles as the one-letter state code."""

    LIGHT_MAN = "l"
    DARK_MAN = "d"
    LIGHT_KING = "L"
    DARK_KING = "D"

    @classmethod
    def king(cls, color: Color) -> "Piece":
        return cls.LIGHT_KING if color is Color.LIGHT else cls.DARK_KING

    @classmethod
    def from_code(cls, code: str) -> "Piece":
        try:
            return cls(code)
        except ValueError as exc:
            raise ValueError(f"Unknown piece code '{code}'.") from exc

    @property
    def color(self) -> Color:
        if self in (Piece.LIGHT_MAN, Piece.LIGHT_KING):
            return Color.LIGHT
        return Color.DARK

    @property
    def is_king(self) -> bool:
        return self in (Piece.LIGHT_KING, Piece.DARK_KING)

    @property
    def forward(self) -> int:
        """Row step of a man's non-capturing move: light climbs toward row 0."""
        return -1 if self.color is Color.LIGHT else 1

    def promotion_row(self, size: int) -> int:
        return 0 if self.color is Color.LIGHT else size - 1

    def promote(self) -> "Piece":
        return Piece.king(self.color)

    def is_enemy(self, other: "Piece") -> bool:
        return self.color is not other.color

    def __repr__(self) -> str:
        piece_type = "K" if self.is_king else "M"
        return f"{piece_type}({self.color.name})"
