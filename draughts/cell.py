from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Optional

from .pieces import Piece


class CellKind(Enum):
    EMPTY = "empty"
    PIECE = "piece"
    MOVE = "move"
    CAPTURE = "capture"


@dataclass(frozen=True, slots=True)
class Cell:
    """What one square shows: nothing, a piece, or a transient highlight."""

    kind: CellKind
    piece: Optional[Piece] = None

    EMPTY: ClassVar["Cell"]
    MOVE: ClassVar["Cell"]
    CAPTURE: ClassVar["Cell"]

    def __post_init__(self) -> None:
        if (self.kind is CellKind.PIECE) != (self.piece is not None):
            raise ValueError("Only piece cells carry a piece.")

    @classmethod
    def of(cls, piece: Optional[Piece]) -> "Cell":
        if piece is None:
            return cls.EMPTY
        return cls(CellKind.PIECE, piece)

    @property
    def is_empty(self) -> bool:
        return self.kind is CellKind.EMPTY

    @property
    def is_piece(self) -> bool:
        return self.kind is CellKind.PIECE

    @property
    def is_marker(self) -> bool:
        return self.kind in (CellKind.MOVE, CellKind.CAPTURE)

    @property
    def is_king(self) -> bool:
        return self.piece is not None and self.piece.is_king

    def is_enemy(self, other: "Cell") -> bool:
        if self.piece is None or other.piece is None:
            return False
        return self.piece.is_enemy(other.piece)

    def __str__(self) -> str:
        if self.piece is not None:
            return self.piece.value
        return {CellKind.EMPTY: ".", CellKind.MOVE: "*", CellKind.CAPTURE: "x"}[self.kind]


Cell.EMPTY = Cell(CellKind.EMPTY)
Cell.MOVE = Cell(CellKind.MOVE)
Cell.CAPTURE = Cell(CellKind.CAPTURE)
