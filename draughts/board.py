from __future__ import annotations

from typing import Any, Iterator, Optional

from .cell import Cell, CellKind
from .coordinate import Coordinate
from .errors import OutOfBounds
from .pieces import Color, Piece
from .turn import Turn

BoardState = dict[str, Any]

EMPTY_CODE = "."


class Board:
    """Square grid of pieces plus the side to move.

    Move and capture highlights live in a separate marker layer so that
    :meth:`to_state` only ever sees pieces and the turn.
    """

    def __init__(self, size: int = 8, turn: Turn = Turn.LIGHT) -> None:
        self._init_grid(size, turn)
        self._set_start_pieces()

    @classmethod
    def empty(cls, size: int = 8, *, turn: Turn = Turn.LIGHT) -> "Board":
        board = cls.__new__(cls)
        board._init_grid(size, turn)
        return board

    def _init_grid(self, size: int, turn: Turn) -> None:
        if size < 4 or size % 2:
            raise ValueError(f"Board size must be an even number of at least 4, got {size}.")
        self.size = size
        self.turn = turn
        self.cells: list[list[Optional[Piece]]] = [[None for _ in range(size)] for _ in range(size)]
        self.markers: dict[Coordinate, CellKind] = {}

    @classmethod
    def from_text(cls, text: str, *, turn: Turn = Turn.LIGHT) -> "Board":
        """Build a board from rows such as ``".d.d.d.d"``, top row first."""
        rows = [line.strip() for line in text.strip().splitlines() if line.strip()]
        board = cls.empty(len(rows), turn=turn)
        for y, row in enumerate(rows):
            if len(row) != board.size:
                raise ValueError(f"Row {y} has {len(row)} squares, expected {board.size}.")
            for x, code in enumerate(row):
                if code != EMPTY_CODE:
                    board.cells[y][x] = Piece.from_code(code)
        return board

    # access ---------------------------------------------------------------

    def contains(self, point: Coordinate) -> bool:
        return point.is_valid(self.size)

    def _require(self, point: Coordinate) -> None:
        if not self.contains(point):
            raise OutOfBounds(f"{point} is outside the {self.size}x{self.size} board.", point)

    def piece_at(self, point: Coordinate) -> Optional[Piece]:
        self._require(point)
        return self.cells[point.y][point.x]

    def get(self, point: Coordinate) -> Cell:
        piece = self.piece_at(point)
        if piece is not None:
            return Cell.of(piece)
        kind = self.markers.get(point)
        if kind is CellKind.MOVE:
            return Cell.MOVE
        if kind is CellKind.CAPTURE:
            return Cell.CAPTURE
        return Cell.EMPTY

    def set(self, point: Coordinate, cell: Cell) -> None:
        self._require(point)
        if cell.is_marker:
            if self.cells[point.y][point.x] is not None:
                raise ValueError(f"Cannot mark occupied square {point}.")
            self.markers[point] = cell.kind
            return
        self.markers.pop(point, None)
        self.cells[point.y][point.x] = cell.piece

    def mark(self, point: Coordinate, kind: CellKind) -> None:
        """Write ``kind`` to the marker layer only.

        Unlike :meth:`set` this also works on an occupied square. A capture
        landing can be occupied on the board being annotated: the moving
        piece's own square for a chain that comes back round, or a square
        whose piece is jumped earlier in the chain. :meth:`get` still
        reports the piece there.
        """
        self._require(point)
        if kind not in (CellKind.MOVE, CellKind.CAPTURE):
            raise ValueError(f"{kind} is not a marker.")
        self.markers[point] = kind

    def clear_markers(self) -> "Board":
        board = self.copy()
        board.markers.clear()
        return board

    def check_promotion(self, point: Coordinate) -> bool:
        piece = self.piece_at(point)
        if piece is None or piece.is_king:
            return False
        if point.y != piece.promotion_row(self.size):
            return False
        self.cells[point.y][point.x] = piece.promote()
        return True

    # scans ----------------------------------------------------------------

    def __iter__(self) -> Iterator[tuple[Coordinate, Cell]]:
        for y in range(self.size):
            for x in range(self.size):
                point = Coordinate(x, y)
                yield point, self.get(point)

    def pieces(self, color: Optional[Color] = None) -> list[tuple[Coordinate, Piece]]:
        found: list[tuple[Coordinate, Piece]] = []
        for y, row in enumerate(self.cells):
            for x, piece in enumerate(row):
                if piece is None:
                    continue
                if color is None or piece.color is color:
                    found.append((Coordinate(x, y), piece))
        return found

    def count(self, color: Color, *, kings_only: bool = False) -> int:
        return sum(1 for _, piece in self.pieces(color) if piece.is_king or not kings_only)

    def marked(self, kind: Optional[CellKind] = None) -> set[Coordinate]:
        return {point for point, marker in self.markers.items() if kind is None or marker is kind}

    def copy(self) -> "Board":
        board = Board.empty(self.size, turn=self.turn)
        board.cells = [row.copy() for row in self.cells]
        board.markers = dict(self.markers)
        return board

    # plain data -----------------------------------------------------------

    def to_state(self) -> BoardState:
        rows = [
            "".join(EMPTY_CODE if piece is None else piece.value for piece in row)
            for row in self.cells
        ]
        return {"size": self.size, "turn": self.turn.value, "cells": rows}

    @classmethod
    def from_state(cls, state: BoardState) -> "Board":
        board = cls.from_text("\n".join(state["cells"]), turn=Turn(state["turn"]))
        if board.size != state["size"]:
            raise ValueError("Board state size does not match its rows.")
        return board

    def _set_start_pieces(self) -> None:
        rows_to_fill = (self.size - 2) // 2

        for y in range(self.size):
            for x in range(self.size):
                if (x + y) % 2 == 1:
                    if y < rows_to_fill:
                        self.cells[y][x] = Piece.DARK_MAN
                    elif y >= self.size - rows_to_fill:
                        self.cells[y][x] = Piece.LIGHT_MAN

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return (
            self.size == other.size
            and self.turn is other.turn
            and self.cells == other.cells
            and self.markers == other.markers
        )

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return "\n".join(
            "".join(str(self.get(Coordinate(x, y))) for x in range(self.size))
            for y in range(self.size)
        )

    def __repr__(self) -> str:
        return f"Board(size={self.size}, turn={self.turn.value})"
