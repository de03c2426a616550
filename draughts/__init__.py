"""Draughts rules engine."""

from .board import Board
from .cell import Cell, CellKind
from .coordinate import Coordinate
from .engine import (
    MoveResult,
    apply_move,
    capture,
    check_origin,
    get_captures,
    legal_moves,
    make_move,
    movable_pieces,
    new_board,
    winner,
    with_legal_moves,
)
from .errors import EngineError, IllegalDestination, NoPieceAtOrigin, OutOfBounds, WrongTurn
from .pieces import Color, Piece
from .route import Route
from .rules import DEFAULT_RULES, Rules
from .turn import Turn

__all__ = [
    "Board",
    "Cell",
    "CellKind",
    "Color",
    "Coordinate",
    "DEFAULT_RULES",
    "EngineError",
    "IllegalDestination",
    "MoveResult",
    "NoPieceAtOrigin",
    "OutOfBounds",
    "Piece",
    "Route",
    "Rules",
    "Turn",
    "WrongTurn",
    "apply_move",
    "capture",
    "check_origin",
    "get_captures",
    "legal_moves",
    "make_move",
    "movable_pieces",
    "new_board",
    "winner",
    "with_legal_moves",
]
