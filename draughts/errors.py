"""Recoverable rule violations reported by the engine."""

from __future__ import annotations

from typing import Optional

from .coordinate import Coordinate


class EngineError(ValueError):
    code = "engine_error"

    def __init__(self, message: str, point: Optional[Coordinate] = None) -> None:
        super().__init__(message)
        self.point = point


class OutOfBounds(EngineError):
    code = "out_of_bounds"


class NoPieceAtOrigin(EngineError):
    code = "no_piece_at_origin"


class WrongTurn(EngineError):
    code = "wrong_turn"


class IllegalDestination(EngineError):
    code = "illegal_destination"
