from __future__ import annotations

from typing import Any, Optional

from draughts.board import Board
from draughts.coordinate import Coordinate
from draughts.engine import MoveResult, movable_pieces, winner
from draughts.errors import EngineError
from draughts.pieces import Color
from draughts.route import Route
from draughts.rules import DEFAULT_RULES, Rules


def _coord_to_dict(point: Coordinate) -> dict[str, int]:
    return {"x": point.x, "y": point.y}


def serialize_error(error: EngineError) -> dict[str, Any]:
    return {"code": error.code, "message": str(error)}


def serialize_route(route: Route) -> list[dict[str, int]]:
    return [_coord_to_dict(point) for point in route]


def serialize_board(board: Board, rules: Rules = DEFAULT_RULES) -> dict[str, Any]:
    pieces = [
        {**_coord_to_dict(point), "color": piece.color.value, "isKing": piece.is_king}
        for point, piece in board.pieces()
    ]
    markers = [
        {**_coord_to_dict(point), "kind": kind.value}
        for point, kind in sorted(board.markers.items(), key=lambda item: (item[0].y, item[0].x))
    ]
    won = winner(board, rules)
    return {
        "size": board.size,
        "turn": board.turn.value,
        "rows": str(board).splitlines(),
        "pieces": pieces,
        "markers": markers,
        "pieceCounts": {
            color.value: {
                "total": board.count(color),
                "kings": board.count(color, kings_only=True),
            }
            for color in Color
        },
        "movable": [_coord_to_dict(point) for point in movable_pieces(board, rules)],
        "winner": won.value if won else None,
    }


def serialize_room(
    room_id: str,
    board: Board,
    rules: Rules = DEFAULT_RULES,
    *,
    selected: Optional[Coordinate] = None,
    error: Optional[EngineError] = None,
) -> dict[str, Any]:
    return {
        "id": room_id,
        "board": serialize_board(board, rules),
        "selected": _coord_to_dict(selected) if selected is not None else None,
        "error": serialize_error(error) if error is not None else None,
    }


def serialize_move_result(room_id: str, result: MoveResult, rules: Rules = DEFAULT_RULES) -> dict[str, Any]:
    payload = serialize_room(room_id, result.board, rules, error=result.error)
    payload["moved"] = result.moved
    payload["lastMove"] = (
        {
            "route": serialize_route(result.route),
            "captured": [_coord_to_dict(point) for point in result.captured],
        }
        if result.route is not None
        else None
    )
    return payload
