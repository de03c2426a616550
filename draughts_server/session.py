from __future__ import annotations

import logging
import uuid
from typing import Any, Optional

from draughts.coordinate import Coordinate
from draughts.engine import check_origin, make_move, new_board, with_legal_moves
from draughts.errors import EngineError
from draughts.rules import DEFAULT_RULES, Rules

from .schemas import CreateRoomRequest, MoveRequest
from .serializers import serialize_move_result, serialize_room
from .store import RoomStore

logger = logging.getLogger(__name__)


class RoomExists(RuntimeError):
    pass


class RoomService:
    """Glue between HTTP requests and the engine for a set of rooms.

    The selected square is never stored: every query names its origin.
    """

    def __init__(self, store: Optional[RoomStore] = None, *, rules: Rules = DEFAULT_RULES, board_size: int = 8) -> None:
        self.store = store if store is not None else RoomStore()
        self.rules = rules
        self.board_size = board_size

    # public API ---------------------------------------------------------

    def list_rooms(self) -> dict[str, Any]:
        return {"rooms": self.store.ids()}

    def create_room(self, payload: Optional[CreateRoomRequest] = None) -> dict[str, Any]:
        room_id = payload.room_id if payload and payload.room_id else uuid.uuid4().hex[:8]
        size = payload.size if payload and payload.size else self.board_size
        with self.store.lock:
            if self.store.exists(room_id):
                raise RoomExists(f"Room '{room_id}' already exists.")
            board = new_board(size)
            self.store.put(room_id, board)
        logger.info("Created room %s (%dx%d)", room_id, size, size)
        return serialize_room(room_id, board, self.rules)

    def get_room(self, room_id: str) -> dict[str, Any]:
        return serialize_room(room_id, self.store.get(room_id), self.rules)

    def reset_room(self, room_id: str) -> dict[str, Any]:
        with self.store.lock:
            board = new_board(self.store.get(room_id).size)
            self.store.put(room_id, board)
        logger.info("Reset room %s", room_id)
        return serialize_room(room_id, board, self.rules)

    def legal_moves(self, room_id: str, x: int, y: int) -> dict[str, Any]:
        board = self.store.get(room_id)
        origin = Coordinate(x, y)
        error: Optional[EngineError] = None
        try:
            check_origin(board, origin)
        except EngineError as exc:
            error = exc
        annotated = with_legal_moves(board, origin, self.rules)
        return serialize_room(room_id, annotated, self.rules, selected=origin, error=error)

    def make_move(self, room_id: str, payload: MoveRequest) -> dict[str, Any]:
        with self.store.lock:
            board = self.store.get(room_id)
            result = make_move(
                board,
                payload.origin.to_coordinate(),
                payload.destination.to_coordinate(),
                payload.path_coordinates(),
                self.rules,
            )
            if result.error is not None:
                raise result.error
            self.store.put(room_id, result.board)
        logger.info(
            "Room %s: %s -> %s (%d captured)",
            room_id,
            payload.origin.to_coordinate(),
            payload.destination.to_coordinate(),
            len(result.captured),
        )
        return serialize_move_result(room_id, result, self.rules)
