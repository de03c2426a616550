"""Room storage: room id to board, optionally mirrored to a JSON file."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from threading import RLock
from typing import Optional, Union

from pydantic import ValidationError

from draughts.board import Board

from .schemas import BoardStateModel, RoomsFile

logger = logging.getLogger(__name__)


class RoomNotFound(KeyError):
    def __init__(self, room_id: str) -> None:
        super().__init__(room_id)
        self.room_id = room_id

    def __str__(self) -> str:
        return f"Room '{self.room_id}' not found."


class RoomStore:
    """Thread-safe map of rooms.

    Hold :attr:`lock` around a read-modify-write sequence so two requests for
    the same room cannot interleave. Boards go in and out as copies with
    markers stripped.
    """

    def __init__(self, path: Optional[Union[str, Path]] = None) -> None:
        self.lock = RLock()
        self.path = Path(path) if path is not None else None
        self._rooms: dict[str, Board] = {}
        self._load()

    def ids(self) -> list[str]:
        with self.lock:
            return sorted(self._rooms)

    def exists(self, room_id: str) -> bool:
        with self.lock:
            return room_id in self._rooms

    def get(self, room_id: str) -> Board:
        with self.lock:
            board = self._rooms.get(room_id)
            if board is None:
                raise RoomNotFound(room_id)
            return board.copy()

    def put(self, room_id: str, board: Board) -> None:
        with self.lock:
            rooms = dict(self._rooms)
            rooms[room_id] = board.clear_markers()
            self._commit(rooms)

    def delete(self, room_id: str) -> None:
        with self.lock:
            if room_id not in self._rooms:
                raise RoomNotFound(room_id)
            rooms = dict(self._rooms)
            del rooms[room_id]
            self._commit(rooms)

    # persistence ----------------------------------------------------------

    def _load(self) -> None:
        if self.path is None or not self.path.exists():
            return
        try:
            payload = RoomsFile.model_validate_json(self.path.read_text(encoding="utf-8"))
            rooms = {room_id: state.to_board() for room_id, state in payload.rooms.items()}
        except (OSError, ValidationError, ValueError) as exc:
            logger.warning("Could not load rooms from %s, starting empty: %s", self.path, exc)
            return
        self._rooms = rooms
        logger.info("Loaded %d room(s) from %s", len(rooms), self.path)

    def _commit(self, rooms: dict[str, Board]) -> None:
        """Write ``rooms`` to the file, then make them current.

        A failed write raises and leaves the previous rooms in place.
        """
        self._save(rooms)
        self._rooms = rooms

    def _save(self, rooms: dict[str, Board]) -> None:
        if self.path is None:
            return
        payload = RoomsFile(
            rooms={room_id: BoardStateModel.from_board(board) for room_id, board in rooms.items()}
        )
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self.path.with_suffix(self.path.suffix + ".tmp")
        tmp_path.write_text(payload.model_dump_json(indent=2), encoding="utf-8")
        os.replace(tmp_path, self.path)
        logger.debug("Wrote %d room(s) to %s", len(rooms), self.path)
