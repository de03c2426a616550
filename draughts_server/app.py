from __future__ import annotations

import logging
from typing import Optional

from fastapi import Depends, FastAPI, HTTPException, Query
from fastapi.middleware.cors import CORSMiddleware

from draughts.errors import EngineError

from .config import ServerConfig
from .schemas import CreateRoomRequest, MoveRequest
from .serializers import serialize_error
from .session import RoomExists, RoomService
from .store import RoomNotFound, RoomStore

logger = logging.getLogger(__name__)


def create_app(config: Optional[ServerConfig] = None, service: Optional[RoomService] = None) -> FastAPI:
    config = config if config is not None else ServerConfig.from_env()
    if service is None:
        service = RoomService(RoomStore(config.rooms_path), board_size=config.board_size)

    app = FastAPI(title="Draughts", version="1.0.0")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
        allow_credentials=True,
    )

    def get_service() -> RoomService:
        return service

    def _not_found(exc: RoomNotFound) -> HTTPException:
        return HTTPException(status_code=404, detail=str(exc))

    @app.get("/health")
    def healthcheck() -> dict[str, str]:
        return {"status": "ok"}

    @app.get("/rooms")
    def list_rooms(service: RoomService = Depends(get_service)):
        return service.list_rooms()

    @app.post("/rooms")
    def create_room(payload: Optional[CreateRoomRequest] = None, service: RoomService = Depends(get_service)):
        try:
            return service.create_room(payload)
        except RoomExists as exc:
            raise HTTPException(status_code=409, detail=str(exc)) from exc

    @app.get("/rooms/{room_id}")
    def read_room(room_id: str, service: RoomService = Depends(get_service)):
        try:
            return service.get_room(room_id)
        except RoomNotFound as exc:
            raise _not_found(exc) from exc

    @app.post("/rooms/{room_id}/reset")
    def reset_room(room_id: str, service: RoomService = Depends(get_service)):
        try:
            return service.reset_room(room_id)
        except RoomNotFound as exc:
            raise _not_found(exc) from exc

    @app.get("/games/{room_id}/moves")
    def read_legal_moves(
        room_id: str,
        x: int = Query(..., ge=0),
        y: int = Query(..., ge=0),
        service: RoomService = Depends(get_service),
    ):
        try:
            return service.legal_moves(room_id, x, y)
        except RoomNotFound as exc:
            raise _not_found(exc) from exc

    @app.post("/games/{room_id}/moves")
    def play_move(room_id: str, payload: MoveRequest, service: RoomService = Depends(get_service)):
        try:
            return service.make_move(room_id, payload)
        except RoomNotFound as exc:
            raise _not_found(exc) from exc
        except EngineError as exc:
            raise HTTPException(status_code=400, detail=serialize_error(exc)) from exc

    logger.debug("Created app (rooms path: %s)", config.rooms_path)
    return app
