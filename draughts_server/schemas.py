from __future__ import annotations

from typing import Literal, Optional

from pydantic import BaseModel, Field, field_validator

from draughts.board import Board
from draughts.coordinate import Coordinate


class CoordinateModel(BaseModel):
    x: int = Field(..., ge=0)
    y: int = Field(..., ge=0)

    def to_coordinate(self) -> Coordinate:
        return Coordinate(self.x, self.y)


class MoveRequest(BaseModel):
    origin: CoordinateModel
    destination: CoordinateModel
    path: Optional[list[CoordinateModel]] = Field(
        default=None, description="Intermediate landings of a capture chain, if ambiguous."
    )

    def path_coordinates(self) -> Optional[list[Coordinate]]:
        if self.path is None:
            return None
        return [node.to_coordinate() for node in self.path]


class CreateRoomRequest(BaseModel):
    room_id: Optional[str] = Field(default=None, min_length=1, max_length=64, pattern=r"^[A-Za-z0-9_-]+$")
    size: Optional[int] = Field(default=None, ge=4, le=16)

    @field_validator("size")
    @classmethod
    def _even_size(cls, value: Optional[int]) -> Optional[int]:
        if value is not None and value % 2:
            raise ValueError("Board size must be even.")
        return value


class BoardStateModel(BaseModel):
    """Persisted form of a board: piece rows and the side to move, nothing else."""

    size: int = Field(..., ge=4)
    turn: Literal["light", "dark"]
    cells: list[str]

    @classmethod
    def from_board(cls, board: Board) -> "BoardStateModel":
        return cls.model_validate(board.to_state())

    def to_board(self) -> Board:
        return Board.from_state(self.model_dump())


class RoomsFile(BaseModel):
    rooms: dict[str, BoardStateModel] = Field(default_factory=dict)
