"""Requests and Response models"""

from typing import Optional
from uuid import UUID

from pydantic import BaseModel, field_validator

from src.core.exceptions import InvalidRequestError
from src.core.shared_types import Status
from src.tictactoe.board import SLOT_COUNT

PlayerId = int
PlayerName = str


# --- REQUEST MODELS ---
class CreateGameRequest(BaseModel):
    """Names in turn order: the first player moves first."""

    first_player: str
    second_player: str

    @field_validator(*["first_player", "second_player"])
    @classmethod
    def validate_name(cls, value: str) -> str:
        if not value.strip():
            raise InvalidRequestError("Player name cannot be empty.")
        return value


class MoveRequest(BaseModel):
    game_id: UUID
    slot: int

    @field_validator("slot", mode="before")
    @classmethod
    def reject_bool_slot(cls, value: object) -> object:
        # pydantic would coerce True/False into 1/0
        if isinstance(value, bool):
            raise InvalidRequestError(f"Cannot interpret slot: {value!r} as a board slot.")
        return value

    @field_validator("slot")
    @classmethod
    def validate_slot(cls, value: int) -> int:
        if not 0 <= value < SLOT_COUNT:
            raise InvalidRequestError(
                f"Cannot interpret slot: {value!r} as a board slot. Pick 0-{SLOT_COUNT - 1}."
            )
        return value


class GetGameRequest(BaseModel):
    game_id: UUID


class DeleteGameRequest(BaseModel):
    game_id: UUID


# --- RESPONSE MODELS ---
class GameResponse(BaseModel):
    game_id: UUID
    players: dict[PlayerId, PlayerName]
    board: dict[int, PlayerId]
    current_player: PlayerName
    status: Status
    winner: Optional[PlayerName]
    move_history: list[int]


class LeaderboardResponse(BaseModel):
    winners: list[PlayerName]
