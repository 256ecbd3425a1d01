"""
Boundary layer data model(s).

These objects can be used to communicate with the Service.
Both the API layer (higher) and domain/db layers (lower) use the model(s) defined here to send to/receive from the Service.
"""

from dataclasses import dataclass
from typing import Optional

# Type aliases to make GameModel easier to read
PlayerName = str
SlotIndex = int


@dataclass
class GameModel:
    """Transport-safe representation of a tic-tac-toe game used between Service, DB, and Game layers."""

    players: list[PlayerName]
    moves: list[SlotIndex]
    status: str
    winner: Optional[PlayerName] = None
