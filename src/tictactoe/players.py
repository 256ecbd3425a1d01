"""Players of a game and the order in which they take turns"""

from collections.abc import Sequence
from dataclasses import dataclass

from src.core.exceptions import InvalidSetupError

# Tic-tac-toe is strictly a two player game
NUMBER_OF_PLAYERS = 2


@dataclass(frozen=True)
class Player:
    id: int
    name: str


class PlayerRegistry:
    """
    Holds the two players of a game and tracks whose turn it is.

    ----
    Insertion order is turn order: the first name moves first and gets id 1.
    """

    def __init__(self, names: Sequence[str]) -> None:
        if isinstance(names, str) or len(names) != NUMBER_OF_PLAYERS:
            raise InvalidSetupError(
                f"A game needs exactly {NUMBER_OF_PLAYERS} players, got {names!r}."
            )
        for name in names:
            if not isinstance(name, str) or not name.strip():
                raise InvalidSetupError(f"Player name must be non-empty text, got {name!r}.")

        self.players: tuple[Player, ...] = tuple(
            Player(id=idx + 1, name=name) for idx, name in enumerate(names)
        )
        self.current_index = 0

    def get_current_player(self) -> Player:
        return self.players[self.current_index]

    def next_player_turn(self) -> None:
        """Hand the turn to the other player. Call once per completed, non-terminal move."""
        self.current_index = (self.current_index + 1) % NUMBER_OF_PLAYERS
