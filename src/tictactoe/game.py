"""
The GameEngine is the entrypoint into the domain layer for the service layer.
It is responsible for applying a move, evaluating the board for a winner or a draw and reporting the outcome (once).
"""

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Optional, Self

from src.core.exceptions import GameStateError, InvalidMoveError
from src.core.models import GameModel
from src.core.shared_types import TERMINAL_STATUSES, Status
from src.tictactoe.board import Board, is_within_bounds
from src.tictactoe.players import Player, PlayerRegistry

logger = logging.getLogger(__name__)

# Receives the winning Player, or None for a draw
OutcomeSink = Callable[[Optional[Player]], None]


@dataclass(frozen=True)
class GameResult:
    """Tagged result of a move: still in progress, won by `winner`, or a draw (winner is None)."""

    status: Status
    winner: Optional[Player] = None

    @property
    def is_terminal(self) -> bool:
        return self.status in TERMINAL_STATUSES


class GameEngine:
    # --- DOMAIN LAYER API CALLED BY SERVICE---

    def __init__(
        self, player_names: Sequence[str], on_game_end: Optional[OutcomeSink] = None
    ) -> None:
        self.players = PlayerRegistry(player_names)
        self.board = Board()
        self.moves: list[int] = []
        self.status = Status.IN_PROGRESS
        self.winner: Optional[Player] = None
        self.on_game_end = on_game_end

    @classmethod
    def from_model(
        cls, model: GameModel, on_game_end: Optional[OutcomeSink] = None
    ) -> Self:
        """
        Rebuild a game by replaying the stored moves.
        ----
        The outcome sink is attached only after the replay: a game that already ended must not report its outcome again.
        """
        status_name = model.status.replace(" ", "_").upper()
        if status_name not in Status.__members__:
            raise GameStateError(
                f"Invalid status code: {model.status!r}. \nPick one from {','.join([status.value for status in Status])}"
            )

        game = cls(model.players)
        for index in model.moves:
            moves_before = len(game.moves)
            try:
                game.fill_slot(index)
            except InvalidMoveError as e:
                raise GameStateError(
                    f"Stored move {index!r} is not on the board. moves: {model.moves}"
                ) from e
            if len(game.moves) == moves_before:
                raise GameStateError(
                    f"Stored move {index} could not be replayed. moves: {model.moves}"
                )

        if game.status != Status[status_name]:
            raise GameStateError(
                f"Stored status {model.status!r} does not match replayed status {game.status.value!r}."
            )

        replayed_winner = game.winner.name if game.winner else None
        if model.winner != replayed_winner:
            raise GameStateError(
                f"Stored winner {model.winner!r} does not match replayed winner {replayed_winner!r}."
            )
        game.on_game_end = on_game_end
        return game

    def to_model(self) -> GameModel:
        """Encode back into a format the Service layer uses"""
        return GameModel(
            players=[player.name for player in self.players.players],
            moves=list(self.moves),
            status=self.status.value,
            winner=self.winner.name if self.winner else None,
        )

    @property
    def is_terminated(self) -> bool:
        return self.status in TERMINAL_STATUSES

    @property
    def result(self) -> GameResult:
        return GameResult(self.status, self.winner)

    def get_board(self) -> dict[int, int]:
        """Snapshot of slot -> occupant id, for display. Mutating it does not affect the game."""
        return dict(self.board.slots)

    def get_current_player(self) -> Player:
        return self.players.get_current_player()

    def fill_slot(self, index: int) -> GameResult:
        """
        Mark the slot for the player whose turn it is.
        -----

        1. game already over? ignore the move (whatever the index)
        2. index outside the board? raise InvalidMoveError
        3. slot already taken? ignore the move
        4. place the mark
        5. winning line for the mover? -> WON. board full? -> DRAW. Otherwise hand the turn over.
        """
        if self.is_terminated:
            logger.debug("Ignoring move on slot %r: game is over (%s)", index, self.status)
            return self.result

        if not is_within_bounds(index):
            raise InvalidMoveError(f"Slot {index!r} is not on the board. Pick 0-8.")

        if self.board.is_occupied(index):
            logger.debug("Ignoring move on slot %d: already taken", index)
            return self.result

        # NOTE the mover is read BEFORE any turn rotation, win detection is from their perspective
        mover = self.players.get_current_player()
        self.board.place_mark(index, mover.id)
        self.moves.append(index)

        self._update_game_status(mover)
        return self.result

    # -- PRIVATE HELPERS ---
    def _update_game_status(self, mover: Player) -> None:
        """Win is checked before draw: a winning ninth move is a win, not a draw."""
        if self.board.has_line(mover.id):
            self._end_game(Status.WON, mover)
        elif self.board.is_full():
            self._end_game(Status.DRAW, None)
        else:
            self.players.next_player_turn()

    def _end_game(self, status: Status, winner: Optional[Player]) -> None:
        self.status = status
        self.winner = winner
        if winner:
            logger.info(
                "Game won by %s on lines %s",
                winner.name,
                self.board.winning_lines(winner.id),
            )
        else:
            logger.info("Game ended in a draw after %d moves", len(self.moves))

        if self.on_game_end is not None:
            self.on_game_end(winner)
