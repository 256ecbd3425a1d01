"""Orchestration of communication from API router to business logic and persistence layers (and the reverse direction)."""

import logging
from typing import Optional
from uuid import UUID

from src.api.models import (
    CreateGameRequest,
    DeleteGameRequest,
    GameResponse,
    GetGameRequest,
    LeaderboardResponse,
    MoveRequest,
)
from src.core.exceptions import RepositoryError
from src.core.models import GameModel
from src.db.repository import GameRepository, LeaderboardRepository
from src.tictactoe.game import GameEngine
from src.tictactoe.players import Player

logger = logging.getLogger(__name__)


class TicTacToeService:
    """Orchestration of layers for tic-tac-toe."""

    def __init__(
        self, repository: GameRepository, leaderboard: LeaderboardRepository
    ) -> None:
        self.repo = repository
        self.leaderboard = leaderboard

    # -- API routes logic ---
    def create_new_game(self, request: CreateGameRequest) -> GameResponse:
        """Both players are known up front: the game starts immediately."""

        # Use info in CreateGameRequest to create a new GameEngine, and convert into GameModel
        game = GameEngine([request.first_player, request.second_player])
        created_game_data = game.to_model()

        # Store the GameModel in the repository
        stored_game, game_id = self.repo.create_game(created_game_data)
        logger.info(
            "Created game %s: %s vs %s",
            game_id,
            request.first_player,
            request.second_player,
        )

        return self._create_game_response(game_id, GameEngine.from_model(stored_game))

    def get_game_state(self, request: GetGameRequest) -> GameResponse:
        """
        Retrieve current game state.
        ----
        Used in "polling" loop by frontend to redraw the board for instance.
        """
        game = GameEngine.from_model(self._fetch_game(request.game_id))
        return self._create_game_response(request.game_id, game)

    def fill_slot(self, request: MoveRequest) -> GameResponse:
        """
        Play a move. When this move ends the game, a winner is added to the top of the leaderboard.
        ----
        NOTE the leaderboard is only touched once the finished game is stored: a failed update must not leave a recorded win behind.
        """

        # Retrieve persisted GameModel from repository
        stored_model = self._fetch_game(request.game_id)

        # Create the engine, collecting the outcome (if this move ends the game)
        outcomes: list[Optional[Player]] = []
        game = GameEngine.from_model(stored_model, on_game_end=outcomes.append)

        # Attempt the move
        game.fill_slot(request.slot)

        # Capture updated state in GameModel and store in repository
        after_move = game.to_model()
        if self.repo.update_game(request.game_id, after_move) is None:
            raise RepositoryError(f"Game with game_id={request.game_id} could not be updated.")

        for winner in outcomes:
            self._record_outcome(winner)

        return self._create_game_response(request.game_id, game)

    def get_leaderboard(self) -> LeaderboardResponse:
        return LeaderboardResponse(winners=self.leaderboard.get_leaderboard())

    def delete_game(self, request: DeleteGameRequest) -> None:
        """Handle a request to delete a Game record."""
        self.repo.delete_game(request.game_id)

    # -- Internal helpers --
    def _record_outcome(self, winner: Optional[Player]) -> None:
        """A draw leaves the leaderboard untouched."""
        if winner is None:
            return
        winners = self.leaderboard.update_leaderboard(
            [winner.name, *self.leaderboard.get_leaderboard()]
        )
        logger.info("Recorded win for %s (%d entries on leaderboard)", winner.name, len(winners))

    def _create_game_response(self, game_id: UUID, game: GameEngine) -> GameResponse:
        """Convert the state of the GameEngine to a GameResponse (for game with given ID.)"""
        return GameResponse(
            game_id=game_id,
            players={player.id: player.name for player in game.players.players},
            board=game.get_board(),
            current_player=game.get_current_player().name,
            status=game.status,
            winner=game.winner.name if game.winner else None,
            move_history=list(game.moves),
        )

    def _fetch_game(self, game_id: UUID) -> GameModel:
        """Attempt to find the game in the repository and raise error if it fails."""
        game_model = self.repo.get_game(game_id)
        if game_model is None:
            raise RepositoryError(f"Game with {game_id=} not found.")
        return game_model
