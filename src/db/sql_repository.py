"""Implementation of the repositories using SQLAlchemy"""

from uuid import UUID, uuid4

from sqlalchemy import delete, select
from sqlalchemy.orm import Session

from src.core.models import GameModel
from src.db.schema import DBGame, DBLeaderboardEntry


class SQLGameRepository:
    """Data stored using SQL / methods implemented using SQLAlchemy"""

    def __init__(self, db_session: Session) -> None:
        self.db = db_session

    def get_game(self, game_id: UUID) -> GameModel | None:
        """Get game by ID, if record exists."""
        game_db = self._fetch_game(game_id)
        if game_db:
            return self._to_model(game_db)
        return None

    def create_game(self, game: GameModel) -> tuple[GameModel, UUID]:
        """Store new game and return the stored data + newly created game ID."""

        new_id = uuid4()
        game_db = DBGame(
            id=new_id,
            players=game.players,
            moves=game.moves,
            status=game.status,
            winner=game.winner,
        )
        self.db.add(game_db)
        self.db.commit()
        self.db.refresh(game_db)
        return self._to_model(game_db), new_id

    def update_game(self, game_id: UUID, game: GameModel) -> GameModel | None:
        """Add new info to existing record."""
        game_db = self._fetch_game(game_id)
        if not game_db:
            return None
        game_db.players = game.players
        game_db.moves = game.moves
        game_db.status = game.status
        game_db.winner = game.winner
        self.db.commit()
        self.db.refresh(game_db)
        return self._to_model(game_db)

    def delete_game(self, game_id: UUID) -> GameModel | None:
        """Remove a game's record."""
        game_db = self._fetch_game(game_id)
        if not game_db:
            return None
        game_model = self._to_model(game_db)
        self.db.delete(game_db)
        self.db.commit()
        return game_model

    def _fetch_game(self, game_id: UUID) -> DBGame | None:
        query = select(DBGame).where(DBGame.id == game_id)
        return self.db.scalar(query)

    def _to_model(self, game_db: DBGame) -> GameModel:
        """Convert SQLAlchemy model to data transfer model."""
        # JSON columns hand back the same list object: copy so callers cannot alter the ORM state
        return GameModel(
            players=list(game_db.players),
            moves=list(game_db.moves),
            status=game_db.status,
            winner=game_db.winner,
        )


class SQLLeaderboardRepository:
    """Winner names stored one row per entry, ordered by position."""

    def __init__(self, db_session: Session) -> None:
        self.db = db_session

    def get_leaderboard(self) -> list[str]:
        query = select(DBLeaderboardEntry.name).order_by(DBLeaderboardEntry.position)
        return list(self.db.scalars(query))

    def update_leaderboard(self, names: list[str]) -> list[str]:
        """The stored list is replaced as a whole, in a single commit."""
        self.db.execute(delete(DBLeaderboardEntry))
        self.db.add_all(
            DBLeaderboardEntry(position=position, name=name)
            for position, name in enumerate(names)
        )
        self.db.commit()
        return self.get_leaderboard()
