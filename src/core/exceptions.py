"""Exceptions raised across layers. The domain raises, the service propagates."""


class GameError(Exception):
    """Base class for anything the game rules refuse."""


class InvalidSetupError(GameError):
    """A game cannot be created from the supplied players."""


class InvalidMoveError(GameError):
    """The requested slot does not exist on the board."""


class GameStateError(GameError):
    """Stored or requested state is inconsistent with the rules."""


class InvalidRequestError(Exception):
    """Request data failed validation at the boundary."""


class RepositoryError(Exception):
    """Record could not be found in (or written to) the persistence layer."""
