"""
Runtime configuration, read from environment variables.
"""

import logging
import os

DATABASE_URL = os.environ.get("TICTACTOE_DATABASE_URL", "sqlite:///tictactoe.db")
ECHO_SQL = os.environ.get("TICTACTOE_ECHO_SQL", "").lower() in {"1", "true", "yes"}
LOG_LEVEL = os.environ.get("TICTACTOE_LOG_LEVEL", "INFO").upper()

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str = LOG_LEVEL) -> None:
    """Set up root logging once for a process using this package."""
    logging.basicConfig(level=level, format=LOG_FORMAT)
