"""
Type definitions used across layers
"""

from enum import StrEnum


class Status(StrEnum):
    IN_PROGRESS = "in progress"
    WON = "won"
    DRAW = "draw"


# Terminal states: no transition leaves them
TERMINAL_STATUSES = frozenset({Status.WON, Status.DRAW})
