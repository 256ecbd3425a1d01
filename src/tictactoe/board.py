"""The Game board: which slot is occupied by whom, and which lines of slots win the game"""

from dataclasses import dataclass, field

from src.core.exceptions import InvalidMoveError

# Board is always 3x3, slots are numbered row-major:
#  0 | 1 | 2
#  3 | 4 | 5
#  6 | 7 | 8
BOARD_DIMENSIONS = (3, 3)
SLOT_COUNT = BOARD_DIMENSIONS[0] * BOARD_DIMENSIONS[1]

Line = tuple[int, int, int]

ROWS: tuple[Line, ...] = ((0, 1, 2), (3, 4, 5), (6, 7, 8))
COLUMNS: tuple[Line, ...] = ((0, 3, 6), (1, 4, 7), (2, 5, 8))
DIAGONALS: tuple[Line, ...] = ((0, 4, 8), (2, 4, 6))
WINNING_LINES: tuple[Line, ...] = ROWS + COLUMNS + DIAGONALS


def is_within_bounds(index: int) -> bool:
    # bool is a subclass of int, but True/False are not slot numbers
    return (
        isinstance(index, int)
        and not isinstance(index, bool)
        and 0 <= index < SLOT_COUNT
    )


@dataclass
class Board:
    """
    Sparse mapping of slot index -> id of the player occupying it.

    An empty slot is simply absent from the mapping, so "occupied" is a membership test
    and no sentinel value can be confused with a player id.
    """

    slots: dict[int, int] = field(default_factory=dict)

    def is_occupied(self, index: int) -> bool:
        return index in self.slots

    def is_full(self) -> bool:
        return len(self.slots) >= SLOT_COUNT

    def empty_slots(self) -> list[int]:
        return [index for index in range(SLOT_COUNT) if index not in self.slots]

    def place_mark(self, index: int, player_id: int) -> None:
        """Marks are irrevocable: writing to an occupied slot is refused."""
        if not is_within_bounds(index):
            raise InvalidMoveError(f"Slot {index!r} is not on the board.")
        if self.is_occupied(index):
            raise InvalidMoveError(f"Slot {index} is already taken.")
        self.slots[index] = player_id

    def winning_lines(self, player_id: int) -> list[Line]:
        """All lines completely held by the given player"""
        return [line for line in WINNING_LINES if self._holds_line(line, player_id)]

    def has_line(self, player_id: int) -> bool:
        """Stops at the first completed line."""
        return any(self._holds_line(line, player_id) for line in WINNING_LINES)

    def _holds_line(self, line: Line, player_id: int) -> bool:
        return all(self.slots.get(index) == player_id for index in line)
