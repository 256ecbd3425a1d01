"""Unit tests for src/tictactoe/players.py"""

import pytest

from src.core.exceptions import InvalidSetupError
from src.tictactoe.players import Player, PlayerRegistry


def test_ids_follow_turn_order() -> None:
    registry = PlayerRegistry(["first", "second"])
    assert registry.players == (Player(1, "first"), Player(2, "second"))


def test_first_player_starts() -> None:
    registry = PlayerRegistry(["first", "second"])
    assert registry.get_current_player() == Player(1, "first")


def test_current_player_has_no_side_effects() -> None:
    registry = PlayerRegistry(["first", "second"])
    registry.get_current_player()
    registry.get_current_player()
    assert registry.current_index == 0


def test_turn_alternates() -> None:
    """Calling next_player_turn() twice hands the turn back."""
    registry = PlayerRegistry(["first", "second"])
    registry.next_player_turn()
    assert registry.get_current_player().name == "second"
    registry.next_player_turn()
    assert registry.get_current_player().name == "first"


@pytest.mark.parametrize(
    "names",
    [
        [],
        ["lonely"],
        ["one", "two", "three"],
        "ab",  # a string is a sequence of characters, not of names
    ],
)
def test_wrong_number_of_players(names: list[str]) -> None:
    with pytest.raises(InvalidSetupError):
        PlayerRegistry(names)


@pytest.mark.parametrize("bad_name", ["", "   ", None, 42])
def test_invalid_player_name(bad_name: str) -> None:
    with pytest.raises(InvalidSetupError):
        PlayerRegistry(["fine", bad_name])


def test_players_are_immutable() -> None:
    player = PlayerRegistry(["first", "second"]).get_current_player()
    with pytest.raises(AttributeError):
        player.name = "someone else"  # type: ignore[misc]
