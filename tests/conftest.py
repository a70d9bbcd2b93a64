"""Shared fixtures for game engine tests."""

import pytest

from bowling_scores.schemas.game import Frame, Game, Player, Roll
from bowling_scores.services.game import create_new_game, process_roll
from bowling_scores.services.game.engine import calculate_game_score, update_frame_flags

# Fixed ids for deterministic testing
PLAYER_1_ID = "00000000-0000-0000-0000-000000000001"
PLAYER_2_ID = "00000000-0000-0000-0000-000000000002"
PLAYER_3_ID = "00000000-0000-0000-0000-000000000003"

GAME_ID = "game-1"
GAME_DATE = "2024-01-01T00:00:00+00:00"


def create_test_player(player_id: str, name: str) -> Player:
    """Helper to create a player."""
    return Player(id=player_id, name=name)


def create_frame(*pins: int) -> Frame:
    """Helper to create a frame with flags derived from its rolls."""
    frame = Frame(rolls=[Roll(pins_knocked=p) for p in pins])
    return update_frame_flags(frame)


def create_frames(*frames: tuple[int, ...]) -> list[Frame]:
    """Helper to create ten scored frames; missing frames are empty."""
    built = [create_frame(*pins) for pins in frames]
    built += [create_frame() for _ in range(10 - len(built))]
    return calculate_game_score(built)


def roll_many(game: Game, rolls: list[int]) -> Game:
    """Record each roll through process_roll, failing the test on rejection."""
    for pins in rolls:
        result = process_roll(game, pins)
        assert result.success, f"roll {pins} rejected: {result.error_message}"
        game = result.state
    return game


@pytest.fixture
def player1() -> Player:
    return create_test_player(PLAYER_1_ID, "Alice")


@pytest.fixture
def player2() -> Player:
    return create_test_player(PLAYER_2_ID, "Bob")


@pytest.fixture
def player3() -> Player:
    return create_test_player(PLAYER_3_ID, "Carol")


@pytest.fixture
def single_player_game(player1: Player) -> Game:
    """Fresh one-player game."""
    return create_new_game([player1], game_id=GAME_ID, date=GAME_DATE)


@pytest.fixture
def two_player_game(player1: Player, player2: Player) -> Game:
    """Fresh two-player game."""
    return create_new_game([player1, player2], game_id=GAME_ID, date=GAME_DATE)


@pytest.fixture
def three_player_game(player1: Player, player2: Player, player3: Player) -> Game:
    """Fresh three-player game."""
    return create_new_game([player1, player2, player3], game_id=GAME_ID, date=GAME_DATE)


@pytest.fixture
def game_in_tenth_frame(single_player_game: Game) -> Game:
    """One-player game with frames 1-9 played as 3,4 and the 10th frame untouched."""
    return roll_many(single_player_game, [3, 4] * 9)


@pytest.fixture
def perfect_game(single_player_game: Game) -> Game:
    """One-player game of twelve strikes."""
    return roll_many(single_player_game, [10] * 12)
