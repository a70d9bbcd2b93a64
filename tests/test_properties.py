"""Randomized checks over many legal games.

Each seed plays a full game with random legal rolls and checks, after every
roll, that the snapshot stays consistent with its own rolls.
"""

import random

import pytest

from bowling_scores.schemas.game import Game
from bowling_scores.services.game import (
    calculate_game_score,
    create_new_game,
    is_game_complete,
    process_roll,
    validate_game_state,
    validate_roll,
)

from .conftest import create_test_player

SEEDS = list(range(25))


def legal_pins(game: Game) -> list[int]:
    return [pins for pins in range(11) if validate_roll(game, pins).is_valid]


def play_random_game(seed: int, player_count: int) -> list[Game]:
    """Play a whole game and return every snapshot, starting with the empty one."""
    rng = random.Random(seed)
    players = [create_test_player(str(i), f"Player {i}") for i in range(player_count)]
    game = create_new_game(players)
    snapshots = [game]

    # 21 rolls per player is the most a game can take
    for _ in range(21 * player_count):
        if game.is_complete:
            break
        pins = rng.choice(legal_pins(game))
        result = process_roll(game, pins)
        assert result.success
        game = result.state
        snapshots.append(game)

    return snapshots


@pytest.mark.parametrize("seed", SEEDS)
@pytest.mark.parametrize("player_count", [1, 3])
class TestRandomGames:
    def test_game_terminates(self, seed: int, player_count: int):
        final = play_random_game(seed, player_count)[-1]

        assert final.is_complete
        assert len(final.scores) == player_count
        assert all(0 <= score <= 300 for score in final.scores)
        assert legal_pins(final) == []

    def test_every_snapshot_is_consistent(self, seed: int, player_count: int):
        for game in play_random_game(seed, player_count):
            result = validate_game_state(game)
            assert result.valid, result.errors
            assert game.is_complete == is_game_complete(game)
            assert (game.scores is not None) == game.is_complete

    def test_frame_invariants(self, seed: int, player_count: int):
        final = play_random_game(seed, player_count)[-1]

        for player_frames in final.frames:
            for index, frame in enumerate(player_frames):
                pins = [roll.pins_knocked for roll in frame.rolls]
                if index < 9:
                    assert len(pins) <= 2
                    assert sum(pins) <= 10
                    if frame.is_strike:
                        assert pins == [10]
                else:
                    assert len(pins) in (2, 3)
                assert not (frame.is_strike and frame.is_spare)

    def test_cumulative_never_decreases(self, seed: int, player_count: int):
        for game in play_random_game(seed, player_count):
            for player_frames in game.frames:
                totals = [frame.cumulative_score for frame in player_frames]
                assert totals == sorted(totals)

    def test_scoring_is_idempotent(self, seed: int, player_count: int):
        final = play_random_game(seed, player_count)[-1]

        for player_frames in final.frames:
            assert calculate_game_score(player_frames) == player_frames
