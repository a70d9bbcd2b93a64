"""Tests for per-game summaries."""

from bowling_scores.schemas.game import Game
from bowling_scores.services.game import (
    get_frame_statistics,
    get_game_progress_percentage,
    get_highest_scoring_player,
    get_player_frame,
    get_player_frames,
    get_player_score,
)

from .conftest import PLAYER_1_ID, PLAYER_2_ID, roll_many


class TestPlayerLookups:
    def test_frames_by_player_id(self, two_player_game: Game):
        game = roll_many(two_player_game, [10])

        assert get_player_frames(game, PLAYER_1_ID)[0].is_strike
        assert get_player_frames(game, PLAYER_2_ID)[0].rolls == []
        assert get_player_frames(game, "missing") == []

    def test_single_frame(self, single_player_game: Game):
        game = roll_many(single_player_game, [3, 4])

        assert get_player_frame(game, PLAYER_1_ID, 0).score == 7
        assert get_player_frame(game, PLAYER_1_ID, 10) is None
        assert get_player_frame(game, PLAYER_1_ID, -1) is None
        assert get_player_frame(game, "missing", 0) is None

    def test_running_score_mid_game(self, single_player_game: Game):
        assert get_player_score(single_player_game, PLAYER_1_ID) == 0

        game = roll_many(single_player_game, [10, 3, 4])
        assert get_player_score(game, PLAYER_1_ID) == 24


class TestHighestScoringPlayer:
    def test_none_before_completion(self, two_player_game: Game):
        assert get_highest_scoring_player(two_player_game) is None

    def test_winner(self, two_player_game: Game):
        game = roll_many(two_player_game, [3, 4] * 10 + [10, 10, 10])
        assert get_highest_scoring_player(game).id == PLAYER_1_ID

    def test_tie_goes_to_first_player(self, two_player_game: Game):
        game = roll_many(two_player_game, [0] * 20 + [0, 0])
        assert game.scores == [0, 0]
        assert get_highest_scoring_player(game).id == PLAYER_1_ID


class TestProgress:
    def test_new_game(self, single_player_game: Game):
        assert get_game_progress_percentage(single_player_game) == 0

    def test_half_way(self, single_player_game: Game):
        game = roll_many(single_player_game, [10] * 5)
        assert get_game_progress_percentage(game) == 50

    def test_complete(self, perfect_game: Game):
        assert get_game_progress_percentage(perfect_game) == 100


class TestFrameStatistics:
    def test_counts(self, single_player_game: Game):
        game = roll_many(single_player_game, [10, 7, 3, 4, 4, 10])
        stats = get_frame_statistics(game.frames[0])

        assert stats.frames_played == 4
        assert stats.strike_count == 2
        assert stats.spare_count == 1
        assert stats.open_count == 1

    def test_empty(self, single_player_game: Game):
        stats = get_frame_statistics(single_player_game.frames[0])
        assert stats.frames_played == 0
        assert stats.strike_count == 0
