"""Tests for rebuilding games from flat roll lists."""

import pytest

from bowling_scores.exceptions import RollRejectedError
from bowling_scores.schemas.game import Player
from bowling_scores.services.game import build_game_from_rolls, validate_roll_sequence


class TestBuildGameFromRolls:
    def test_complete_game(self, player1: Player):
        game = build_game_from_rolls([player1], [10] * 12)

        assert game.is_complete
        assert game.scores == [300]

    def test_partial_game(self, player1: Player):
        game = build_game_from_rolls([player1], [10, 7, 3])

        assert not game.is_complete
        assert game.current_frame == 2
        assert game.frames[0][0].score == 20

    def test_illegal_roll_names_position(self, player1: Player):
        with pytest.raises(RollRejectedError) as exc_info:
            build_game_from_rolls([player1], [3, 4, 6, 5])

        error = exc_info.value
        assert error.code == "FRAME_PIN_LIMIT"
        assert error.details == ["Roll 4: 5"]

    def test_roll_after_completion(self, player1: Player):
        with pytest.raises(RollRejectedError) as exc_info:
            build_game_from_rolls([player1], [0] * 21)

        assert exc_info.value.code == "GAME_COMPLETE"
        assert exc_info.value.details == ["Roll 21: 0"]


class TestValidateRollSequence:
    @pytest.mark.parametrize(
        "rolls",
        [
            [10] * 12,
            [0] * 20,
            [9, 1] * 10 + [9],
            [3, 4] * 9 + [10, 3, 7],
            [10, 7, 3],
            [],
        ],
    )
    def test_valid_sequences(self, rolls: list[int]):
        result = validate_roll_sequence(rolls)

        assert result.valid
        assert result.errors == []

    def test_pin_limit(self):
        result = validate_roll_sequence([3, 4, 6, 5])

        assert not result.valid
        assert result.errors == [
            "Invalid roll 4 (5): Total pins knocked down in a frame cannot exceed 10 (6 + 5)"
        ]

    def test_out_of_range(self):
        result = validate_roll_sequence([11])
        assert result.errors[0].startswith("Invalid roll 1 (11): Pin count out of range")

    def test_tenth_frame_fill_over_limit(self):
        result = validate_roll_sequence([0] * 18 + [10, 3, 8])
        assert result.errors[0].startswith("Invalid roll 21 (8):")

    def test_extra_rolls(self):
        result = validate_roll_sequence([10] * 13)
        assert result.errors == ["Extra roll(s) after the game is complete, starting at roll 13"]

    def test_extra_roll_after_open_tenth(self):
        result = validate_roll_sequence([0] * 21)
        assert result.errors == ["Extra roll(s) after the game is complete, starting at roll 21"]
