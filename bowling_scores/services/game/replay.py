"""Replaying flat lists of pin counts through the engine.

Roll rules are not restated here: every roll goes through process_roll and
therefore validate_roll.
"""

import logging

from bowling_scores.exceptions import RollRejectedError
from bowling_scores.schemas.game import Game, Player

from .engine import GameValidationResult, process_roll
from .start_game import create_new_game

logger = logging.getLogger(__name__)

_SEQUENCE_PLAYER = Player(id="sequence", name="Sequence")


def build_game_from_rolls(players: list[Player], rolls: list[int]) -> Game:
    """Create a game for the roster and record each roll in order.

    Raises:
        GameSetupError: If the roster is invalid.
        RollRejectedError: On the first illegal roll; details name its position.
    """
    game = create_new_game(players)

    for position, pins in enumerate(rolls, start=1):
        result = process_roll(game, pins)
        if not result.success or result.state is None:
            raise RollRejectedError(
                result.error_message or "Invalid roll",
                details=[f"Roll {position}: {pins}"],
                code=result.error_code,
            )
        game = result.state

    logger.debug("Game rebuilt from %d rolls: complete=%s", len(rolls), game.is_complete)
    return game


def validate_roll_sequence(rolls: list[int]) -> GameValidationResult:
    """Validate one bowler's full list of pin counts.

    Replays the rolls on a single-player game and stops at the first
    rejection. Rolls left over once the game is complete are reported as
    extra rolls.
    """
    game = create_new_game([_SEQUENCE_PLAYER])
    errors: list[str] = []

    for position, pins in enumerate(rolls, start=1):
        if game.is_complete:
            errors.append(f"Extra roll(s) after the game is complete, starting at roll {position}")
            break

        result = process_roll(game, pins)
        if not result.success or result.state is None:
            errors.append(f"Invalid roll {position} ({pins}): {result.error_message}")
            break
        game = result.state

    return GameValidationResult.from_errors(errors)
