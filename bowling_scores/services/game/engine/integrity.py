"""Consistency checks over a whole game snapshot.

Re-derives what a game should look like from its recorded rolls and reports
every divergence. Nothing here mutates or repairs state: a flag or score that
drifted from its rolls is a bug or a corrupted snapshot and is reported as is.
"""

import logging
from dataclasses import dataclass, field

from bowling_scores.exceptions import GameStateError
from bowling_scores.schemas.game import (
    FRAMES_PER_GAME,
    MAX_PINS,
    MAX_ROLLS_PER_FRAME,
    MAX_ROLLS_TENTH_FRAME,
    TENTH_FRAME_INDEX,
    Frame,
    Game,
)

from .rolling import is_game_complete
from .scoring import calculate_frame_score

logger = logging.getLogger(__name__)


@dataclass
class GameValidationResult:
    """Outcome of a consistency check: valid plus every error found."""

    valid: bool = True
    errors: list[str] = field(default_factory=list)

    @classmethod
    def from_errors(cls, errors: list[str]) -> "GameValidationResult":
        return cls(valid=not errors, errors=list(errors))

    def to_error(self) -> GameStateError | None:
        """Convert a failed check into a GameStateError, None if valid."""
        if self.valid:
            return None
        return GameStateError("Game state is invalid", details=self.errors)


def _validate_pins(frame: Frame, is_tenth_frame: bool) -> list[str]:
    errors: list[str] = []
    pins = [roll.pins_knocked for roll in frame.rolls]

    for index, count in enumerate(pins):
        if not 0 <= count <= MAX_PINS:
            errors.append(f"Roll {index + 1} has invalid pin count: {count}")

    if len(pins) < 2:
        return errors

    first, second = pins[0], pins[1]
    if not is_tenth_frame:
        if first + second > MAX_PINS:
            errors.append(f"Sum of pins in frame exceeds 10: {first} + {second}")
        return errors

    if first != MAX_PINS and first + second > MAX_PINS:
        errors.append(
            f"Sum of first two rolls in 10th frame exceeds 10: {first} + {second}"
        )

    if len(pins) > 2:
        third = pins[2]
        if first == MAX_PINS:
            if second != MAX_PINS and second + third > MAX_PINS:
                errors.append(
                    "After strike in 10th frame, sum of second and third rolls "
                    f"exceeds 10: {second} + {third}"
                )
        elif first + second != MAX_PINS:
            errors.append("Third roll in 10th frame is only allowed after a strike or spare")

    return errors


def validate_frame(frame: Frame, is_tenth_frame: bool) -> GameValidationResult:
    """Validate a single frame's roll count, pin counts and flags."""
    errors: list[str] = []
    roll_count = len(frame.rolls)

    if not is_tenth_frame:
        if roll_count > MAX_ROLLS_PER_FRAME:
            errors.append("Regular frame cannot have more than 2 rolls")
        if roll_count > 1 and frame.rolls[0].pins_knocked == MAX_PINS:
            errors.append("A strike frame should only have 1 roll")
    elif roll_count > MAX_ROLLS_TENTH_FRAME:
        errors.append("10th frame cannot have more than 3 rolls")

    errors.extend(_validate_pins(frame, is_tenth_frame))

    if roll_count > 0:
        actual_strike = frame.rolls[0].pins_knocked == MAX_PINS
        if frame.is_strike != actual_strike:
            errors.append(
                "Strike flag is inconsistent with roll values. "
                f"Flag: {frame.is_strike}, First roll: {frame.rolls[0].pins_knocked}"
            )

        actual_spare = (
            roll_count > 1
            and not actual_strike
            and frame.rolls[0].pins_knocked + frame.rolls[1].pins_knocked == MAX_PINS
        )
        if frame.is_spare != actual_spare:
            errors.append(
                "Spare flag is inconsistent with roll values. "
                f"Flag: {frame.is_spare}, Rolls: {[r.pins_knocked for r in frame.rolls[:2]]}"
            )
    elif frame.is_strike or frame.is_spare:
        errors.append("Frame without rolls cannot be flagged as strike or spare")

    return GameValidationResult.from_errors(errors)


def validate_score_calculation(frames: list[Frame]) -> GameValidationResult:
    """Compare stored scores with a fresh recomputation.

    Frames without rolls are skipped; the running total still follows the
    recomputed scores.
    """
    errors: list[str] = []
    running_total = 0

    for index, frame in enumerate(frames):
        expected_score = calculate_frame_score(frames, index)
        running_total += expected_score

        if not frame.rolls:
            continue

        if frame.score != expected_score:
            errors.append(
                f"Frame {index + 1} score is incorrect. "
                f"Expected: {expected_score}, Actual: {frame.score}"
            )

        if frame.cumulative_score != running_total:
            errors.append(
                f"Frame {index + 1} cumulative score is incorrect. "
                f"Expected: {running_total}, Actual: {frame.cumulative_score}"
            )

    return GameValidationResult.from_errors(errors)


def validate_game_state(game: Game) -> GameValidationResult:
    """Validate an entire game for structural and scoring consistency.

    Checks:
    - At least one player, one frame list per player, ten frames each
    - Current player/frame pointers in range
    - Every frame's rolls and flags
    - Every played frame's score and cumulative score
    - is_complete and scores agree with the recorded rolls

    Args:
        game: The game to check.

    Returns:
        GameValidationResult with every error found.
    """
    errors: list[str] = []

    if not game.players:
        errors.append("Game must have at least one player")

    if len(game.frames) != len(game.players):
        errors.append("Number of frame arrays must match the number of players")

    for player_index, player_frames in enumerate(game.frames):
        label = f"Player {player_index + 1}"

        if len(player_frames) != FRAMES_PER_GAME:
            errors.append(f"{label} must have exactly 10 frames")

        for frame_index, frame in enumerate(player_frames):
            frame_result = validate_frame(frame, frame_index == TENTH_FRAME_INDEX)
            errors.extend(
                f"{label}, Frame {frame_index + 1}: {error}" for error in frame_result.errors
            )

        score_result = validate_score_calculation(player_frames)
        errors.extend(f"{label}: {error}" for error in score_result.errors)

    if not 0 <= game.current_player < max(len(game.players), 1):
        errors.append("Current player index is out of bounds")

    if not 0 <= game.current_frame <= TENTH_FRAME_INDEX:
        errors.append("Current frame index is out of bounds")

    errors.extend(_validate_completion(game))

    if errors:
        logger.warning(
            "Game state validation failed: game=%s, errors=%d",
            game.id,
            len(errors),
        )
        logger.debug("Game state errors: %s", errors)
    return GameValidationResult.from_errors(errors)


def _validate_completion(game: Game) -> list[str]:
    errors: list[str] = []
    complete = is_game_complete(game)

    if game.is_complete != complete:
        errors.append(
            f"Completion flag is inconsistent with rolls. Flag: {game.is_complete}, "
            f"Expected: {complete}"
        )

    if not game.is_complete:
        if game.scores is not None:
            errors.append("Final scores must not be set before the game is complete")
        return errors

    if game.scores is None:
        errors.append("Final scores are missing for a completed game")
        return errors

    expected = [
        player_frames[-1].cumulative_score if player_frames else 0
        for player_frames in game.frames
    ]
    if game.scores != expected:
        errors.append(
            f"Final scores are incorrect. Expected: {expected}, Actual: {game.scores}"
        )

    return errors
