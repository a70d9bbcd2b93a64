"""Roll validation and the ProcessResult pattern.

Separates validation from processing logic:
- validate_roll() decides whether a pin count is legal for the current frame
- ProcessResult replaces exceptions for control flow

validate_roll() is the only place the roll rules live; every other entry
point (process_roll, validate_roll_sequence) goes through it.
"""

import logging
from dataclasses import dataclass, field

from bowling_scores.exceptions import RollRejectedError
from bowling_scores.schemas.game import (
    FRAMES_PER_GAME,
    MAX_PINS,
    TENTH_FRAME_INDEX,
    Game,
)

from .events import AnyGameEvent

logger = logging.getLogger(__name__)


@dataclass
class ProcessResult:
    """Result of processing a roll.

    Replaces exceptions for control flow, providing explicit success/failure
    with error codes suitable for client localization.
    """

    state: Game | None = None
    events: list[AnyGameEvent] = field(default_factory=list)
    success: bool = True
    error_code: str | None = None
    error_message: str | None = None

    @classmethod
    def ok(
        cls,
        state: Game,
        events: list[AnyGameEvent] | None = None,
    ) -> "ProcessResult":
        """Create a successful result with new state and events."""
        return cls(
            state=state,
            events=events or [],
            success=True,
        )

    @classmethod
    def failure(cls, code: str, message: str) -> "ProcessResult":
        """Create a failure result with error details."""
        return cls(
            state=None,
            events=[],
            success=False,
            error_code=code,
            error_message=message,
        )


@dataclass
class RollValidationResult:
    """Result of validating a roll before applying it."""

    is_valid: bool = True
    error_code: str | None = None
    error_message: str | None = None

    @classmethod
    def ok(cls) -> "RollValidationResult":
        """Create a successful validation result."""
        return cls(is_valid=True)

    @classmethod
    def error(cls, code: str, message: str) -> "RollValidationResult":
        """Create a validation failure with error details."""
        return cls(
            is_valid=False,
            error_code=code,
            error_message=message,
        )

    def to_error(self) -> RollRejectedError | None:
        """Convert a rejection into a RollRejectedError, None if valid."""
        if self.is_valid:
            return None
        return RollRejectedError(
            self.error_message or "Invalid roll",
            code=self.error_code,
        )


def _reject(code: str, message: str) -> RollValidationResult:
    logger.warning("Roll rejected: code=%s, message=%s", code, message)
    return RollValidationResult.error(code, message)


def _frame_pin_limit(previous: int, pins_knocked: int) -> RollValidationResult:
    return _reject(
        "FRAME_PIN_LIMIT",
        "Total pins knocked down in a frame cannot exceed 10 "
        f"({previous} + {pins_knocked})",
    )


def validate_roll(game: Game, pins_knocked: int) -> RollValidationResult:
    """Validate a proposed pin count against the current frame.

    Checks, in order:
    - The game is not already complete
    - The pin count is within 0-10
    - Frames 1-9: two rolls at most, summing to 10 at most
    - 10th frame: pins reset after a strike or spare, a third roll only
      after a strike or spare

    Args:
        game: Current game state.
        pins_knocked: Proposed number of pins knocked down.

    Returns:
        RollValidationResult indicating success or failure with error details.
    """
    logger.debug(
        "Validating roll: pins=%s, player=%d, frame=%d",
        pins_knocked,
        game.current_player,
        game.current_frame,
    )

    if game.is_complete:
        return _reject("GAME_COMPLETE", "Game already complete")

    if (
        isinstance(pins_knocked, bool)
        or not isinstance(pins_knocked, int)
        or not 0 <= pins_knocked <= MAX_PINS
    ):
        return _reject(
            "PINS_OUT_OF_RANGE",
            f"Pin count out of range (must be between 0 and {MAX_PINS}): {pins_knocked}",
        )

    if not 0 <= game.current_player < len(game.frames) or not (
        0 <= game.current_frame < FRAMES_PER_GAME
    ):
        return _reject("INVALID_TURN", "Current player or frame is out of bounds")

    player_frames = game.frames[game.current_player]
    if game.current_frame >= len(player_frames):
        return _reject("INVALID_TURN", "Current frame is missing for this player")

    frame = player_frames[game.current_frame]
    rolls = [roll.pins_knocked for roll in frame.rolls]
    is_tenth = game.current_frame == TENTH_FRAME_INDEX

    # First roll of a frame only needs to be in range
    if not rolls:
        return RollValidationResult.ok()

    if len(rolls) == 1:
        first = rolls[0]
        if first == MAX_PINS:
            if is_tenth:
                # Pins reset after a 10th-frame strike
                return RollValidationResult.ok()
            return _reject("FRAME_COMPLETE", "Frame already complete")
        if first + pins_knocked > MAX_PINS:
            return _frame_pin_limit(first, pins_knocked)
        return RollValidationResult.ok()

    if len(rolls) == 2:
        if not is_tenth:
            return _reject("NO_THIRD_ROLL", "No third roll in a regular frame")

        first, second = rolls
        if first == MAX_PINS:
            if second == MAX_PINS:
                return RollValidationResult.ok()
            if second + pins_knocked > MAX_PINS:
                return _frame_pin_limit(second, pins_knocked)
            return RollValidationResult.ok()

        if first + second == MAX_PINS:
            return RollValidationResult.ok()

        return _reject("THIRD_ROLL_NOT_EARNED", "Third roll only after strike or spare")

    return _reject("FRAME_COMPLETE", "Frame already complete")
