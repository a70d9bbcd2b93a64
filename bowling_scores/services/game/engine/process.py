"""Main entry point for roll processing.

This module provides the primary interface for recording a roll:
- process_roll(): Validates and applies a roll
- Builds the events describing the transition
- Returns ProcessResult with new state and events
"""

import logging

from bowling_scores.schemas.game import TENTH_FRAME_INDEX, Game

from .events import (
    AnyGameEvent,
    FrameCompleted,
    GameCompleted,
    RollRecorded,
    TurnPassed,
)
from .frames import is_frame_complete
from .rolling import apply_roll
from .validation import ProcessResult, validate_roll

logger = logging.getLogger(__name__)


def process_roll(game: Game, pins_knocked: int) -> ProcessResult:
    """Validate a roll, apply it and return the result.

    This is the main entry point for recording a roll. It:
    1. Validates the roll against the current frame
    2. Applies it to the game state
    3. Builds and sequences the resulting events
    4. Returns ProcessResult with the new state and events

    A rejected roll leaves the game untouched: the result carries no state.

    Args:
        game: Current game state.
        pins_knocked: Proposed number of pins knocked down.

    Returns:
        ProcessResult containing:
        - success: Whether the roll was recorded
        - state: The new game state (if successful)
        - events: Events that occurred (with seq numbers)
        - error_code/error_message: Rejection details (if failed)

    Example:
        >>> result = process_roll(game, 7)
        >>> if result.success:
        ...     game = result.state
        ... else:
        ...     show_error(result.error_message)
    """
    logger.info(
        "Processing roll: game=%s, player=%d, frame=%d, pins=%s",
        game.id,
        game.current_player,
        game.current_frame,
        pins_knocked,
    )

    validation = validate_roll(game, pins_knocked)
    if not validation.is_valid:
        logger.warning(
            "Roll validation failed: code=%s, message=%s, game=%s",
            validation.error_code,
            validation.error_message,
            game.id,
        )
        return ProcessResult.failure(
            validation.error_code or "INVALID_ROLL",
            validation.error_message or "Invalid roll",
        )

    player_index = game.current_player
    frame_index = game.current_frame
    new_game = apply_roll(game, pins_knocked)

    events = _build_roll_events(new_game, player_index, frame_index, pins_knocked)
    result = _assign_event_sequences(ProcessResult.ok(new_game, events))

    logger.info(
        "Roll processed: player=%d, frame=%d, events_generated=%d",
        player_index,
        frame_index,
        len(result.events),
    )
    logger.debug("Generated events: %s", [type(e).__name__ for e in result.events])
    return result


def _build_roll_events(
    game: Game,
    player_index: int,
    frame_index: int,
    pins_knocked: int,
) -> list[AnyGameEvent]:
    """Describe what a roll just did to the game."""
    events: list[AnyGameEvent] = []
    frame = game.frames[player_index][frame_index]

    events.append(
        RollRecorded(
            player_index=player_index,
            frame_index=frame_index,
            roll_number=len(frame.rolls),
            pins_knocked=pins_knocked,
            is_strike=frame.is_strike,
            is_spare=frame.is_spare,
        )
    )

    if is_frame_complete(frame, is_tenth_frame=frame_index == TENTH_FRAME_INDEX):
        events.append(
            FrameCompleted(
                player_index=player_index,
                frame_index=frame_index,
                cumulative_score=frame.cumulative_score,
            )
        )

    if game.is_complete:
        scores = game.scores or []
        winner_index = scores.index(max(scores)) if scores else 0
        events.append(GameCompleted(scores=scores, winner_index=winner_index))
    elif game.current_player != player_index:
        events.append(
            TurnPassed(
                from_player_index=player_index,
                to_player_index=game.current_player,
            )
        )

    return events


def _assign_event_sequences(result: ProcessResult) -> ProcessResult:
    """Assign monotonically increasing sequence numbers to events.

    Updates each event's seq field and increments the game's event_seq counter.
    """
    if result.state is None or not result.events:
        return result

    current_seq = result.state.event_seq
    for event in result.events:
        event.seq = current_seq
        current_seq += 1

    new_state = result.state.model_copy(update={"event_seq": current_seq})

    return ProcessResult.ok(new_state, result.events)
