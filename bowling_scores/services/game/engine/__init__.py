"""Game engine module - pure functional bowling logic.

This module provides the core game engine with:
- Roll validation (the single source of the rules)
- Score calculation with strike/spare look-ahead
- Roll application and turn advancement
- Game state consistency checks
- ProcessResult pattern for error handling

Usage:
    from bowling_scores.services.game.engine import process_roll

    result = process_roll(game, 7)

    if result.success:
        game = result.state
        events = result.events  # Feed these to the scoreboard
    else:
        # Handle rejection
        print(f"Error: {result.error_code} - {result.error_message}")
"""

# Events - describe each transition
from .events import (
    AnyGameEvent,
    FrameCompleted,
    GameCompleted,
    GameEvent,
    RollRecorded,
    TurnPassed,
)

# Frame helpers
from .frames import (
    create_empty_frame,
    get_frame_pinfall,
    is_frame_complete,
    is_spare,
    is_strike,
    update_frame_flags,
)

# Consistency checks
from .integrity import (
    GameValidationResult,
    validate_frame,
    validate_game_state,
    validate_score_calculation,
)

# Main processing
from .process import process_roll
from .rolling import apply_roll, get_next_turn, is_game_complete, reset_current_frame

# Scoring
from .scoring import calculate_frame_score, calculate_game_score, can_display_score

# Result types
from .validation import ProcessResult, RollValidationResult, validate_roll

__all__ = [
    # Events
    "GameEvent",
    "AnyGameEvent",
    "RollRecorded",
    "FrameCompleted",
    "TurnPassed",
    "GameCompleted",
    # Frames
    "create_empty_frame",
    "get_frame_pinfall",
    "is_frame_complete",
    "is_spare",
    "is_strike",
    "update_frame_flags",
    # Scoring
    "calculate_frame_score",
    "calculate_game_score",
    "can_display_score",
    # Processing
    "process_roll",
    "apply_roll",
    "get_next_turn",
    "is_game_complete",
    "reset_current_frame",
    # Validation
    "ProcessResult",
    "RollValidationResult",
    "validate_roll",
    "GameValidationResult",
    "validate_frame",
    "validate_game_state",
    "validate_score_calculation",
]
