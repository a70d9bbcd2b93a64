"""Game service module.

Provides:
- Game initialization (start_game.py)
- Game engine processing (engine/)
- Roll sequence replay (replay.py)
- Per-game summaries (summary.py)
"""

# Re-export from engine for convenience
from .engine import (
    GameValidationResult,
    ProcessResult,
    RollValidationResult,
    apply_roll,
    calculate_game_score,
    can_display_score,
    is_game_complete,
    process_roll,
    reset_current_frame,
    validate_game_state,
    validate_roll,
)
from .replay import build_game_from_rolls, validate_roll_sequence
from .start_game import create_new_game, create_player, validate_player_name, validate_players
from .summary import (
    FrameStatistics,
    get_frame_statistics,
    get_game_progress_percentage,
    get_highest_scoring_player,
    get_player_frame,
    get_player_frames,
    get_player_score,
)

__all__ = [
    # Initialization
    "create_new_game",
    "create_player",
    "validate_player_name",
    "validate_players",
    # Engine
    "ProcessResult",
    "RollValidationResult",
    "GameValidationResult",
    "validate_roll",
    "apply_roll",
    "process_roll",
    "is_game_complete",
    "reset_current_frame",
    "validate_game_state",
    "calculate_game_score",
    "can_display_score",
    # Replay
    "build_game_from_rolls",
    "validate_roll_sequence",
    # Summary
    "FrameStatistics",
    "get_frame_statistics",
    "get_game_progress_percentage",
    "get_highest_scoring_player",
    "get_player_frame",
    "get_player_frames",
    "get_player_score",
]
