"""Game event types - emitted during state transitions.

Events describe what happened during a roll, enabling:
- Scoreboard updates (only redraw what changed)
- Roll feedback ("Strike!", "Spare!")
- Action replay / audit logging
"""

from typing import Annotated, Literal

from pydantic import BaseModel, Field


class GameEvent(BaseModel):
    """Base class for all game events."""

    event_type: str
    seq: int = 0  # Sequence number assigned during processing


class RollRecorded(GameEvent):
    """A roll was appended to the active frame."""

    event_type: Literal["roll_recorded"] = "roll_recorded"
    player_index: int
    frame_index: int
    roll_number: int = Field(..., ge=1, le=3, description="Which roll in the frame (1, 2, 3)")
    pins_knocked: int = Field(..., ge=0, le=10)
    is_strike: bool = Field(..., description="Frame is a strike after this roll")
    is_spare: bool = Field(..., description="Frame is a spare after this roll")


class FrameCompleted(GameEvent):
    """The active frame received its last roll."""

    event_type: Literal["frame_completed"] = "frame_completed"
    player_index: int
    frame_index: int
    cumulative_score: int = Field(
        ..., description="Running total as far as it can be resolved so far"
    )


class TurnPassed(GameEvent):
    """A player finished their 10th frame and the next player is up."""

    event_type: Literal["turn_passed"] = "turn_passed"
    from_player_index: int
    to_player_index: int


class GameCompleted(GameEvent):
    """Every player has finished the 10th frame."""

    event_type: Literal["game_completed"] = "game_completed"
    scores: list[int] = Field(..., description="Final score per player, in roster order")
    winner_index: int = Field(..., description="First player holding the highest score")


# Union of all event types for type checking
AnyGameEvent = Annotated[
    RollRecorded | FrameCompleted | TurnPassed | GameCompleted,
    Field(discriminator="event_type"),
]
