"""Frame-level helpers: strike/spare flags and completion checks."""

from bowling_scores.schemas.game import (
    MAX_PINS,
    MAX_ROLLS_PER_FRAME,
    MAX_ROLLS_TENTH_FRAME,
    Frame,
)


def create_empty_frame() -> Frame:
    """Create a frame with no rolls and zero scores."""
    return Frame(rolls=[], is_strike=False, is_spare=False, score=0, cumulative_score=0)


def is_strike(frame: Frame | None) -> bool:
    """True if the frame's first roll knocked down all ten pins."""
    if frame is None or not frame.rolls:
        return False
    return frame.rolls[0].pins_knocked == MAX_PINS


def is_spare(frame: Frame | None) -> bool:
    """True if the first two rolls cleared the pins without a strike."""
    if frame is None or len(frame.rolls) < 2:
        return False
    return (
        not is_strike(frame)
        and frame.rolls[0].pins_knocked + frame.rolls[1].pins_knocked == MAX_PINS
    )


def update_frame_flags(frame: Frame) -> Frame:
    """Return a copy of the frame with flags recomputed from its rolls."""
    return frame.model_copy(
        update={
            "is_strike": is_strike(frame),
            "is_spare": is_spare(frame),
        }
    )


def is_frame_complete(frame: Frame | None, is_tenth_frame: bool) -> bool:
    """Check whether a frame has received every roll it is entitled to."""
    if frame is None:
        return False

    if is_tenth_frame:
        if frame.is_strike or frame.is_spare:
            return len(frame.rolls) == MAX_ROLLS_TENTH_FRAME
        return len(frame.rolls) == MAX_ROLLS_PER_FRAME

    if frame.is_strike:
        return True
    return len(frame.rolls) == MAX_ROLLS_PER_FRAME


def get_frame_pinfall(frame: Frame | None) -> int:
    """Pins knocked down in the frame, without bonus."""
    if frame is None:
        return 0
    return sum(roll.pins_knocked for roll in frame.rolls)
