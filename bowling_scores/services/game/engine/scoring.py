"""Score calculation with strike/spare look-ahead.

Scores are always recomputed from frame 0 so that bonus rolls arriving later
retroactively settle earlier frames. A strike or spare whose bonus rolls have
not been thrown yet scores 0 until a later call can resolve it.
"""

import logging

from bowling_scores.schemas.game import MAX_PINS, TENTH_FRAME_INDEX, Frame

from .frames import get_frame_pinfall, is_spare, is_strike

logger = logging.getLogger(__name__)


def _bonus_rolls(frames: list[Frame], frame_index: int, count: int) -> list[int]:
    """Collect up to `count` pin counts thrown after the given frame.

    Look-ahead only continues past the next frame when that frame is a strike
    below the 10th frame (it holds a single roll). The 10th frame's own rolls
    count in order, so a strike in frame 9 takes its first two.
    """
    bonus: list[int] = []
    next_index = frame_index + 1

    while len(bonus) < count and next_index < len(frames):
        next_frame = frames[next_index]
        for roll in next_frame.rolls:
            if len(bonus) == count:
                break
            bonus.append(roll.pins_knocked)

        if not (is_strike(next_frame) and next_index < TENTH_FRAME_INDEX):
            break
        next_index += 1

    return bonus


def calculate_frame_score(frames: list[Frame], frame_index: int) -> int:
    """Calculate the settled score of a single frame.

    Args:
        frames: One player's frames.
        frame_index: 0-based index of the frame to score.

    Returns:
        The frame's points including bonus, or 0 if the frame is empty or
        still waiting on bonus rolls.
    """
    frame = frames[frame_index]

    if not frame.rolls:
        return 0

    pinfall = get_frame_pinfall(frame)

    # The 10th frame carries its own bonus rolls
    if frame_index == TENTH_FRAME_INDEX:
        return pinfall

    if is_strike(frame):
        bonus = _bonus_rolls(frames, frame_index, 2)
        if len(bonus) < 2:
            return 0
        return MAX_PINS + sum(bonus)

    if is_spare(frame):
        bonus = _bonus_rolls(frames, frame_index, 1)
        if not bonus:
            return 0
        return MAX_PINS + bonus[0]

    return pinfall


def calculate_game_score(frames: list[Frame]) -> list[Frame]:
    """Recompute score and cumulative_score for every frame of one player.

    Pure and idempotent: returns new Frame objects and leaves the input alone.

    Example:
        >>> frames = calculate_game_score(game.frames[player_index])
        >>> frames[-1].cumulative_score
        300
    """
    updated_frames: list[Frame] = []
    running_total = 0

    for index, frame in enumerate(frames):
        frame_score = calculate_frame_score(frames, index)
        running_total += frame_score
        updated_frames.append(
            frame.model_copy(
                update={"score": frame_score, "cumulative_score": running_total},
                deep=True,
            )
        )

    logger.debug(
        "Game score recalculated: frames=%d, total=%d",
        len(updated_frames),
        running_total,
    )
    return updated_frames


def can_display_score(frames: list[Frame], frame_index: int) -> bool:
    """Check whether a frame's score is final and safe to show.

    A strike needs two recorded bonus rolls (looking through consecutive
    strikes), a spare one, an open frame both of its rolls. The 10th frame is
    final once it has all the rolls it is entitled to.
    """
    if frame_index < 0 or frame_index >= len(frames):
        return False

    frame = frames[frame_index]
    if not frame.rolls:
        return False

    if frame_index == TENTH_FRAME_INDEX:
        rolls_needed = 3 if is_strike(frame) or is_spare(frame) else 2
        return len(frame.rolls) >= rolls_needed

    if is_strike(frame):
        return len(_bonus_rolls(frames, frame_index, 2)) == 2

    if is_spare(frame):
        return len(_bonus_rolls(frames, frame_index, 1)) == 1

    return len(frame.rolls) >= 2
