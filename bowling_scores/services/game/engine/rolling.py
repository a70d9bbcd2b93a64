"""Roll application and turn advancement."""

import logging

from bowling_scores.schemas.game import (
    FRAMES_PER_GAME,
    TENTH_FRAME_INDEX,
    Frame,
    Game,
    Roll,
)

from .frames import create_empty_frame, is_frame_complete, update_frame_flags
from .scoring import calculate_game_score

logger = logging.getLogger(__name__)


def get_next_turn(
    frames: list[list[Frame]],
    current_player: int,
    current_frame: int,
) -> tuple[int, int]:
    """Work out (next_player, next_frame) after a roll has been recorded.

    Frames 1-9 move on to the same player's next frame after a strike or two
    rolls. In the 10th frame the player keeps rolling until the frame is
    finished, then the next player is up while the frame pointer stays on the
    10th frame.
    """
    frame = frames[current_player][current_frame]

    if current_frame < TENTH_FRAME_INDEX:
        if is_frame_complete(frame, is_tenth_frame=False):
            logger.debug(
                "Frame finished: player=%d, frame=%d, next_frame=%d",
                current_player,
                current_frame,
                current_frame + 1,
            )
            return current_player, current_frame + 1
        return current_player, current_frame

    if not is_frame_complete(frame, is_tenth_frame=True):
        return current_player, current_frame

    next_player = (current_player + 1) % len(frames)
    logger.debug(
        "10th frame finished: player=%d, next_player=%d",
        current_player,
        next_player,
    )
    return next_player, TENTH_FRAME_INDEX


def is_game_complete(game: Game) -> bool:
    """Check whether every player has finished the 10th frame.

    A 10th frame is finished with 3 rolls after a strike or spare and with 2
    rolls otherwise. This is the only termination check in the engine.
    """
    if not game.players or len(game.frames) != len(game.players):
        return False

    for player_frames in game.frames:
        if len(player_frames) != FRAMES_PER_GAME:
            return False
        tenth_frame = update_frame_flags(player_frames[TENTH_FRAME_INDEX])
        if not is_frame_complete(tenth_frame, is_tenth_frame=True):
            return False
    return True


def apply_roll(game: Game, pins_knocked: int) -> Game:
    """Record an already validated roll and return the next game state.

    Handles:
    - Appending the roll to the active frame and recomputing its flags
    - Recomputing the active player's scores
    - Advancing the frame/player pointers
    - Marking the game complete and filling in final scores

    Callers must run validate_roll() first; this function trusts its input.
    The returned Game shares no mutable data with the one passed in.

    Args:
        game: Current game state.
        pins_knocked: Pins knocked down by this roll.

    Returns:
        The new game state.
    """
    player_index = game.current_player
    frame_index = game.current_frame

    logger.info(
        "Applying roll: player=%d, frame=%d, pins=%d",
        player_index,
        frame_index,
        pins_knocked,
    )

    new_frames = [
        [frame.model_copy(deep=True) for frame in player_frames]
        for player_frames in game.frames
    ]
    player_frames = new_frames[player_index]

    frame = player_frames[frame_index]
    frame = frame.model_copy(
        update={"rolls": [*frame.rolls, Roll(pins_knocked=pins_knocked)]}
    )
    player_frames[frame_index] = update_frame_flags(frame)
    logger.debug(
        "Frame updated: rolls=%s, strike=%s, spare=%s",
        [r.pins_knocked for r in player_frames[frame_index].rolls],
        player_frames[frame_index].is_strike,
        player_frames[frame_index].is_spare,
    )

    new_frames[player_index] = calculate_game_score(player_frames)

    next_player, next_frame = get_next_turn(new_frames, player_index, frame_index)

    new_game = game.model_copy(
        update={
            "frames": new_frames,
            "current_player": next_player,
            "current_frame": next_frame,
        },
        deep=True,
    )

    if is_game_complete(new_game):
        scores = [
            player_frames[TENTH_FRAME_INDEX].cumulative_score
            for player_frames in new_game.frames
        ]
        new_game = new_game.model_copy(update={"is_complete": True, "scores": scores})
        logger.info("Game complete: game=%s, scores=%s", new_game.id, scores)

    return new_game


def reset_current_frame(game: Game) -> Game:
    """Clear the rolls of the frame currently being bowled.

    The turn pointers stay where they are, so the same player re-bowls the
    same frame. Scores are recomputed for that player rather than patched. A
    completed game has no frame in progress and is returned unchanged.
    """
    if game.is_complete:
        logger.debug("Reset ignored, game already complete: game=%s", game.id)
        return game

    player_index = game.current_player
    frame_index = game.current_frame

    new_frames = [
        [frame.model_copy(deep=True) for frame in player_frames]
        for player_frames in game.frames
    ]
    new_frames[player_index][frame_index] = create_empty_frame()
    new_frames[player_index] = calculate_game_score(new_frames[player_index])

    logger.info(
        "Frame reset: game=%s, player=%d, frame=%d",
        game.id,
        player_index,
        frame_index,
    )
    return game.model_copy(update={"frames": new_frames}, deep=True)
