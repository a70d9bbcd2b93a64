"""Per-game lookups and counts over a single game's frames."""

from dataclasses import dataclass

from bowling_scores.schemas.game import FRAMES_PER_GAME, TENTH_FRAME_INDEX, Frame, Game, Player

from .engine import is_frame_complete


@dataclass
class FrameStatistics:
    """Strike/spare/open counts for one player's frames in one game."""

    frames_played: int = 0
    strike_count: int = 0
    spare_count: int = 0
    open_count: int = 0


def _player_index(game: Game, player_id: str) -> int | None:
    for index, player in enumerate(game.players):
        if player.id == player_id:
            return index
    return None


def get_player_frames(game: Game, player_id: str) -> list[Frame]:
    """All frames of a player, empty if the player is not in the game."""
    index = _player_index(game, player_id)
    if index is None:
        return []
    return game.frames[index]


def get_player_frame(game: Game, player_id: str, frame_index: int) -> Frame | None:
    if not 0 <= frame_index < FRAMES_PER_GAME:
        return None
    frames = get_player_frames(game, player_id)
    if frame_index >= len(frames):
        return None
    return frames[frame_index]


def get_player_score(game: Game, player_id: str) -> int:
    """Latest running total for a player.

    Uses the last played frame's cumulative score, so it can be read mid-game.
    """
    frames = get_player_frames(game, player_id)
    played = [frame for frame in frames if frame.rolls]
    if not played:
        return 0
    return played[-1].cumulative_score


def get_highest_scoring_player(game: Game) -> Player | None:
    """First player holding the top final score, None until the game is complete."""
    if not game.scores:
        return None
    best = max(game.scores)
    return game.players[game.scores.index(best)]


def get_game_progress_percentage(game: Game) -> int:
    """Share of all players' frames that are finished, 0-100."""
    if game.is_complete:
        return 100

    total_frames = len(game.players) * FRAMES_PER_GAME
    if total_frames == 0:
        return 0

    completed = sum(
        1
        for player_frames in game.frames
        for index, frame in enumerate(player_frames)
        if is_frame_complete(frame, index == TENTH_FRAME_INDEX)
    )
    return round(completed / total_frames * 100)


def get_frame_statistics(frames: list[Frame]) -> FrameStatistics:
    """Count strikes, spares and open frames among played frames."""
    played = [frame for frame in frames if frame.rolls]
    return FrameStatistics(
        frames_played=len(played),
        strike_count=sum(1 for frame in played if frame.is_strike),
        spare_count=sum(1 for frame in played if frame.is_spare),
        open_count=sum(1 for frame in played if not frame.is_strike and not frame.is_spare),
    )
