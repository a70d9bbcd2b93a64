import logging
import re
import uuid
from datetime import datetime, timezone

from bowling_scores.config import get_settings
from bowling_scores.exceptions import ErrorKind, GameSetupError
from bowling_scores.schemas.game import FRAMES_PER_GAME, Frame, Game, Player

from .engine import create_empty_frame

logger = logging.getLogger(__name__)

_PLAYER_NAME_PATTERN = re.compile(r"^[a-zA-Z0-9 ]+$")


def validate_player_name(name: str) -> str | None:
    """Validate a single player name.

    Returns:
        An error message, or None if the name is acceptable.
    """
    settings = get_settings()
    trimmed_name = name.strip()

    if not trimmed_name:
        return "Player name cannot be empty"
    if len(trimmed_name) < settings.PLAYER_NAME_MIN_LENGTH:
        return f"Player name must be at least {settings.PLAYER_NAME_MIN_LENGTH} characters"
    if len(trimmed_name) > settings.PLAYER_NAME_MAX_LENGTH:
        return f"Player name cannot exceed {settings.PLAYER_NAME_MAX_LENGTH} characters"
    if not _PLAYER_NAME_PATTERN.match(trimmed_name):
        return "Player name can only contain letters, numbers, and spaces"
    return None


def validate_players(players: list[Player]) -> list[str]:
    """Validate a roster before creating a game.

    Returns:
        Every problem found, empty if the roster is valid.
    """
    settings = get_settings()
    errors: list[str] = []

    if not players:
        return ["At least one player is required to start a game"]

    if len(players) > settings.MAX_PLAYERS:
        errors.append(f"Maximum of {settings.MAX_PLAYERS} players allowed per game")

    player_ids: set[str] = set()
    player_names: set[str] = set()
    for player in players:
        name_error = validate_player_name(player.name)
        if name_error:
            errors.append(f'Invalid player name "{player.name}": {name_error}')

        normalized = player.name.strip().lower()
        if normalized in player_names:
            errors.append(f"Duplicate player name: {player.name}")
        player_names.add(normalized)

        if player.id in player_ids:
            errors.append(f"Duplicate player ID: {player.id}")
        player_ids.add(player.id)

    return errors


def create_player(name: str, player_id: str | None = None) -> Player:
    """Create a player, validating the name and generating an id if needed.

    Raises:
        GameSetupError: If the name is invalid.
    """
    name_error = validate_player_name(name)
    if name_error:
        raise GameSetupError(name_error, kind=ErrorKind.INVALID_PLAYER)
    return Player(id=player_id or str(uuid.uuid4()), name=name.strip())


def _create_initial_frames() -> list[Frame]:
    """Create ten empty frames for a player."""
    return [create_empty_frame() for _ in range(FRAMES_PER_GAME)]


def create_new_game(
    players: list[Player],
    game_id: str | None = None,
    date: str | None = None,
) -> Game:
    """
    Validate the roster and return a freshly initialized Game.

    Args:
        players: Players in bowling order.
        game_id: Optional id, a uuid4 is generated when omitted.
        date: Optional ISO-8601 date, defaults to now (UTC).

    Returns:
        A Game with ten empty frames per player, ready for the first roll.

    Raises:
        GameSetupError: If the roster is invalid. details lists every problem.
    """
    errors = validate_players(players)
    if errors:
        logger.warning("Game setup rejected: errors=%s", errors)
        raise GameSetupError("Invalid player setup for the game", details=errors)

    game = Game(
        id=game_id or str(uuid.uuid4()),
        date=date or datetime.now(timezone.utc).isoformat(),
        players=[player.model_copy(update={"name": player.name.strip()}) for player in players],
        frames=[_create_initial_frames() for _ in players],
        current_player=0,
        current_frame=0,
        is_complete=False,
        scores=None,
    )
    logger.info(
        "Game created: game=%s, players=%s",
        game.id,
        [player.name for player in game.players],
    )
    return game
