"""Game storage service for saving and loading games."""

import logging
from datetime import datetime, timezone

from pydantic import TypeAdapter, ValidationError

from bowling_scores.config import get_settings
from bowling_scores.exceptions import GameStateError, PersistenceError
from bowling_scores.schemas.game import Game, GameHistory, Player
from bowling_scores.services.game.engine import validate_game_state

from .store import KeyValueStore, get_store

logger = logging.getLogger(__name__)

_players_adapter = TypeAdapter(list[Player])


class GameStorage:
    """Service for persisting games, players and game history.

    Writes report failure as False and reads fall back to None/empty: a store
    outage never takes down the in-memory game. A stored game whose contents
    are inconsistent is different and raises GameStateError.
    """

    def __init__(self, store: KeyValueStore | None = None, prefix: str | None = None):
        self._store = store or get_store()
        self._prefix = prefix or get_settings().STORAGE_KEY_PREFIX

    def _current_game_key(self) -> str:
        return f"{self._prefix}:CurrentGame"

    def _players_key(self) -> str:
        return f"{self._prefix}:Players"

    def _history_key(self) -> str:
        return f"{self._prefix}:GameHistory"

    async def _write(self, key: str, value: str) -> bool:
        try:
            await self._store.set(key, value)
        except PersistenceError as e:
            logger.error("Failed to save %s: %s", key, e.message)
            return False
        return True

    async def _read(self, key: str) -> str | None:
        try:
            return await self._store.get(key)
        except PersistenceError as e:
            logger.error("Failed to load %s: %s", key, e.message)
            return None

    async def _delete(self, key: str) -> bool:
        try:
            await self._store.delete(key)
        except PersistenceError as e:
            logger.error("Failed to delete %s: %s", key, e.message)
            return False
        return True

    async def save_current_game(self, game: Game) -> bool:
        """Persist the game in progress."""
        saved = await self._write(self._current_game_key(), game.model_dump_json())
        if saved:
            logger.info("Current game saved: game=%s", game.id)
        return saved

    async def load_current_game(self) -> Game | None:
        """Load the game in progress.

        Returns:
            The stored game, or None if there is none or it cannot be read.

        Raises:
            GameStateError: If the stored game is inconsistent with its rolls.
        """
        payload = await self._read(self._current_game_key())
        if payload is None:
            return None

        try:
            game = Game.model_validate_json(payload)
        except ValidationError as e:
            logger.error("Stored current game is unreadable: %s", e)
            return None

        result = validate_game_state(game)
        if not result.valid:
            logger.error(
                "Stored current game is corrupted: game=%s, errors=%s",
                game.id,
                result.errors,
            )
            raise GameStateError("Stored game state is invalid", details=result.errors)

        logger.debug("Current game loaded: game=%s", game.id)
        return game

    async def clear_current_game(self) -> bool:
        return await self._delete(self._current_game_key())

    async def save_players(self, players: list[Player]) -> bool:
        """Persist the list of known players."""
        return await self._write(
            self._players_key(), _players_adapter.dump_json(players).decode()
        )

    async def load_players(self) -> list[Player]:
        payload = await self._read(self._players_key())
        if payload is None:
            return []
        try:
            return _players_adapter.validate_json(payload)
        except ValidationError as e:
            logger.error("Stored players are unreadable: %s", e)
            return []

    async def _read_history(self) -> GameHistory | None:
        """Stored history, empty if never saved, None if it could not be read.

        Writers use this so a failed read is never mistaken for an empty
        history and written back over the stored games.
        """
        key = self._history_key()
        try:
            payload = await self._store.get(key)
        except PersistenceError as e:
            logger.error("Failed to load %s: %s", key, e.message)
            return None

        if payload is None:
            return GameHistory()
        try:
            return GameHistory.model_validate_json(payload)
        except ValidationError as e:
            logger.error("Stored game history is unreadable: %s", e)
            return None

    async def load_game_history(self) -> GameHistory:
        """Completed games, newest first. Empty if none or unreadable."""
        history = await self._read_history()
        if history is None:
            return GameHistory()
        games = sorted(history.games, key=_game_timestamp, reverse=True)
        return GameHistory(games=games)

    async def get_game_from_history(self, game_id: str) -> Game | None:
        history = await self.load_game_history()
        for game in history.games:
            if game.id == game_id:
                return game
        return None

    async def filter_games(
        self,
        start_date: datetime | None = None,
        end_date: datetime | None = None,
        player_ids: list[str] | None = None,
        min_score: int | None = None,
        max_score: int | None = None,
    ) -> list[Game]:
        """Completed games matching every given criterion, newest first.

        Args:
            start_date: Keep games played at or after this time.
            end_date: Keep games played at or before this time.
            player_ids: Keep games with at least one of these players.
            min_score: Together with max_score, keep games where at least one
                player's final score falls inside the range.
            max_score: Upper bound of the score range.
        """
        history = await self.load_game_history()
        start = _as_utc(start_date) if start_date else None
        end = _as_utc(end_date) if end_date else None

        matches: list[Game] = []
        for game in history.games:
            played_at = _game_timestamp(game)
            if start and played_at < start:
                continue
            if end and played_at > end:
                continue
            if player_ids and not any(p.id in player_ids for p in game.players):
                continue
            if (min_score is not None or max_score is not None) and not any(
                _score_in_range(score, min_score, max_score)
                for score in _final_scores(game)
            ):
                continue
            matches.append(game)
        return matches

    async def save_game_to_history(self, game: Game) -> bool:
        """Add a completed game to history, replacing any entry with the same id.

        Returns False without writing when the stored history cannot be read.
        """
        if not game.is_complete:
            logger.warning("Refusing to add incomplete game to history: game=%s", game.id)
            return False

        history = await self._read_history()
        if history is None:
            logger.error(
                "Game not added to history, stored history unavailable: game=%s", game.id
            )
            return False

        games = [g for g in history.games if g.id != game.id]
        games.append(game)

        saved = await self._write(
            self._history_key(), GameHistory(games=games).model_dump_json()
        )
        if saved:
            logger.info("Game added to history: game=%s, total=%d", game.id, len(games))
        return saved

    async def delete_game_from_history(self, game_id: str) -> bool:
        """Remove a game from history.

        False if the history could not be read, the game was not there or the
        write failed.
        """
        history = await self._read_history()
        if history is None:
            logger.error("Game not deleted, stored history unavailable: game=%s", game_id)
            return False

        games = [g for g in history.games if g.id != game_id]
        if len(games) == len(history.games):
            logger.debug("Game not found in history: game=%s", game_id)
            return False
        return await self._write(
            self._history_key(), GameHistory(games=games).model_dump_json()
        )

    async def clear_all_data(self) -> bool:
        """Remove everything this app stored."""
        try:
            await self._store.clear()
        except PersistenceError as e:
            logger.error("Failed to clear storage: %s", e.message)
            return False
        logger.info("All stored data cleared")
        return True


def _as_utc(moment: datetime) -> datetime:
    if moment.tzinfo is None:
        return moment.replace(tzinfo=timezone.utc)
    return moment


def _game_timestamp(game: Game) -> datetime:
    """Parse the game's ISO date; naive dates are taken as UTC."""
    try:
        return _as_utc(datetime.fromisoformat(game.date))
    except ValueError:
        logger.warning("Game has an unparsable date: game=%s, date=%s", game.id, game.date)
        return datetime.min.replace(tzinfo=timezone.utc)


def _final_scores(game: Game) -> list[int]:
    scores = game.scores or []
    return [scores[i] if i < len(scores) else 0 for i in range(len(game.players))]


def _score_in_range(score: int, min_score: int | None, max_score: int | None) -> bool:
    if min_score is not None and score < min_score:
        return False
    if max_score is not None and score > max_score:
        return False
    return True
