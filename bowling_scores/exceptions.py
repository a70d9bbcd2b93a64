"""Error taxonomy for the bowling engine.

Each error carries a kind, a human readable message and an ordered list of
detail strings that callers can show verbatim.
"""

from enum import Enum


class ErrorKind(str, Enum):
    INVALID_PLAYER = "INVALID_PLAYER"
    INVALID_GAME_SETUP = "INVALID_GAME_SETUP"
    INVALID_ROLL = "INVALID_ROLL"
    INVALID_GAME_STATE = "INVALID_GAME_STATE"
    PERSISTENCE = "PERSISTENCE"


class BowlingError(Exception):
    """Base class for all bowling engine errors."""

    kind: ErrorKind

    def __init__(self, message: str, details: list[str] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = list(details or [])

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(kind={self.kind.value!r}, "
            f"message={self.message!r}, details={self.details!r})"
        )


class GameSetupError(BowlingError):
    """Invalid player roster supplied when creating a game."""

    def __init__(
        self,
        message: str,
        details: list[str] | None = None,
        kind: ErrorKind = ErrorKind.INVALID_GAME_SETUP,
    ) -> None:
        super().__init__(message, details)
        self.kind = kind


class RollRejectedError(BowlingError):
    """A proposed pin count breaks the rules for the current frame."""

    kind = ErrorKind.INVALID_ROLL

    def __init__(
        self,
        message: str,
        details: list[str] | None = None,
        code: str | None = None,
    ) -> None:
        super().__init__(message, details)
        self.code = code


class GameStateError(BowlingError):
    """A game snapshot is inconsistent with its own rolls."""

    kind = ErrorKind.INVALID_GAME_STATE


class PersistenceError(BowlingError):
    """The key-value store failed to read or write."""

    kind = ErrorKind.PERSISTENCE


def format_error_message(error: BowlingError) -> str:
    """Render an error for display: message, then its details."""
    if not error.details:
        return error.message

    if len(error.details) == 1:
        return f"{error.message}: {error.details[0]}"

    lines = "\n".join(f"- {detail}" for detail in error.details)
    return f"{error.message}:\n{lines}"
