from pydantic import BaseModel, ConfigDict, Field

# Game constants
FRAMES_PER_GAME = 10
TENTH_FRAME_INDEX = FRAMES_PER_GAME - 1
MAX_PINS = 10
MAX_ROLLS_PER_FRAME = 2
MAX_ROLLS_TENTH_FRAME = 3
MAX_PLAYERS = 6


# Data models for game entities
class Roll(BaseModel):
    """A single ball thrown. Never changes once recorded."""

    model_config = ConfigDict(frozen=True)

    pins_knocked: int = Field(..., ge=0, le=MAX_PINS)


class Frame(BaseModel):
    """One of a player's ten turns.

    is_strike / is_spare are always derived from rolls by the engine;
    score stays 0 until its bonus rolls are known.
    """

    rolls: list[Roll] = []
    is_strike: bool = False
    is_spare: bool = False
    score: int = 0
    cumulative_score: int = 0


class Player(BaseModel):
    id: str
    name: str


class Game(BaseModel):
    """Aggregate root for one bowling game.

    frames is indexed [player][frame] and always holds ten frames per player;
    frames not yet played have no rolls. scores is only set once the game is
    complete.
    """

    id: str
    date: str
    players: list[Player]
    frames: list[list[Frame]]
    current_player: int = 0
    current_frame: int = 0
    is_complete: bool = False
    scores: list[int] | None = None
    event_seq: int = 0  # Next sequence number for events (monotonically increasing)


# Stored alongside the current game
class GameHistory(BaseModel):
    games: list[Game] = []
