"""Storage service module.

Provides:
- Key-value store backends (store.py)
- Game/player/history persistence (service.py)
"""

from .service import GameStorage
from .store import InMemoryStore, KeyValueStore, RedisStore, get_store

__all__ = [
    "GameStorage",
    "KeyValueStore",
    "InMemoryStore",
    "RedisStore",
    "get_store",
]
