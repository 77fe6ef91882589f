"""Game domain services: matchmaking, turns and rounds.

This package contains pure(ish) domain logic that is driven by the socket
handlers, keeping transport concerns separated from core game mechanics.
Transport only enters through the ``Notifier`` passed to ``GuessWhoGame``.
"""

from .notifier import Notifier, SocketIONotifier
from .session import GuessWhoGame
from .store import InMemoryStore, KeyValueStore
from .turns import Verdict

__all__ = [
    'GuessWhoGame',
    'InMemoryStore',
    'KeyValueStore',
    'Notifier',
    'SocketIONotifier',
    'Verdict',
]
