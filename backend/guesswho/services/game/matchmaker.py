from typing import Optional

from guesswho.models import WaitingPlayer
from .store import KeyValueStore

WAITING_KEY = 'waiting'


class Matchmaker:
    """Holds at most one waiting connection and pairs it with the next joiner."""

    def __init__(self, store: KeyValueStore):
        self._store = store

    @property
    def waiting(self) -> Optional[WaitingPlayer]:
        return self._store.get(WAITING_KEY)

    def join(self, sid: str, name: Optional[str] = None) -> Optional[WaitingPlayer]:
        """Queue ``sid`` or pair it.

        Returns the consumed waiter when a pair is formed, ``None`` when
        ``sid`` now occupies the slot. The slot is cleared before returning a
        partner.
        """
        waiter = self.waiting
        if waiter is None or waiter.sid == sid:
            self._store.put(WAITING_KEY, WaitingPlayer(sid=sid, name=name))
            return None
        self._store.delete(WAITING_KEY)
        return waiter

    def leave(self, sid: str) -> bool:
        waiter = self.waiting
        if waiter is None or waiter.sid != sid:
            return False
        self._store.delete(WAITING_KEY)
        return True
