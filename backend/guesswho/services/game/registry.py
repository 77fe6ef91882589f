import random
import uuid
from typing import Dict, List, Optional, Sequence

from guesswho.models import Character, InProgress, Room
from .shuffle import draw_secrets
from .store import KeyValueStore


class RoomRegistry:
    def __init__(self, store: KeyValueStore):
        self._store = store

    def create(self, players: List[str], names: Dict[str, Optional[str]],
               catalog: Sequence[Character], rng: random.Random) -> Room:
        """Register a new room; ``players[0]`` moves first."""
        room_id = str(uuid.uuid4())
        while room_id in self._store:
            room_id = str(uuid.uuid4())
        room = Room(
            room_id=room_id,
            players=list(players),
            names=dict(names),
            secrets=draw_secrets(players, catalog, rng),
            state=InProgress(turn=0),
        )
        self._store.put(room_id, room)
        return room

    def get(self, room_id) -> Optional[Room]:
        if not isinstance(room_id, str):
            return None
        return self._store.get(room_id)

    def remove(self, room_id: str) -> Optional[Room]:
        return self._store.delete(room_id)

    def rooms_with(self, sid: str) -> List[Room]:
        return [room for room in self._store.values() if room.has_player(sid)]

    def __len__(self):
        return len(self._store)
