from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional


class KeyValueStore(ABC):
    """Keyed storage for process-wide game state.

    The matchmaking slot and the room registry only ever use these four
    operations, so a shared backend can be dropped in for multi-process
    deployments.
    """

    @abstractmethod
    def get(self, key: str) -> Optional[Any]:
        ...

    @abstractmethod
    def put(self, key: str, value: Any) -> None:
        ...

    @abstractmethod
    def delete(self, key: str) -> Optional[Any]:
        ...

    @abstractmethod
    def values(self) -> List[Any]:
        ...

    def __contains__(self, key: str) -> bool:
        return self.get(key) is not None

    def __len__(self) -> int:
        return len(self.values())


class InMemoryStore(KeyValueStore):
    def __init__(self):
        self._data: Dict[str, Any] = {}

    def get(self, key):
        return self._data.get(key)

    def put(self, key, value):
        self._data[key] = value

    def delete(self, key):
        return self._data.pop(key, None)

    def values(self):
        # Snapshot so callers may delete while iterating
        return list(self._data.values())
