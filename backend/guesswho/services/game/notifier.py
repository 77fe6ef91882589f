from abc import ABC, abstractmethod
from typing import Any

from flask_socketio import SocketIO


class Notifier(ABC):
    """Fire-and-forget push to one connection or to every member of a room."""

    @abstractmethod
    def send(self, sid: str, event: str, payload: Any) -> None:
        ...

    @abstractmethod
    def broadcast(self, room_id: str, event: str, payload: Any) -> None:
        ...

    @abstractmethod
    def enter_room(self, sid: str, room_id: str) -> None:
        ...

    @abstractmethod
    def close_room(self, room_id: str) -> None:
        ...


class SocketIONotifier(Notifier):
    # Uses the server object directly so it also works outside a request context
    def __init__(self, socketio: SocketIO, namespace: str = '/'):
        self.socketio = socketio
        self.namespace = namespace

    def send(self, sid, event, payload):
        self.socketio.emit(event, payload, to=sid, namespace=self.namespace)

    def broadcast(self, room_id, event, payload):
        self.socketio.emit(event, payload, to=room_id, namespace=self.namespace)

    def enter_room(self, sid, room_id):
        self.socketio.server.enter_room(sid, room_id, namespace=self.namespace)

    def close_room(self, room_id):
        self.socketio.server.close_room(room_id, namespace=self.namespace)
