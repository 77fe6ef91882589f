import os
import random
import sys
from collections import defaultdict

import pytest

# Ensure the backend root (containing the `guesswho` package) is on sys.path
CURRENT_DIR = os.path.dirname(__file__)
BACKEND_ROOT = os.path.abspath(os.path.join(CURRENT_DIR, '..'))
if BACKEND_ROOT not in sys.path:
    sys.path.insert(0, BACKEND_ROOT)

from guesswho import create_app, socketio
from guesswho.models import Character
from guesswho.services.game import GuessWhoGame, Notifier


class TestConfig:
    TESTING = True
    SECRET_KEY = os.environ.get('SECRET_KEY', 'test-secret')
    HOST = '127.0.0.1'
    PORT = 5000
    CHARACTERS = ''
    CORS_ALLOWED_ORIGINS = '*'
    SOCKETIO_NAMESPACE = '/'
    SINGLE_ROUND = False
    RANDOM_SEED = 1234


class RecordingNotifier(Notifier):
    """Collects notifications per recipient instead of pushing them anywhere."""

    def __init__(self):
        self.sent = []
        self.members = defaultdict(set)
        self.closed = []

    def send(self, sid, event, payload):
        self.sent.append((sid, event, payload))

    def broadcast(self, room_id, event, payload):
        for sid in sorted(self.members[room_id]):
            self.sent.append((sid, event, payload))

    def enter_room(self, sid, room_id):
        self.members[room_id].add(sid)

    def close_room(self, room_id):
        self.members.pop(room_id, None)
        self.closed.append(room_id)

    def to(self, sid, event=None):
        return [payload for target, name, payload in self.sent
                if target == sid and (event is None or name == event)]

    def events(self, sid):
        return [name for target, name, _ in self.sent if target == sid]

    def clear(self):
        self.sent.clear()


A = Character(name='A', image_url='https://example.test/a.png')
B = Character(name='B', image_url='https://example.test/b.png')
C = Character(name='C', image_url='https://example.test/c.png')
D = Character(name='D', image_url='https://example.test/d.png')


@pytest.fixture()
def catalog():
    return [A, B, C, D]


@pytest.fixture()
def notifier():
    return RecordingNotifier()


@pytest.fixture()
def game(catalog, notifier):
    return GuessWhoGame(catalog, notifier, rng=random.Random(7))


@pytest.fixture()
def flask_app():
    application = create_app(TestConfig)
    with application.app_context():
        yield application


@pytest.fixture()
def client(flask_app):
    return flask_app.test_client()


@pytest.fixture()
def connect(flask_app):
    """Factory returning ``(test_client, sid)`` for a fresh Socket.IO connection."""
    clients = []

    def _connect():
        test_client = socketio.test_client(
            flask_app,
            flask_test_client=flask_app.test_client(),
        )
        received = test_client.get_received()
        sid = next(pkt['args'][0]['id'] for pkt in received if pkt['name'] == 'connected')
        clients.append(test_client)
        return test_client, sid

    yield _connect
    for test_client in clients:
        try:
            if test_client.is_connected():
                test_client.disconnect()
        except Exception:
            pass


def payloads(received, name):
    """Payloads of every packet named ``name``.

    The Flask-SocketIO test client stores ``message`` and ``json`` packets with
    the bare payload as ``args``; every other event keeps a list of arguments.
    """
    return [pkt['args'] if name in ('message', 'json') else pkt['args'][0]
            for pkt in received if pkt['name'] == name]
