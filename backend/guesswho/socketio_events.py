from flask import current_app, request
from flask_socketio import emit

from guesswho import socketio
from guesswho.services.game import GuessWhoGame


def _game() -> GuessWhoGame:
    return current_app.extensions['guesswho']


def _get_sid() -> str:
    # type: ignore: request.sid exists in Socket.IO context
    return request.sid  # type: ignore


def handle_connect(auth=None):
    sid = _get_sid()
    current_app.logger.info(f"[connect] sid={sid}")
    emit('connected', {'message': 'Connected to Guess Who', 'id': sid})


def handle_disconnect(reason=None):
    sid = _get_sid()
    current_app.logger.info(f"[disconnect] sid={sid} reason={reason}")
    _game().disconnect(sid)


def handle_join_game(data=None):
    data = data if isinstance(data, dict) else {}
    _game().join(_get_sid(), data.get('name'))


def handle_guess(data=None):
    data = data if isinstance(data, dict) else {}
    _game().guess(_get_sid(), data.get('roomId'), data.get('guessedName'))


def handle_new_round(data=None):
    data = data if isinstance(data, dict) else {}
    _game().new_round(_get_sid(), data.get('roomId'))


def handle_ping(data=None):
    emit('pong', data or {})


def register_socketio_handlers(namespace: str = '/') -> None:
    """Register Socket.IO event handlers on ``namespace``."""
    socketio.on_event('connect', handle_connect, namespace=namespace)
    socketio.on_event('disconnect', handle_disconnect, namespace=namespace)
    socketio.on_event('joinGame', handle_join_game, namespace=namespace)
    socketio.on_event('guess', handle_guess, namespace=namespace)
    socketio.on_event('newRound', handle_new_round, namespace=namespace)
    socketio.on_event('ping', handle_ping, namespace=namespace)
