import json
import random

import click
from flask import Flask
from flask_cors import CORS
from flask_socketio import SocketIO

from guesswho.config import Config

socketio = SocketIO(async_mode=None)


def _allowed_origins(value):
    if isinstance(value, (list, tuple)):
        return list(value)
    value = (value or '*').strip()
    if value == '*':
        return '*'
    return [origin.strip() for origin in value.split(',') if origin.strip()]


def create_app(config_class=Config):
    flask_app = Flask(__name__)
    flask_app.config.from_object(config_class)

    allowed_origins = _allowed_origins(flask_app.config.get('CORS_ALLOWED_ORIGINS'))
    namespace = flask_app.config.get('SOCKETIO_NAMESPACE') or '/'
    CORS(flask_app, origins=allowed_origins)

    # Initialize Socket.IO after app is created
    socketio.init_app(flask_app, cors_allowed_origins=allowed_origins)

    from guesswho.catalog import load_characters
    from guesswho.services.game import GuessWhoGame, SocketIONotifier

    seed = flask_app.config.get('RANDOM_SEED')
    flask_app.extensions['guesswho'] = GuessWhoGame(
        catalog=load_characters(flask_app.config.get('CHARACTERS')),
        notifier=SocketIONotifier(socketio, namespace=namespace),
        rng=random.Random(seed) if seed is not None else random.Random(),
        single_round=bool(flask_app.config.get('SINGLE_ROUND')),
        logger=flask_app.logger,
    )

    from guesswho.main import main
    flask_app.register_blueprint(main)

    # Importing here ensures the handlers bind to the initialized socketio instance
    from guesswho.socketio_events import register_socketio_handlers
    register_socketio_handlers(namespace=namespace)

    @click.command('characters')
    def characters_command():
        """Prints the character catalog as JSON."""
        game = flask_app.extensions['guesswho']
        click.echo(json.dumps([c.to_dict() for c in game.catalog], indent=2))

    flask_app.cli.add_command(characters_command)

    return flask_app
