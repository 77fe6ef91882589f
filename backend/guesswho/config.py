import os


def _flag(name, default='0'):
    return os.environ.get(name, default).strip().lower() in ('1', 'true', 'yes', 'on')


class Config:
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'you-will-never-guess'
    # Enables the reloader and lets run.py serve on the Werkzeug dev server
    DEBUG = _flag('FLASK_DEBUG')
    HOST = os.environ.get('HOST', '0.0.0.0')
    PORT = int(os.environ.get('APP_PORT') or os.environ.get('PORT') or '5000')
    # Optional JSON list of {"imageUrl", "name"} overriding the built-in catalog
    CHARACTERS = os.environ.get('CHARACTERS', '')
    # Comma-separated list, or '*' for any origin
    CORS_ALLOWED_ORIGINS = os.environ.get('CORS_ALLOWED_ORIGINS', '*')
    SOCKETIO_NAMESPACE = os.environ.get('SOCKETIO_NAMESPACE', '/')
    # Single-round games close the room on the first correct guess instead of offering a rematch
    SINGLE_ROUND = _flag('SINGLE_ROUND')
    # Seed for secret draws and board shuffles. Unset means non-deterministic.
    RANDOM_SEED = os.environ.get('RANDOM_SEED') or None
