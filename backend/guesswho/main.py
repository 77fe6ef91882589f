from flask import Blueprint, current_app, jsonify

main = Blueprint('main', __name__)


@main.route('/')
def index():
    return jsonify({'message': 'Welcome to the Guess Who game server!'})


@main.route('/api/characters')
def list_characters():
    """Returns the catalog in its configured order."""
    game = current_app.extensions['guesswho']
    return jsonify([c.to_dict() for c in game.catalog])


@main.route('/api/status')
def matchmaking_status():
    """Returns whether someone is waiting for an opponent and how many rooms are live."""
    return jsonify(current_app.extensions['guesswho'].status())
