import random
from typing import Sequence

from guesswho.models import Character, InProgress, Resolved, Room
from .shuffle import draw_secrets


def start_next_round(room: Room, catalog: Sequence[Character], rng: random.Random) -> bool:
    """Move a resolved room into a fresh round.

    The previous winner is moved to the front and therefore moves first.
    Both secrets are redrawn. Returns ``False`` (and changes nothing) when the
    current round has not been resolved yet.
    """
    if not isinstance(room.state, Resolved):
        return False

    winner = room.state.winner
    if winner in room.players and room.players[0] != winner:
        room.players.remove(winner)
        room.players.insert(0, winner)

    room.secrets = draw_secrets(room.players, catalog, rng)
    room.state = InProgress(turn=0)
    return True
