from enum import Enum

from guesswho.models import InProgress, Resolved, Room


class Verdict(Enum):
    ROUND_OVER = 'round_over'
    NOT_YOUR_TURN = 'not_your_turn'
    CORRECT = 'correct'
    WRONG = 'wrong'


def resolve_guess(room: Room, sid: str, guessed_name) -> Verdict:
    """Validate and apply a guess against the opponent's secret.

    Rejected guesses leave the room untouched. A correct guess resolves the
    round with ``sid`` as winner; a wrong one passes the turn.
    """
    if not room.has_player(sid):
        return Verdict.NOT_YOUR_TURN
    if not room.round_active:
        return Verdict.ROUND_OVER
    if room.current_player != sid:
        return Verdict.NOT_YOUR_TURN

    opponent = room.opponent_of(sid)
    secret = room.secrets.get(opponent) if opponent else None
    if secret is not None and secret.name == guessed_name:
        room.state = Resolved(winner=sid, turn=room.current_turn)
        return Verdict.CORRECT

    room.state = InProgress(turn=(room.current_turn + 1) % len(room.players))
    return Verdict.WRONG
