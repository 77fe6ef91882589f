import functools
import logging
import random
import threading
from typing import List, Optional, Sequence

from guesswho.models import Character, Room
from .matchmaker import Matchmaker
from .notifier import Notifier
from .registry import RoomRegistry
from .rounds import start_next_round
from .shuffle import board_for
from .store import InMemoryStore, KeyValueStore
from .turns import Verdict, resolve_guess

NOT_YOUR_TURN = 'Not your turn!'
ROUND_OVER = 'Round is over! Waiting for a new round.'
WRONG_GUESS = 'Wrong guess! Turn passes.'
OPPONENT_LEFT = 'Opponent disconnected. Game over.'


def _serialized(method):
    @functools.wraps(method)
    def wrapper(self, *args, **kwargs):
        with self._lock:
            return method(self, *args, **kwargs)
    return wrapper


def waiting_message(name: Optional[str]) -> str:
    if name:
        return f'Welcome, {name}! Waiting for an opponent...'
    return 'Waiting for an opponent...'


class GuessWhoGame:
    """Matchmaking, turns and rounds for two-player Guess Who rooms.

    Every public method runs to completion under one lock, so events coming
    in on different handler threads see each other's changes whole.
    """

    def __init__(self, catalog: Sequence[Character], notifier: Notifier,
                 rooms: Optional[KeyValueStore] = None,
                 waiting: Optional[KeyValueStore] = None,
                 rng: Optional[random.Random] = None,
                 single_round: bool = False,
                 logger: Optional[logging.Logger] = None):
        if not catalog:
            raise ValueError('catalog must contain at least one character')
        self.catalog: List[Character] = list(catalog)
        self.notifier = notifier
        self.rooms = RoomRegistry(rooms if rooms is not None else InMemoryStore())
        self.matchmaker = Matchmaker(waiting if waiting is not None else InMemoryStore())
        self.rng = rng or random.Random()
        self.single_round = single_round
        self.logger = logger or logging.getLogger(__name__)
        self._lock = threading.RLock()

    @_serialized
    def join(self, sid: str, name: Optional[str] = None) -> Optional[Room]:
        partner = self.matchmaker.join(sid, name)
        if partner is None:
            self.logger.info(f"[waiting] sid={sid}")
            self.notifier.send(sid, 'message', waiting_message(name))
            return None

        room = self.rooms.create(
            [partner.sid, sid],
            {partner.sid: partner.name, sid: name},
            self.catalog,
            self.rng,
        )
        self.logger.info(f"[room-created] room={room.room_id} players={room.players}")
        for player in room.players:
            self.notifier.enter_room(player, room.room_id)
        for player in room.players:
            self.notifier.send(player, 'gameStart', {
                'roomId': room.room_id,
                'characters': board_for(self.catalog, self.rng),
                'currentTurn': room.current_player,
                'names': dict(room.names),
            })
        for player in room.players:
            self.notifier.send(player, 'secretAssigned', room.secrets[player].to_dict())
        self.notifier.broadcast(room.room_id, 'turnChange', {'currentTurn': room.current_player})
        return room

    @_serialized
    def guess(self, sid: str, room_id, guessed_name) -> Optional[Verdict]:
        room = self.rooms.get(room_id)
        if room is None:
            return None

        verdict = resolve_guess(room, sid, guessed_name)
        if verdict is Verdict.ROUND_OVER:
            self.logger.info(f"[guess-rejected] room={room.room_id} sid={sid} reason=round_over")
            self.notifier.send(sid, 'message', ROUND_OVER)
            return verdict
        if verdict is Verdict.NOT_YOUR_TURN:
            self.logger.info(f"[guess-rejected] room={room.room_id} sid={sid} reason=not_your_turn")
            self.notifier.send(sid, 'message', NOT_YOUR_TURN)
            return verdict

        self.logger.info(f"[guess] room={room.room_id} sid={sid} guessed={guessed_name!r} result={verdict.value}")
        self.notifier.broadcast(room.room_id, 'guessMade', {
            'guesser': sid,
            'guesserName': room.names.get(sid),
            'guessedName': guessed_name,
        })

        if verdict is Verdict.CORRECT:
            self.notifier.broadcast(room.room_id, 'gameOver', {'winner': sid, 'guessedName': guessed_name})
            self.logger.info(f"[round-over] room={room.room_id} winner={sid}")
            if self.single_round:
                self._close(room)
        else:
            self.notifier.send(sid, 'message', WRONG_GUESS)
            self.notifier.broadcast(room.room_id, 'turnChange', {'currentTurn': room.current_player})
        return verdict

    @_serialized
    def new_round(self, sid: str, room_id) -> bool:
        room = self.rooms.get(room_id)
        if room is None or not room.has_player(sid):
            return False
        if not start_next_round(room, self.catalog, self.rng):
            return False

        self.logger.info(f"[new-round] room={room.room_id} first={room.current_player}")
        for player in room.players:
            # Each payload carries only its recipient's secret
            self.notifier.send(player, 'newRound', {
                'roomId': room.room_id,
                'characters': board_for(self.catalog, self.rng),
                'currentTurn': room.current_player,
                'secret': room.secrets[player].to_dict(),
            })
        return True

    @_serialized
    def disconnect(self, sid: str) -> List[str]:
        """Drop ``sid`` from matchmaking and end every room it belongs to.

        Returns the ids of the rooms that were closed.
        """
        if self.matchmaker.leave(sid):
            self.logger.info(f"[waiting-cleared] sid={sid}")

        closed = []
        for room in self.rooms.rooms_with(sid):
            for player in room.players:
                if player != sid:
                    self.notifier.send(player, 'message', OPPONENT_LEFT)
            self._close(room)
            closed.append(room.room_id)
        return closed

    @_serialized
    def status(self):
        return {
            'waiting': self.matchmaker.waiting is not None,
            'rooms': len(self.rooms),
        }

    def _close(self, room: Room) -> None:
        self.rooms.remove(room.room_id)
        self.notifier.close_room(room.room_id)
        self.logger.info(f"[room-closed] room={room.room_id}")
