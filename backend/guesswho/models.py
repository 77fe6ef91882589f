from dataclasses import dataclass, field
from typing import Dict, List, Optional, Union


@dataclass(frozen=True)
class Character:
    name: str
    image_url: str

    def to_dict(self):
        return {
            'imageUrl': self.image_url,
            'name': self.name,
        }


@dataclass
class WaitingPlayer:
    """The single unpaired connection sitting in matchmaking (AwaitingJoin)."""
    sid: str
    name: Optional[str] = None


@dataclass
class InProgress:
    turn: int = 0


@dataclass
class Resolved:
    winner: str
    turn: int = 0


RoundState = Union[InProgress, Resolved]


@dataclass
class Room:
    room_id: str
    players: List[str]
    names: Dict[str, Optional[str]]
    secrets: Dict[str, Character] = field(default_factory=dict)
    state: RoundState = field(default_factory=InProgress)

    @property
    def current_turn(self) -> int:
        return self.state.turn

    @property
    def current_player(self) -> str:
        return self.players[self.state.turn]

    @property
    def round_active(self) -> bool:
        return isinstance(self.state, InProgress)

    @property
    def last_winner(self) -> Optional[str]:
        if isinstance(self.state, Resolved):
            return self.state.winner
        return None

    def has_player(self, sid: str) -> bool:
        return sid in self.players

    def opponent_of(self, sid: str) -> Optional[str]:
        for player in self.players:
            if player != sid:
                return player
        return None
