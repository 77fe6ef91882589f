import random
from typing import Dict, Iterable, List, Sequence, TypeVar

from guesswho.models import Character

T = TypeVar('T')


def shuffled(items: Sequence[T], rng: random.Random) -> List[T]:
    """Return a uniformly permuted copy of ``items`` (Fisher-Yates via ``Random.shuffle``)."""
    copy = list(items)
    rng.shuffle(copy)
    return copy


def draw_secrets(players: Iterable[str], catalog: Sequence[Character], rng: random.Random) -> Dict[str, Character]:
    # Independent draws: both players may end up with the same character
    return {sid: rng.choice(catalog) for sid in players}


def board_for(catalog: Sequence[Character], rng: random.Random) -> List[dict]:
    return [c.to_dict() for c in shuffled(catalog, rng)]
