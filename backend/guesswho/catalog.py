import json
from typing import List, Optional

from guesswho.models import Character


class CatalogError(ValueError):
    """Raised when a configured character list cannot be used."""


DEFAULT_CHARACTERS: List[Character] = [
    Character(name='Bulbasaur', image_url='https://img.pokemondb.net/sprites/home/normal/bulbasaur.png'),
    Character(name='Charmander', image_url='https://img.pokemondb.net/sprites/home/normal/charmander.png'),
    Character(name='Squirtle', image_url='https://img.pokemondb.net/sprites/home/normal/squirtle.png'),
    Character(name='Pidgey', image_url='https://img.pokemondb.net/sprites/home/normal/pidgey.png'),
    Character(name='Rattata', image_url='https://img.pokemondb.net/sprites/home/normal/rattata.png'),
]


def _parse_entry(index: int, entry) -> Character:
    if not isinstance(entry, dict):
        raise CatalogError(f'character #{index} must be an object, got {type(entry).__name__}')
    name = entry.get('name')
    image_url = entry.get('imageUrl', entry.get('image_url'))
    if not isinstance(name, str) or not name.strip():
        raise CatalogError(f'character #{index} is missing a name')
    if not isinstance(image_url, str) or not image_url.strip():
        raise CatalogError(f'character {name!r} is missing an imageUrl')
    return Character(name=name, image_url=image_url)


def load_characters(raw: Optional[str]) -> List[Character]:
    """Build the catalog from a JSON document, falling back to the defaults.

    A blank document or an empty list selects ``DEFAULT_CHARACTERS``. Names
    identify characters during guesses, so duplicates are rejected.
    """
    if not raw or not raw.strip():
        return list(DEFAULT_CHARACTERS)
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise CatalogError(f'CHARACTERS is not valid JSON: {exc}') from exc
    if not isinstance(data, list):
        raise CatalogError('CHARACTERS must be a JSON list')
    if not data:
        return list(DEFAULT_CHARACTERS)

    characters = [_parse_entry(i, entry) for i, entry in enumerate(data)]
    seen = set()
    for character in characters:
        if character.name in seen:
            raise CatalogError(f'duplicate character name {character.name!r}')
        seen.add(character.name)
    return characters
