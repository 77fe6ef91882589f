import importlib
import json

import pytest

from conftest import TestConfig as BaseConfig
import guesswho.config
from guesswho import create_app
from guesswho.catalog import DEFAULT_CHARACTERS, CatalogError


class CustomCatalogConfig(BaseConfig):
    CHARACTERS = json.dumps([
        {'imageUrl': 'https://example.test/mew.png', 'name': 'Mew'},
        {'imageUrl': 'https://example.test/eevee.png', 'name': 'Eevee'},
    ])


class BrokenCatalogConfig(BaseConfig):
    CHARACTERS = '[{"name": "Mew"}]'


def test_index(client):
    res = client.get('/')
    assert res.status_code == 200
    assert 'Guess Who' in res.get_json()['message']


def test_characters_default_catalog(client):
    res = client.get('/api/characters')
    assert res.status_code == 200
    assert res.get_json() == [c.to_dict() for c in DEFAULT_CHARACTERS]


def test_characters_override():
    app = create_app(CustomCatalogConfig)
    res = app.test_client().get('/api/characters')
    assert [c['name'] for c in res.get_json()] == ['Mew', 'Eevee']


def test_invalid_catalog_fails_app_creation():
    with pytest.raises(CatalogError):
        create_app(BrokenCatalogConfig)


def test_status_tracks_matchmaking(client, connect):
    assert client.get('/api/status').get_json() == {'waiting': False, 'rooms': 0}

    alice, _ = connect()
    alice.emit('joinGame', {'name': 'Alice'})
    assert client.get('/api/status').get_json() == {'waiting': True, 'rooms': 0}

    bob, _ = connect()
    bob.emit('joinGame', {'name': 'Bob'})
    assert client.get('/api/status').get_json() == {'waiting': False, 'rooms': 1}


def test_characters_cli_command(flask_app):
    runner = flask_app.test_cli_runner()
    result = runner.invoke(args=['characters'])
    assert result.exit_code == 0
    assert [c['name'] for c in json.loads(result.output)] == [c.name for c in DEFAULT_CHARACTERS]


@pytest.fixture()
def reload_config(monkeypatch):
    def _reload(**env):
        for key, value in env.items():
            monkeypatch.setenv(key, value)
        return importlib.reload(guesswho.config).Config

    yield _reload
    monkeypatch.undo()
    importlib.reload(guesswho.config)


def test_debug_server_is_opt_in(reload_config):
    assert reload_config(FLASK_DEBUG='0').DEBUG is False
    assert reload_config(FLASK_DEBUG='1').DEBUG is True


def test_default_app_reads_packaged_config(reload_config):
    config = reload_config(APP_PORT='6123', SINGLE_ROUND='yes')
    app = create_app(config)
    assert app.config['PORT'] == 6123
    assert app.config['SINGLE_ROUND'] is True
    assert app.extensions['guesswho'].single_round is True
