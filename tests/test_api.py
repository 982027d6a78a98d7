import json
import logging

import pytest


def new_game(client, player_id='alice'):
    res = client.post('/api/new_game', json={'player_id': player_id})
    assert res.status_code == 201
    return res.get_json()['game_id']


def test_welcome(client):
    res = client.get('/')
    assert res.status_code == 200
    assert 'Welcome' in res.get_json()['message']


def test_create_game(client):
    res = client.post('/api/new_game', json={'player_id': 'alice'})
    assert res.status_code == 201
    data = res.get_json()
    assert data['success'] is True
    assert 'game_id' in data
    # The secret is never part of the creation response
    assert 'mower' not in res.get_data(as_text=True)


def test_create_game_without_body_uses_client_address(client, store):
    res = client.post('/api/new_game')
    assert res.status_code == 201
    game = store.load(res.get_json()['game_id'])
    assert game.player_id == '127.0.0.1'


def test_guess_flow(client):
    game_id = new_game(client)

    res = client.post(f'/api/game/{game_id}/guess', json={'guess': 'owler'})
    assert res.status_code == 200
    answer = res.get_json()['answer']
    assert answer['solved'] is False
    assert answer['revealed_word'] is None
    assert answer['attempt_count'] == 1
    assert [m['classification'] for m in answer['evaluation']] == [
        'PRESENT', 'PRESENT', 'ABSENT', 'EXACT', 'EXACT'
    ]
    assert [m['position'] for m in answer['evaluation']] == [0, 1, 2, 3, 4]

    res = client.post(f'/api/game/{game_id}/guess', json={'guess': 'mower'})
    answer = res.get_json()['answer']
    assert answer['solved'] is True
    assert answer['revealed_word'] == 'mower'
    assert answer['attempt_count'] == 2

    # Further guesses change nothing
    res = client.post(f'/api/game/{game_id}/guess', json={'guess': 'camel'})
    assert res.status_code == 200
    answer = res.get_json()['answer']
    assert answer['solved'] is True
    assert answer['attempt_count'] == 2
    assert answer['evaluation'] == []


def test_invalid_guess_is_bad_request(client):
    game_id = new_game(client)
    res = client.post(f'/api/game/{game_id}/guess', json={'guess': 'zzzzz'})
    assert res.status_code == 400
    assert res.get_json()['success'] is False

    res = client.post(f'/api/game/{game_id}/guess', json={'guess': 'owl'})
    assert res.status_code == 400

    state = client.get(f'/api/game/{game_id}/state').get_json()['state']
    assert state['attempt_count'] == 0


def test_missing_guess_is_bad_request(client):
    game_id = new_game(client)
    res = client.post(f'/api/game/{game_id}/guess', json={})
    assert res.status_code == 400
    assert res.get_json()['error'] == 'Guess is required'


def test_unknown_game_is_not_found(client):
    res = client.post('/api/game/nope/guess', json={'guess': 'mower'})
    assert res.status_code == 404
    res = client.get('/api/game/nope/state')
    assert res.status_code == 404


def test_state(client):
    game_id = new_game(client)
    state = client.get(f'/api/game/{game_id}/state').get_json()['state']
    assert state == {
        'game_id': game_id,
        'attempt_count': 0,
        'solved': False,
        'state': 'created',
        'revealed_word': None,
    }

    client.post(f'/api/game/{game_id}/guess', json={'guess': 'camel'})
    state = client.get(f'/api/game/{game_id}/state').get_json()['state']
    assert state['state'] == 'in_progress'
    assert state['revealed_word'] is None


def test_stats(client):
    game_id = new_game(client, 'alice')
    client.post(f'/api/game/{game_id}/guess', json={'guess': 'owler'})
    client.post(f'/api/game/{game_id}/guess', json={'guess': 'mower'})
    new_game(client, 'bob')

    res = client.get('/api/stats')
    assert res.status_code == 200
    stats = {entry['player_id']: entry for entry in res.get_json()['stats']}
    assert stats['alice'] == {
        'player_id': 'alice',
        'average_attempts': 2.0,
        'max_attempts': 2,
        'solved_count': 1,
        'total_count': 1,
    }
    assert stats['bob']['total_count'] == 1
    assert stats['bob']['solved_count'] == 0

    res = client.get('/api/stats?player_id=bob')
    assert [entry['player_id'] for entry in res.get_json()['stats']] == ['bob']


def test_busy_game_is_service_unavailable(client, store, monkeypatch):
    from wordle_server.errors import StorageConflict

    game_id = new_game(client)

    def always_conflict(game_id, attempt_count, solved):
        raise StorageConflict(game_id)

    monkeypatch.setattr(store, 'update', always_conflict)
    res = client.post(f'/api/game/{game_id}/guess', json={'guess': 'owler'})
    assert res.status_code == 503


def test_health(client):
    res = client.get('/api/health')
    assert res.status_code == 200
    data = res.get_json()
    assert data['status'] == 'healthy'
    assert data['store'] == 'memory'
    assert data['answer_words'] == 1
    assert 'entries' in data['log_stats']


def test_short_routes(client):
    res = client.get('/create')
    assert res.status_code == 200
    game_id = res.get_json()['game_id']

    res = client.get(f'/play/{game_id}/guess/zzzzz')
    assert res.status_code == 400

    res = client.get(f'/play/{game_id}/guess/mower')
    assert res.status_code == 200
    answer = res.get_json()
    assert answer['solved'] is True
    assert answer['guess'] == 'mower'

    res = client.get('/play/missing/guess/mower')
    assert res.status_code == 404


@pytest.mark.parametrize('body', [['owler'], 'owler', 5, None, {'guess': 5}, {'guess': ['owler']}])
def test_malformed_guess_body_is_bad_request(client, body):
    game_id = new_game(client)
    res = client.post(f'/api/game/{game_id}/guess', json=body)
    assert res.status_code == 400
    assert res.get_json()['error'] == 'Guess is required'

    state = client.get(f'/api/game/{game_id}/state').get_json()['state']
    assert state['attempt_count'] == 0
    assert state['solved'] is False


@pytest.mark.parametrize('body', [['alice'], 'alice', 7])
def test_new_game_ignores_non_object_body(client, store, body):
    res = client.post('/api/new_game', json=body)
    assert res.status_code == 201
    assert store.load(res.get_json()['game_id']).player_id == '127.0.0.1'


def test_log_entries_carry_the_player(client, caplog):
    caplog.set_level(logging.INFO, logger='wordle_game')
    new_game(client, 'alice')

    entries = [json.loads(record.getMessage()) for record in caplog.records
               if record.name == 'wordle_game']
    actions = [e for e in entries if e['action'] == 'new_game']
    assert actions
    assert all(e['user']['player_id'] == 'alice' for e in actions)

    (created,) = [e for e in entries if e['action'] == 'game_created']
    assert created['user']['player_id'] == 'alice'
