from jotto.config import WORD_LIST


def _state(client):
    return client.get('/api/state').get_json()['state']


def test_initial_state(client):
    res = client.get('/api/state')
    assert res.status_code == 200
    data = res.get_json()
    assert data['success'] is True
    state = data['state']
    assert state['secret_word'] in WORD_LIST
    assert state['status'] == 'playing'
    assert state['attempt_count'] == 0
    assert state['max_attempts'] == 10
    assert state['history'] == []


def test_guess_and_win(client):
    secret = _state(client)['secret_word']
    res = client.post('/api/guess', json={'guess': secret.upper()})
    assert res.status_code == 200
    state = res.get_json()['state']
    assert state['status'] == 'won'
    assert state['score'] == 1000
    assert state['matches'] == [len(set(secret))]

    scores = client.get('/api/high_scores').get_json()['high_scores']
    assert len(scores) == 1
    assert scores[0]['word'] == secret
    assert scores[0]['attempts'] == 1


def test_invalid_guess_rejected(client):
    res = client.post('/api/guess', json={'guess': 'abc'})
    assert res.status_code == 400
    data = res.get_json()
    assert data['success'] is False
    assert '5 letters' in data['error']
    assert _state(client)['attempt_count'] == 0


def test_missing_guess_rejected(client):
    res = client.post('/api/guess', json={})
    assert res.status_code == 400
    assert res.get_json()['error'] == 'Guess is required'


def test_new_game_resets(client):
    secret = _state(client)['secret_word']
    wrong = 'zzzzz' if secret != 'zzzzz' else 'yyyyy'
    client.post('/api/guess', json={'guess': wrong})
    assert _state(client)['attempt_count'] == 1

    res = client.post('/api/new_game')
    assert res.status_code == 200
    state = res.get_json()['state']
    assert state['attempt_count'] == 0
    assert state['status'] == 'playing'


def test_letters_and_progress(client):
    client.post('/api/guess', json={'guess': 'qqqqq'})
    letters = client.get('/api/letters').get_json()['letters']
    assert letters['q'] in ('used', 'eliminated')

    progress = client.get('/api/progress').get_json()['progress']
    assert progress['attempts'] == 1
    assert progress['remaining'] == 9


def test_first_visit(client, store):
    assert client.get('/api/visit').get_json()['first_visit'] is True
    assert client.get('/api/visit').get_json()['first_visit'] is False
    assert store.get('jottoHasVisited') == 'true'


def test_health(client):
    data = client.get('/api/health').get_json()
    assert data['status'] == 'healthy'
    assert data['game_available'] is True


def test_non_object_body_rejected(client):
    res = client.post('/api/guess', data='"guessing"', content_type='application/json')
    assert res.status_code == 400
    assert res.get_json()['error'] == 'Guess is required'

    res = client.post('/api/guess', data='["mouse"]', content_type='application/json')
    assert res.status_code == 400
    assert _state(client)['attempt_count'] == 0
