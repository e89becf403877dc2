from gamehall import get_registry


def test_index(client):
    res = client.get('/')
    assert res.status_code == 200
    assert res.get_json()['games'] == ['gin', 'guess', 'tictactoe']


def test_rooms_empty(client):
    res = client.get('/api/rooms')
    assert res.status_code == 200
    assert res.get_json() == []


def test_rooms_listing(flask_app, client):
    registry = get_registry(flask_app)
    registry.connect('a')
    registry.connect('b')
    registry.join('a', 'den')
    registry.join('b', 'den')
    registry.select_game('a', 'tictactoe')
    registry.ensure_room('attic')

    data = client.get('/api/rooms').get_json()
    assert [r['code'] for r in data] == ['attic', 'den']
    den = data[1]
    assert den['game_type'] == 'tictactoe'
    assert den['members'] == 2
    assert den['seats'] == ['a', 'b']


def test_room_view_hides_gin_hands(flask_app, client):
    registry = get_registry(flask_app)
    registry.connect('a')
    registry.connect('b')
    registry.join('a', 'den')
    registry.join('b', 'den')
    registry.select_game('a', 'gin')

    res = client.get('/api/rooms/den')
    assert res.status_code == 200
    view = res.get_json()
    assert view['gameType'] == 'gin'
    assert view['state']['handCounts'] == {'a': 10, 'b': 10}
    assert 'hands' not in view['state']
    assert 'hand' not in view


def test_unknown_room(client):
    res = client.get('/api/rooms/nowhere')
    assert res.status_code == 404
    assert 'error' in res.get_json()


def test_rooms_command_lists_rooms(flask_app):
    get_registry(flask_app).ensure_room('den')
    result = flask_app.test_cli_runner().invoke(args=['rooms'])
    assert 'den: game=guess members=0' in result.output
