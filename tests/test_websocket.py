"""Tests for the Socket.IO events."""

from conftest import TARGET


def received_states(socket_client):
    return [event['args'][0] for event in socket_client.get_received() if event['name'] == 'game_state']


def received_errors(socket_client):
    return [event['args'][0] for event in socket_client.get_received() if event['name'] == 'error']


def start_game(socket_client):
    socket_client.emit('new_game')
    states = received_states(socket_client)
    assert len(states) == 1
    return states[0]['game_id']


def test_new_game_event(socket_client):
    socket_client.emit('new_game')
    states = received_states(socket_client)
    assert states[0]['state']['status'] == 'playing'
    assert states[0]['state']['answer'] is None


def test_key_press_broadcasts_state(socket_client):
    game_id = start_game(socket_client)
    for key in TARGET:
        socket_client.emit('key_press', {'game_id': game_id, 'key': key})
    states = received_states(socket_client)
    assert len(states) == 5
    assert states[-1]['state']['current_guess'] == TARGET

    socket_client.emit('key_press', {'game_id': game_id, 'key': 'Enter'})
    state = received_states(socket_client)[-1]['state']
    assert state['status'] == 'won'
    assert state['answer'] == TARGET


def test_join_game_from_second_client(app, socket_client):
    game_id = start_game(socket_client)
    watcher = app.socketio.test_client(app)
    watcher.emit('join_game', {'game_id': game_id})
    assert received_states(watcher)[0]['game_id'] == game_id

    socket_client.emit('key_press', {'game_id': game_id, 'key': 'g'})
    assert received_states(watcher)[-1]['state']['current_guess'] == 'ل'
    watcher.disconnect()


def test_reset_game_event(socket_client):
    game_id = start_game(socket_client)
    socket_client.emit('key_press', {'game_id': game_id, 'key': 'ل'})
    socket_client.emit('reset_game', {'game_id': game_id})
    state = received_states(socket_client)[-1]['state']
    assert state['current_guess'] == ''
    assert state['guesses'] == []


def test_unknown_game_emits_error(socket_client):
    socket_client.emit('key_press', {'game_id': 'missing', 'key': 'ل'})
    assert received_errors(socket_client) == [{'error': 'Game not found'}]

    socket_client.emit('join_game', {'game_id': 'missing'})
    socket_client.emit('reset_game', {'game_id': 'missing'})
    assert len(received_errors(socket_client)) == 2


def test_missing_key_emits_error(socket_client):
    game_id = start_game(socket_client)
    socket_client.emit('key_press', {'game_id': game_id})
    assert received_errors(socket_client) == [{'error': 'Key is required'}]


def test_malformed_payloads_emit_errors(socket_client):
    game_id = start_game(socket_client)

    socket_client.emit('key_press', 'ل')
    socket_client.emit('key_press', {'game_id': ['x'], 'key': 'ل'})
    socket_client.emit('join_game', 'abc')
    socket_client.emit('join_game', {'game_id': {'nested': 1}})
    socket_client.emit('reset_game', [game_id])
    socket_client.emit('reset_game')

    assert received_errors(socket_client) == [
        {'error': 'Key is required'},
        {'error': 'Game not found'},
        {'error': 'Game not found'},
        {'error': 'Game not found'},
        {'error': 'Game not found'},
        {'error': 'Game not found'},
    ]
    assert socket_client.is_connected()


def test_multi_letter_key_press_leaves_buffer_empty(socket_client):
    game_id = start_game(socket_client)
    socket_client.emit('key_press', {'game_id': game_id, 'key': TARGET})
    assert received_states(socket_client)[-1]['state']['current_guess'] == ''
