"""
WebSocket Event Handlers

Streams key presses from the browser to the game service and pushes the
resulting state back to every client watching the game.
"""

from dataclasses import asdict
from flask import request
from flask_socketio import emit, join_room
from ..services.game_service import get_game_service
from ..utils.game_logger import game_logger


def _emit_state(socketio, game_id, state):
    socketio.emit('game_state', {'game_id': game_id, 'state': asdict(state)}, to=game_id)


def _game_id(data):
    """Game id from an event payload, or None when the payload is malformed."""
    if not isinstance(data, dict):
        return None
    game_id = data.get('game_id')
    return game_id if isinstance(game_id, str) and game_id else None


def register_websocket_handlers(socketio):
    """Register all WebSocket event handlers."""

    @socketio.on('connect')
    def handle_connect():
        """Handle WebSocket connection."""
        game_logger.log_user_action(request, 'socket_connect')

    @socketio.on('disconnect')
    def handle_disconnect(*args):
        """Handle WebSocket disconnection. Games outlive the socket."""
        game_logger.log_user_action(request, 'socket_disconnect')

    @socketio.on('new_game')
    def handle_new_game(data=None):
        """Create a game and subscribe this socket to its updates."""
        game_service = get_game_service()
        if not game_service:
            emit('error', {'error': 'Game service unavailable'})
            return

        game_id = game_service.create_new_game()
        join_room(game_id)
        game_logger.log_user_action(request, 'new_game', game_id)

        _emit_state(socketio, game_id, game_service.get_game_state(game_id))

    @socketio.on('join_game')
    def handle_join_game(data=None):
        """Subscribe this socket to an existing game's updates."""
        game_service = get_game_service()
        game_id = _game_id(data)
        state = game_service.get_game_state(game_id) if game_service and game_id else None
        if state is None:
            emit('error', {'error': 'Game not found'})
            return

        join_room(game_id)
        game_logger.log_user_action(request, 'join_game', game_id)
        emit('game_state', {'game_id': game_id, 'state': asdict(state)})

    @socketio.on('key_press')
    def handle_key_press(data=None):
        """Apply one key press and broadcast the new state."""
        game_service = get_game_service()
        game_id = _game_id(data)
        key = data.get('key') if isinstance(data, dict) else None

        if not game_service:
            emit('error', {'error': 'Game service unavailable'})
            return

        if not isinstance(key, str):
            emit('error', {'error': 'Key is required'})
            return

        before = game_service.get_state(game_id) if game_id else None
        if before is None:
            emit('error', {'error': 'Game not found'})
            return

        game_logger.log_user_action(request, 'key_press', game_id, key=key)

        try:
            state = game_service.press_key(game_id, key)
        except Exception as e:
            game_logger.log_error(request, e, 'key_press', game_id)
            emit('error', {'error': str(e)})
            return

        _emit_state(socketio, game_id, state)

        if state.game_over and not before.is_over:
            game_logger.log_game_event(
                game_id, 'game_won' if state.won else 'game_lost', request.remote_addr,
                rounds_used=len(state.guesses), target_word=state.answer
            )

    @socketio.on('reset_game')
    def handle_reset_game(data=None):
        """Start the game over and broadcast the fresh state."""
        game_service = get_game_service()
        game_id = _game_id(data)
        state = game_service.reset_game(game_id) if game_service and game_id else None
        if state is None:
            emit('error', {'error': 'Game not found'})
            return

        game_logger.log_game_event(game_id, 'game_reset', request.remote_addr)
        _emit_state(socketio, game_id, state)
