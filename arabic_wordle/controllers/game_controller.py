"""
Game Controller

Handles all game-related HTTP endpoints.
"""

from flask import Blueprint, request, jsonify
from dataclasses import asdict
from ..config.game_settings import (
    ARABIC_KEYBOARD_ROWS, ENGLISH_TO_ARABIC_MAP, ENTER_KEY, BACKSPACE_KEY, MAX_ROUNDS, WORD_LENGTH
)
from ..services.game_service import get_game_service
from ..utils.game_logger import game_logger

game_bp = Blueprint('game', __name__)


def _service_unavailable():
    return jsonify({
        'success': False,
        'error': 'Game service unavailable'
    }), 500


def _game_not_found(action, game_id):
    error_response = {
        'success': False,
        'error': 'Game not found'
    }
    game_logger.log_server_response(request, action, False, error_response, game_id)
    return jsonify(error_response), 404


def log_outcome(game_id, state, final_guess):
    """Log a game_won / game_lost event once a submission ends the game."""
    if not state.game_over:
        return
    event = 'game_won' if state.won else 'game_lost'
    game_logger.log_game_event(
        game_id, event, request.remote_addr,
        rounds_used=len(state.guesses), target_word=state.answer,
        final_guess=final_guess
    )


@game_bp.route('/new_game', methods=['POST'])
def new_game():
    """Create a new game session."""
    try:
        game_service = get_game_service()
        if not game_service:
            return _service_unavailable()

        game_logger.log_user_action(request, 'new_game', word_mode=game_service.word_mode)

        game_id = game_service.create_new_game()
        state = game_service.get_game_state(game_id)

        response_data = {
            'success': True,
            'game_id': game_id,
            'state': asdict(state)
        }

        game_logger.log_server_response(
            request, 'new_game', True, response_data, game_id,
            word_length=WORD_LENGTH, max_rounds=state.max_rounds
        )

        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'new_game')
        error_response = {
            'success': False,
            'error': str(e)
        }
        game_logger.log_server_response(request, 'new_game', False, error_response)
        return jsonify(error_response), 500


@game_bp.route('/game/<game_id>/state', methods=['GET'])
def get_state(game_id):
    """Get current game state."""
    try:
        game_service = get_game_service()
        if not game_service:
            return _service_unavailable()

        game_logger.log_user_action(request, 'get_state', game_id)

        state = game_service.get_game_state(game_id)
        if state is None:
            return _game_not_found('get_state', game_id)

        response_data = {
            'success': True,
            'state': asdict(state)
        }

        game_logger.log_server_response(
            request, 'get_state', True, response_data, game_id,
            current_row=state.current_row, game_over=state.game_over
        )

        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'get_state', game_id)
        error_response = {
            'success': False,
            'error': str(e)
        }
        game_logger.log_server_response(request, 'get_state', False, error_response, game_id)
        return jsonify(error_response), 500


@game_bp.route('/game/<game_id>/key', methods=['POST'])
def press_key(game_id):
    """Apply a single physical or on-screen key press."""
    try:
        game_service = get_game_service()
        if not game_service:
            return _service_unavailable()

        data = request.get_json(silent=True)
        if not isinstance(data, dict) or not isinstance(data.get('key'), str):
            error_response = {
                'success': False,
                'error': 'Key is required'
            }
            game_logger.log_server_response(request, 'key_press', False, error_response, game_id)
            return jsonify(error_response), 400

        key = data['key']
        game_logger.log_user_action(request, 'key_press', game_id, key=key)

        before = game_service.get_state(game_id)
        state = game_service.press_key(game_id, key)
        if state is None:
            return _game_not_found('key_press', game_id)

        response_data = {
            'success': True,
            'state': asdict(state)
        }

        game_logger.log_server_response(
            request, 'key_press', True, response_data, game_id,
            row=state.current_row, game_over=state.game_over
        )

        if state.game_over and not before.is_over:
            log_outcome(game_id, state, state.guesses[-1] if state.guesses else None)

        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'key_press', game_id)
        error_response = {
            'success': False,
            'error': str(e)
        }
        game_logger.log_server_response(request, 'key_press', False, error_response, game_id)
        return jsonify(error_response), 500


@game_bp.route('/game/<game_id>/guess', methods=['POST'])
def make_guess(game_id):
    """Submit a whole word for validation and evaluation."""
    try:
        game_service = get_game_service()
        if not game_service:
            return _service_unavailable()

        data = request.get_json(silent=True)
        if not isinstance(data, dict) or 'guess' not in data:
            error_response = {
                'success': False,
                'error': 'Guess is required'
            }
            game_logger.log_server_response(request, 'submit_guess', False, error_response, game_id)
            return jsonify(error_response), 400

        guess = data['guess']

        game_logger.log_user_action(
            request, 'submit_guess', game_id,
            guess_length=len(guess) if isinstance(guess, str) else None
        )

        if game_service.get_state(game_id) is None:
            return _game_not_found('submit_guess', game_id)

        # Validate guess first; a rejected word only sets the message
        is_valid, error = game_service.is_valid_guess(game_id, guess)
        if not is_valid:
            state = game_service.submit_guess(game_id, guess)
            error_response = {
                'success': False,
                'error': error
            }
            if state is not None:
                error_response['state'] = asdict(state)
            game_logger.log_server_response(
                request, 'submit_guess', False, error_response, game_id,
                validation_error=error
            )
            return jsonify(error_response), 400

        state = game_service.submit_guess(game_id, guess)
        if state is None:
            error_response = {
                'success': False,
                'error': 'Failed to process guess'
            }
            game_logger.log_server_response(request, 'submit_guess', False, error_response, game_id)
            return jsonify(error_response), 500

        response_data = {
            'success': True,
            'state': asdict(state)
        }

        game_logger.log_server_response(
            request, 'submit_guess', True, response_data, game_id,
            row=state.current_row, game_over=state.game_over
        )

        log_outcome(game_id, state, guess)

        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'submit_guess', game_id)
        error_response = {
            'success': False,
            'error': str(e)
        }
        game_logger.log_server_response(request, 'submit_guess', False, error_response, game_id)
        return jsonify(error_response), 500


@game_bp.route('/game/<game_id>/reset', methods=['POST'])
def reset_game(game_id):
    """Start a session over with a fresh target word."""
    try:
        game_service = get_game_service()
        if not game_service:
            return _service_unavailable()

        game_logger.log_user_action(request, 'reset_game', game_id)

        state = game_service.reset_game(game_id)
        if state is None:
            return _game_not_found('reset_game', game_id)

        response_data = {
            'success': True,
            'state': asdict(state)
        }

        game_logger.log_server_response(request, 'reset_game', True, response_data, game_id)
        game_logger.log_game_event(game_id, 'game_reset', request.remote_addr)

        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'reset_game', game_id)
        error_response = {
            'success': False,
            'error': str(e)
        }
        game_logger.log_server_response(request, 'reset_game', False, error_response, game_id)
        return jsonify(error_response), 500


@game_bp.route('/game/<game_id>', methods=['DELETE'])
def delete_game(game_id):
    """Delete a game session."""
    try:
        game_service = get_game_service()
        if not game_service:
            return _service_unavailable()

        game_logger.log_user_action(request, 'delete_game', game_id)

        success = game_service.delete_game(game_id)

        response_data = {
            'success': success
        }

        game_logger.log_server_response(request, 'delete_game', success, response_data, game_id)

        if success:
            game_logger.log_game_event(game_id, 'game_deleted', request.remote_addr)

        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'delete_game', game_id)
        error_response = {
            'success': False,
            'error': str(e)
        }
        game_logger.log_server_response(request, 'delete_game', False, error_response, game_id)
        return jsonify(error_response), 500


@game_bp.route('/keyboard', methods=['GET'])
def keyboard_layout():
    """On-screen keyboard rows and the English key map for clients."""
    return jsonify({
        'success': True,
        'rows': ARABIC_KEYBOARD_ROWS,
        'english_map': ENGLISH_TO_ARABIC_MAP,
        'enter_key': ENTER_KEY,
        'backspace_key': BACKSPACE_KEY,
        'word_length': WORD_LENGTH,
        'max_rounds': MAX_ROUNDS
    })


@game_bp.route('/health', methods=['GET'])
def health_check():
    """Health check endpoint."""
    try:
        game_service = get_game_service()

        game_logger.log_user_action(request, 'health_check')

        response_data = {
            'status': 'healthy',
            'active_games': len(game_service.games) if game_service else 0,
            'dictionary_size': len(game_service.word_source) if game_service else 0,
            'log_stats': game_logger.get_log_stats()
        }

        game_logger.log_server_response(request, 'health_check', True, response_data)

        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'health_check')
        error_response = {
            'status': 'error',
            'error': str(e)
        }
        game_logger.log_server_response(request, 'health_check', False, error_response)
        return jsonify(error_response), 500
