"""
Game Controller

Handles all game-related HTTP endpoints.
"""

from dataclasses import asdict
from flask import Blueprint, request, jsonify

from ..services.game_service import GameService
from ..utils.decorators import with_game_service
from ..utils.game_logger import game_logger
from ..utils.helpers import get_player_id

game_bp = Blueprint('game', __name__)


def start_game(game_service: GameService, action: str, data: dict = None):
    """Create a game for the requesting player and log it."""
    player_id = get_player_id(request, data)
    game_logger.log_user_action(request, action, player_id=player_id)

    game_id = game_service.create_game(player_id)
    response_data = {
        'success': True,
        'game_id': game_id
    }

    game_logger.log_server_response(request, action, True, response_data, game_id)
    game_logger.log_game_event(game_id, 'game_created', request.remote_addr, player_id=player_id)
    return response_data


def play_guess(game_service: GameService, action: str, game_id: str, guess: str):
    """Evaluate a guess and log the outcome."""
    game_logger.log_user_action(
        request, action, game_id,
        guess=guess, guess_length=len(guess)
    )

    answer = game_service.submit_guess(game_id, guess)
    response_data = {
        'success': True,
        'answer': answer.to_dict()
    }

    game_logger.log_server_response(
        request, action, True, response_data, game_id,
        attempt_count=answer.attempt_count, solved=answer.solved
    )

    # An empty evaluation means the game was already solved before this guess
    if answer.solved and answer.evaluation:
        game_logger.log_game_event(
            game_id, 'game_solved', request.remote_addr,
            attempts_used=answer.attempt_count, winning_guess=answer.guess
        )
    return response_data


@game_bp.route('/new_game', methods=['POST'])
@with_game_service('new_game')
def new_game(game_service):
    """Create a new game session."""
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        data = {}
    return jsonify(start_game(game_service, 'new_game', data)), 201


@game_bp.route('/game/<game_id>/guess', methods=['POST'])
@with_game_service('submit_guess')
def make_guess(game_service, game_id):
    """Submit a guess for validation and evaluation."""
    data = request.get_json(silent=True)
    if not isinstance(data, dict) or not isinstance(data.get('guess'), str):
        error_response = {
            'success': False,
            'error': 'Guess is required'
        }
        game_logger.log_server_response(request, 'submit_guess', False, error_response, game_id)
        return jsonify(error_response), 400

    return jsonify(play_guess(game_service, 'submit_guess', game_id, data['guess']))


@game_bp.route('/game/<game_id>/state', methods=['GET'])
@with_game_service('get_state')
def get_state(game_service, game_id):
    """Get current game state (the secret stays hidden until solved)."""
    game_logger.log_user_action(request, 'get_state', game_id)

    state = game_service.get_game(game_id)
    response_data = {
        'success': True,
        'state': asdict(state)
    }

    game_logger.log_server_response(
        request, 'get_state', True, response_data, game_id,
        attempt_count=state.attempt_count, solved=state.solved
    )
    return jsonify(response_data)


@game_bp.route('/stats', methods=['GET'])
@with_game_service('get_stats')
def get_stats(game_service):
    """Per-player statistics, optionally for a single player."""
    player_id = request.args.get('player_id')
    game_logger.log_user_action(request, 'get_stats', requested_player=player_id)

    stats = game_service.get_player_statistics(player_id)
    response_data = {
        'success': True,
        'stats': [asdict(entry) for entry in stats]
    }

    game_logger.log_server_response(request, 'get_stats', True, response_data)
    return jsonify(response_data)


@game_bp.route('/health', methods=['GET'])
@with_game_service('health_check')
def health_check(game_service):
    """Health check endpoint."""
    game_logger.log_user_action(request, 'health_check')

    response_data = {
        'status': 'healthy',
        'store': game_service.store.kind,
        'answer_words': len(game_service.vocabulary.answers),
        'guess_words': len(game_service.vocabulary.valid_guesses),
        'log_stats': game_logger.get_log_stats()
    }

    game_logger.log_server_response(request, 'health_check', True, response_data)
    return jsonify(response_data)
