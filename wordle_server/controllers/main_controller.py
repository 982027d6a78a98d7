"""
Main Controller

Welcome page and the short GET routes kept for existing clients.
"""

from flask import Blueprint, jsonify

from ..utils.decorators import with_game_service
from .game_controller import play_guess, start_game

main_bp = Blueprint('main', __name__)


@main_bp.route('/')
def index():
    return jsonify({
        'message': 'Welcome to the Wordle game server!',
        'usage': {
            'new_game': 'POST /api/new_game',
            'guess': 'POST /api/game/<game_id>/guess  {"guess": "crane"}',
            'state': 'GET /api/game/<game_id>/state',
            'stats': 'GET /api/stats',
        }
    })


@main_bp.route('/create', methods=['GET'])
@with_game_service('create')
def create(game_service):
    response_data = start_game(game_service, 'create')
    return jsonify({'game_id': response_data['game_id']})


@main_bp.route('/play/<game_id>/guess/<guess>', methods=['GET'])
@with_game_service('play')
def play(game_service, game_id, guess):
    return jsonify(play_guess(game_service, 'play', game_id, guess)['answer'])
