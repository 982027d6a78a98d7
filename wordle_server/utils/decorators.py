"""
Controller Decorators

Shared request handling for the HTTP endpoints.
"""

from functools import wraps
from flask import request, jsonify, current_app

from ..errors import WordleError
from .game_logger import game_logger


def with_game_service(action: str):
    """
    Decorator that passes the app's game service to an endpoint and maps
    game errors to HTTP responses.

    WordleError subclasses become their status code; anything else is
    logged and returned as a 500.
    """
    def decorator(f):
        @wraps(f)
        def decorated_function(*args, **kwargs):
            game_id = kwargs.get('game_id')

            game_service = getattr(current_app, 'game_service', None)
            if game_service is None:
                return jsonify({
                    'success': False,
                    'error': 'Game service unavailable'
                }), 500

            try:
                return f(game_service, *args, **kwargs)
            except WordleError as e:
                error_response = {
                    'success': False,
                    'error': str(e)
                }
                game_logger.log_server_response(
                    request, action, False, error_response, game_id,
                    error_type=type(e).__name__
                )
                return jsonify(error_response), e.status_code
            except Exception as e:
                game_logger.log_error(request, e, action, game_id)
                error_response = {
                    'success': False,
                    'error': str(e)
                }
                game_logger.log_server_response(request, action, False, error_response, game_id)
                return jsonify(error_response), 500

        return decorated_function
    return decorator
