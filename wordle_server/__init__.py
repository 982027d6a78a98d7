"""
Wordle Game Server Application Package

A Flask server that hosts Wordle games: the server keeps a secret word per
game, clients submit guesses over HTTP and receive per-letter feedback.
"""

from flask import Flask
from flask_cors import CORS
from .config import Config


def create_app(config_class=Config, game_service=None):
    """
    Application factory pattern for creating Flask app instances.

    Args:
        config_class: Configuration class to use
        game_service: Ready GameService to serve; built from config when omitted

    Returns:
        Flask application instance with all extensions initialized
    """
    app = Flask(__name__)
    app.config.from_object(config_class)

    # Initialize extensions
    CORS(app)

    if game_service is None:
        from .services.game_service import GameService
        from .services.vocabulary import default_vocabulary
        from .storage import create_game_store

        game_service = GameService(
            create_game_store(config_class),
            default_vocabulary(),
            retry_limit=app.config.get('GUESS_RETRY_LIMIT', 3)
        )

    # Controllers reach the service through current_app
    app.game_service = game_service

    # Register blueprints
    from .controllers.main_controller import main_bp
    from .controllers.game_controller import game_bp

    app.register_blueprint(main_bp)
    app.register_blueprint(game_bp, url_prefix='/api')

    return app
