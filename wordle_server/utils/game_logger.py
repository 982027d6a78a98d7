"""
Game Logger Module for Wordle Server

This module provides logging for user actions, server responses,
and game events as JSON lines in a daily log file.
"""

import logging
import json
from datetime import datetime
from typing import Dict, Any, Optional
from pathlib import Path
from flask import g, has_request_context

from ..config.app_config import Config


class GameLogger:
    """
    Centralized logging system for the Wordle game server.

    Features:
    - User action tracking with client identification
    - Server response logging
    - Game event logging (creation, solves)
    - JSON structured logs for easy parsing
    """

    def __init__(self, log_dir: str = "logs", level: str = "INFO"):
        self.log_dir = Path(log_dir)
        self.log_dir.mkdir(parents=True, exist_ok=True)
        self.level = logging.getLevelName(level.upper()) if isinstance(level, str) else level
        if not isinstance(self.level, int):
            self.level = logging.INFO

        # Setup main game logger
        self.logger = self._setup_logger()

    def _log_file(self) -> Path:
        return self.log_dir / f"game_log_{datetime.now().strftime('%Y-%m-%d')}.log"

    def _setup_logger(self) -> logging.Logger:
        """Setup the main game logger with file handler."""
        logger = logging.getLogger('wordle_game')
        logger.setLevel(self.level)

        # Prevent duplicate handlers
        if logger.handlers:
            logger.handlers.clear()

        # File handler for detailed logs
        file_handler = logging.FileHandler(self._log_file(), encoding='utf-8')
        file_handler.setLevel(self.level)

        # Console only shows warnings and errors
        console_handler = logging.StreamHandler()
        console_handler.setLevel(logging.WARNING)

        file_handler.setFormatter(logging.Formatter(
            '%(asctime)s | %(levelname)s | %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        ))
        console_handler.setFormatter(logging.Formatter('%(levelname)s: %(message)s'))

        logger.addHandler(file_handler)
        logger.addHandler(console_handler)

        return logger

    def _get_user_identity(self, request) -> Dict[str, Optional[str]]:
        """Client address plus the player resolved for this request, if any."""
        return {
            'user_ip': request.remote_addr or 'unknown',
            'player_id': g.get('player_id') if has_request_context() else None
        }

    def _write(self, event_type: str, action: str, user_info: Dict[str, Optional[str]],
               details: Dict[str, Any], level: int = logging.INFO):
        log_entry = {
            'timestamp': datetime.now().isoformat(),
            'event_type': event_type,
            'action': action,
            'user': user_info,
            'details': details
        }
        self.logger.log(level, json.dumps(log_entry, ensure_ascii=False, default=str))

    def log_user_action(self, request, action: str, game_id: Optional[str] = None, **kwargs):
        """
        Log an incoming request.

        Args:
            request: Flask request object
            action: Type of action (e.g., 'new_game', 'submit_guess', 'get_state')
            game_id: Game identifier if applicable
            **kwargs: Additional details to log
        """
        details = {'game_id': game_id, 'method': request.method, 'path': request.path, **kwargs}
        self._write('USER_ACTION', action, self._get_user_identity(request), details)

    def log_server_response(self, request, action: str, success: bool,
                            response_data: Dict[str, Any], game_id: Optional[str] = None, **kwargs):
        """Log what was sent back; failures go out at ERROR level."""
        details = {
            'game_id': game_id,
            'success': success,
            'response_data': self._sanitize_response_data(response_data),
            **kwargs
        }
        event_type = 'SERVER_RESPONSE_SUCCESS' if success else 'SERVER_RESPONSE_ERROR'
        self._write(event_type, action, self._get_user_identity(request), details,
                    logging.INFO if success else logging.ERROR)

    def log_game_event(self, game_id: Optional[str], event: str, user_ip: str, **kwargs):
        """Log a game milestone such as 'game_created' or 'game_solved'."""
        user_info = {'user_ip': user_ip, 'player_id': kwargs.pop('player_id', None)}
        if user_info['player_id'] is None and has_request_context():
            user_info['player_id'] = g.get('player_id')
        self._write('GAME_EVENT', event, user_info, {'game_id': game_id, **kwargs})

    def log_error(self, request, error: Exception, action: str, game_id: Optional[str] = None):
        details = {
            'game_id': game_id,
            'error_type': type(error).__name__,
            'error_message': str(error)
        }
        self._write('ERROR', action, self._get_user_identity(request), details, logging.ERROR)

    def _sanitize_response_data(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """Shrink response payloads for the log."""
        if not isinstance(data, dict):
            return {'data_type': type(data).__name__}

        sanitized = data.copy()

        if isinstance(sanitized.get('answer'), dict):
            answer = sanitized['answer']
            sanitized['answer'] = {
                'guess': answer.get('guess'),
                'solved': answer.get('solved'),
                'attempt_count': answer.get('attempt_count'),
                'pattern': ''.join(
                    match['classification'][0] for match in answer.get('evaluation', [])
                ),
            }

        if isinstance(sanitized.get('stats'), list):
            sanitized['stats'] = {'players': len(sanitized['stats'])}

        return sanitized

    def get_log_stats(self) -> Dict[str, Any]:
        """Size of today's log, for the health endpoint."""
        log_file = self._log_file()
        if not log_file.exists():
            return {'log_file': str(log_file), 'entries': 0}

        with open(log_file, 'r', encoding='utf-8') as f:
            entries = sum(1 for line in f if line.strip())
        return {'log_file': str(log_file), 'entries': entries}


# Global logger instance
game_logger = GameLogger(Config.LOG_DIR, Config.LOG_LEVEL)
