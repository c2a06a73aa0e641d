"""
Structured event log for the Arabic Wordle server.

Every line is a JSON record describing a key press, a guess, the response
sent back, or a finished game. One file is written per calendar day.
"""

import logging
import json
from datetime import datetime
from typing import Dict, Any, Optional
from pathlib import Path

from ..config import Config
from .helpers import get_user_identity

# Record type prefix in a log line -> counter name in get_log_stats()
_STAT_KEYS = (
    ('USER_ACTION', 'user_actions'),
    ('SERVER_RESPONSE', 'server_responses'),
    ('GAME_EVENT', 'game_events'),
    ('"ERROR"', 'errors'),
)


class GameLogger:
    """
    Writes the game's JSON records to ``LOG_DIR/game_log_<date>.log``.

    Warnings and errors are echoed to the console as well. Target words only
    reach the log once the game that owns them is over.
    """

    def __init__(self, log_dir: str = "logs", level: str = "INFO"):
        self.log_dir = Path(log_dir)
        self.log_dir.mkdir(parents=True, exist_ok=True)
        self.level = getattr(logging, str(level).upper(), logging.INFO)
        self.logger = self._setup_logger()

    @property
    def log_file(self) -> Path:
        return self.log_dir / f"game_log_{datetime.now().strftime('%Y-%m-%d')}.log"

    def _setup_logger(self) -> logging.Logger:
        logger = logging.getLogger('arabic_wordle')
        logger.setLevel(self.level)
        logger.propagate = False

        # Re-initialising replaces the previous handlers instead of stacking them
        for handler in list(logger.handlers):
            handler.close()
            logger.removeHandler(handler)

        file_handler = logging.FileHandler(self.log_file, encoding='utf-8')
        file_handler.setLevel(self.level)
        file_handler.setFormatter(logging.Formatter(
            '%(asctime)s | %(levelname)s | %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        ))

        console_handler = logging.StreamHandler()
        console_handler.setLevel(logging.WARNING)
        console_handler.setFormatter(logging.Formatter('%(levelname)s: %(message)s'))

        logger.addHandler(file_handler)
        logger.addHandler(console_handler)
        return logger

    def _record(self, event_type: str, action: str,
                player: Dict[str, Optional[str]], details: Dict[str, Any]) -> str:
        return json.dumps({
            'timestamp': datetime.now().isoformat(),
            'event_type': event_type,
            'action': action,
            'user': player,
            'details': details
        }, ensure_ascii=False)

    def log_user_action(self, request, action: str, game_id: Optional[str] = None, **kwargs):
        """
        Record something a player asked for: a new game, a key press, a guess.

        Args:
            request: the HTTP or Socket.IO request that carried the action
            action: short action name, e.g. 'key_press' or 'submit_guess'
            game_id: the game the action targets, if any
            **kwargs: extra fields such as the key pressed
        """
        details = {
            'game_id': game_id,
            'endpoint': getattr(request, 'endpoint', None),
            'method': getattr(request, 'method', None),
            **kwargs
        }
        self.logger.info(self._record('USER_ACTION', action, get_user_identity(request), details))

    def log_server_response(self, request, action: str, success: bool,
                            response_data: Dict[str, Any], game_id: Optional[str] = None, **kwargs):
        """
        Record the reply to a player action.

        Rejected guesses and other failures are written at ERROR level. The
        board and keyboard are summarised rather than dumped.
        """
        details = {
            'game_id': game_id,
            'success': success,
            'response_size': len(str(response_data)),
            'response_data': self._summarize(response_data),
            **kwargs
        }
        event_type = 'SERVER_RESPONSE_SUCCESS' if success else 'SERVER_RESPONSE_ERROR'
        level = logging.INFO if success else logging.ERROR
        self.logger.log(level, self._record(event_type, action, get_user_identity(request), details))

    def log_game_event(self, game_id: Optional[str], event: str, user_ip: Optional[str], **kwargs):
        """Record a game milestone: 'game_won', 'game_lost', 'game_reset' or 'game_deleted'."""
        player = {'user_ip': user_ip or 'unknown', 'session_id': None}
        self.logger.info(self._record('GAME_EVENT', event, player, {'game_id': game_id, **kwargs}))

    def log_error(self, request, error: Exception, action: str, game_id: Optional[str] = None):
        """Record an unexpected exception raised while handling a player action."""
        details = {
            'game_id': game_id,
            'error_type': type(error).__name__,
            'error_message': str(error),
            'action': action
        }
        self.logger.error(self._record('ERROR', action, get_user_identity(request), details))

    def _summarize(self, data: Dict[str, Any]) -> Dict[str, Any]:
        if not isinstance(data, dict):
            return {'data_type': type(data).__name__}

        summary = data.copy()
        state = summary.get('state')
        if isinstance(state, dict):
            summary['state'] = {
                'current_row': state.get('current_row'),
                'max_rounds': state.get('max_rounds'),
                'status': state.get('status'),
                'guesses_count': len(state.get('guesses', [])),
                'buffer_length': len(state.get('current_guess', '')),
                'message': state.get('message'),
                'answer_revealed': state.get('answer') is not None
            }
        return summary

    def get_log_stats(self) -> Dict[str, Any]:
        """Counts of each record type in today's log file, for the health endpoint."""
        log_file = self.log_file
        if not log_file.exists():
            return {'error': 'No log file found for today'}

        stats = {
            'log_file': str(log_file),
            'file_size_mb': round(log_file.stat().st_size / (1024 * 1024), 2),
            'total_entries': 0,
        }
        stats.update({name: 0 for _, name in _STAT_KEYS})

        try:
            with open(log_file, 'r', encoding='utf-8') as f:
                for line in filter(str.strip, f):
                    stats['total_entries'] += 1
                    name = next((name for marker, name in _STAT_KEYS if marker in line), None)
                    if name:
                        stats[name] += 1
        except OSError as e:
            return {'error': f'Failed to get stats: {e}'}

        return stats


game_logger = GameLogger(Config.LOG_DIR, Config.LOG_LEVEL)
