"""
Game Service

Owns the in-memory game sessions and drives them through the state machine.
"""

import random
import uuid
from dataclasses import replace
from typing import Dict, Optional, Tuple

from ..config.game_settings import MAX_ROUNDS
from ..models.game import GameState, GameStatus, GameView, InputAction, InputEvent
from . import state_machine
from .input_handler import parse_key
from .renderer import render_grid, render_keyboard
from .scoring import aggregate_key_status, score_guess
from .word_source import WordSource


class GameService:
    """
    Core game service managing multiple game sessions.

    This class handles:
    - Game session management with unique game IDs
    - Target word selection (word of the day or random)
    - Routing key presses and guesses through the state machine
    - Building client views without exposing answers before the game ends
    """

    def __init__(self, word_source: Optional[WordSource] = None, word_mode: str = "daily",
                 scoring_mode: str = "simple", max_rounds: int = MAX_ROUNDS,
                 rng: Optional[random.Random] = None):
        if word_mode not in ("daily", "random"):
            raise ValueError(f"Unknown word mode: {word_mode}")
        if scoring_mode not in ("simple", "canonical"):
            raise ValueError(f"Unknown scoring mode: {scoring_mode}")

        self.games: Dict[str, GameState] = {}  # Store active games by game_id
        self.word_source = word_source or WordSource()
        self.word_mode = word_mode
        self.canonical = scoring_mode == "canonical"
        self.max_rounds = max_rounds
        self.rng = rng or random.Random()

    def _choose_target(self) -> str:
        if self.word_mode == "random":
            return self.word_source.random_word(self.rng)
        return self.word_source.get_word_of_the_day()

    def create_new_game(self) -> str:
        """
        Creates a new game session.

        Returns:
            str: Unique game ID for this session
        """
        game_id = str(uuid.uuid4())
        self.games[game_id] = state_machine.new_game(self._choose_target())
        return game_id

    def get_state(self, game_id: str) -> Optional[GameState]:
        """Raw snapshot for a session, answer included. Server-side use only."""
        return self.games.get(game_id)

    def get_game_state(self, game_id: str) -> Optional[GameView]:
        """
        Returns the client view of a session (without revealing the answer).

        Args:
            game_id: Unique game identifier

        Returns:
            GameView object or None if game not found
        """
        state = self.games.get(game_id)
        if state is None:
            return None

        guess_results = []
        for guess in state.guesses:
            statuses = score_guess(guess, state.target_word, self.canonical)
            guess_results.append([(letter, status.value) for letter, status in zip(guess, statuses)])

        letter_status = {
            letter: status.value
            for letter, status in aggregate_key_status(state.guesses, state.target_word, self.canonical).items()
        }

        return GameView(
            game_id=game_id,
            current_row=state.current_row,
            max_rounds=self.max_rounds,
            status=state.status.value,
            game_over=state.is_over,
            won=state.status is GameStatus.WON,
            guesses=list(state.guesses),
            guess_results=guess_results,
            letter_status=letter_status,
            current_guess=state.current_guess,
            message=state.message,
            grid=render_grid(state, self.canonical, self.max_rounds),
            keyboard=render_keyboard(state, self.canonical),
            answer=state.target_word if state.is_over else None
        )

    def press_key(self, game_id: str, key: str) -> Optional[GameView]:
        """
        Applies a physical or on-screen key press to a session.

        Unknown keys and any key after the game has ended leave the state as is.

        Returns:
            Updated GameView or None if game not found
        """
        state = self.games.get(game_id)
        if state is None:
            return None

        event = parse_key(key)
        if event is not None:
            self.games[game_id] = state_machine.apply_event(
                state, event, self.word_source.all_words, self.max_rounds
            )
        return self.get_game_state(game_id)

    def is_valid_guess(self, game_id: str, guess: str) -> Tuple[bool, str]:
        """
        Validates a whole-word guess for a specific game session.

        Returns:
            Tuple of (is_valid, error_message)
        """
        state = self.games.get(game_id)
        if state is None:
            return False, "Game not found"

        if state.is_over:
            return False, "Game is already over"

        if not guess or not isinstance(guess, str):
            return False, "Guess must be a valid string"

        error = state_machine.validate_guess(guess.strip(), self.word_source.all_words)
        return not error, error

    def submit_guess(self, game_id: str, guess: str) -> Optional[GameView]:
        """
        Submits a whole word in place of the typed buffer.

        A rejected word only sets the validation message; whatever the player
        had typed stays in the buffer. An accepted word goes through the same
        submit transition as typing it and pressing Enter.

        Returns:
            Updated GameView or None if game not found or already over
        """
        state = self.games.get(game_id)
        if state is None or state.is_over or not isinstance(guess, str):
            return None

        guess = guess.strip()
        error = state_machine.validate_guess(guess, self.word_source.all_words)
        if error:
            self.games[game_id] = replace(state, message=error)
            return self.get_game_state(game_id)

        state = replace(state, current_guess=guess)
        self.games[game_id] = state_machine.apply_event(
            state, InputEvent(InputAction.SUBMIT), self.word_source.all_words, self.max_rounds
        )
        return self.get_game_state(game_id)

    def reset_game(self, game_id: str) -> Optional[GameView]:
        """
        Starts the session over with a fresh target, empty history and buffer.

        Returns:
            New GameView or None if game not found
        """
        if game_id not in self.games:
            return None
        self.games[game_id] = state_machine.reset(self._choose_target())
        return self.get_game_state(game_id)

    def delete_game(self, game_id: str) -> bool:
        """
        Removes a game session from memory.

        Returns:
            bool: True if game was deleted, False if not found
        """
        if game_id in self.games:
            del self.games[game_id]
            return True
        return False


# Global service instance
_game_service = None


def get_game_service() -> Optional[GameService]:
    """Get the global game service instance."""
    return _game_service


def initialize_game_service(config_class=None) -> GameService:
    """Initialize the global game service instance from a config class."""
    global _game_service

    if config_class is None:
        from ..config import Config
        config_class = Config

    _game_service = GameService(
        word_source=WordSource(epoch=config_class.WORD_EPOCH),
        word_mode=config_class.WORD_MODE,
        scoring_mode=config_class.SCORING_MODE,
        max_rounds=config_class.MAX_ROUNDS,
    )
    return _game_service
