"""
Game State Machine

Pure transition functions over immutable GameState snapshots. Nothing in
this module mutates its input; callers replace their stored snapshot with
the returned one.
"""

from dataclasses import replace
from typing import Container

from ..config.game_settings import (
    MAX_ROUNDS, WORD_LENGTH,
    MESSAGE_WRONG_LENGTH, MESSAGE_NOT_IN_LIST, MESSAGE_WON, MESSAGE_LOST
)
from ..models.game import GameState, GameStatus, InputAction, InputEvent


def new_game(target_word: str) -> GameState:
    """Fresh game: playing, empty history and buffer, first row."""
    if len(target_word) != WORD_LENGTH:
        raise ValueError(f"Target word must be {WORD_LENGTH} characters long")
    return GameState(target_word=target_word)


# A reset is indistinguishable from starting over with a new target
reset = new_game


def validate_guess(guess: str, dictionary: Container[str]) -> str:
    """
    Returns the validation message for a guess, or an empty string if valid.
    """
    if len(guess) != WORD_LENGTH:
        return MESSAGE_WRONG_LENGTH
    if guess not in dictionary:
        return MESSAGE_NOT_IN_LIST
    return ""


def append_letters(state: GameState, letters: str) -> GameState:
    if state.is_over or not letters:
        return state
    if len(state.current_guess) + len(letters) > WORD_LENGTH:
        return state
    return replace(state, current_guess=state.current_guess + letters)


def delete_letter(state: GameState) -> GameState:
    if state.is_over or not state.current_guess:
        return state
    return replace(state, current_guess=state.current_guess[:-1])


def submit_guess(state: GameState, dictionary: Container[str],
                 max_rounds: int = MAX_ROUNDS) -> GameState:
    """
    Submits the buffered guess.

    Invalid guesses leave history and buffer untouched and only set the
    message. A valid guess is appended to the history and the game is won,
    lost or moved on to the next row.
    """
    if state.is_over:
        return state

    guess = state.current_guess
    error = validate_guess(guess, dictionary)
    if error:
        return replace(state, message=error)

    guesses = state.guesses + (guess,)

    if guess == state.target_word:
        return replace(state, guesses=guesses, current_guess="",
                       status=GameStatus.WON, message=MESSAGE_WON)

    if len(guesses) >= max_rounds:
        return replace(state, guesses=guesses, current_guess="",
                       status=GameStatus.LOST,
                       message=MESSAGE_LOST.format(answer=state.target_word))

    return replace(state, guesses=guesses, current_guess="",
                   current_row=state.current_row + 1, message="")


def apply_event(state: GameState, event: InputEvent, dictionary: Container[str],
                max_rounds: int = MAX_ROUNDS) -> GameState:
    """Reducer: the single entry point for input events."""
    if state.is_over:
        return state

    if event.action is InputAction.SUBMIT:
        return submit_guess(state, dictionary, max_rounds)
    if event.action is InputAction.DELETE:
        return delete_letter(state)
    return append_letters(state, event.letters)
