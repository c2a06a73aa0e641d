"""
Board Renderer

Turns a GameState into the grid and keyboard view models the browser
client draws. Presentation data only, no styling.
"""

from typing import Dict, List, Optional

from ..config.game_settings import (
    MAX_ROUNDS, WORD_LENGTH, ARABIC_KEYBOARD_ROWS,
    ENTER_KEY, BACKSPACE_KEY, ENTER_LABEL, BACKSPACE_LABEL
)
from ..models.game import GameState
from .scoring import aggregate_key_status, score_guess


def render_grid(state: GameState, canonical: bool = False,
                max_rounds: int = MAX_ROUNDS) -> List[List[Dict[str, Optional[str]]]]:
    """
    Builds the rows x WORD_LENGTH grid of cells.

    Submitted rows carry a status per cell, the active row shows the typed
    letters without status, and remaining rows are blank.
    """
    grid = []
    for row_index in range(max_rounds):
        if row_index < len(state.guesses):
            word = state.guesses[row_index]
            statuses = [s.value for s in score_guess(word, state.target_word, canonical)]
        elif row_index == len(state.guesses) and not state.is_over:
            word = state.current_guess
            statuses = []
        else:
            word = ""
            statuses = []

        row = []
        for position in range(WORD_LENGTH):
            row.append({
                "letter": word[position] if position < len(word) else "",
                "status": statuses[position] if statuses else None,
            })
        grid.append(row)
    return grid


def render_keyboard(state: GameState, canonical: bool = False) -> List[List[Dict]]:
    """
    Builds the on-screen keyboard rows with each key's best known status.

    Enter sits at the start of the last row and Backspace at its end. Keys
    made of more than one letter carry no status.
    """
    key_status = aggregate_key_status(state.guesses, state.target_word, canonical)
    disabled = state.is_over

    keyboard = []
    last_row = len(ARABIC_KEYBOARD_ROWS) - 1
    for row_index, row in enumerate(ARABIC_KEYBOARD_ROWS):
        keys = []
        if row_index == last_row:
            keys.append({"key": ENTER_KEY, "label": ENTER_LABEL, "status": None, "disabled": disabled})

        for key in row:
            status = key_status.get(key) if len(key) == 1 else None
            keys.append({
                "key": key,
                "label": key,
                "status": status.value if status else None,
                "disabled": disabled,
            })

        if row_index == last_row:
            keys.append({"key": BACKSPACE_KEY, "label": BACKSPACE_LABEL, "status": None, "disabled": disabled})
        keyboard.append(keys)
    return keyboard
