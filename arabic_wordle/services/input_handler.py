"""
Input Handler

Normalizes physical key names and on-screen key presses into InputEvents.
"""

from typing import Optional

from ..config.game_settings import ENTER_KEY, BACKSPACE_KEY, ENGLISH_TO_ARABIC_MAP, ARABIC_KEYBOARD_ROWS
from ..models.game import InputAction, InputEvent

# Every key of the on-screen keyboard; "لا" is the only one with two letters
KEYBOARD_KEYS = frozenset(key for row in ARABIC_KEYBOARD_ROWS for key in row)


def parse_key(key: Optional[str]) -> Optional[InputEvent]:
    """
    Maps a key name to an InputEvent.

    Accepts ``Enter``, ``Backspace``, a single key of the Arabic on-screen
    keyboard (including the two-letter key "لا") and English keys of the
    Arabic keyboard layout. Strings of several letters are not key presses.

    Returns:
        InputEvent, or None when the key has no meaning in the game
    """
    if not key or not isinstance(key, str):
        return None

    if key == ENTER_KEY:
        return InputEvent(InputAction.SUBMIT)
    if key == BACKSPACE_KEY:
        return InputEvent(InputAction.DELETE)

    if key in KEYBOARD_KEYS:
        return InputEvent(InputAction.APPEND, key)

    mapped = ENGLISH_TO_ARABIC_MAP.get(key.lower())
    if mapped:
        return InputEvent(InputAction.APPEND, mapped)

    return None
