"""
Game Configuration Constants Module

This module defines the game constants: board size, the Arabic on-screen
keyboard, the English-to-Arabic key map, the player-facing messages and
the word list shipped in words.json.
"""

import json
import os
from typing import Dict, List, Final, Optional

# Core Game Configuration Constants
MAX_ROUNDS: Final[int] = 6
"""
Maximum number of guess attempts allowed per game.
Type: Final[int] - Immutable to prevent accidental modification
"""

WORD_LENGTH: Final[int] = 5

# On-screen keyboard, one list per row, right-to-left reading order
ARABIC_KEYBOARD_ROWS: Final[List[List[str]]] = [
    ["د", "ج", "ح", "خ", "ه", "ع", "غ", "ف", "ق", "ث", "ص", "ض", "ذ"],
    ["ط", "ك", "م", "ن", "ت", "ا", "ل", "ب", "ي", "س", "ش"],
    ["ظ", "ز", "و", "ة", "ى", "لا", "ر", "ؤ", "ء", "ئ"],
]

ENTER_KEY: Final[str] = "Enter"
BACKSPACE_KEY: Final[str] = "Backspace"
ENTER_LABEL: Final[str] = "إدخال"
BACKSPACE_LABEL: Final[str] = "حذف"

# Standard Arabic (101) layout: physical English key -> Arabic letter(s)
ENGLISH_TO_ARABIC_MAP: Final[Dict[str, str]] = {
    "`": "ذ",
    "q": "ض", "w": "ص", "e": "ث", "r": "ق", "t": "ف", "y": "غ",
    "u": "ع", "i": "ه", "o": "خ", "p": "ح", "[": "ج", "]": "د",
    "a": "ش", "s": "س", "d": "ي", "f": "ب", "g": "ل", "h": "ا",
    "j": "ت", "k": "ن", "l": "م", ";": "ك", "'": "ط",
    "z": "ئ", "x": "ء", "c": "ؤ", "v": "ر", "b": "لا", "n": "ى",
    "m": "ة", ",": "و", ".": "ز", "/": "ظ",
}

# Player-facing messages
MESSAGE_WRONG_LENGTH: Final[str] = "يجب أن تكون الكلمة من 5 أحرف"
MESSAGE_NOT_IN_LIST: Final[str] = "كلمة غير صحيحة"
MESSAGE_WON: Final[str] = "أحسنت! لقد فزت!"
MESSAGE_LOST: Final[str] = "انتهت المحاولات. الكلمة الصحيحة: {answer}"

KEYBOARD_LETTERS: Final[frozenset] = frozenset(
    char for row in ARABIC_KEYBOARD_ROWS for key in row for char in key
)


def _load_word_list(json_file_path: Optional[str] = None) -> List[str]:
    """
    Load word list from words.json file (or the given path).

    Returns:
        List[str]: List of 5-letter Arabic words

    Raises:
        FileNotFoundError: If words.json file is not found
        ValueError: If the JSON is malformed, the list is empty or holds invalid words
    """
    if json_file_path is None:
        config_dir = os.path.dirname(os.path.abspath(__file__))
        json_file_path = os.path.join(config_dir, "words.json")

    try:
        with open(json_file_path, 'r', encoding='utf-8') as f:
            word_list = json.load(f)
    except FileNotFoundError:
        raise FileNotFoundError(f"Word list file not found: {json_file_path}")
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in words.json: {e}")

    if not isinstance(word_list, list):
        raise ValueError("JSON file must contain an array of words")

    if not word_list:
        raise ValueError("Word list cannot be empty")

    words = [word.strip() for word in word_list]
    for word in words:
        if len(word) != WORD_LENGTH:
            raise ValueError(f"Word '{word}' is not {WORD_LENGTH} characters long")
        if not all(char in KEYBOARD_LETTERS for char in word):
            raise ValueError(f"Word '{word}' contains letters missing from the keyboard")

    return words


# Curated Word Database loaded from JSON file
WORD_LIST: Final[List[str]] = _load_word_list()


def validate_word_list_integrity(word_list: List[str] = WORD_LIST) -> bool:
    """
    Validates the integrity and consistency of the word database.

    This function performs validation to ensure:
    1. Length validation: All words must be exactly 5 characters
    2. Character validation: Only letters present on the Arabic keyboard
    3. Uniqueness validation: No duplicate entries

    Returns:
        bool: True if word list passes all validation checks

    Raises:
        ValueError: If any validation check fails with detailed error message
    """
    if not word_list:
        raise ValueError("Word list cannot be empty")

    for index, word in enumerate(word_list):
        if len(word) != WORD_LENGTH:
            raise ValueError(f"Word at index {index} '{word}' is not {WORD_LENGTH} characters long")

        if not word.isalpha() or not all(char in KEYBOARD_LETTERS for char in word):
            raise ValueError(f"Word at index {index} '{word}' contains letters missing from the keyboard")

    if len(word_list) != len(set(word_list)):
        duplicates = sorted({word for word in word_list if word_list.count(word) > 1})
        raise ValueError(f"Duplicate words found in word list: {duplicates}")

    return True


def get_word_statistics(word_list: List[str] = WORD_LIST) -> dict:
    """
    Analyzes the word list and returns letter distribution figures.

    Returns:
        dict: total_words, letter_frequency and the five most common letters
    """
    if not word_list:
        return {"error": "Word list is empty"}

    letter_frequency = {}
    for word in word_list:
        for char in word:
            letter_frequency[char] = letter_frequency.get(char, 0) + 1

    return {
        "total_words": len(word_list),
        "letter_frequency": letter_frequency,
        "most_common_letters": sorted(letter_frequency.items(), key=lambda x: x[1], reverse=True)[:5]
    }


if __name__ == "__main__":

    try:
        validate_word_list_integrity()
        print(" Word list validation passed")

        stats = get_word_statistics()
        print(f" Word statistics: {stats}")
    except ValueError as config_error:
        print(f" Configuration validation failed: {config_error}")
        exit(1)
