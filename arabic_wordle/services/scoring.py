"""
Guess Scoring

Letter evaluation for a single guess and aggregation of letter statuses
across all submitted guesses for the on-screen keyboard.
"""

from typing import Dict, Iterable, List, Optional

from ..models.game import LetterStatus


def score_guess(guess: str, target: str, canonical: bool = False) -> List[LetterStatus]:
    """
    Evaluates each position of a guess against the target word.

    The default rule marks a letter PRESENT whenever it occurs anywhere in
    the target, so a letter guessed twice but present once is PRESENT at
    both positions. With ``canonical`` set, present letters consume target
    letters the way the standard Wordle algorithm does.

    Args:
        guess: Submitted word
        target: Secret word of the same length

    Returns:
        List of LetterStatus, one per position
    """
    if len(guess) != len(target):
        raise ValueError("Guess length must match the target length")

    if canonical:
        return _score_canonical(guess, target)

    result = []
    for i, letter in enumerate(guess):
        if letter == target[i]:
            result.append(LetterStatus.CORRECT)
        elif letter in target:
            result.append(LetterStatus.PRESENT)
        else:
            result.append(LetterStatus.ABSENT)
    return result


def _score_canonical(guess: str, target: str) -> List[LetterStatus]:
    result: List[Optional[LetterStatus]] = []

    # Working copy of the target to track letter consumption
    target_chars: List[Optional[str]] = list(target)

    # First pass: exact position matches
    for i, letter in enumerate(guess):
        if letter == target[i]:
            result.append(LetterStatus.CORRECT)
            target_chars[i] = None
        else:
            result.append(None)

    # Second pass: present letters and misses
    for i, letter in enumerate(guess):
        if result[i] is not None:
            continue
        if letter in target_chars:
            result[i] = LetterStatus.PRESENT
            target_chars[target_chars.index(letter)] = None
        else:
            result[i] = LetterStatus.ABSENT

    return result  # type: ignore[return-value]


def aggregate_key_status(guesses: Iterable[str], target: str,
                         canonical: bool = False) -> Dict[str, LetterStatus]:
    """
    Best status seen for every guessed letter (correct > present > absent).

    Letters that were never guessed are left out of the mapping.
    """
    key_status: Dict[str, LetterStatus] = {}
    for guess in guesses:
        for letter, status in zip(guess, score_guess(guess, target, canonical)):
            current = key_status.get(letter)
            if current is None or status.priority > current.priority:
                key_status[letter] = status
    return key_status
