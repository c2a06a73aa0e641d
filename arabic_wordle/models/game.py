"""
Game Data Models

Contains all game-related data structures and enums.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Tuple


class LetterStatus(Enum):
    """Per-position evaluation of a guessed letter."""
    CORRECT = "correct"
    PRESENT = "present"
    ABSENT = "absent"

    @property
    def priority(self) -> int:
        return _LETTER_PRIORITY[self]


_LETTER_PRIORITY = {
    LetterStatus.CORRECT: 2,
    LetterStatus.PRESENT: 1,
    LetterStatus.ABSENT: 0,
}


class GameStatus(Enum):
    """Overall game outcome. Only moves forward until a reset."""
    PLAYING = "playing"
    WON = "won"
    LOST = "lost"


class InputAction(Enum):
    APPEND = "append"
    DELETE = "delete"
    SUBMIT = "submit"


@dataclass(frozen=True)
class InputEvent:
    """A normalized key press consumed by the game reducer."""
    action: InputAction
    letters: str = ""


@dataclass(frozen=True)
class GameState:
    """
    Immutable snapshot of one game.

    Every transition builds a new instance; the previous snapshot is never
    mutated.
    """
    target_word: str
    guesses: Tuple[str, ...] = ()
    current_guess: str = ""
    current_row: int = 0
    status: GameStatus = GameStatus.PLAYING
    message: str = ""

    @property
    def is_over(self) -> bool:
        return self.status is not GameStatus.PLAYING


@dataclass
class GameView:
    """Client-facing game state representation (answer hidden until game over)."""
    game_id: str
    current_row: int
    max_rounds: int
    status: str
    game_over: bool
    won: bool
    guesses: List[str]
    guess_results: List[List[Tuple[str, str]]]  # Letter status as string for JSON serialization
    letter_status: Dict[str, str]
    current_guess: str
    message: str
    grid: List[List[Dict[str, Optional[str]]]] = field(default_factory=list)
    keyboard: List[List[Dict]] = field(default_factory=list)
    answer: Optional[str] = None  # Only included when game is over
