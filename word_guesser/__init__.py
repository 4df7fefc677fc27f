from .game import (
    ErrorKind,
    GameResult,
    GameState,
    GuessResult,
    GuessStatus,
    generate_hint,
    score_guess,
)
from .session import GameSession, load_word_list
from .render import TextUI

__all__ = [
    "ErrorKind",
    "GameResult",
    "GameState",
    "GuessResult",
    "GuessStatus",
    "GameSession",
    "TextUI",
    "generate_hint",
    "score_guess",
    "load_word_list",
]
