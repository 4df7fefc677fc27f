import logging
import random
from collections import Counter
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Sequence, Tuple, Union

logger = logging.getLogger(__name__)

WORD_LEN = 4
MAX_GUESSES = 5

EXACT, MISPLACED, ABSENT = "1", "0", "-"


class ErrorKind(Enum):
    EMPTY_DICTIONARY = "empty_dictionary"
    INVALID_TARGET_WORD = "invalid_target_word"
    GAME_NOT_INITIALIZED = "game_not_initialized"
    GUESS_NOT_IN_DICTIONARY = "guess_not_in_dictionary"
    GAME_ALREADY_OVER = "game_already_over"
    INVALID_GUESS_LENGTH = "invalid_guess_length"
    NO_DICTIONARY_LOADED = "no_dictionary_loaded"


class GuessStatus(Enum):
    WON = "won"
    CONTINUE = "continue"
    LOST = "lost"
    ERROR = "error"


@dataclass(frozen=True)
class GameResult:
    """Outcome of initialize_game / new_game."""
    ok: bool
    message: str
    error: Optional[ErrorKind] = None


@dataclass(frozen=True)
class GuessResult:
    """Outcome of a single guess. Errors carry no hint."""
    status: GuessStatus
    message: str
    hint: Optional[str] = None
    error: Optional[ErrorKind] = None

    @property
    def is_error(self) -> bool:
        return self.status is GuessStatus.ERROR


@dataclass
class GameState:
    dictionary: List[str] = field(default_factory=list)
    target_word: Optional[List[str]] = None
    guesses_remaining: int = MAX_GUESSES
    game_over: bool = False
    won: bool = False

    # history of processed guesses, only used for rendering the board
    guesses: List[str] = field(default_factory=list)
    hints: List[str] = field(default_factory=list)

    @property
    def turn(self) -> int:
        return len(self.guesses)

    def copy(self) -> "GameState":
        return GameState(
            dictionary=list(self.dictionary),
            target_word=list(self.target_word) if self.target_word is not None else None,
            guesses_remaining=self.guesses_remaining,
            game_over=self.game_over,
            won=self.won,
            guesses=list(self.guesses),
            hints=list(self.hints),
        )


def validate_dictionary(dictionary: Sequence[str]) -> List[str]:
    """
    Keeps only the words that are exactly WORD_LEN characters long, in order.

    A word also has to stay WORD_LEN characters once lower-cased; some letters
    (e.g. "İ") lower-case to two codepoints.
    """
    return [word for word in dictionary if len(word) == WORD_LEN and len(word.lower()) == WORD_LEN]


def _validate_target_word(target_word: Union[str, Sequence[str]]) -> Optional[List[str]]:
    # the target can be given as "test" or ["t", "e", "s", "t"]
    word = target_word if isinstance(target_word, str) else "".join(target_word)
    if len(word) != WORD_LEN or len(word.lower()) != WORD_LEN:
        return None
    return list(word.lower())


def _draw_target(dictionary: Sequence[str], rng: Optional[random.Random]) -> List[str]:
    chooser = rng or random
    return list(chooser.choice(dictionary).lower())


def initialize_game(
    dictionary: Sequence[str],
    target_word: Optional[Union[str, Sequence[str]]] = None,
    rng: Optional[random.Random] = None,
) -> Tuple[GameResult, Optional[GameState]]:
    """
    Builds a fresh game from a dictionary of candidate words.

    Args:
        dictionary (Sequence[str]): Candidate words; anything that is not 4 characters is dropped.
        target_word (str | Sequence[str]): Optional secret word to use instead of a random one.
        rng (random.Random): Source used to draw the target. Defaults to the module-level random.

    Returns:
        Tuple[GameResult, Optional[GameState]]: The result and, on success, the new state.
        The caller replaces its whole state with the returned one.
    """
    valid_words = validate_dictionary(dictionary)
    if not valid_words:
        return GameResult(False, "Dictionary must contain at least one 4-letter word", ErrorKind.EMPTY_DICTIONARY), None

    if target_word is not None:
        target = _validate_target_word(target_word)
        if target is None:
            return GameResult(False, "Target word, when supplied, must be 4 letters", ErrorKind.INVALID_TARGET_WORD), None
    else:
        target = _draw_target(valid_words, rng)

    state = GameState(dictionary=valid_words, target_word=target)
    logger.debug("initialized game with %d words, target=%s", len(valid_words), "".join(target))
    return GameResult(True, f"Game initialized with {len(valid_words)} words"), state


def new_game(state: GameState, rng: Optional[random.Random] = None) -> GameResult:
    """Picks a new target from the loaded dictionary and resets the counters in place."""
    if not state.dictionary:
        return GameResult(False, "No dictionary loaded. Call initialize_game() first.", ErrorKind.NO_DICTIONARY_LOADED)

    state.target_word = _draw_target(state.dictionary, rng)
    state.guesses_remaining = MAX_GUESSES
    state.game_over = False
    state.won = False
    state.guesses = []
    state.hints = []
    logger.debug("new game started, target=%s", "".join(state.target_word))
    return GameResult(True, "New game started")


def generate_hint(target_word: Sequence[str], guess: str) -> str:
    """
    Scores a guess against the target.

    "1" marks a correct letter in the correct position, "0" a letter that is in
    the target somewhere else, and "-" a letter that is not (or no longer) available.
    Each target letter can be credited to at most one guess position.
    """
    guess_chars = list(guess.lower())
    hint = [ABSENT] * len(guess_chars)

    # letters of the target not yet claimed by a guess position
    remaining = Counter(target_word)

    # exact matches first, so they can't be stolen by an earlier misplaced letter
    for i, (target_char, guess_char) in enumerate(zip(target_word, guess_chars)):
        if target_char == guess_char:
            hint[i] = EXACT
            remaining[guess_char] -= 1

    for i, guess_char in enumerate(guess_chars):
        if hint[i] == EXACT:
            continue
        if remaining[guess_char] > 0:
            hint[i] = MISPLACED
            remaining[guess_char] -= 1

    return "".join(hint)


def score_guess(target_word: Sequence[str], guess: str) -> Union[str, ErrorKind]:
    """Older entry point: like generate_hint, but refuses guesses of the wrong length."""
    if len(guess) != len(target_word):
        return ErrorKind.INVALID_GUESS_LENGTH
    return generate_hint(target_word, guess)


def _error(kind: ErrorKind, message: str) -> GuessResult:
    return GuessResult(GuessStatus.ERROR, message, error=kind)


def process_guess(state: GameState, guess: str) -> GuessResult:
    """
    Applies a guess to the state. Guards run in a fixed order and the first
    failing one wins; a rejected guess never consumes a turn.
    """
    if state.target_word is None:
        return _error(ErrorKind.GAME_NOT_INITIALIZED, "Game not initialized. Call initialize_game() first.")
    # membership is checked against the exact stored strings
    if guess not in state.dictionary:
        return _error(ErrorKind.GUESS_NOT_IN_DICTIONARY, "Guess must be in the dictionary")
    if state.game_over:
        return _error(ErrorKind.GAME_ALREADY_OVER, "Game is over. Start a new game.")
    if len(guess) != WORD_LEN:
        return _error(ErrorKind.INVALID_GUESS_LENGTH, f"Guess must be exactly {WORD_LEN} letters")

    hint = generate_hint(state.target_word, guess)
    is_correct = list(guess.lower()) == state.target_word

    state.guesses_remaining -= 1
    state.game_over = is_correct or state.guesses_remaining == 0
    state.won = is_correct
    state.guesses.append(guess)
    state.hints.append(hint)
    logger.debug("guess %r scored %s, %d left", guess, hint, state.guesses_remaining)

    if is_correct:
        return GuessResult(GuessStatus.WON, "Congratulations! You guessed the word!", hint)
    if state.guesses_remaining == 0:
        return GuessResult(GuessStatus.LOST, f"Game over! The word was '{''.join(state.target_word)}'", hint)
    return GuessResult(GuessStatus.CONTINUE, f"{state.guesses_remaining} guesses remaining", hint)


def get_letter_states(state: GameState) -> dict:
    """
    Returns a mapping from every letter a-z to its best known state
    (correct, present, absent, unused) across the guesses so far.
    """
    # absent -> present -> correct, a letter only ever gets promoted
    rank = {"unused": 0, "absent": 1, "present": 2, "correct": 3}
    names = {EXACT: "correct", MISPLACED: "present", ABSENT: "absent"}

    letters = {letter: "unused" for letter in "abcdefghijklmnopqrstuvwxyz"}
    for guess, hint in zip(state.guesses, state.hints):
        for letter, mark in zip(guess.lower(), hint):
            if letter not in letters:
                continue
            new_state = names[mark]
            if rank[new_state] > rank[letters[letter]]:
                letters[letter] = new_state
    return letters
