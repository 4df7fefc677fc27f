import argparse
import logging
import random
import threading
import uuid
from pathlib import Path
from typing import List, Optional, Sequence, Union

from . import game
from .config import DEFAULT_WORD_LIST_PATH, RENDER_MODES, load_settings
from .game import GameResult, GameState, GuessResult
from .render import TextUI, colored, render_board_screenshot

logger = logging.getLogger(__name__)


def load_word_list(path: Path) -> List[str]:
    """Reads a newline-delimited word list, skipping blank lines."""
    if not path.is_file():
        raise FileNotFoundError(f"Error: Word list not found at '{path}'")
    with open(path, 'r') as f:
        return [line.strip() for line in f if line.strip()]


class GameSession:
    """
    One player's game. Every operation holds the session lock for its whole
    read-check-write sequence, so concurrent callers see guesses applied one at a time.
    Separate sessions share nothing.
    """

    def __init__(self, word_list_path: Optional[Path] = None, rng: Optional[random.Random] = None):
        """
        Args:
            word_list_path (Path): Word list used when initialize_game() is called without a dictionary.
            rng (random.Random): Source for picking target words. Pass a seeded one for reproducible games.
        """
        self.word_list_path = word_list_path or DEFAULT_WORD_LIST_PATH
        self.rng = rng or random.Random()
        self.session_id = str(uuid.uuid4())

        self._lock = threading.Lock()
        self._state = GameState()

    def initialize_game(
        self,
        dictionary: Optional[Sequence[str]] = None,
        target_word: Optional[Union[str, Sequence[str]]] = None,
    ) -> GameResult:
        # the file read happens outside the lock
        if dictionary is None:
            dictionary = load_word_list(self.word_list_path)

        with self._lock:
            result, state = game.initialize_game(dictionary, target_word, rng=self.rng)
            if state is not None:
                self._state = state
        logger.info("session %s: %s", self.session_id, result.message)
        return result

    def user_guess(self, guess: str) -> GuessResult:
        with self._lock:
            return game.process_guess(self._state, guess)

    def new_game(self) -> GameResult:
        with self._lock:
            result = game.new_game(self._state, rng=self.rng)
        logger.info("session %s: %s", self.session_id, result.message)
        return result

    def get_state(self) -> GameState:
        """Returns a copy of the current state; changing it does not affect the session."""
        with self._lock:
            return self._state.copy()


def play_interactive(
    session: GameSession,
    dictionary: Optional[Sequence[str]] = None,
    target_word: Optional[str] = None,
    render_mode: str = 'text',
    screenshot_dir: Optional[Path] = None,
) -> GameState:
    """Runs one game against stdin/stdout and returns the final state."""
    ui = TextUI()
    init = session.initialize_game(dictionary, target_word)
    if not init.ok:
        print(colored(init.message, "red"))
        return session.get_state()

    ui.print_welcome(init.message)

    while True:
        state = session.get_state()
        if state.game_over:
            ui.print_game_over(state)
            print("Thanks for playing! 🎮")
            return state

        try:
            guess = ui.get_input(state)
        except (KeyboardInterrupt, EOFError):
            print("\n\nExiting game.")
            return session.get_state()

        if not guess: continue

        result = session.user_guess(guess)
        ui.print_result(result)

        state = session.get_state()
        if not result.is_error:
            print(ui.get_text_observation(state))
            if render_mode == 'image':
                output_path = screenshot_dir / f"turn_{state.turn}.png" if screenshot_dir else None
                render_board_screenshot(state, status=result.message, output_path=output_path)


def main():
    """Play a game from the command line."""
    parser = argparse.ArgumentParser(
        description="Guess the 4-letter word in 5 tries.",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter
    )
    parser.add_argument('target', nargs='?', default=None, help="Secret word to play against (useful for testing).")
    parser.add_argument('--dictionary', type=Path, default=None, help="Newline-delimited word list. Defaults to WORD_GUESSER_WORDS or the bundled list.")
    parser.add_argument('--render-mode', type=str, default=None, choices=RENDER_MODES, help="'image' also saves a screenshot of the board after every guess.")
    parser.add_argument('--screenshot-dir', type=Path, default=None, help="Where to save screenshots in image mode.")
    args = parser.parse_args()

    try:
        settings = load_settings()
    except ValueError as e:
        print(e)
        exit(1)

    logging.basicConfig(
        level=settings.log_level,
        format='%(asctime)s | %(levelname)-8s | %(name)s | %(message)s'
    )

    session = GameSession(word_list_path=args.dictionary or settings.word_list_path)
    try:
        dictionary = load_word_list(session.word_list_path)
    except FileNotFoundError as e:
        print(e)
        exit(1)

    play_interactive(
        session,
        dictionary=dictionary,
        target_word=args.target,
        render_mode=args.render_mode or settings.render_mode,
        screenshot_dir=args.screenshot_dir,
    )


if __name__ == "__main__":
    main()
