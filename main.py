import logging
from typing import List, Optional

from word_guesser import GameSession, GuessStatus, TextUI
from word_guesser.config import load_settings
from word_guesser.render import colored

STATUS_COLORS = {
    GuessStatus.WON: "green",
    GuessStatus.LOST: "red",
}


def run_demo(dictionary: List[str], guesses: List[str], target_word: Optional[str] = None):
    """
    Plays a scripted game and prints every step.

    Args:
        dictionary (List[str]): Words the game is initialized with.
        guesses (List[str]): Guesses to submit in order. Guesses after the game ends are reported as errors.
        target_word (str): Secret word; random from the dictionary when omitted.
    """
    session = GameSession()
    ui = TextUI()

    print(colored("=" * 30, "blue"))
    init = session.initialize_game(dictionary, target_word)
    if not init.ok:
        print(colored(init.message, "red"))
        return
    print(f"🎮 {init.message}")
    print("🎯 Target word has been selected (hidden)")
    print(f"📝 You have {session.get_state().guesses_remaining} guesses remaining")
    print(colored("=" * 30, "blue"))

    for guess in guesses:
        print(f"\n{colored('Guessing:', 'cyan')} {colored(guess, 'yellow')}")
        result = session.user_guess(guess)
        ui.print_result(result)
        print(30 * "-")

        if result.status in (GuessStatus.WON, GuessStatus.LOST):
            print(colored("\n🏁 Game Over!", STATUS_COLORS[result.status]))

    print(ui.get_text_observation(session.get_state()))
    print(colored("Demo completed!", "blue"))


if __name__ == "__main__":
    logging.basicConfig(level=load_settings().log_level)

    params = {
        "dictionary": ["cast", "word", "game", "test", "play", "code", "love", "hope"],
        "guesses": ["word", "cast", "game", "test", "code", "gibberish"],
        "target_word": "play",
    }
    run_demo(**params)
