from main import run_demo
from word_guesser.render import colored

DEMO_DICTIONARY = ["cast", "word", "game", "test", "play", "code", "love", "hope"]


def test_run_demo_won(capsys):
    run_demo(DEMO_DICTIONARY, ["word", "play", "cast"], target_word="play")
    out = capsys.readouterr().out

    # guesses are announced in one colour, before their result is known
    assert colored("word", "yellow") in out
    assert colored("play", "yellow") in out
    assert "Congratulations! You guessed the word!" in out
    assert colored("\n🏁 Game Over!", "green") in out
    assert "Game is over. Start a new game." in out
    assert "Demo completed!" in out


def test_run_demo_lost(capsys):
    run_demo(DEMO_DICTIONARY, ["word", "cast", "game", "test", "code", "gibberish"], target_word="play")
    out = capsys.readouterr().out

    assert "Game over! The word was 'play'" in out
    assert colored("\n🏁 Game Over!", "red") in out
    assert "Guess must be in the dictionary" in out


def test_run_demo_bad_dictionary(capsys):
    run_demo(["hi"], ["word"])
    assert "Dictionary must contain at least one 4-letter word" in capsys.readouterr().out
