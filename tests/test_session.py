from concurrent.futures import ThreadPoolExecutor

import pytest

from word_guesser import ErrorKind, GameSession, GuessStatus, load_word_list
from word_guesser.session import play_interactive

from conftest import DICTIONARY


def test_initialize_game_replaces_state(session):
    session.user_guess("word")
    result = session.initialize_game(["cast", "word", "game", "test"], "cast")
    assert result.message == "Game initialized with 4 words"

    state = session.get_state()
    assert state.dictionary == ["cast", "word", "game", "test"]
    assert state.target_word == ["c", "a", "s", "t"]
    assert state.guesses_remaining == 5
    assert state.guesses == []


def test_failed_initialize_keeps_previous_game(session):
    result = session.initialize_game([])
    assert result.error is ErrorKind.EMPTY_DICTIONARY
    assert session.get_state().target_word == ["t", "e", "s", "t"]


def test_guess_before_initialize():
    result = GameSession().user_guess("word")
    assert result.error is ErrorKind.GAME_NOT_INITIALIZED
    assert result.message == "Game not initialized. Call initialize_game() first."


def test_guess_not_in_dictionary(session):
    result = session.user_guess("tent")
    assert result.status is GuessStatus.ERROR
    assert result.error is ErrorKind.GUESS_NOT_IN_DICTIONARY
    assert result.message == "Guess must be in the dictionary"
    assert session.get_state().guesses_remaining == 5


def test_dictionary_membership_is_case_sensitive(session):
    result = session.user_guess("TEST")
    assert result.error is ErrorKind.GUESS_NOT_IN_DICTIONARY


def test_won(session):
    result = session.user_guess("test")
    assert result.status is GuessStatus.WON
    assert result.hint == "1111"
    assert result.message == "Congratulations! You guessed the word!"

    state = session.get_state()
    assert state.won is True
    assert state.game_over is True
    assert state.guesses_remaining == 4


def test_continue(session):
    result = session.user_guess("word")
    assert result.status is GuessStatus.CONTINUE
    assert result.hint == "----"
    assert result.message == "4 guesses remaining"

    state = session.get_state()
    assert state.guesses_remaining == 4
    assert state.game_over is False


def test_lost_after_five_guesses(session):
    for guess in ["word", "cast", "game", "play"]:
        assert session.user_guess(guess).status is GuessStatus.CONTINUE

    result = session.user_guess("fail")
    assert result.status is GuessStatus.LOST
    assert result.message == "Game over! The word was 'test'"

    state = session.get_state()
    assert state.game_over is True
    assert state.won is False
    assert state.guesses_remaining == 0


def test_guess_after_game_over(session):
    assert session.user_guess("test").status is GuessStatus.WON

    result = session.user_guess("test")
    assert result.error is ErrorKind.GAME_ALREADY_OVER
    assert result.message == "Game is over. Start a new game."
    assert session.get_state().guesses_remaining == 4

    # the dictionary check runs before the game-over check
    assert session.user_guess("tent").error is ErrorKind.GUESS_NOT_IN_DICTIONARY


def test_new_game_without_dictionary():
    result = GameSession().new_game()
    assert not result.ok
    assert result.error is ErrorKind.NO_DICTIONARY_LOADED


def test_new_game_resets_counters(session):
    session.user_guess("fail")
    session.user_guess("test")

    result = session.new_game()
    assert result.ok
    assert result.message == "New game started"

    state = session.get_state()
    assert state.guesses_remaining == 5
    assert state.game_over is False
    assert state.won is False
    assert state.guesses == [] and state.hints == []
    assert state.dictionary == DICTIONARY
    assert "".join(state.target_word) in DICTIONARY

    assert session.user_guess("word").status is not GuessStatus.ERROR


def test_get_state_is_a_copy(session):
    state = session.get_state()
    state.dictionary.append("fake")
    state.target_word[0] = "x"
    state.guesses_remaining = 0

    fresh = session.get_state()
    assert "fake" not in fresh.dictionary
    assert fresh.target_word == ["t", "e", "s", "t"]
    assert fresh.guesses_remaining == 5


def test_concurrent_guesses_are_serialized(session):
    with ThreadPoolExecutor(max_workers=8) as pool:
        results = list(pool.map(session.user_guess, ["word"] * 40))

    statuses = [r.status for r in results]
    assert statuses.count(GuessStatus.CONTINUE) == 4
    assert statuses.count(GuessStatus.LOST) == 1
    assert all(r.error is ErrorKind.GAME_ALREADY_OVER for r in results if r.is_error)

    state = session.get_state()
    assert state.guesses_remaining == 0
    assert len(state.guesses) == 5


def test_sessions_are_independent(session):
    other = GameSession()
    other.initialize_game(DICTIONARY, "word")

    session.user_guess("test")
    assert other.get_state().game_over is False
    assert other.get_state().guesses_remaining == 5


def test_initialize_game_uses_default_word_list(tmp_path):
    words = tmp_path / "words.txt"
    words.write_text("cast\n\nhi\nword\n  \n")

    session = GameSession(word_list_path=words)
    result = session.initialize_game(target_word="cast")
    assert result.message == "Game initialized with 2 words"
    assert session.get_state().dictionary == ["cast", "word"]


def test_missing_word_list(tmp_path):
    session = GameSession(word_list_path=tmp_path / "missing.txt")
    with pytest.raises(FileNotFoundError):
        session.initialize_game()


def test_bundled_word_list():
    words = load_word_list(GameSession().word_list_path)
    assert words
    assert all(len(word) == 4 for word in words)


def test_play_interactive(session, monkeypatch, capsys):
    answers = iter(["", "tent", "word", "test"])
    monkeypatch.setattr("builtins.input", lambda prompt="": next(answers))

    state = play_interactive(session, DICTIONARY, "test")
    out = capsys.readouterr().out

    assert state.won is True
    assert state.guesses == ["word", "test"]
    assert "Guess must be in the dictionary" in out
    assert "Thanks for playing!" in out


def test_play_interactive_eof(session, monkeypatch):
    def raise_eof(prompt=""):
        raise EOFError

    monkeypatch.setattr("builtins.input", raise_eof)
    state = play_interactive(session, DICTIONARY, "test")
    assert state.game_over is False
