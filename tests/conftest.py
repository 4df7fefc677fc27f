import pytest

from word_guesser import GameSession

DICTIONARY = ["test", "word", "cast", "game", "play", "fail"]


@pytest.fixture
def session():
    """A session playing against 'test'."""
    session = GameSession()
    result = session.initialize_game(DICTIONARY, ["t", "e", "s", "t"])
    assert result.ok
    return session
