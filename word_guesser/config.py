import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

DEFAULT_WORD_LIST_PATH = Path(__file__).parent / 'data' / 'four-letter-words.txt'
RENDER_MODES = ('text', 'image')


@dataclass(frozen=True)
class Settings:
    word_list_path: Path = DEFAULT_WORD_LIST_PATH
    log_level: str = "WARNING"
    render_mode: str = "text"


def load_settings(env_file: Optional[Path] = None) -> Settings:
    """
    Reads settings from the environment, after loading a .env file if there is one.

    Recognised variables: WORD_GUESSER_WORDS, WORD_GUESSER_LOG_LEVEL, WORD_GUESSER_RENDER_MODE.
    """
    load_dotenv(dotenv_path=env_file)

    render_mode = os.getenv("WORD_GUESSER_RENDER_MODE", "text").lower()
    if render_mode not in RENDER_MODES:
        raise ValueError(f"WORD_GUESSER_RENDER_MODE must be one of {RENDER_MODES}, got '{render_mode}'")

    words = os.getenv("WORD_GUESSER_WORDS")
    return Settings(
        word_list_path=Path(words) if words else DEFAULT_WORD_LIST_PATH,
        log_level=os.getenv("WORD_GUESSER_LOG_LEVEL", "WARNING").upper(),
        render_mode=render_mode,
    )
