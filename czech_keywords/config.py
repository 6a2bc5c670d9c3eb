"""
Runtime configuration from environment variables.

Environment is loaded from .env.local (local dev) or .env, whichever exists
first, before variables are read. Command-line flags override these values.
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from dotenv import load_dotenv

from .extraction.filters import MIN_WORD_LENGTH
from .extraction.normalizer import DEFAULT_TOP_K
from .extraction.pipeline import DEFAULT_STOP_WORD_COUNT
from .sources import DEFAULT_CORPUS_PATH

logger = logging.getLogger(__name__)


def load_environment(base_dir: Union[str, Path, None] = None) -> Optional[Path]:
    """
    Load .env.local (highest priority) or .env from base_dir.

    Returns:
        Path of the loaded file, or None when neither exists
    """
    base = Path(base_dir) if base_dir is not None else Path.cwd()

    for name in (".env.local", ".env"):
        env_file = base / name
        if env_file.exists():
            load_dotenv(env_file, override=True)
            return env_file

    return None


def _int_env(name: str, default: int, minimum: int = 0) -> int:
    value = os.getenv(name)
    if value is None or value.strip() == "":
        return default
    try:
        parsed = int(value)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got '{value}'")
    if parsed < minimum:
        raise ValueError(f"{name} must be >= {minimum}, got {parsed}")
    return parsed


def _bool_env(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if not value:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


@dataclass
class Settings:
    """Extraction and logging settings"""
    corpus_path: str = DEFAULT_CORPUS_PATH
    stop_word_count: int = DEFAULT_STOP_WORD_COUNT
    min_word_length: int = MIN_WORD_LENGTH
    top_k: int = DEFAULT_TOP_K
    lookup_workers: int = 1
    strict_corpus: bool = False
    log_level: int = logging.WARNING
    log_file: Optional[str] = None

    @classmethod
    def from_env(cls) -> "Settings":
        """
        Build settings from environment variables.

        Config (env vars):
            KEYWORDS_CORPUS_PATH: Corpus TSV file
            KEYWORDS_STOP_WORD_COUNT: Top-N corpus words treated as stop words (default: 150)
            KEYWORDS_MIN_WORD_LENGTH: Shortest kept word (default: 4)
            KEYWORDS_TOP_K: Maximum number of keywords (default: 20)
            KEYWORDS_LOOKUP_WORKERS: Threads for corpus lookups (default: 1)
            KEYWORDS_STRICT_CORPUS: "true" to reject corpora with duplicate words
            LOG_LEVEL: Console log level (default: WARNING)
            KEYWORDS_LOG_FILE: Rotating debug log file (default: disabled)

        Raises:
            ValueError: A numeric variable is not a valid integer
        """
        log_level_name = os.getenv("LOG_LEVEL", "WARNING").upper()

        return cls(
            corpus_path=os.getenv("KEYWORDS_CORPUS_PATH") or DEFAULT_CORPUS_PATH,
            stop_word_count=_int_env("KEYWORDS_STOP_WORD_COUNT", DEFAULT_STOP_WORD_COUNT),
            min_word_length=_int_env("KEYWORDS_MIN_WORD_LENGTH", MIN_WORD_LENGTH),
            top_k=_int_env("KEYWORDS_TOP_K", DEFAULT_TOP_K, minimum=1),
            lookup_workers=_int_env("KEYWORDS_LOOKUP_WORKERS", 1, minimum=1),
            strict_corpus=_bool_env("KEYWORDS_STRICT_CORPUS", False),
            log_level=getattr(logging, log_level_name, logging.WARNING),
            log_file=os.getenv("KEYWORDS_LOG_FILE") or None,
        )
