"""Unit test configuration - toy corpus and isolated environment"""

import logging

import pytest

from czech_keywords.extraction.corpus import CorpusEntry, CorpusIndex

# Toy corpus: three stop words, then two content words
TOY_ENTRIES = [
    CorpusEntry(rank=1, word="a", frequency=1000000),
    CorpusEntry(rank=2, word="je", frequency=800000),
    CorpusEntry(rank=3, word="který", frequency=300000),
    CorpusEntry(rank=4, word="pes", frequency=50),
    CorpusEntry(rank=5, word="kočka", frequency=5),
]

TOY_CORPUS_TSV = "".join(f"{e.rank}\t{e.word}\t{e.frequency}\n" for e in TOY_ENTRIES)

CONFIG_VARIABLES = [
    "KEYWORDS_CORPUS_PATH",
    "KEYWORDS_STOP_WORD_COUNT",
    "KEYWORDS_MIN_WORD_LENGTH",
    "KEYWORDS_TOP_K",
    "KEYWORDS_LOOKUP_WORKERS",
    "KEYWORDS_STRICT_CORPUS",
    "LOG_LEVEL",
    "KEYWORDS_LOG_FILE",
]


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Unit tests never see configuration from the developer's shell"""
    for name in CONFIG_VARIABLES:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def restore_root_logger():
    """setup_logging() replaces root handlers; put pytest's back afterwards"""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level

    yield

    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def toy_entries():
    return list(TOY_ENTRIES)


@pytest.fixture
def toy_corpus():
    """CorpusIndex over the toy corpus"""
    return CorpusIndex(TOY_ENTRIES)


@pytest.fixture
def corpus_file(tmp_path):
    """Toy corpus written as TSV"""
    path = tmp_path / "corpus.tsv"
    path.write_text(TOY_CORPUS_TSV, encoding="utf-8")
    return path
