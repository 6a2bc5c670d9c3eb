"""
Tokenizer for keyword extraction.

Tokenization pipeline:
1. Split text into maximal runs of non-whitespace characters
2. Delete punctuation, brackets and digits from each run (no replacement)
3. Lowercase the remainder
4. Return every run, including ones that became empty

Diacritics are kept as they are: "Kočka" → "kočka", never "kocka".
Empty tokens are dropped later by the short-word filter.
"""

import re
from typing import List

# Characters deleted from every word; "–" is the en dash, not a hyphen
STRIPPED_CHARACTERS = ".,!?;:\"'()–[]{}|0123456789"

_DELETE_TABLE = str.maketrans("", "", STRIPPED_CHARACTERS)
_WORD_RUN = re.compile(r"\S+")


def normalize_token(run: str) -> str:
    """
    Normalize a single whitespace-delimited run into a token.

    Examples:
        >>> normalize_token("don't")
        'dont'
        >>> normalize_token("(Praha),")
        'praha'
        >>> normalize_token("2015")
        ''
    """
    return run.translate(_DELETE_TABLE).lower()


def tokenize(text: str) -> List[str]:
    """
    Tokenize document text into normalized word tokens.

    Args:
        text: Full document text

    Returns:
        List of lowercase tokens in document order, duplicates preserved.
        Runs made only of stripped characters yield empty strings.

    Examples:
        >>> tokenize("Kočka leze dírou, pes oknem.")
        ['kočka', 'leze', 'dírou', 'pes', 'oknem']

        >>> tokenize("Hello, World! 123")
        ['hello', 'world', '']

        >>> tokenize("   ")
        []
    """
    if not text:
        return []

    return [normalize_token(run) for run in _WORD_RUN.findall(text)]
