"""
Word filters applied between tokenization and counting.

Order matters: stop words are removed first, short words second.
"""

from typing import AbstractSet, List, Sequence

# Words of 3 characters or less usually carry no content
MIN_WORD_LENGTH = 4


def remove_stop_words(tokens: Sequence[str], stop_words: AbstractSet[str]) -> List[str]:
    """
    Drop every token present in the stop word set (exact match).

    Order and duplicates of the remaining tokens are preserved.
    """
    return [t for t in tokens if t not in stop_words]


def remove_short_words(tokens: Sequence[str], min_length: int = MIN_WORD_LENGTH) -> List[str]:
    """
    Drop every token shorter than min_length characters.

    Examples:
        >>> remove_short_words(["cat", "dogs", "a", "tree"])
        ['dogs', 'tree']
    """
    return [t for t in tokens if len(t) >= min_length]
