"""
Corpus-relative importance scorer.

Formula:
    importance(word) = (tf / unique) × ln(((total + corpus_size) / 2) / (1 + cf) + 1)

Where:
    tf = occurrences of the word in the document (after threshold pruning)
    unique = number of distinct candidate words (pruned table size)
    total = sum of all candidate occurrences
    corpus_size = number of corpus entries
    cf = frequency of the word in the corpus

Words frequent in the document but rare in the language score highest.
Words missing from the corpus are skipped entirely - typos, names and
foreign words would otherwise dominate the ranking.
"""

import logging
import math
from concurrent.futures import ThreadPoolExecutor
from typing import Dict, List, Optional

from ..errors import NoScorableWordsError
from .corpus import CorpusIndex

logger = logging.getLogger(__name__)


def _lookup_all(words: List[str], corpus: CorpusIndex, max_workers: int) -> List[Optional[int]]:
    """Corpus frequencies for words, in the same order"""
    if max_workers <= 1 or len(words) < 2:
        return [corpus.lookup(word) for word in words]

    # Pure reads against an immutable index; map() keeps input order
    with ThreadPoolExecutor(max_workers=max_workers) as executor:
        return list(executor.map(corpus.lookup, words))


def score_importances(
    frequencies: Dict[str, int],
    corpus: CorpusIndex,
    max_workers: int = 1
) -> Dict[str, float]:
    """
    Compute raw importance values for candidate words.

    Args:
        frequencies: Pruned token → count table
        corpus: Corpus index of the document language
        max_workers: Thread pool size for corpus lookups (1 = sequential)
            The result does not depend on this value.

    Returns:
        Word → raw importance, only for words found in the corpus.
        Values are comparable within one run only.

    Raises:
        NoScorableWordsError: No candidate word is present in the corpus

    Example:
        >>> index = CorpusIndex([CorpusEntry(1, "kočka", 5), CorpusEntry(2, "strom", 50)])
        >>> scores = score_importances({"kočka": 3, "strom": 1, "xyzzy": 2}, index)
        >>> sorted(scores)
        ['kočka', 'strom']
    """
    words = list(frequencies)

    if not words:
        raise NoScorableWordsError(0)

    unique_word_count = len(frequencies)
    total_frequency = sum(frequencies.values())
    corpus_size = corpus.size()

    # Numerator of the rarity term is shared by all words
    base = (total_frequency + corpus_size) / 2

    importances: Dict[str, float] = {}
    skipped = 0

    for word, corpus_frequency in zip(words, _lookup_all(words, corpus, max_workers)):
        # Skip every word that's not in the corpus
        if corpus_frequency is None:
            skipped += 1
            continue

        importance = (frequencies[word] / unique_word_count) * math.log(base / (1 + corpus_frequency) + 1)
        importances[word] = importance

    logger.debug(f"Scored {len(importances)} of {unique_word_count} candidate words ({skipped} not in corpus)")

    if not importances:
        raise NoScorableWordsError(unique_word_count)

    return importances
