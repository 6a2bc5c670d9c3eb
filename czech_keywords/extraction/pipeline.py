"""
Keyword extraction pipeline.

Stages:
1. tokenize             - document text → tokens
2. remove_stop_words    - drop the most frequent corpus words
3. remove_short_words   - drop tokens shorter than 4 characters
4. count_frequencies    - token → occurrence count
5. prune_by_threshold   - drop words below the log10 cutoff
6. score_importances    - corpus-relative importance per word
7. normalize_scores     - rank, rescale to 0.5 - 100, keep top K

The pipeline is pure: it reads nothing, prints nothing and does not know
about output mode or message language.
"""

import logging
from dataclasses import dataclass, field
from typing import List

from ..errors import NoScorableWordsError
from .corpus import CorpusIndex
from .filters import MIN_WORD_LENGTH, remove_short_words, remove_stop_words
from .frequency import count_frequencies, prune_by_threshold
from .importance import score_importances
from .normalizer import DEFAULT_TOP_K, RankedKeyword, is_degenerate, normalize_scores
from .tokenizer import tokenize

logger = logging.getLogger(__name__)

# The 150 most frequent corpus words are treated as stop words
DEFAULT_STOP_WORD_COUNT = 150


@dataclass
class ExtractionStats:
    """Counts collected at each pipeline stage"""
    document_token_count: int = 0
    corpus_size: int = 0
    stop_words_removed: int = 0
    short_words_removed: int = 0
    filtered_token_count: int = 0     # Input of the threshold formula
    unique_word_count: int = 0        # Distinct words before pruning
    threshold: int = 0
    unusual_words_removed: int = 0
    candidate_count: int = 0          # Distinct words after pruning
    scored_word_count: int = 0        # Candidates found in the corpus


@dataclass
class ExtractionResult:
    """Ranked keywords plus the statistics of the run"""
    keywords: List[RankedKeyword] = field(default_factory=list)
    stats: ExtractionStats = field(default_factory=ExtractionStats)
    no_scorable_words: bool = False
    degenerate_range: bool = False


def extract_keywords(
    text: str,
    corpus: CorpusIndex,
    stop_word_count: int = DEFAULT_STOP_WORD_COUNT,
    min_word_length: int = MIN_WORD_LENGTH,
    top_k: int = DEFAULT_TOP_K,
    max_workers: int = 1
) -> ExtractionResult:
    """
    Extract ranked keywords from document text.

    Args:
        text: Full document text
        corpus: Corpus index of the document language
        stop_word_count: How many top-ranked corpus words are stop words
        min_word_length: Shortest token kept
        top_k: Maximum number of keywords returned
        max_workers: Thread pool size for corpus lookups

    Returns:
        ExtractionResult; keywords may be empty when no candidate is in the corpus

    Raises:
        EmptyInputError: Nothing left after stop-word and short-word filtering
    """
    stats = ExtractionStats(corpus_size=corpus.size())

    tokens = tokenize(text)
    stats.document_token_count = len(tokens)

    before = len(tokens)
    tokens = remove_stop_words(tokens, corpus.top_by_rank(stop_word_count))
    stats.stop_words_removed = before - len(tokens)

    before = len(tokens)
    tokens = remove_short_words(tokens, min_word_length)
    stats.short_words_removed = before - len(tokens)
    stats.filtered_token_count = len(tokens)

    frequencies = count_frequencies(tokens)
    stats.unique_word_count = len(frequencies)

    frequencies, stats.threshold = prune_by_threshold(frequencies, stats.filtered_token_count)
    stats.candidate_count = len(frequencies)
    stats.unusual_words_removed = stats.unique_word_count - stats.candidate_count

    logger.debug(
        f"{stats.document_token_count} tokens → {stats.filtered_token_count} after filtering "
        f"→ {stats.candidate_count} candidates (threshold {stats.threshold})"
    )

    result = ExtractionResult(stats=stats)

    try:
        importances = score_importances(frequencies, corpus, max_workers=max_workers)
    except NoScorableWordsError as e:
        logger.warning(f"No keywords extracted: {e}")
        result.no_scorable_words = True
        return result

    stats.scored_word_count = len(importances)
    result.degenerate_range = is_degenerate(importances)
    result.keywords = normalize_scores(importances, top_k=top_k)

    logger.info(f"Extracted {len(result.keywords)} keywords from {stats.document_token_count} tokens")

    return result
