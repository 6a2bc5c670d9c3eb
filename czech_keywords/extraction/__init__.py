"""
Corpus-relative keyword extraction.

Components:
- tokenizer: Word splitting, punctuation/digit stripping, lowercasing
- corpus: Ordered corpus entries with top-N and first-match lookup
- filters: Stop-word and short-word removal
- frequency: Term counts and the log10 cutoff threshold
- importance: Corpus-relative importance scoring
- normalizer: Ranking and rescaling to the 0.5 - 100 range
- pipeline: All of the above in order
"""

from .tokenizer import tokenize
from .corpus import CorpusEntry, CorpusIndex
from .filters import remove_short_words, remove_stop_words
from .frequency import compute_threshold, count_frequencies, prune_by_threshold
from .importance import score_importances
from .normalizer import RankedKeyword, normalize_scores, rank_scores
from .pipeline import ExtractionResult, ExtractionStats, extract_keywords

__all__ = [
    "tokenize",
    "CorpusEntry",
    "CorpusIndex",
    "remove_stop_words",
    "remove_short_words",
    "count_frequencies",
    "compute_threshold",
    "prune_by_threshold",
    "score_importances",
    "RankedKeyword",
    "normalize_scores",
    "rank_scores",
    "ExtractionResult",
    "ExtractionStats",
    "extract_keywords",
]
