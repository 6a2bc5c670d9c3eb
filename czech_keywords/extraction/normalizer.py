"""
Rank normalizer - sorts raw importances and rescales them to 0.5 - 100.

Raw importances have no fixed scale, so they are mapped linearly:

    normalized = round(((score - min) / (max - min)) × 99.5, 2) + 0.5

The scaled term is rounded to 2 decimals first and the 0.5 offset is added
afterwards; the sum is not rounded again. The top word gets 100.0, the bottom
word 0.5. When all scores are equal (including a single candidate) every word
gets the midpoint of the range instead.
"""

import logging
import warnings
from dataclasses import dataclass
from typing import Dict, List, Tuple

from ..errors import DegenerateScoreRangeWarning

logger = logging.getLogger(__name__)

MIN_SCORE = 0.5
MAX_SCORE = 100.0
MIDPOINT_SCORE = (MIN_SCORE + MAX_SCORE) / 2  # 50.25

# Maximum number of keywords reported
DEFAULT_TOP_K = 20


@dataclass
class RankedKeyword:
    """Single keyword in the final ranking"""
    rank: int      # 1-based position
    word: str
    score: float   # Normalized importance (0.5 - 100.0)


def rank_scores(importances: Dict[str, float]) -> List[Tuple[str, float]]:
    """
    Sort (word, score) pairs: score descending, then word descending.

    Example:
        >>> rank_scores({"auto": 1.0, "dům": 2.0, "byt": 1.0})
        [('dům', 2.0), ('byt', 1.0), ('auto', 1.0)]
    """
    return sorted(importances.items(), key=lambda item: (item[1], item[0]), reverse=True)


def is_degenerate(importances: Dict[str, float]) -> bool:
    """True when there is at least one score and all scores are equal"""
    if not importances:
        return False
    values = importances.values()
    return max(values) == min(values)


def normalize_scores(importances: Dict[str, float], top_k: int = DEFAULT_TOP_K) -> List[RankedKeyword]:
    """
    Rank raw importances and rescale them to the 0.5 - 100 range.

    Args:
        importances: Word → raw importance
        top_k: Maximum number of keywords returned

    Returns:
        Ranked keywords (at most top_k), best first. Empty for empty input.

    Warns:
        DegenerateScoreRangeWarning: All scores equal, midpoint used
    """
    ranked = rank_scores(importances)

    if not ranked:
        return []

    max_score = ranked[0][1]
    min_score = ranked[-1][1]
    denominator = max_score - min_score

    if denominator == 0:
        message = f"All {len(ranked)} keywords have the same importance, using midpoint score {MIDPOINT_SCORE}"
        logger.warning(message)
        warnings.warn(message, DegenerateScoreRangeWarning, stacklevel=2)
        normalized = [(word, MIDPOINT_SCORE) for word, _ in ranked]
    else:
        normalized = [
            (word, round(((score - min_score) / denominator) * (MAX_SCORE - MIN_SCORE), 2) + MIN_SCORE)
            for word, score in ranked
        ]

    return [
        RankedKeyword(rank=position, word=word, score=score)
        for position, (word, score) in enumerate(normalized[:top_k], start=1)
    ]
