"""
Document frequency table - term counts with a length-dependent cutoff.

Threshold formula:
    threshold = round_half_up(log10(token_count) + 0.5)

Where token_count is the number of tokens left after stop-word and short-word
filtering (not the raw document token count). Words occurring fewer times than
the threshold are dropped as incidental:

    token_count      threshold
    1 - 9            1
    10 - 99          2
    100 - 999        3
    1000 - 9999      4
"""

import logging
import math
from collections import defaultdict
from typing import Dict, Sequence, Tuple

from ..errors import EmptyInputError

logger = logging.getLogger(__name__)


def count_frequencies(tokens: Sequence[str]) -> Dict[str, int]:
    """
    Count occurrences of every distinct token.

    Example:
        >>> count_frequencies(["kočka", "strom", "kočka"])
        {'kočka': 2, 'strom': 1}
    """
    frequencies = defaultdict(int)

    for token in tokens:
        frequencies[token] += 1

    return dict(frequencies)


def compute_threshold(total_token_count: int) -> int:
    """
    Minimum occurrence count a word needs to stay a candidate.

    Args:
        total_token_count: Tokens left after stop-word and short-word filtering

    Returns:
        Threshold (>= 1)

    Raises:
        EmptyInputError: total_token_count < 1 (logarithm undefined)

    Examples:
        >>> compute_threshold(1000)
        4
        >>> compute_threshold(6)
        1
    """
    if total_token_count < 1:
        raise EmptyInputError()

    return math.floor(math.log10(total_token_count) + 0.5 + 0.5)


def prune_by_threshold(frequencies: Dict[str, int], total_token_count: int) -> Tuple[Dict[str, int], int]:
    """
    Remove words whose count is strictly below the threshold (in place).

    Args:
        frequencies: Token → count table, mutated
        total_token_count: Tokens left after filtering, before pruning

    Returns:
        (pruned table, threshold used)

    Raises:
        EmptyInputError: total_token_count < 1
    """
    threshold = compute_threshold(total_token_count)

    for word in [w for w, count in frequencies.items() if count < threshold]:
        del frequencies[word]

    logger.debug(f"Cutoff threshold {threshold} for {total_token_count} tokens: {len(frequencies)} words kept")

    return frequencies, threshold
