"""
Corpus index - ordered word frequency table of the document language.

The corpus is supplied ordered by rank (most frequent word first). That order
is kept as is: the first N entries are the stop words, and lookups resolve to
the first entry with a matching word.
"""

import logging
from dataclasses import dataclass
from typing import Dict, FrozenSet, List, Optional, Sequence

from ..errors import MalformedCorpusError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CorpusEntry:
    """Single corpus row"""
    rank: int        # Position in the corpus (1 = most frequent)
    word: str        # Lowercased word form
    frequency: int   # Absolute occurrence count in the corpus


class CorpusIndex:
    """
    Read-only index over ordered corpus entries.

    Two lookup modes:
    - top_by_rank(n): the n most frequent words (stop word detection)
    - lookup(word): corpus frequency of a word, first match wins

    Duplicate words policy:
        Only the first occurrence of a word (in supplied order) is visible to
        lookup(). Later duplicates still count towards size() and still take
        a slot in top_by_rank(). With reject_duplicates=True the index refuses
        such a corpus instead.
    """

    def __init__(self, entries: Sequence[CorpusEntry], reject_duplicates: bool = False):
        """
        Build the index.

        Args:
            entries: Corpus entries ordered by ascending rank
            reject_duplicates: Raise MalformedCorpusError on a repeated word
                instead of shadowing it

        Raises:
            MalformedCorpusError: Duplicate word found and reject_duplicates set
        """
        self._entries: List[CorpusEntry] = list(entries)
        self._frequencies: Dict[str, int] = {}
        self.duplicate_count = 0

        for entry in self._entries:
            if entry.word in self._frequencies:
                if reject_duplicates:
                    raise MalformedCorpusError(
                        f"Duplicate corpus word '{entry.word}' at rank {entry.rank}"
                    )
                self.duplicate_count += 1
                continue
            self._frequencies[entry.word] = entry.frequency

        if self.duplicate_count:
            logger.warning(
                f"Corpus contains {self.duplicate_count} duplicate words, "
                f"only the first occurrence of each is used for lookups"
            )
        logger.debug(f"Built corpus index: {len(self._entries)} entries, {len(self._frequencies)} distinct words")

    def top_by_rank(self, n: int) -> FrozenSet[str]:
        """
        Words of the first n entries in supplied order.

        Returns all words when the corpus has fewer than n entries.
        """
        return frozenset(entry.word for entry in self._entries[:max(n, 0)])

    def lookup(self, word: str) -> Optional[int]:
        """
        Corpus frequency of the first entry whose word equals `word` exactly.

        Returns:
            Frequency, or None when the word is not in the corpus
        """
        return self._frequencies.get(word)

    def size(self) -> int:
        """Total number of entries, duplicates included"""
        return len(self._entries)

    def __len__(self) -> int:
        return self.size()

    def __contains__(self, word: str) -> bool:
        return word in self._frequencies
