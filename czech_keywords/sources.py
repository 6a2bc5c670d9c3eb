"""
Input and output collaborators of the extraction pipeline.

- DocumentSource: full text of the document to analyse
- CorpusSource: ordered corpus entries of the document language
- ResultSink: destination for report lines

The pipeline never touches files; these classes are the only place where
bytes are read, decoded or written.
"""

import csv
import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import List, Sequence, TextIO, Union

from .errors import DocumentError, MalformedCorpusError
from .extraction.corpus import CorpusEntry

logger = logging.getLogger(__name__)

DEFAULT_CORPUS_PATH = "corpus/syn2015_word_utf8.tsv"


class DocumentSource(ABC):
    """Provides the text of a single document"""

    @abstractmethod
    def read_all(self) -> str:
        """Return the full decoded document text"""
        pass


class TextDocument(DocumentSource):
    """Document already held in memory"""

    def __init__(self, text: str):
        self.text = text

    def read_all(self) -> str:
        return self.text


class TextFileDocument(DocumentSource):
    """
    UTF-8 text file on disk.

    Validation (fail fast with actionable message):
    - File must exist and be readable
    - Size limit (100MB) - the whole document is held in memory
    - Content must be valid UTF-8
    """

    MAX_FILE_SIZE = 100 * 1024 * 1024  # 100MB

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)

    def read_all(self) -> str:
        """
        Read and decode the file.

        Raises:
            DocumentError: File missing, too large or not UTF-8
        """
        try:
            content = self.path.read_bytes()
        except OSError as e:
            raise DocumentError(
                f"Cannot open input file '{self.path}': {e.strerror or e}"
            ) from e

        if len(content) > self.MAX_FILE_SIZE:
            raise DocumentError(
                f"File '{self.path}' is too large ({len(content) / 1024 / 1024:.1f}MB).\n"
                f"Maximum allowed: {self.MAX_FILE_SIZE / 1024 / 1024}MB."
            )

        try:
            # utf-8-sig drops a leading BOM that would otherwise stick to the first word
            text = content.decode("utf-8-sig")
        except UnicodeDecodeError as e:
            raise DocumentError(
                f"File '{self.path}' is not valid UTF-8 text.\n"
                f"Error at byte position {e.start}: {e.reason}\n\n"
                f"Solutions:\n"
                f"  1. Convert file to UTF-8 encoding\n"
                f"  2. Save file with UTF-8 encoding\n"
                f"  3. Check for binary data in text file"
            ) from e

        logger.debug(f"Read {len(text)} chars from {self.path}")
        return text


class CorpusSource(ABC):
    """Provides corpus entries ordered by ascending rank"""

    @abstractmethod
    def load_entries(self) -> List[CorpusEntry]:
        """Return all usable entries, most frequent word first"""
        pass


class StaticCorpus(CorpusSource):
    """Corpus entries already held in memory"""

    def __init__(self, entries: Sequence[CorpusEntry]):
        self.entries = list(entries)

    def load_entries(self) -> List[CorpusEntry]:
        return list(self.entries)


class TsvCorpusFile(CorpusSource):
    """
    Tab-separated corpus word list.

    Row format (SYN2015 word frequency list):
        rank<TAB>word<TAB>frequency[<TAB>...]

    Words are lowercased, row order is kept. Rows that are too short, carry a
    non-integer rank/frequency (e.g. a header line), a rank below 1 or a
    negative frequency are skipped and counted in skipped_rows.
    """

    def __init__(self, path: Union[str, Path] = DEFAULT_CORPUS_PATH):
        self.path = Path(path)
        self.skipped_rows = 0

    def load_entries(self) -> List[CorpusEntry]:
        """
        Parse the corpus file.

        Raises:
            MalformedCorpusError: File missing or without a single usable row
        """
        entries: List[CorpusEntry] = []
        skipped = 0

        try:
            with open(self.path, "r", encoding="utf-8", newline="") as f:
                reader = csv.reader(f, delimiter="\t", quoting=csv.QUOTE_NONE)
                for row in reader:
                    entry = self._parse_row(row)
                    if entry is None:
                        skipped += 1
                        continue
                    entries.append(entry)
        except OSError as e:
            raise MalformedCorpusError(f"Can't open corpus file {self.path}: {e.strerror or e}") from e
        except UnicodeDecodeError as e:
            raise MalformedCorpusError(f"Corpus file {self.path} is not valid UTF-8: {e.reason}") from e

        if skipped:
            logger.warning(f"Skipped {skipped} malformed rows in corpus {self.path}")
        self.skipped_rows = skipped

        if not entries:
            raise MalformedCorpusError(f"Corpus file {self.path} contains no usable rows")

        logger.info(f"Loaded corpus {self.path}: {len(entries)} entries")
        return entries

    @staticmethod
    def _parse_row(row: List[str]):
        """CorpusEntry for a row, or None when the row is unusable"""
        if len(row) < 3:
            return None
        try:
            rank = int(row[0])
            frequency = int(row[2])
        except ValueError:
            return None
        # Negative frequencies break the rarity logarithm
        if rank < 1 or frequency < 0:
            return None
        return CorpusEntry(rank=rank, word=row[1].lower(), frequency=frequency)


class ResultSink(ABC):
    """Destination for report lines"""

    @abstractmethod
    def write_line(self, line: str) -> None:
        """Write one line (newline appended by the sink)"""
        pass


class StreamResultSink(ResultSink):
    """Writes lines to a text stream (stdout or an open output file)"""

    def __init__(self, stream: TextIO):
        self.stream = stream

    def write_line(self, line: str) -> None:
        self.stream.write(line + "\n")


class MemoryResultSink(ResultSink):
    """Collects lines in a list"""

    def __init__(self):
        self.lines: List[str] = []

    def write_line(self, line: str) -> None:
        self.lines.append(line)
