"""
Unit tests for document, corpus and result collaborators.
"""

import io
import logging

import pytest
from czech_keywords.errors import DegenerateScoreRangeWarning, DocumentError, MalformedCorpusError
from czech_keywords.extraction.corpus import CorpusEntry, CorpusIndex
from czech_keywords.extraction.pipeline import extract_keywords
from czech_keywords.sources import (
    MemoryResultSink,
    StaticCorpus,
    StreamResultSink,
    TextDocument,
    TextFileDocument,
    TsvCorpusFile,
)


class TestTextFileDocument:
    """Test document reading and validation"""

    def test_reads_utf8(self, tmp_path):
        path = tmp_path / "doc.txt"
        path.write_text("Příliš žluťoučký kůň\núpěl ďábelské ódy", encoding="utf-8")

        assert TextFileDocument(path).read_all() == "Příliš žluťoučký kůň\núpěl ďábelské ódy"

    def test_strips_bom(self, tmp_path):
        path = tmp_path / "bom.txt"
        path.write_bytes("\ufeffkočka".encode("utf-8"))

        assert TextFileDocument(path).read_all() == "kočka"

    def test_missing_file(self, tmp_path):
        with pytest.raises(DocumentError, match="Cannot open input file"):
            TextFileDocument(tmp_path / "missing.txt").read_all()

    def test_invalid_utf8(self, tmp_path):
        path = tmp_path / "latin2.txt"
        path.write_bytes("kočka".encode("iso-8859-2"))

        with pytest.raises(DocumentError) as exc_info:
            TextFileDocument(path).read_all()
        assert "not valid UTF-8" in str(exc_info.value)
        assert "Solutions" in str(exc_info.value)

    def test_too_large(self, tmp_path):
        path = tmp_path / "big.txt"
        path.write_text("dlouhý text", encoding="utf-8")
        document = TextFileDocument(path)
        document.MAX_FILE_SIZE = 4

        with pytest.raises(DocumentError, match="too large"):
            document.read_all()

    def test_in_memory_document(self):
        assert TextDocument("pes").read_all() == "pes"


class TestTsvCorpusFile:
    """Test corpus parsing"""

    def test_parses_rows_in_order(self, corpus_file):
        entries = TsvCorpusFile(corpus_file).load_entries()

        assert [e.word for e in entries] == ["a", "je", "který", "pes", "kočka"]
        assert entries[4] == CorpusEntry(rank=5, word="kočka", frequency=5)

    def test_lowercases_words(self, tmp_path):
        path = tmp_path / "corpus.tsv"
        path.write_text("1\tPraha\t900\n2\tČR\t800\n", encoding="utf-8")

        assert [e.word for e in TsvCorpusFile(path).load_entries()] == ["praha", "čr"]

    def test_skips_malformed_rows(self, tmp_path):
        """Header, short rows and non-integer columns are skipped"""
        path = tmp_path / "corpus.tsv"
        path.write_text(
            "rank\tword\tfrequency\n"
            "1\ta\t100\n"
            "broken line\n"
            "2\tpes\tmnoho\n"
            "3\t\"uvozovky\"\t7\textra\n",
            encoding="utf-8",
        )

        source = TsvCorpusFile(path)
        entries = source.load_entries()
        assert [(e.rank, e.word, e.frequency) for e in entries] == [(1, "a", 100), (3, '"uvozovky"', 7)]
        assert source.skipped_rows == 3

    def test_skips_negative_frequency_and_bad_rank(self, tmp_path, caplog):
        """Rows that would break the importance formula are skipped and counted"""
        path = tmp_path / "corpus.tsv"
        path.write_text("1\ta\t100\n2\tkočka\t-1\n3\tpes\t-5\n0\tstrom\t4\n4\tdům\t0\n", encoding="utf-8")

        source = TsvCorpusFile(path)
        with caplog.at_level(logging.WARNING):
            entries = source.load_entries()

        assert [(e.word, e.frequency) for e in entries] == [("a", 100), ("dům", 0)]
        assert source.skipped_rows == 3
        assert "Skipped 3 malformed rows" in caplog.text

    def test_negative_frequency_row_not_scored(self, tmp_path):
        """A skipped row leaves its word out of the corpus instead of crashing the scorer"""
        path = tmp_path / "corpus.tsv"
        path.write_text("1\ta\t100\n2\tkočka\t-1\n3\tstrom\t4\n", encoding="utf-8")
        index = CorpusIndex(TsvCorpusFile(path).load_entries())

        with pytest.warns(DegenerateScoreRangeWarning):
            result = extract_keywords("kočka kočka strom", index, stop_word_count=1)

        assert [k.word for k in result.keywords] == ["strom"]

    def test_missing_file(self, tmp_path):
        with pytest.raises(MalformedCorpusError, match="Can't open corpus file"):
            TsvCorpusFile(tmp_path / "missing.tsv").load_entries()

    def test_no_usable_rows(self, tmp_path):
        path = tmp_path / "empty.tsv"
        path.write_text("rank\tword\tfrequency\n", encoding="utf-8")

        with pytest.raises(MalformedCorpusError, match="no usable rows"):
            TsvCorpusFile(path).load_entries()

    def test_static_corpus(self, toy_entries):
        assert StaticCorpus(toy_entries).load_entries() == toy_entries


class TestResultSinks:
    """Test line writers"""

    def test_stream_sink(self):
        stream = io.StringIO()
        sink = StreamResultSink(stream)
        sink.write_line("1. kočka (100)")
        sink.write_line("")

        assert stream.getvalue() == "1. kočka (100)\n\n"

    def test_memory_sink(self):
        sink = MemoryResultSink()
        sink.write_line("kočka")

        assert sink.lines == ["kočka"]
