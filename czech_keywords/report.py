"""Report formatting - turns an ExtractionResult into sink lines"""

from dataclasses import dataclass
from typing import List

from .extraction.normalizer import RankedKeyword
from .extraction.pipeline import ExtractionResult
from .messages import Language, status
from .sources import ResultSink


@dataclass
class OutputConfig:
    """Presentation settings; never seen by the scoring pipeline"""
    verbose: bool = True
    language: Language = Language.CZE


def format_score(score: float) -> str:
    """Shortest decimal form: 100.0 → '100', 50.25 → '50.25'"""
    return f"{score:.15g}"


def format_keyword(keyword: RankedKeyword, config: OutputConfig) -> str:
    """
    Single result line.

    Examples:
        verbose: "1. kočka (100)"
        terse:   "kočka"
    """
    if not config.verbose:
        return keyword.word
    return f"{keyword.rank}. {keyword.word} ({format_score(keyword.score)})"


def status_lines(result: ExtractionResult, config: OutputConfig) -> List[str]:
    """Analysis progress lines in the order the stages ran"""
    stats = result.stats
    lang = config.language
    lines = [
        status("words_loaded", lang, count=stats.document_token_count),
        status("corpus_loaded", lang, count=stats.corpus_size),
        status("stop_words_removed", lang, count=stats.stop_words_removed),
        status("short_words_removed", lang, count=stats.short_words_removed),
        status("unique_words", lang, count=stats.unique_word_count),
        status("unusual_words_removed", lang, threshold=stats.threshold, count=stats.unusual_words_removed),
        status("assigning_importance", lang, count=stats.candidate_count),
        "",
    ]
    if result.no_scorable_words:
        lines.append(status("no_keywords", lang))
    return lines


def write_report(result: ExtractionResult, sink: ResultSink, config: OutputConfig) -> None:
    """Write status lines (verbose mode only) followed by one line per keyword"""
    if config.verbose:
        for line in status_lines(result, config):
            sink.write_line(line)

    for keyword in result.keywords:
        sink.write_line(format_keyword(keyword, config))
