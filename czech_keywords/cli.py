"""
Command line interface.

Example:
    czech-keywords --input inputText.txt --output keywords.txt --simplePrint --language eng

Exit codes:
    0 - success, help shown, or missing/invalid option (hint printed)
    1 - nothing left to analyse after filtering
    2 - bad parameters, configuration, or input/output/corpus file
"""

import argparse
import logging
import sys
import warnings
from typing import List, Optional, TextIO

from . import __version__
from .config import Settings, load_environment
from .errors import DegenerateScoreRangeWarning, DocumentError, EmptyInputError, MalformedCorpusError
from .extraction.corpus import CorpusIndex
from .extraction.pipeline import extract_keywords
from .logging_config import setup_logging
from .messages import ERROR_MESSAGES, HELP_TEXT, Language
from .report import OutputConfig, write_report
from .sources import StreamResultSink, TextFileDocument, TsvCorpusFile

logger = logging.getLogger(__name__)


class CommandLineError(Exception):
    """Parameters could not be parsed"""


class _ArgumentParser(argparse.ArgumentParser):
    """Raises instead of printing an English usage message and exiting"""

    def error(self, message):
        raise CommandLineError(message)


def build_parser() -> argparse.ArgumentParser:
    """Argument parser; help is printed by main() in both languages"""
    parser = _ArgumentParser(prog="czech-keywords", add_help=False)
    parser.add_argument("--input", help="Document to analyse (UTF-8 text)")
    parser.add_argument("--output", help="Result file (default: stdout)")
    parser.add_argument("--simplePrint", "--simple-print", dest="simple_print", action="store_true",
                        help="Print keywords only")
    parser.add_argument("--language", default=Language.CZE.value,
                        help="Status output language: cze or eng")
    parser.add_argument("--corpus", help="Corpus TSV file (overrides KEYWORDS_CORPUS_PATH)")
    parser.add_argument("--help", "-?", "--man", dest="help", action="store_true")
    parser.add_argument("--version", action="store_true")
    return parser


def _fail(key: str, detail: Optional[str] = None, **values) -> None:
    print(ERROR_MESSAGES[key].format(**values), file=sys.stderr)
    if detail:
        print(detail, file=sys.stderr)


def main(argv: Optional[List[str]] = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    try:
        args, unknown = build_parser().parse_known_args(argv)
    except CommandLineError as e:
        _fail("invalid_arguments", detail=str(e))
        return 2

    # Print help message if no parameters or --help parameter specified
    if not argv or args.help:
        print(HELP_TEXT)
        return 0

    if args.version:
        print(f"czech-keywords {__version__}")
        return 0

    # Unknown options are reported and skipped
    if unknown:
        _fail("unknown_options", options=" ".join(unknown))

    load_environment()
    try:
        settings = Settings.from_env()
    except ValueError as e:
        _fail("invalid_configuration", detail=str(e))
        return 2

    setup_logging(log_file=settings.log_file, console_level=settings.log_level)

    if unknown:
        logger.debug(f"Ignored unknown options: {unknown}")

    if not args.input:
        _fail("missing_input")
        return 0

    try:
        language = Language(args.language)
    except ValueError:
        _fail("invalid_language")
        return 0

    config = OutputConfig(verbose=not args.simple_print, language=language)

    try:
        text = TextFileDocument(args.input).read_all()
    except DocumentError as e:
        _fail("input_unreadable", str(e))
        return 2

    # Output is opened before the analysis so a bad path fails fast
    if args.output:
        try:
            output = open(args.output, "w", encoding="utf-8")
        except OSError as e:
            _fail("output_unwritable", str(e))
            return 2
    else:
        output = sys.stdout

    try:
        return _run(text, args.corpus or settings.corpus_path, settings, config, output)
    finally:
        if output is not sys.stdout:
            output.close()


def _run(text: str, corpus_path: str, settings: Settings, config: OutputConfig, output: TextIO) -> int:
    """Load the corpus, extract keywords and write the report"""
    try:
        corpus = CorpusIndex(TsvCorpusFile(corpus_path).load_entries(), reject_duplicates=settings.strict_corpus)
    except MalformedCorpusError as e:
        _fail("corpus_unreadable", str(e))
        return 2

    try:
        with warnings.catch_warnings():
            # Already reported through logging
            warnings.simplefilter("ignore", DegenerateScoreRangeWarning)
            result = extract_keywords(
                text,
                corpus,
                stop_word_count=settings.stop_word_count,
                min_word_length=settings.min_word_length,
                top_k=settings.top_k,
                max_workers=settings.lookup_workers,
            )
    except EmptyInputError as e:
        logger.error(f"Extraction aborted: {e}")
        _fail("empty_input")
        return 1

    write_report(result, StreamResultSink(output), config)
    return 0


if __name__ == "__main__":
    sys.exit(main())
