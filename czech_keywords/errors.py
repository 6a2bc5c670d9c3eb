"""Exception and warning types raised by the extraction pipeline and its I/O"""


class KeywordExtractionError(Exception):
    """Base class for all keyword extraction failures"""


class EmptyInputError(KeywordExtractionError):
    """No tokens left after stop-word and short-word filtering.

    The cutoff threshold is a logarithm of the token count, so an empty
    document cannot be analysed at all. This is the only pipeline error that
    reaches the caller.
    """

    def __init__(self, message: str = "No words left to analyse after filtering"):
        super().__init__(message)


class NoScorableWordsError(KeywordExtractionError):
    """None of the candidate words appear in the corpus.

    Raised by the scorer and absorbed by the pipeline into an empty result.
    """

    def __init__(self, candidate_count: int):
        self.candidate_count = candidate_count
        super().__init__(f"None of {candidate_count} candidate words were found in the corpus")


class MalformedCorpusError(KeywordExtractionError):
    """Corpus file is missing, empty, or violates the strict duplicate policy"""


class DocumentError(KeywordExtractionError):
    """Input document could not be read or decoded, with actionable message"""


class DegenerateScoreRangeWarning(UserWarning):
    """All raw scores are equal, so every keyword gets the midpoint score"""
