"""
Unit tests for the keyword tokenizer.
"""

import pytest
from czech_keywords.extraction.tokenizer import STRIPPED_CHARACTERS, normalize_token, tokenize


class TestTokenizer:
    """Test word splitting, stripping and lowercasing"""

    def test_basic_tokenization(self):
        """Words are split on whitespace and lowercased"""
        assert tokenize("Kočka leze dírou") == ["kočka", "leze", "dírou"]

    def test_punctuation_and_digits(self):
        """Punctuation and digits are stripped; pure digit runs become empty tokens"""
        tokens = tokenize("Hello, World! 123")
        assert tokens == ["hello", "world", ""]
        # Empty artifacts carry no meaning and are removed by the short-word filter
        assert [t for t in tokens if t] == ["hello", "world"]

    def test_deletion_not_replacement(self):
        """Stripped characters are deleted in place, words are not split"""
        assert tokenize("don't") == ["dont"]
        assert tokenize("(ne)známý") == ["neznámý"]
        assert tokenize("Covid19") == ["covid"]

    def test_en_dash_removed_hyphen_kept(self):
        """The en dash is stripped but an ASCII hyphen is part of the word"""
        assert tokenize("Praha – Brno") == ["praha", "", "brno"]
        assert tokenize("česko-slovenský") == ["česko-slovenský"]

    def test_diacritics_preserved(self):
        """Lowercasing keeps accents: tokens are accent-sensitive"""
        assert tokenize("ŽLUŤOUČKÝ KŮŇ") == ["žluťoučký", "kůň"]

    def test_newlines_separate_words(self):
        """Words on adjacent lines never merge"""
        assert tokenize("první\ndruhý\r\ntřetí\tčtvrtý") == ["první", "druhý", "třetí", "čtvrtý"]

    def test_empty_string(self):
        """Empty or whitespace-only text yields no tokens"""
        assert tokenize("") == []
        assert tokenize("   ") == []
        assert tokenize("\n\t") == []

    def test_duplicates_preserved(self):
        """Every occurrence is a separate token"""
        assert tokenize("pes pes Pes") == ["pes", "pes", "pes"]

    def test_tokens_are_clean(self):
        """No token contains uppercase or stripped characters"""
        text = 'Věta: "Ahoj" (2024) [poznámka] {x} | konec; opravdu? Ano! 3,14.'
        for token in tokenize(text):
            assert token == token.lower()
            assert not any(c in STRIPPED_CHARACTERS for c in token)

    @pytest.mark.parametrize("run,expected", [
        ("Praha.", "praha"),
        ("„citát“", "„citát“"),
        ("[1]", ""),
        ("{A|B}", "ab"),
    ])
    def test_normalize_token(self, run, expected):
        """Only the fixed character set is stripped"""
        assert normalize_token(run) == expected
