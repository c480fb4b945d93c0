"""Tests for trigram similarity scoring."""

import unicodedata

import pytest

from isoidentity.utils.similarity import (
    graphemes,
    similarity,
    trigrams,
    word_similarity,
)


class TestGraphemes:
    def test_plain_ascii(self):
        assert graphemes("TEXAS") == ["T", "E", "X", "A", "S"]

    def test_combining_marks_stay_with_base(self):
        decomposed = unicodedata.normalize("NFD", "Yucatán")
        clusters = graphemes(decomposed)
        assert len(clusters) == 7
        assert clusters[5] == "a\u0301"

    def test_empty(self):
        assert graphemes("") == []


class TestTrigrams:
    def test_sliding_window(self):
        assert trigrams("TEXAS") == frozenset({"TEX", "EXA", "XAS"})

    def test_duplicates_collapse(self):
        assert trigrams("AAAA") == frozenset({"AAA"})

    @pytest.mark.parametrize("text", ["", "A", "TX"])
    def test_short_strings_have_none(self, text):
        assert trigrams(text) == frozenset()

    def test_input_used_as_given(self):
        """No normalization: case matters"""
        assert trigrams("Tex") != trigrams("TEX")

    def test_grapheme_count_not_code_points(self):
        decomposed = unicodedata.normalize("NFD", "né")
        # n + e + U+0301 is two graphemes, so no trigram
        assert trigrams(decomposed) == frozenset()


class TestSimilarity:
    """similarity(): Jaccard over normalized trigram sets"""

    @pytest.mark.parametrize("text", ["Texas", "Yucatán", "Co. Wicklow", "West Virginia", "abc"])
    def test_self_similarity_is_one(self, text):
        assert similarity(text, text) == 1.0

    @pytest.mark.parametrize("a,b", [
        ("Texas", "Tennessee"),
        ("Virginia", "West Virginia"),
        ("Veracruz", "Veracruz de Ignacio de la Llave"),
        ("Alberta", "Ontario"),
        ("", "Texas"),
    ])
    def test_symmetric(self, a, b):
        assert similarity(a, b) == similarity(b, a)

    def test_case_and_accent_insensitive(self):
        assert similarity("YucatAN", "Yucatán") == 1.0
        assert similarity("texas", "TEXAS") == 1.0

    def test_disjoint_is_zero(self):
        assert similarity("Texas", "Ohio") == 0.0

    @pytest.mark.parametrize("a,b", [("ab", "ab"), ("TX", "TX"), ("", ""), (None, None), ("--", "..")])
    def test_too_short_is_zero(self, a, b):
        assert similarity(a, b) == 0.0

    def test_jaccard_value(self):
        # VIRGINIA: 6 trigrams, all shared; WEST VIRGINIA: 11 trigrams
        assert similarity("Virginia", "West Virginia") == pytest.approx(6 / 11)

    def test_range(self):
        for a, b in [("Texas", "Taxes"), ("Ontario", "Ontarion"), ("Dublin", "Doublin")]:
            assert 0.0 <= similarity(a, b) <= 1.0


class TestWordSimilarity:
    """word_similarity(): best match against the words of a phrase"""

    def test_best_word_wins(self):
        assert word_similarity("Wicklow", "Co. Wicklow") == 1.0
        assert word_similarity("Virginia", "West Virginia") == 1.0

    def test_direction_matters(self):
        # "West Virginia" is compared against "Virginia" as a whole
        assert word_similarity("West Virginia", "Virginia") == pytest.approx(6 / 11)

    @pytest.mark.parametrize("phrase", ["", "   ", None])
    def test_no_words(self, phrase):
        assert word_similarity("Virginia", phrase) == 0.0

    def test_single_word_equals_similarity(self):
        assert word_similarity("Texas", "Taxes") == similarity("Texas", "Taxes")
