"""Edge case tests: empty strings, Unicode, very long strings and realistic data."""

import pytest

import tabfuzz as tfz

from fixtures.real_data import INTERNATIONAL_NAMES, MISSPELLINGS, PERSON_NAME_PAIRS


class TestEmptyStrings:
    @pytest.mark.parametrize(
        "method",
        [m for m in tfz.Method if m.kind is tfz.MethodKind.SIMILARITY],
        ids=lambda m: m.value,
    )
    def test_both_empty_is_identical(self, method):
        assert tfz.score("", "", method=method) == 100.0

    @pytest.mark.parametrize(
        "method",
        [m for m in tfz.Method if m.kind is tfz.MethodKind.DISTANCE],
        ids=lambda m: m.value,
    )
    def test_both_empty_distance_zero(self, method):
        assert tfz.score("", "", method=method) == 0

    @pytest.mark.parametrize(
        "method",
        [
            m
            for m in tfz.Method
            if m.kind is tfz.MethodKind.SIMILARITY and m not in (tfz.Method.NORM_HAMMING,)
        ],
        ids=lambda m: m.value,
    )
    def test_one_empty_scores_zero(self, method):
        assert tfz.score("abc", "", method=method) == 0.0
        assert tfz.score("", "abc", method=method) == 0.0

    def test_whitespace_only_has_no_tokens(self):
        assert tfz.token_set_ratio("   ", "\t") == 100.0
        assert tfz.token_sort_ratio("   ", "abc") == 0.0


class TestUnicode:
    @pytest.mark.parametrize("name", INTERNATIONAL_NAMES)
    def test_identity(self, name):
        assert tfz.ratio(name, name) == 100.0
        assert tfz.jaro_winkler(name, name) == 100.0
        assert tfz.levenshtein(name, name) == 0

    def test_code_point_distance(self):
        assert tfz.levenshtein("北京大学", "北京") == 2
        assert tfz.hamming_distance("Zoë", "Zoe") == 1

    def test_nocase_unicode(self):
        assert tfz.score("VLADIMIR", "vladimir", method="ratio", nocase=True) == 100.0
        assert tfz.score("ВЛАДИМИР", "Владимир", method="ratio", nocase=True) == 100.0

    def test_emoji(self):
        assert tfz.levenshtein("👍", "👎") == 1


class TestLongStrings:
    def test_long_identical(self):
        text = "abcdefghij" * 100
        assert tfz.ratio(text, text) == 100.0
        assert tfz.levenshtein(text, text[:-1]) == 1

    def test_long_partial(self):
        needle = "needle"
        haystack = "x" * 500 + needle + "y" * 500
        assert tfz.partial_ratio(needle, haystack) == 100.0


class TestRealData:
    @pytest.mark.parametrize("a, b, minimum", PERSON_NAME_PAIRS)
    def test_name_variants(self, a, b, minimum):
        assert tfz.jaro_winkler(a, b) >= minimum

    @pytest.mark.parametrize("wrong, right", MISSPELLINGS)
    def test_misspellings_one_edit(self, wrong, right):
        assert tfz.osa_distance(wrong, right) == 1
        assert tfz.levenshtein(wrong, right) <= 2
