"""Tests for Jaro and Jaro-Winkler similarity."""

import pytest

import tabfuzz as tfz
from tabfuzz._core.jaro import MAX_PREFIX_LENGTH


class TestJaro:
    """Tests for Jaro similarity."""

    def test_identical(self):
        assert tfz.jaro("hello", "hello") == 100.0

    def test_classic_examples(self):
        assert tfz.jaro("MARTHA", "MARHTA") == pytest.approx(94.4444, abs=1e-3)
        assert tfz.jaro("DIXON", "DICKSONX") == pytest.approx(76.6667, abs=1e-3)
        assert tfz.jaro("DWAYNE", "DUANE") == pytest.approx(82.2222, abs=1e-3)

    def test_empty(self):
        assert tfz.jaro("", "") == 100.0, "Two empty strings are identical"
        assert tfz.jaro("abc", "") == 0.0
        assert tfz.jaro("", "abc") == 0.0

    def test_no_common_characters(self):
        assert tfz.jaro("abc", "xyz") == 0.0

    def test_matching_window(self):
        # Matching characters further apart than max(len)//2 - 1 do not count
        assert tfz.jaro("ab", "ba") == 0.0

    def test_symmetric(self):
        assert tfz.jaro("DIXON", "DICKSONX") == pytest.approx(tfz.jaro("DICKSONX", "DIXON"))


class TestJaroWinkler:
    """Tests for Jaro-Winkler similarity."""

    def test_classic_examples(self):
        assert tfz.jaro_winkler("MARTHA", "MARHTA") == pytest.approx(96.1111, abs=1e-3)
        assert tfz.jaro_winkler("DIXON", "DICKSONX") == pytest.approx(81.3333, abs=1e-3)
        assert tfz.jaro_winkler("DWAYNE", "DUANE") == pytest.approx(84.0, abs=1e-3)

    def test_at_least_jaro(self):
        for a, b in [("MARTHA", "MARHTA"), ("John Smith", "Jon Smith"), ("abc", "xyz")]:
            assert tfz.jaro_winkler(a, b) >= tfz.jaro(a, b)

    def test_zero_prefix_weight_is_jaro(self):
        assert tfz.jaro_winkler("MARTHA", "MARHTA", prefix_weight=0.0) == pytest.approx(
            tfz.jaro("MARTHA", "MARHTA")
        )

    def test_no_boost_below_threshold(self):
        # Jaro is 66.67 here, so the shared "ab" prefix earns nothing
        assert tfz.jaro("abcd", "abxy") == pytest.approx(66.6667, abs=1e-3)
        assert tfz.jaro_winkler("abcd", "abxy") == pytest.approx(tfz.jaro("abcd", "abxy"))

    def test_prefix_capped(self):
        assert MAX_PREFIX_LENGTH == 4
        # jaro = 91.67; only 4 of the 7 shared prefix characters count
        assert tfz.jaro_winkler("abcdefgh", "abcdefgx") == pytest.approx(95.0, abs=1e-3)

    def test_max_prefix_weight_stays_in_range(self):
        assert tfz.jaro_winkler("abcd", "abcd", prefix_weight=0.25) == 100.0
        assert tfz.jaro_winkler("abcdefgh", "abcdefgx", prefix_weight=0.25) <= 100.0

    def test_prefix_weight_through_dispatcher(self):
        default = tfz.score("MARTHA", "MARHTA", method="jaro_winkler")
        heavier = tfz.score("MARTHA", "MARHTA", method="jaro_winkler", prefix_weight=0.2)
        assert heavier > default

    def test_prefix_weight_out_of_range(self):
        with pytest.raises(tfz.ValidationError, match="prefix_weight"):
            tfz.score("a", "b", method="jaro_winkler", prefix_weight=0.3)
        with pytest.raises(tfz.ValidationError):
            tfz.score("a", "b", method="jaro_winkler", prefix_weight=-0.1)
