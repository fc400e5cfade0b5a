"""Tests for batch evaluation: row-aligned pairwise scoring and best-match search.

Row-level failures must never abort a batch; they come back as sentinel
values with a non-OK status while every other row is scored normally.
"""

import logging

import pytest

import tabfuzz as tfz
from tabfuzz.fixtures import DEFAULT_MASTER, DEFAULT_REFERENCE
from tabfuzz.results import SENTINEL_INDEX, SENTINEL_MATCH, SENTINEL_SCORE


class TestPairwise:
    """Tests for pairwise()."""

    def test_levenshtein(self):
        results = tfz.pairwise(["kitten", "Saturday"], ["sitting", "Sunday"], method="levenshtein")
        assert [r.score for r in results] == [3, 3]
        assert all(r.ok for r in results)

    def test_row_order_preserved(self):
        left = ["a", "ab", "abc", "abcd"]
        right = ["a", "a", "a", "a"]
        assert tfz.scores(left, right, method="levenshtein") == [0, 1, 2, 3]

    def test_hamming_length_mismatch_is_row_level(self):
        results = tfz.pairwise(["abc", "abc", "xyz"], ["abd", "ab", "xyz"], method="hamming")
        assert [r.score for r in results] == [1, SENTINEL_SCORE, 0]
        assert [r.status for r in results] == [
            tfz.RowStatus.OK,
            tfz.RowStatus.LENGTH_MISMATCH,
            tfz.RowStatus.OK,
        ]
        assert "equal length" in results[1].message

    def test_scores_helper(self):
        assert tfz.scores(["abc", "abc"], ["abd", "ab"], method="hamming") == [1, -1]

    def test_unequal_columns(self):
        with pytest.raises(tfz.ValidationError, match="equal length"):
            tfz.pairwise(["a", "b"], ["a"])

    def test_unknown_method_raises_before_rows(self):
        with pytest.raises(tfz.UnsupportedMethodError):
            tfz.pairwise(["a"], ["b"], method="nope")

    def test_invalid_prefix_weight(self):
        with pytest.raises(tfz.ValidationError):
            tfz.pairwise(["a"], ["b"], method="jaro_winkler", prefix_weight=0.9)

    def test_empty_columns(self):
        assert tfz.pairwise([], [], method="ratio") == []

    def test_none_is_empty_text(self):
        results = tfz.pairwise([None, None], ["", "abc"], method="ratio")
        assert [r.score for r in results] == [100.0, 0.0]

    def test_encoding_error_is_row_level(self):
        results = tfz.pairwise([b"\xff\xfe", "hello"], ["a", "hello"], method="ratio")
        assert results[0].status is tfz.RowStatus.ENCODING_ERROR
        assert results[0].score == SENTINEL_SCORE
        assert results[1].score == 100.0

    def test_bytes_cells_decoded(self):
        results = tfz.pairwise(["café".encode("utf-8")], ["café"], method="levenshtein")
        assert results[0].score == 0

    def test_nocase(self):
        results = tfz.pairwise(["JOHN SMITH"], ["john smith"], method="ratio", nocase=True)
        assert results[0].score == 100.0

    def test_prefix_weight(self):
        low = tfz.pairwise(["MARTHA"], ["MARHTA"], method="jaro_winkler", prefix_weight=0.0)
        high = tfz.pairwise(["MARTHA"], ["MARHTA"], method="jaro_winkler", prefix_weight=0.25)
        assert low[0].score == pytest.approx(tfz.jaro("MARTHA", "MARHTA"))
        assert high[0].score > low[0].score

    def test_summary_logged(self, caplog):
        with caplog.at_level(logging.INFO, logger="tabfuzz.batch"):
            tfz.pairwise(["abc", "abc"], ["abd", "ab"], method="hamming")
        assert "pairwise hamming: 2 rows, 1 failed" in caplog.text


class TestBestMatches:
    """Tests for best_matches()."""

    def test_default_fixture(self):
        results = tfz.best_matches(DEFAULT_MASTER, DEFAULT_REFERENCE, method="token_set")
        assert len(results) == len(DEFAULT_MASTER)
        by_master = dict(zip(DEFAULT_MASTER, results))
        assert by_master["Gogle"].text in ("Google LLC", "Google Inc")
        assert by_master["John Smith"].text == "John A. Smith"
        # ratio("apple inc", "google inc") = 60 beats ratio("apple", "apple inc") = 55.56
        assert by_master["Apple Inc"].text == "Google Inc"
        assert by_master["Apple Inc"].score == max(
            tfz.token_set_ratio("Apple Inc", r) for r in DEFAULT_REFERENCE
        )
        for result in results:
            assert result.ok
            assert DEFAULT_REFERENCE[result.id] == result.text

    def test_matches_single_query_search(self):
        results = tfz.best_matches(DEFAULT_MASTER, DEFAULT_REFERENCE, method="jaro_winkler")
        for query, result in zip(DEFAULT_MASTER, results):
            assert result == tfz.extract_one(query, DEFAULT_REFERENCE, method="jaro_winkler")

    def test_distance_method(self):
        results = tfz.best_matches(["kitten"], ["sitting", "mitten"], method="levenshtein")
        assert (results[0].text, results[0].id, results[0].score) == ("mitten", 1, 1)

    def test_empty_reference(self):
        results = tfz.best_matches(["a", "b"], [], method="ratio")
        for result in results:
            assert result.status is tfz.RowStatus.EMPTY_REFERENCE_LIST
            assert result.text == SENTINEL_MATCH
            assert result.id == SENTINEL_INDEX
            assert result.score == SENTINEL_SCORE

    def test_empty_master(self):
        assert tfz.best_matches([], ["a"]) == []

    def test_hamming_row_failure(self):
        results = tfz.best_matches(["abc", "ab"], ["abd", "xyz"], method="hamming")
        assert (results[0].text, results[0].score) == ("abd", 1)
        assert results[1].status is tfz.RowStatus.LENGTH_MISMATCH
        assert results[1].text == ""

    def test_invalid_reference_cell_skipped(self, caplog):
        with caplog.at_level(logging.WARNING, logger="tabfuzz.batch"):
            results = tfz.best_matches(["Google"], [b"\xff", "Amazon", "Google LLC"])
        # The index still refers to the caller's reference list
        assert (results[0].text, results[0].id) == ("Google LLC", 2)
        assert "skipping reference entry 0" in caplog.text

    def test_invalid_master_cell(self):
        results = tfz.best_matches([b"\xff", "Amazn"], ["Amazon"])
        assert results[0].status is tfz.RowStatus.ENCODING_ERROR
        assert results[1].text == "Amazon"

    def test_none_master_cell(self):
        results = tfz.best_matches([None], ["abc", ""], method="ratio")
        assert (results[0].id, results[0].score) == (1, 100.0)

    def test_nocase_reports_original_text(self):
        results = tfz.best_matches(["APPLE INC"], ["Apple Inc", "Apple Computer"], nocase=True)
        assert results[0].text == "Apple Inc"

    def test_pruning_flag(self):
        pruned = tfz.best_matches(DEFAULT_MASTER, DEFAULT_REFERENCE, method="ratio", prune=True)
        full = tfz.best_matches(DEFAULT_MASTER, DEFAULT_REFERENCE, method="ratio", prune=False)
        assert pruned == full

    def test_progress_logged(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="tabfuzz.batch"):
            tfz.best_matches(DEFAULT_MASTER, DEFAULT_REFERENCE)
        assert f"matched {len(DEFAULT_MASTER)} of {len(DEFAULT_MASTER)}" in caplog.text
