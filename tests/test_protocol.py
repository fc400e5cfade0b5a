"""Tests for the host command protocol: argument parsing and execution."""

import polars as pl
import pytest

import tabfuzz as tfz
from tabfuzz.fixtures import DEFAULT_MASTER, DEFAULT_REFERENCE
from tabfuzz.protocol import Invocation, MatchResponse, PairwiseResponse, execute, parse_invocation


class TestParseInvocation:
    def test_pairwise(self):
        invocation = parse_invocation(["pairwise", "levenshtein"])
        assert invocation.mode is tfz.Mode.PAIRWISE
        assert invocation.method is tfz.Method.LEVENSHTEIN
        assert invocation.options == tfz.ScoringOptions()

    def test_match_alias(self):
        assert parse_invocation(["match", "ratio"]).mode is tfz.Mode.BEST_MATCH
        assert parse_invocation(["best_match", "ratio"]).mode is tfz.Mode.BEST_MATCH

    def test_options(self):
        invocation = parse_invocation(["pairwise", "jaro_winkler", "nocase", "pw=0.2"])
        assert invocation.options.nocase is True
        assert invocation.options.prefix_weight == 0.2

    def test_options_case_insensitive(self):
        invocation = parse_invocation(["pairwise", "jaro_winkler", "NOCASE", "PW=0.05"])
        assert invocation.options == tfz.ScoringOptions(nocase=True, prefix_weight=0.05)

    def test_method_alias(self):
        assert parse_invocation(["pairwise", "norm_lev"]).method is tfz.Method.NORMALIZED_LEVENSHTEIN

    def test_missing_mode(self):
        with pytest.raises(tfz.ValidationError, match="requires mode"):
            parse_invocation([])

    def test_missing_method(self):
        with pytest.raises(tfz.ValidationError, match="requires method"):
            parse_invocation(["pairwise"])

    def test_unknown_mode(self):
        with pytest.raises(tfz.ValidationError):
            parse_invocation(["cross", "ratio"])

    def test_unknown_method(self):
        with pytest.raises(tfz.UnsupportedMethodError):
            parse_invocation(["pairwise", "metaphone"])

    def test_unknown_option(self):
        with pytest.raises(tfz.ValidationError, match="unknown option"):
            parse_invocation(["pairwise", "ratio", "fast"])

    def test_bad_prefix_weight(self):
        with pytest.raises(tfz.ValidationError, match="pw must be a number"):
            parse_invocation(["pairwise", "jaro_winkler", "pw=abc"])
        with pytest.raises(tfz.ValidationError, match="prefix_weight"):
            parse_invocation(["pairwise", "jaro_winkler", "pw=0.5"])

    @pytest.mark.parametrize(
        "args",
        [[5, "ratio"], ["pairwise", None], ["pairwise", "ratio", 5], ["match", "ratio", b"nocase"]],
    )
    def test_non_string_argument(self, args):
        with pytest.raises(tfz.ValidationError, match="must be a string"):
            parse_invocation(args)

    def test_non_string_option_through_call(self):
        with pytest.raises(tfz.ValidationError):
            tfz.call(["pairwise", "ratio", 5], left=["a"], right=["a"])


class TestExecute:
    def test_pairwise(self):
        response = tfz.call(["pairwise", "levenshtein"], left=["kitten"], right=["sitting"])
        assert isinstance(response, PairwiseResponse)
        assert response.scores == [3]
        assert response.n_failed == 0

    def test_pairwise_failures(self):
        response = tfz.call(["pairwise", "hamming"], left=["abc", "abc"], right=["abd", "ab"])
        assert response.scores == [1, -1]
        assert response.n_failed == 1

    def test_pairwise_frame(self):
        response = tfz.call(["pairwise", "ratio", "nocase"], left=["JOHN"], right=["john"])
        frame = response.to_frame()
        assert frame.columns == ["score", "status"]
        assert frame["score"].dtype == pl.Float64
        assert frame.row(0) == (100.0, "ok")

    def test_match(self):
        response = tfz.call(["match", "token_set"], master=DEFAULT_MASTER, reference=DEFAULT_REFERENCE)
        assert isinstance(response, MatchResponse)
        assert len(response.results) == len(DEFAULT_MASTER)
        gogle = response.results[DEFAULT_MASTER.index("Gogle")]
        assert gogle.text in ("Google LLC", "Google Inc")

    def test_match_frame(self):
        response = tfz.call(["match", "levenshtein"], master=["kitten", None], reference=["mitten"])
        frame = response.to_frame()
        assert frame.columns == ["master", "best_match", "best_index", "score", "status"]
        assert frame["score"].dtype == pl.Int64
        assert frame.row(0) == ("kitten", "mitten", 0, 1, "ok")
        assert frame["master"][1] is None

    def test_match_empty_reference(self):
        response = tfz.call(["match", "ratio"], master=["a"], reference=[])
        assert response.n_failed == 1
        assert response.results[0].status is tfz.RowStatus.EMPTY_REFERENCE_LIST

    def test_missing_columns(self):
        with pytest.raises(tfz.ValidationError, match="left and right"):
            execute(Invocation(tfz.Mode.PAIRWISE, tfz.Method.RATIO), left=["a"])
        with pytest.raises(tfz.ValidationError, match="master and reference"):
            execute(Invocation(tfz.Mode.BEST_MATCH, tfz.Method.RATIO), master=["a"])

    def test_unequal_pairwise_columns(self):
        with pytest.raises(tfz.ValidationError):
            tfz.call(["pairwise", "ratio"], left=["a", "b"], right=["a"])

    def test_bytes_master_displayed(self):
        response = tfz.call(["match", "ratio"], master=[b"abc"], reference=["abc"])
        assert response.to_frame()["master"].to_list() == ["abc"]
