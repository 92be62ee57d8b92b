"""Fuzzy Filter tests — subsequence matching and ranking of candidate names.

Tests cover:
    - Empty pattern returns every candidate in original order
    - "fo" over ["foo", "bar", "foobar"] keeps foo and foobar, drops bar
    - Case-insensitive matching, original casing returned
    - Out-of-order characters do not match
    - Contiguous runs outrank scattered matches
    - Exact match ranks first
    - Ties keep original order
    - Rendered form wraps matched characters; filter_names returns originals
    - Inputs never mutated
"""

import math

from scriptops.core.fuzzy_filter import filter_names, fuzzy_filter, fuzzy_match


def test_empty_pattern_returns_catalog_in_order():
    catalog = ["zeta", "alpha", "", "alpha", "Mid"]
    assert filter_names("", catalog) == catalog


def test_fo_matches_foo_and_foobar_not_bar():
    result = filter_names("fo", ["foo", "bar", "foobar"])
    assert "foo" in result
    assert "foobar" in result
    assert "bar" not in result


def test_case_insensitive_returns_original_casing():
    assert filter_names("ONOP", ["onOpen", "doGet"]) == ["onOpen"]


def test_characters_must_appear_in_order():
    assert filter_names("ba", ["abc"]) == []
    assert filter_names("ac", ["abc"]) == ["abc"]


def test_contiguous_run_outranks_scattered_match():
    result = filter_names("get", ["gxextx", "doGet"])
    assert result == ["doGet", "gxextx"]


def test_exact_match_ranks_first():
    result = filter_names("run", ["runAll", "run", "rerun"])
    assert result[0] == "run"
    score, _ = fuzzy_match("run", "RUN")
    assert score == math.inf


def test_ties_keep_original_order():
    assert filter_names("x", ["ax", "bx", "cx"]) == ["ax", "bx", "cx"]


def test_rendered_wraps_matched_characters():
    _, rendered = fuzzy_match("og", "doGet", "<", ">")
    assert rendered == "d<o><G>et"


def test_filter_results_carry_original_and_index():
    results = fuzzy_filter("b", ["abc", "xyz", "b"], "<", ">")
    assert [r.original for r in results] == ["b", "abc"]
    assert results[1].rendered == "a<b>c"
    assert results[1].index == 0


def test_no_match_returns_none():
    assert fuzzy_match("zz", "foo") is None


def test_inputs_not_mutated():
    catalog = ["b", "a", "ab"]
    filter_names("a", catalog)
    assert catalog == ["b", "a", "ab"]
