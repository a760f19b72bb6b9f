"""Tests for keyword matching helpers."""

import pytest

from resumefit.scoring.matchers import (
    contains_keyword,
    count_found,
    keywords_in,
    normalize_keyword,
    round_half_up,
    unique_ci,
)


class TestKeywordMatching:
    def test_normalize(self):
        assert normalize_keyword("  PyThon ") == "python"

    def test_contains_is_case_insensitive_substring(self):
        assert contains_keyword("Deployed on AWS Lambda", "aws")
        assert contains_keyword("Deployed on AWS Lambda", "aws lambda")
        assert not contains_keyword("Deployed on AWS", "kubernetes")

    def test_blank_keyword_never_matches(self):
        assert not contains_keyword("anything", "   ")

    def test_count_found_counts_distinct_keywords(self):
        text = "Python services, more python, AWS"
        assert count_found(text, ["Python", "python", "AWS", "Go lang", ""]) == 2

    def test_keywords_in_keeps_input_order_and_spelling(self):
        text = "Built on AWS using Python"
        assert keywords_in(text, ["Python", "Rust", "aws", "PYTHON"]) == ["Python", "aws"]

    def test_unique_ci(self):
        assert unique_ci(["Python", "python", " ", "AWS"]) == ["python", "aws"]


class TestRoundHalfUp:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [(0.5, 1), (1.5, 2), (2.5, 3), (37.25, 37), (66.66, 67), (0.0, 0)],
    )
    def test_rounds_half_up(self, value, expected):
        assert round_half_up(value) == expected
