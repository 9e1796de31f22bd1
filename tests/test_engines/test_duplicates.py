"""Tests for W-2 / paystub duplicate detection."""

from decimal import Decimal

import pytest

from fedtax.engines.duplicates import DuplicateDetector, LabelOverlapSimilarity, SimilarityStrategy
from fedtax.models.income_entries import AnnualEntry, PeriodicEntry


def _w2(label, id="w2-1"):
    return AnnualEntry(id=id, employer_label=label, gross_wages=Decimal("50000"), federal_withheld=Decimal("5000"))


def _stub(label, id="stub-1"):
    return PeriodicEntry(
        id=id, employer_label=label,
        ytd_taxable_wages=Decimal("20000"), ytd_federal_withheld=Decimal("2000"),
    )


class TestLabelOverlapSimilarity:
    @pytest.mark.parametrize("first,second,expected", [
        ("acme corp", "acme corp", 0.8),
        ("acme", "acme corporation", 0.8),
        ("acme widgets inc", "acme tools inc", 2 / 3),
        ("acme widgets", "acme tools", 0.5),
        ("big co", "big store", 0.5),
        ("ab cd", "ab ef", 0.0),
        ("", "acme", 0.0),
    ])
    def test_score(self, first, second, expected):
        assert LabelOverlapSimilarity().score(first, second) == pytest.approx(expected)


class TestDuplicateDetector:
    def test_substring_match(self):
        report = DuplicateDetector().detect([_w2("Acme Corp")], [_stub("ACME")])
        assert report.has_potential_duplicates
        assert report.matches[0].annual_entry_id == "w2-1"
        assert report.matches[0].periodic_entry_id == "stub-1"
        assert '"Acme Corp"' in report.warning_message
        assert "double-counting" in report.warning_message

    def test_word_overlap_match(self):
        report = DuplicateDetector().detect([_w2("Acme Widgets Inc")], [_stub("Acme Tools Inc")])
        assert report.has_potential_duplicates

    def test_half_overlap_is_not_a_match(self):
        report = DuplicateDetector().detect([_w2("Acme Widgets")], [_stub("Acme Tools")])
        assert not report.has_potential_duplicates
        assert report.warning_message is None

    def test_unlabeled_entries_skipped(self):
        report = DuplicateDetector().detect([_w2(None), _w2("  ", id="w2-2")], [_stub(None)])
        assert report.matches == []

    def test_empty_inputs(self):
        assert not DuplicateDetector().detect([], []).has_potential_duplicates
        assert not DuplicateDetector().detect(None, None).has_potential_duplicates

    def test_names_listed_once(self):
        report = DuplicateDetector().detect(
            [_w2("Acme")], [_stub("Acme", id="s1"), _stub("acme inc", id="s2")]
        )
        assert len(report.matches) == 2
        assert report.warning_message.count("Acme") == 1

    def test_custom_strategy_and_threshold(self):
        class Always(SimilarityStrategy):
            def score(self, first, second):
                return 0.5

        assert DuplicateDetector(strategy=Always(), threshold=0.4).detect(
            [_w2("One")], [_stub("Two")]
        ).has_potential_duplicates
        assert not DuplicateDetector(strategy=Always()).detect(
            [_w2("One")], [_stub("Two")]
        ).has_potential_duplicates
