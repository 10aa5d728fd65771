# tests/test_summary.py

"""
Summary Service Tests - dashboard KPIs and score distribution
"""

import pytest

from compass.models.enumerations import ScoreCategory, Theme
from compass.services.summary_service import (
    bin_index,
    build_summary,
    filter_companies,
    headquarters_city,
    location_rollup,
    score_distribution,
    score_percentile,
)


class TestBuildSummary:

    def test_empty_batch(self):
        assert build_summary([]) is None

    def test_kpis(self, company_factory):
        companies = [
            company_factory("A", [Theme.AI], 0, comprehensive=10.0),
            company_factory("B", [Theme.SAAS], 1, comprehensive=30.0),
            company_factory("C", [], 2, comprehensive=50.0),
            company_factory("D", [Theme.CLIMATE], 3, comprehensive=90.0),
        ]
        summary = build_summary(companies)
        assert summary.company_count == 4
        assert summary.median_score == 40.0
        assert summary.ai_saturation == 25.0
        assert summary.high_potential_count == 1

    def test_potential_threshold_is_exclusive(self, company_factory):
        summary = build_summary([company_factory("Edge", comprehensive=80.0)])
        assert summary.high_potential_count == 0


class TestScoreDistribution:
    """Tests for the five-bucket histogram."""

    @pytest.mark.parametrize("score, expected", [
        (0.0, 0),
        (20.0, 0),
        (20.5, 1),
        (40.0, 1),
        (60.01, 3),
        (100.0, 4),
    ])
    def test_bin_index(self, score, expected):
        assert bin_index(score) == expected

    def test_counts_and_percentages(self, company_factory):
        companies = [
            company_factory("A", idx=0, comprehensive=10.0),
            company_factory("B", idx=1, comprehensive=20.5),
            company_factory("C", idx=2, comprehensive=50.0),
            company_factory("D", idx=3, comprehensive=100.0),
        ]
        dist = score_distribution(companies)
        assert dist.metric == ScoreCategory.COMPREHENSIVE
        assert dist.company_count == 4
        assert [b.count for b in dist.bins] == [1, 1, 1, 0, 1]
        assert [b.percentage for b in dist.bins] == [25.0, 25.0, 25.0, 0.0, 25.0]
        assert dist.median == 35.3

    def test_bins_cover_every_company(self, company_factory):
        scores = [0.0, 20.2, 40.9, 60.5, 80.7, 99.9]
        companies = [company_factory(f"C{i}", idx=i, comprehensive=s) for i, s in enumerate(scores)]
        dist = score_distribution(companies)
        assert sum(b.count for b in dist.bins) == len(scores)

    def test_year_range_filter(self, company_factory):
        companies = [
            company_factory("Old", idx=0, comprehensive=10.0, founded_date="2005"),
            company_factory("Mid", idx=1, comprehensive=50.0, founded_date="2015"),
            company_factory("New", idx=2, comprehensive=90.0, founded_date="2022"),
            company_factory("Undated", idx=3, comprehensive=70.0),
        ]
        dist = score_distribution(companies, ScoreCategory.FUNDING, year_range=(2010, 2022))
        assert dist.metric == ScoreCategory.FUNDING
        assert dist.company_count == 2
        assert [b.count for b in dist.bins] == [0, 0, 1, 0, 1]

    def test_empty(self):
        dist = score_distribution([])
        assert dist.company_count == 0
        assert dist.median == 0.0
        assert all(b.percentage == 0.0 for b in dist.bins)


class TestScorePercentile:

    def test_share_strictly_below(self):
        assert score_percentile(50.0, [10.0, 20.0, 50.0, 90.0]) == 50.0

    def test_empty(self):
        assert score_percentile(50.0, []) == 0.0


class TestFilterCompanies:

    def _batch(self, company_factory):
        return [
            company_factory("Acme", [Theme.AI], 0, comprehensive=70.0, last_funding_type="Series A"),
            company_factory("Grid", [Theme.CLIMATE], 1, comprehensive=40.0, last_funding_type="Seed"),
            company_factory("Pay", [Theme.FINTECH, Theme.SAAS], 2, comprehensive=55.0,
                            last_funding_type="Pre-Seed"),
            company_factory("Quiet", [], 3, comprehensive=20.0),
        ]

    def test_no_filters_keeps_all(self, company_factory):
        batch = self._batch(company_factory)
        assert filter_companies(batch) == batch

    def test_min_score_is_inclusive(self, company_factory):
        names = [c.name for c in filter_companies(self._batch(company_factory), min_score=55.0)]
        assert names == ["Acme", "Pay"]

    def test_any_selected_theme(self, company_factory):
        selected = filter_companies(self._batch(company_factory), themes=[Theme.AI, Theme.SAAS])
        assert [c.name for c in selected] == ["Acme", "Pay"]

    def test_stage_substring_match(self, company_factory):
        selected = filter_companies(self._batch(company_factory), stages=["Seed"])
        # "pre-seed" contains "seed" too
        assert [c.name for c in selected] == ["Grid", "Pay"]

    def test_hyphenated_stage_label(self, company_factory):
        batch = [
            company_factory("A", last_funding_type="Preseed"),
            company_factory("B", last_funding_type="Pre-Seed"),
        ]
        # Only the first hyphen is dropped from the selected label
        assert [c.name for c in filter_companies(batch, stages=["Pre-Seed"])] == ["A"]

    def test_missing_funding_type_excluded_by_stage(self, company_factory):
        selected = filter_companies(self._batch(company_factory), stages=["Series A"])
        assert [c.name for c in selected] == ["Acme"]

    def test_filters_combine(self, company_factory):
        selected = filter_companies(
            self._batch(company_factory), min_score=50.0, themes=[Theme.CLIMATE, Theme.FINTECH],
        )
        assert [c.name for c in selected] == ["Pay"]


class TestLocationRollup:

    def test_headquarters_city(self, company_factory):
        assert headquarters_city(company_factory("A", location="San Francisco, California, US")) == "san francisco"
        assert headquarters_city(company_factory("B", location="  Berlin ")) == "berlin"
        assert headquarters_city(company_factory("C")) == ""

    def test_groups_by_city(self, company_factory):
        companies = [
            company_factory("A", idx=0, comprehensive=40.0, location="Austin, Texas"),
            company_factory("B", idx=1, comprehensive=70.0, location="Boston, Massachusetts"),
            company_factory("C", idx=2, comprehensive=61.0, location="austin, TX, USA"),
            company_factory("D", idx=3, comprehensive=10.0, location="Austin"),
        ]
        rollups = location_rollup(companies)
        assert [r.city for r in rollups] == ["austin", "boston"]

        austin = rollups[0]
        assert austin.count == 3
        assert austin.average_score == 37.0
        assert austin.top_company == "C"
        assert rollups[1].average_score == 70.0

    def test_average_rounded_to_one_place(self, company_factory):
        companies = [
            company_factory("A", idx=0, comprehensive=10.0, location="Oslo"),
            company_factory("B", idx=1, comprehensive=10.0, location="Oslo"),
            company_factory("C", idx=2, comprehensive=10.5, location="Oslo"),
        ]
        # 30.5 / 3 = 10.1666...
        assert location_rollup(companies)[0].average_score == 10.2

    def test_tie_keeps_first_company(self, company_factory):
        companies = [
            company_factory("First", idx=0, comprehensive=50.0, location="Paris, France"),
            company_factory("Second", idx=1, comprehensive=50.0, location="Paris, France"),
        ]
        assert location_rollup(companies)[0].top_company == "First"

    def test_companies_without_location_skipped(self, company_factory):
        companies = [
            company_factory("A", idx=0, location=""),
            company_factory("B", idx=1),
            company_factory("C", idx=2, location=", Nowhere"),
        ]
        assert location_rollup(companies) == []

    def test_equal_counts_keep_first_seen_order(self, company_factory):
        companies = [
            company_factory("A", idx=0, location="Denver"),
            company_factory("B", idx=1, location="Chicago"),
        ]
        assert [r.city for r in location_rollup(companies)] == ["denver", "chicago"]
