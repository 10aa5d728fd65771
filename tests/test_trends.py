# tests/test_trends.py

"""
Trend Aggregator Tests - founding-year buckets and theme percentages
"""

from compass.models.enumerations import Theme
from compass.services.trend_service import aggregate_trends, founding_year


class TestFoundingYear:

    def test_parsed_from_date(self, company_factory):
        assert founding_year(company_factory("A", founded_date="2019-03-01")) == 2019

    def test_year_only(self, company_factory):
        assert founding_year(company_factory("A", founded_date="2015")) == 2015

    def test_unreadable(self, company_factory):
        assert founding_year(company_factory("A", founded_date="unknown")) is None
        assert founding_year(company_factory("A")) is None


class TestAggregateTrends:
    """Tests for per-year theme shares."""

    def test_percentages_per_year(self, company_factory):
        companies = [
            company_factory("A", [Theme.AI], founded_date="2020-01-10"),
            company_factory("B", [Theme.AI, Theme.SAAS], founded_date="2020-05-01"),
            company_factory("C", [], founded_date="2020-11-30"),
        ]
        (trend,) = aggregate_trends(companies, current_year=2025)
        assert trend.year == 2020
        assert trend.ai == 66.7
        assert trend.saas == 33.3
        assert trend.climate == 0.0
        assert trend.consumer == 0.0

    def test_years_ascending(self, company_factory):
        companies = [
            company_factory("A", [Theme.FINTECH], founded_date="2022"),
            company_factory("B", [Theme.CLIMATE], founded_date="2018"),
            company_factory("C", [Theme.HEALTHCARE], founded_date="2020"),
        ]
        trends = aggregate_trends(companies, current_year=2025)
        assert [t.year for t in trends] == [2018, 2020, 2022]
        assert trends[0].climate == 100.0

    def test_years_outside_window_skipped(self, company_factory):
        companies = [
            company_factory("Old", [Theme.AI], founded_date="1985-05-05"),
            company_factory("Edge", [Theme.AI], founded_date="1990-12-31"),
            company_factory("Future", [Theme.AI], founded_date="2031-01-01"),
            company_factory("Undated", [Theme.AI]),
            company_factory("Kept", [Theme.AI], founded_date="1991-01-01"),
        ]
        trends = aggregate_trends(companies, current_year=2030)
        assert [t.year for t in trends] == [1991]

    def test_current_year_inclusive(self, company_factory):
        trends = aggregate_trends(
            [company_factory("Now", [Theme.SAAS], founded_date="2030-06-01")],
            current_year=2030,
        )
        assert [t.year for t in trends] == [2030]

    def test_themes_are_non_exclusive(self, company_factory):
        (trend,) = aggregate_trends(
            [company_factory("All", list(Theme), founded_date="2021")],
            current_year=2025,
        )
        payload = trend.model_dump(by_alias=True)
        assert payload == {
            "year": 2021,
            "AI": 100.0,
            "Climate": 100.0,
            "Fintech": 100.0,
            "Healthcare": 100.0,
            "SaaS": 100.0,
            "Consumer": 100.0,
        }

    def test_empty(self):
        assert aggregate_trends([], current_year=2025) == []
