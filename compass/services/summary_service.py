"""
Dashboard Summary & Score Distribution
compass/services/summary_service.py

Headline statistics for a scored batch, the five-bucket histogram used
by the "view by metric" control, and the filtered headquarters-city rollup.
"""

from __future__ import annotations

from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from compass.models.analysis import CityRollup, DashboardSummary, ScoreBin, ScoreDistribution
from compass.models.company import ScoredCompany
from compass.models.enumerations import ScoreCategory, Theme
from compass.pipelines.utils import parse_year
from compass.scoring.utils import median, round_half_up

HIGH_POTENTIAL_THRESHOLD = 80.0

# A score goes to the first bucket whose upper bound covers it (20.5 -> "21-40")
SCORE_BINS: List[Tuple[str, int, int]] = [
    ("0-20", 0, 20),
    ("21-40", 21, 40),
    ("41-60", 41, 60),
    ("61-80", 61, 80),
    ("81-100", 81, 100),
]


def bin_index(score: float) -> int:
    for idx, (_, _, upper) in enumerate(SCORE_BINS):
        if score <= upper:
            return idx
    return len(SCORE_BINS) - 1


def build_summary(companies: Sequence[ScoredCompany]) -> Optional[DashboardSummary]:
    """Headline KPIs; None for an empty batch."""
    if not companies:
        return None

    total = len(companies)
    comprehensive = [c.scores.comprehensive for c in companies]
    ai_count = sum(1 for c in companies if c.themes.has(Theme.AI))
    high_potential = sum(
        1 for c in companies if c.scores.potential > HIGH_POTENTIAL_THRESHOLD
    )

    return DashboardSummary(
        company_count=total,
        median_score=round_half_up(median(comprehensive), 1),
        ai_saturation=round_half_up(100 * ai_count / total, 1),
        high_potential_count=high_potential,
    )


def _in_year_range(company: ScoredCompany, year_range: Optional[Tuple[int, int]]) -> bool:
    if year_range is None:
        return True
    year = parse_year(company.record.founded_date)
    if year is None:
        return False
    start, end = year_range
    return start <= year <= end


def score_distribution(
    companies: Sequence[ScoredCompany],
    metric: ScoreCategory = ScoreCategory.COMPREHENSIVE,
    year_range: Optional[Tuple[int, int]] = None,
) -> ScoreDistribution:
    """
    Histogram of one score category.

    Args:
        companies: Scored companies.
        metric: Which score to bucket.
        year_range: Optional inclusive founding-year filter. When given,
                    companies without a readable founding year are excluded.
    """
    selected = [c for c in companies if _in_year_range(c, year_range)]
    scores = [c.scores.get(metric) for c in selected]
    total = len(scores)

    counts = [0] * len(SCORE_BINS)
    for s in scores:
        counts[bin_index(s)] += 1

    bins = []
    for (label, lower, upper), count in zip(SCORE_BINS, counts):
        bins.append(ScoreBin(
            label=label,
            lower=lower,
            upper=upper,
            count=count,
            percentage=round_half_up(100 * count / total, 1) if total else 0.0,
        ))

    return ScoreDistribution(
        metric=metric,
        company_count=total,
        median=round_half_up(median(scores), 1),
        bins=bins,
    )


def score_percentile(value: float, scores: Sequence[float]) -> float:
    """Percentage of scores strictly below value, rounded to a whole number."""
    if not scores:
        return 0.0
    lower = sum(1 for s in scores if s < value)
    return round_half_up(100 * lower / len(scores), 0)


def _matches_stage(company: ScoredCompany, stages: Sequence[str]) -> bool:
    funding_type = (company.record.last_funding_type or "").lower()
    return any(s.lower().replace("-", "", 1) in funding_type for s in stages)


def filter_companies(
    companies: Iterable[ScoredCompany],
    min_score: float = 0.0,
    themes: Optional[Sequence[Theme]] = None,
    stages: Optional[Sequence[str]] = None,
) -> List[ScoredCompany]:
    """
    Companies passing every active filter, in input order.

    Args:
        min_score: Lowest comprehensive score kept.
        themes: Keep companies tagged with any of these. Empty keeps all.
        stages: Keep companies whose last funding type contains any of these
                labels, lower-cased with the first hyphen removed
                ("Series A" matches "Series A"; "Pre-Seed" matches "Preseed").
    """
    selected = []
    for company in companies:
        if company.scores.comprehensive < min_score:
            continue
        if themes and not any(company.themes.has(t) for t in themes):
            continue
        if stages and not _matches_stage(company, stages):
            continue
        selected.append(company)
    return selected


def headquarters_city(company: ScoredCompany) -> str:
    """Lower-cased headquarters text before the first comma."""
    return (company.record.location or "").lower().split(",")[0].strip()


def location_rollup(companies: Iterable[ScoredCompany]) -> List[CityRollup]:
    """
    Group companies by headquarters city.

    Companies without a location are skipped. Cities are returned by
    company count, highest first; equal counts keep first-seen order.
    """
    groups: Dict[str, List[ScoredCompany]] = {}
    for company in companies:
        city = headquarters_city(company)
        if city:
            groups.setdefault(city, []).append(company)

    rollups = []
    for city, members in groups.items():
        top = members[0]
        for company in members[1:]:
            if company.scores.comprehensive > top.scores.comprehensive:
                top = company
        total = sum(c.scores.comprehensive for c in members)
        rollups.append(CityRollup(
            city=city,
            count=len(members),
            average_score=round_half_up(total / len(members), 1),
            top_company=top.name,
        ))

    rollups.sort(key=lambda r: r.count, reverse=True)
    return rollups
