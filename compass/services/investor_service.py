"""
Investor Aggregator
compass/services/investor_service.py

Rolls up financing-entity participation across the batch:

  1. Pull candidate names from the three investor columns of each company
  2. Count each surviving name once per company
  3. Record the company (with its themes) in the entity's portfolio
  4. Tally the company's themes for the entity
  5. Rank entities by deal count and keep the top N
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence

import structlog

from compass.config import get_settings
from compass.models.company import RawRecord, ScoredCompany
from compass.models.enumerations import Theme
from compass.models.investor import InvestorStat, PortfolioItem
from compass.pipelines.utils import strip_wrapping_quotes

logger = structlog.get_logger(__name__)

MIN_NAME_LENGTH = 3
MAX_TOP_THEMES = 3
_THEME_PRIORITY = {theme: idx for idx, theme in enumerate(Theme)}


def extract_investors(record: RawRecord) -> List[str]:
    """
    Unique investor names for one company, in first-seen order.

    Names shorter than three characters and "undisclosed" placeholders
    are dropped.
    """
    sources = [record.top_investors, record.lead_investors, record.investors]
    joined = ",".join(s for s in sources if s)
    if not joined:
        return []

    names: List[str] = []
    seen = set()
    for raw in joined.split(","):
        name = strip_wrapping_quotes(raw.strip())
        if len(name) < MIN_NAME_LENGTH or "undisclosed" in name.lower():
            continue
        if name not in seen:
            seen.add(name)
            names.append(name)
    return names


def rank_themes(tally: Dict[Theme, int], limit: int = MAX_TOP_THEMES) -> List[Theme]:
    """Themes with a non-zero tally, highest first, ties in Theme order."""
    ranked = sorted(
        (theme for theme, n in tally.items() if n > 0),
        key=lambda theme: (-tally[theme], _THEME_PRIORITY[theme]),
    )
    return ranked[:limit]


@dataclass
class _InvestorAccumulator:
    count: int = 0
    theme_tally: Dict[Theme, int] = field(default_factory=lambda: {t: 0 for t in Theme})
    portfolio: Dict[str, List[Theme]] = field(default_factory=dict)


def aggregate_investors(
    companies: Sequence[ScoredCompany],
    limit: Optional[int] = None,
) -> List[InvestorStat]:
    """
    Args:
        companies: Scored and classified companies.
        limit: Maximum entities returned; defaults to settings.INVESTOR_LIMIT.

    Returns:
        InvestorStat list sorted by count descending. Ties keep first-seen order.
    """
    limit = limit or get_settings().INVESTOR_LIMIT
    accumulators: Dict[str, _InvestorAccumulator] = {}

    for company in companies:
        active = company.themes.active()
        for name in extract_investors(company.record):
            acc = accumulators.setdefault(name, _InvestorAccumulator())
            acc.count += 1
            # Same company name under one investor collapses to one entry
            acc.portfolio[company.name] = active
            for theme in active:
                acc.theme_tally[theme] += 1

    stats = [
        InvestorStat(
            name=name,
            count=acc.count,
            top_themes=rank_themes(acc.theme_tally),
            portfolio=[
                PortfolioItem(company_name=company_name, themes=themes)
                for company_name, themes in acc.portfolio.items()
            ],
        )
        for name, acc in accumulators.items()
    ]
    stats.sort(key=lambda s: s.count, reverse=True)

    logger.info("investors_aggregated", entities=len(stats), kept=min(len(stats), limit))
    return stats[:limit]
