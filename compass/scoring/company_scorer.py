# compass/scoring/company_scorer.py
"""
Company Scorer
--------------
Computes the five 0-100 company scores from a normalized record, the batch
bounds, and the record's theme flags.

Formulas (weights from config.py):
    funding      = 100 × (0.7 × norm(amount, minAmt, maxAmt) + 0.3 × norm(rounds, 0, maxRounds))
    operations   = 100 × (0.6 × min(employees, 500) / 500 + 0.4 × active)
    brandTrend   = 100 × min(1, 0.5 × (1 − norm(rank, minRank, maxRank))
                               + 0.3 × norm(articles, 0, maxArticles)
                               + 0.2 × keywordBonus)
    potential    = 100 × (0.4 × stage + 0.3 × funding/100 + 0.3 × brandTrend/100)
    comprehensive = mean(funding, operations, brandTrend, potential)

active is 1 only for the exact status text "Active" (missing status counts
as "Active"). keywordBonus is 0.2 when any theme flag is set.
"""
import structlog
from typing import Optional

from compass.config import Settings, get_settings
from compass.models.company import ScoreSet, ThemeFlags
from compass.pipelines.normalizer import BatchBounds, NormalizedRecord
from compass.scoring.stage_calculator import stage_score
from compass.scoring.utils import clamp, mean, normalize

logger = structlog.get_logger(__name__)

ACTIVE_STATUS = "Active"


class CompanyScorer:
    """Score companies against one batch's bounds."""

    def __init__(self, bounds: BatchBounds, settings: Optional[Settings] = None):
        self.bounds = bounds
        self.settings = settings or get_settings()

    def funding_score(self, rec: NormalizedRecord) -> float:
        s, b = self.settings, self.bounds
        norm_amount = normalize(rec.funding_amount_usd, b.min_amount, b.max_amount)
        norm_rounds = normalize(rec.funding_rounds, 0, b.max_rounds)
        return clamp(100 * (s.W_FUNDING_AMOUNT * norm_amount + s.W_FUNDING_ROUNDS * norm_rounds))

    def operations_score(self, rec: NormalizedRecord) -> float:
        s = self.settings
        cap = s.OPS_EMPLOYEE_CAP
        norm_employees = min(rec.employee_median, cap) / cap
        status = rec.record.operating_status or ACTIVE_STATUS
        is_active = 1.0 if status == ACTIVE_STATUS else 0.0
        return clamp(100 * (s.W_OPS_EMPLOYEES * norm_employees + s.W_OPS_ACTIVE * is_active))

    def brand_trend_score(self, rec: NormalizedRecord, themes: ThemeFlags) -> float:
        s, b = self.settings, self.bounds
        # Lower rank is better
        norm_rank = 1 - normalize(rec.rank, b.min_rank, b.max_rank)
        norm_articles = normalize(rec.article_count, 0, b.max_articles)
        keyword_bonus = s.BRAND_KEYWORD_BONUS if themes.any() else 0.0
        raw = (
            s.W_BRAND_RANK * norm_rank
            + s.W_BRAND_ARTICLES * norm_articles
            + s.W_BRAND_KEYWORDS * keyword_bonus
        )
        return clamp(100 * min(1.0, raw))

    def potential_score(self, rec: NormalizedRecord, funding: float, brand_trend: float) -> float:
        s = self.settings
        stage = stage_score(rec.record.last_funding_type)
        return clamp(100 * (
            s.W_POTENTIAL_STAGE * stage
            + s.W_POTENTIAL_FUNDING * (funding / 100)
            + s.W_POTENTIAL_BRAND * (brand_trend / 100)
        ))

    def calculate(self, rec: NormalizedRecord, themes: ThemeFlags) -> ScoreSet:
        """
        Args:
            rec: Normalized record from the same batch the bounds came from.
            themes: Theme flags for the record (drive the keyword bonus).

        Returns:
            ScoreSet with every score in [0, 100].
        """
        funding = self.funding_score(rec)
        operations = self.operations_score(rec)
        brand_trend = self.brand_trend_score(rec, themes)
        potential = self.potential_score(rec, funding, brand_trend)
        comprehensive = clamp(mean([funding, operations, brand_trend, potential]))

        logger.debug(
            "company_scored",
            company=rec.record.name,
            funding=round(funding, 2),
            operations=round(operations, 2),
            brand_trend=round(brand_trend, 2),
            potential=round(potential, 2),
            comprehensive=round(comprehensive, 2),
        )

        return ScoreSet(
            funding=funding,
            operations=operations,
            brand_trend=brand_trend,
            potential=potential,
            comprehensive=comprehensive,
        )
