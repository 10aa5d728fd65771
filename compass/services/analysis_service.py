"""
Analysis Service - Batch Pipeline Orchestrator
compass/services/analysis_service.py

Runs one batch end to end:

  1. Parse every uploaded file (concurrently) and merge the rows
  2. Normalize rows and compute batch-wide bounds
  3. Classify themes, score, and detect acquisition/closure status
  4. Aggregate founding-year trends and investor activity
  5. Sort companies by comprehensive score (descending); position = rank
  6. Build the dashboard summary

Every call builds its own intermediate state; nothing carries over between
batches.
"""

from __future__ import annotations

from typing import List, Optional, Sequence

import structlog

from compass.config import Settings, get_settings
from compass.models.analysis import AnalysisResult, BatchDiagnostics
from compass.models.company import RawRecord, ScoredCompany
from compass.pipelines.classifier import classify
from compass.pipelines.csv_parser import parse_files
from compass.pipelines.normalizer import BatchBounds, normalize_records
from compass.pipelines.status import detect_status
from compass.scoring.company_scorer import CompanyScorer
from compass.services.investor_service import aggregate_investors
from compass.services.summary_service import build_summary
from compass.services.trend_service import aggregate_trends

logger = structlog.get_logger(__name__)


class AnalysisService:
    """Turns uploaded CSV text into scored companies, trends, and investors."""

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or get_settings()

    def score_records(self, records: Sequence[RawRecord]) -> List[ScoredCompany]:
        """Score a merged batch; the result keeps input order."""
        normalized = normalize_records(records)
        bounds = BatchBounds.from_records(normalized)
        scorer = CompanyScorer(bounds, self.settings)

        scored = []
        for idx, rec in enumerate(normalized):
            themes = classify(rec.record)
            scored.append(ScoredCompany(
                id=f"comp-{idx}",
                record=rec.record,
                scores=scorer.calculate(rec, themes),
                themes=themes,
                acquisition_status=detect_status(rec.record),
            ))

        return scored

    def process_records(
        self,
        records: Sequence[RawRecord],
        diagnostics: Optional[BatchDiagnostics] = None,
        current_year: Optional[int] = None,
    ) -> AnalysisResult:
        companies = self.score_records(records)
        # Aggregates see input order, so investor count ties keep first-seen order
        trends = aggregate_trends(companies, current_year=current_year)
        investors = aggregate_investors(companies, limit=self.settings.INVESTOR_LIMIT)
        companies = sorted(companies, key=lambda c: c.scores.comprehensive, reverse=True)

        logger.info(
            "batch_scored",
            companies=len(companies),
            trend_years=len(trends),
            investors=len(investors),
        )

        return AnalysisResult(
            companies=companies,
            trends=trends,
            investors=investors,
            summary=build_summary(companies),
            diagnostics=diagnostics or BatchDiagnostics(rows_parsed=len(records)),
        )

    def process_texts(
        self,
        texts: Sequence[str],
        current_year: Optional[int] = None,
    ) -> AnalysisResult:
        """
        Args:
            texts: Raw CSV text, one entry per uploaded file.
            current_year: Upper bound for trend years; defaults to this year.

        Returns:
            AnalysisResult for the merged batch.
        """
        parsed = parse_files(texts, max_workers=self.settings.PARSER_MAX_WORKERS)
        if parsed.dropped_rows:
            logger.warning("rows_dropped", dropped=parsed.dropped_rows, files=parsed.files)

        records = [RawRecord.from_mapping(row) for row in parsed.rows]
        diagnostics = BatchDiagnostics(
            files=parsed.files,
            rows_parsed=len(records),
            dropped_rows=parsed.dropped_rows,
        )
        return self.process_records(records, diagnostics=diagnostics, current_year=current_year)
