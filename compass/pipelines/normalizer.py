"""
Record Normalizer
compass/pipelines/normalizer.py

Derives typed numerics from raw text columns with safe defaults, and reduces
the batch to the min/max bounds the scoring engine normalizes against.

Defaults:
    funding amount   0
    article count    0
    rank             100000 (worst)
    funding rounds   1
    employee median  0
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence

from compass.models.company import RawRecord
from compass.pipelines.utils import parse_leading_float, parse_leading_int

DEFAULT_RANK = 100000
DEFAULT_ROUNDS = 1
EMPLOYEE_PLUS_BONUS = 10


def parse_employee_median(value: Optional[str]) -> float:
    """
    Convert a headcount range to a single number.

    "1000+" -> 1010, "11-50" -> 30.5, "42" -> 42, missing -> 0.
    """
    if not value:
        return 0.0
    if "+" in value:
        number = parse_leading_int(value.replace(",", ""))
        return float(number + EMPLOYEE_PLUS_BONUS) if number is not None else 0.0
    if "-" in value:
        low, _, high = value.partition("-")
        low_n = parse_leading_int(low.replace(",", ""))
        high_n = parse_leading_int(high.replace(",", ""))
        if low_n is None or high_n is None:
            return 0.0
        return (low_n + high_n) / 2
    number = parse_leading_int(value.replace(",", ""))
    return float(number) if number is not None else 0.0


@dataclass(frozen=True)
class NormalizedRecord:
    """A raw record with its derived numeric fields."""
    record: RawRecord
    funding_amount_usd: float
    article_count: int
    rank: int
    funding_rounds: int
    employee_median: float

    @classmethod
    def from_raw(cls, record: RawRecord) -> "NormalizedRecord":
        amount = parse_leading_float(record.funding_amount_usd)
        articles = parse_leading_int(record.article_count)
        rank = parse_leading_int(record.rank.replace(",", "") if record.rank else None)
        rounds = parse_leading_int(record.funding_rounds)
        return cls(
            record=record,
            funding_amount_usd=amount if amount is not None else 0.0,
            article_count=articles if articles is not None else 0,
            rank=rank if rank is not None else DEFAULT_RANK,
            funding_rounds=rounds if rounds is not None else DEFAULT_ROUNDS,
            employee_median=parse_employee_median(record.employees),
        )


@dataclass(frozen=True)
class BatchBounds:
    """
    Batch-wide normalization bounds.

    Each bound folds in a fixed floor/ceiling so a degenerate batch (one
    record, all-zero amounts) still yields a non-zero span.
    """
    min_amount: float
    max_amount: float
    max_articles: int
    max_rounds: int
    min_rank: int
    max_rank: int

    @classmethod
    def from_records(cls, records: Sequence[NormalizedRecord]) -> "BatchBounds":
        amounts = [r.funding_amount_usd for r in records]
        articles = [r.article_count for r in records]
        rounds = [r.funding_rounds for r in records]
        ranks = [r.rank for r in records]
        return cls(
            min_amount=min(amounts + [0.0]),
            max_amount=max(amounts + [1.0]),
            max_articles=max(articles + [1]),
            max_rounds=max(rounds + [1]),
            min_rank=min(ranks + [1]),
            max_rank=max(ranks + [DEFAULT_RANK]),
        )


def normalize_records(records: Sequence[RawRecord]) -> List[NormalizedRecord]:
    return [NormalizedRecord.from_raw(r) for r in records]
