"""
Exporter
compass/pipelines/exporters.py

Serializes ranked companies to the fixed 11-column analysis CSV. The column
order and quoting are a compatibility contract with downstream consumers.
"""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional, Sequence

from compass.config import get_settings
from compass.models.company import ScoredCompany
from compass.scoring.utils import to_decimal

EXPORT_HEADERS: List[str] = [
    "Rank",
    "Organization Name",
    "Comprehensive Score",
    "Potential Score",
    "Funding Score",
    "Operations Score",
    "Brand Score",
    "Headquarters Location",
    "Industries",
    "Description",
    "Website",
]


def quote(value: Optional[str]) -> str:
    """Wrap text in quotes, doubling internal quotes; line breaks become spaces."""
    text = (value or "").replace("\r\n", " ").replace("\n", " ").replace("\r", " ")
    return '"' + text.replace('"', '""') + '"'


def _score(value: float) -> str:
    return str(to_decimal(value, 2))


def export_row(rank: int, company: ScoredCompany, description_limit: int) -> List[str]:
    rec = company.record
    scores = company.scores
    return [
        str(rank),
        quote(rec.name),
        _score(scores.comprehensive),
        _score(scores.potential),
        _score(scores.funding),
        _score(scores.operations),
        _score(scores.brand_trend),
        quote(rec.location),
        quote(rec.industries),
        quote(rec.best_description[:description_limit]),
        quote(rec.website),
    ]


def export_companies_csv(
    companies: Sequence[ScoredCompany],
    description_limit: Optional[int] = None,
) -> str:
    """Render companies, in the given order, as analysis CSV text."""
    limit = description_limit or get_settings().EXPORT_DESCRIPTION_LIMIT
    lines = [",".join(EXPORT_HEADERS)]
    for idx, company in enumerate(companies, start=1):
        lines.append(",".join(export_row(idx, company, limit)))
    return "\n".join(lines)


def export_filename(product: Optional[str] = None) -> str:
    return f"{product or get_settings().EXPORT_PRODUCT_NAME}_analysis.csv"


def write_export(out_dir: Path, companies: Sequence[ScoredCompany], product: Optional[str] = None) -> Path:
    out_dir.mkdir(parents=True, exist_ok=True)
    out_path = out_dir / export_filename(product)
    out_path.write_text(export_companies_csv(companies), encoding="utf-8")
    return out_path
