from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional

from compass.models.company import ScoredCompany
from compass.models.enumerations import ScoreCategory
from compass.models.investor import InvestorStat
from compass.models.trend import ThemeTrend


class BatchDiagnostics(BaseModel):
    """Non-fatal ingestion counters for one batch."""

    model_config = ConfigDict(frozen=True)

    files: int = Field(default=0, ge=0)
    rows_parsed: int = Field(default=0, ge=0)
    dropped_rows: int = Field(
        default=0,
        ge=0,
        description="Rows discarded because their field count did not match the header"
    )


class DashboardSummary(BaseModel):
    model_config = ConfigDict(frozen=True)

    company_count: int = Field(..., ge=1)
    median_score: float = Field(..., ge=0, le=100)
    ai_saturation: float = Field(..., ge=0, le=100, description="% of companies tagged AI")
    high_potential_count: int = Field(..., ge=0, description="Companies with potential > 80")


class ScoreBin(BaseModel):
    model_config = ConfigDict(frozen=True)

    label: str
    lower: int
    upper: int
    count: int = Field(default=0, ge=0)
    percentage: float = Field(default=0.0, ge=0, le=100)


class ScoreDistribution(BaseModel):
    model_config = ConfigDict(frozen=True)

    metric: ScoreCategory
    company_count: int = Field(..., ge=0)
    median: float = Field(default=0.0, ge=0, le=100)
    bins: List[ScoreBin]


class CityRollup(BaseModel):
    """Companies grouped by headquarters city."""

    model_config = ConfigDict(frozen=True)

    city: str = Field(..., min_length=1, description="Lower-cased text before the first comma")
    count: int = Field(..., ge=1)
    average_score: float = Field(..., ge=0, le=100)
    top_company: str = Field(..., description="Highest comprehensive score; first seen wins ties")


class AnalysisResult(BaseModel):
    """Everything one batch run produces."""

    model_config = ConfigDict(frozen=True)

    companies: List[ScoredCompany] = Field(default_factory=list)
    trends: List[ThemeTrend] = Field(default_factory=list)
    investors: List[InvestorStat] = Field(default_factory=list)
    summary: Optional[DashboardSummary] = None
    diagnostics: BatchDiagnostics = Field(default_factory=BatchDiagnostics)
