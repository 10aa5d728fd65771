from pydantic import BaseModel, ConfigDict, Field
from typing import Dict, List, Mapping, Optional

from compass.config import (
    COL_ACQUIRED_BY, COL_ARTICLES, COL_CLOSED_DATE, COL_DESCRIPTION,
    COL_EMPLOYEES, COL_EXIT_DATE, COL_FOUNDED, COL_FULL_DESCRIPTION,
    COL_FUNDING_ROUNDS, COL_FUNDING_TYPE, COL_FUNDING_USD, COL_INDUSTRIES,
    COL_INVESTORS, COL_LEAD_INVESTORS, COL_LOCATION, COL_NAME, COL_RANK,
    COL_STATUS, COL_TOP_INVESTORS, COL_URL,
)
from compass.models.enumerations import ScoreCategory, StatusTag, Theme


class RawRecord(BaseModel):
    """
    One uploaded row: known columns as named fields, everything else in extras.

    Empty cells are stored as None so that downstream defaulting treats
    "" and a missing column the same way.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str = Field(default="", alias=COL_NAME)
    website: Optional[str] = Field(default=None, alias=COL_URL)
    description: Optional[str] = Field(default=None, alias=COL_DESCRIPTION)
    full_description: Optional[str] = Field(default=None, alias=COL_FULL_DESCRIPTION)
    founded_date: Optional[str] = Field(default=None, alias=COL_FOUNDED)
    employees: Optional[str] = Field(default=None, alias=COL_EMPLOYEES)
    funding_amount_usd: Optional[str] = Field(default=None, alias=COL_FUNDING_USD)
    funding_rounds: Optional[str] = Field(default=None, alias=COL_FUNDING_ROUNDS)
    last_funding_type: Optional[str] = Field(default=None, alias=COL_FUNDING_TYPE)
    operating_status: Optional[str] = Field(default=None, alias=COL_STATUS)
    top_investors: Optional[str] = Field(default=None, alias=COL_TOP_INVESTORS)
    lead_investors: Optional[str] = Field(default=None, alias=COL_LEAD_INVESTORS)
    investors: Optional[str] = Field(default=None, alias=COL_INVESTORS)
    rank: Optional[str] = Field(default=None, alias=COL_RANK)
    article_count: Optional[str] = Field(default=None, alias=COL_ARTICLES)
    acquired_by: Optional[str] = Field(default=None, alias=COL_ACQUIRED_BY)
    exit_date: Optional[str] = Field(default=None, alias=COL_EXIT_DATE)
    closed_date: Optional[str] = Field(default=None, alias=COL_CLOSED_DATE)
    location: Optional[str] = Field(default=None, alias=COL_LOCATION)
    industries: Optional[str] = Field(default=None, alias=COL_INDUSTRIES)

    extras: Dict[str, str] = Field(
        default_factory=dict,
        description="Unrecognised columns, in upload order"
    )

    @classmethod
    def from_mapping(cls, fields: Mapping[str, str]) -> "RawRecord":
        """Build a record from a parsed header -> value mapping."""
        aliases = {f.alias for f in cls.model_fields.values() if f.alias}
        known: Dict[str, Optional[str]] = {}
        extras: Dict[str, str] = {}
        for column, value in fields.items():
            if column in aliases:
                known[column] = value if value != "" else None
            else:
                extras[column] = value
        if known.get(COL_NAME) is None:
            known[COL_NAME] = ""
        return cls(**known, extras=extras)

    @property
    def best_description(self) -> str:
        """Full description when present, otherwise the short one."""
        return self.full_description or self.description or ""


class ScoreSet(BaseModel):
    """Five 0-100 scores; comprehensive is the mean of the other four."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    funding: float = Field(..., ge=0, le=100)
    operations: float = Field(..., ge=0, le=100)
    brand_trend: float = Field(..., ge=0, le=100, alias="brandTrend")
    potential: float = Field(..., ge=0, le=100)
    comprehensive: float = Field(..., ge=0, le=100)

    def get(self, category: ScoreCategory) -> float:
        """Score for the given category."""
        if category is ScoreCategory.FUNDING:
            return self.funding
        if category is ScoreCategory.OPERATIONS:
            return self.operations
        if category is ScoreCategory.BRAND_TREND:
            return self.brand_trend
        if category is ScoreCategory.POTENTIAL:
            return self.potential
        return self.comprehensive


_THEME_FIELDS: Dict[Theme, str] = {
    Theme.AI: "ai",
    Theme.CLIMATE: "climate",
    Theme.FINTECH: "fintech",
    Theme.HEALTHCARE: "healthcare",
    Theme.SAAS: "saas",
    Theme.CONSUMER: "consumer",
}


class ThemeFlags(BaseModel):
    """Independent sector tags; any combination is valid."""

    model_config = ConfigDict(frozen=True)

    ai: bool = False
    climate: bool = False
    fintech: bool = False
    healthcare: bool = False
    saas: bool = False
    consumer: bool = False

    @classmethod
    def from_themes(cls, themes: List[Theme]) -> "ThemeFlags":
        return cls(**{_THEME_FIELDS[t]: True for t in themes})

    def has(self, theme: Theme) -> bool:
        return getattr(self, _THEME_FIELDS[theme])

    def active(self) -> List[Theme]:
        """Active themes in priority order."""
        return [t for t in Theme if self.has(t)]

    def any(self) -> bool:
        return bool(self.active())


class AcquisitionStatus(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    is_acquired_or_closed: bool = Field(default=True, alias="isAcquiredOrClosed")
    label: str = Field(..., min_length=1)
    color_tag: StatusTag = Field(..., alias="colorTag")


class ScoredCompany(BaseModel):
    """
    A scored, classified company.

    The id is positional within the batch (comp-<input index>) and is assigned
    before the final comprehensive-score sort.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str
    record: RawRecord
    scores: ScoreSet
    themes: ThemeFlags
    acquisition_status: Optional[AcquisitionStatus] = Field(
        default=None, alias="acquisitionStatus"
    )

    @property
    def name(self) -> str:
        return self.record.name
