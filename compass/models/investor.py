from pydantic import BaseModel, ConfigDict, Field
from typing import List

from compass.models.enumerations import Theme


class PortfolioItem(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    company_name: str = Field(..., alias="name")
    themes: List[Theme] = Field(default_factory=list)


class InvestorStat(BaseModel):
    """Deal activity of one financing entity across the batch."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str = Field(..., min_length=3)
    count: int = Field(..., ge=1, description="Number of companies backed")
    top_themes: List[Theme] = Field(
        default_factory=list,
        max_length=3,
        alias="topThemes",
        description="Most frequent portfolio themes, highest tally first"
    )
    portfolio: List[PortfolioItem] = Field(default_factory=list)
