from pydantic import BaseModel, ConfigDict, Field


class ThemeTrend(BaseModel):
    """
    Share of companies founded in one year that carry each theme.

    Themes are non-exclusive, so the six percentages need not sum to 100.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    year: int = Field(..., gt=1990, description="Founding year")
    ai: float = Field(default=0.0, ge=0, le=100, alias="AI")
    climate: float = Field(default=0.0, ge=0, le=100, alias="Climate")
    fintech: float = Field(default=0.0, ge=0, le=100, alias="Fintech")
    healthcare: float = Field(default=0.0, ge=0, le=100, alias="Healthcare")
    saas: float = Field(default=0.0, ge=0, le=100, alias="SaaS")
    consumer: float = Field(default=0.0, ge=0, le=100, alias="Consumer")
