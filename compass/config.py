"""Application configuration with comprehensive validation."""
from typing import Optional, Literal
from functools import lru_cache
from pydantic import Field, model_validator, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


# =============================================================================
# INPUT COLUMN NAMES
# =============================================================================
# Header names as they appear in the uploaded company exports. The model layer
# binds these as field aliases; the exporter and the narrative prompts read
# through the model, never through these strings directly.
# =============================================================================

COL_NAME = "Organization Name"
COL_URL = "Organization Name URL"
COL_DESCRIPTION = "Description"
COL_FULL_DESCRIPTION = "Full Description"
COL_FOUNDED = "Founded Date"
COL_EMPLOYEES = "Number of Employees"
COL_FUNDING_USD = "Total Funding Amount (in USD)"
COL_FUNDING_ROUNDS = "Number of Funding Rounds"
COL_FUNDING_TYPE = "Last Funding Type"
COL_STATUS = "Operating Status"
COL_TOP_INVESTORS = "Top 5 Investors"
COL_LEAD_INVESTORS = "Lead Investors"
COL_INVESTORS = "Investors"
COL_RANK = "CB Rank (Company)"
COL_ARTICLES = "Number of Articles"
COL_ACQUIRED_BY = "Acquired by"
COL_EXIT_DATE = "Exit Date"
COL_CLOSED_DATE = "Closed Date"
COL_LOCATION = "Headquarters Location"
COL_INDUSTRIES = "Industries"


class Settings(BaseSettings):
    """Application settings with production-grade validation."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    APP_NAME: str = "Capital Compass"
    APP_VERSION: str = "1.0.0"
    APP_ENV: Literal["development", "staging", "production"] = "development"
    DEBUG: bool = False
    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    LOG_FORMAT: Literal["json", "console"] = "console"

    # API
    API_V1_PREFIX: str = "/api/v1"

    # Narrative collaborator (Anthropic)
    ANTHROPIC_API_KEY: Optional[SecretStr] = None
    DEFAULT_LLM_MODEL: str = "claude-sonnet-4-20250514"
    LLM_MAX_TOKENS: int = Field(default=1500, ge=256, le=8192)
    LLM_TIMEOUT_SECONDS: float = Field(default=60.0, ge=5.0, le=600.0)
    LLM_WEB_SEARCH_MAX_USES: int = Field(default=5, ge=1, le=20)

    # Ingestion
    PARSER_MAX_WORKERS: int = Field(default=4, ge=1, le=32)

    # Export / aggregation
    EXPORT_PRODUCT_NAME: str = "capital_compass"
    EXPORT_DESCRIPTION_LIMIT: int = Field(default=1000, ge=1)
    INVESTOR_LIMIT: int = Field(default=50, ge=1, le=1000)

    # Funding score weights
    W_FUNDING_AMOUNT: float = Field(default=0.7, ge=0.0, le=1.0)
    W_FUNDING_ROUNDS: float = Field(default=0.3, ge=0.0, le=1.0)

    # Operations score weights
    W_OPS_EMPLOYEES: float = Field(default=0.6, ge=0.0, le=1.0)
    W_OPS_ACTIVE: float = Field(default=0.4, ge=0.0, le=1.0)
    OPS_EMPLOYEE_CAP: int = Field(default=500, ge=1)

    # Brand / trend score weights
    W_BRAND_RANK: float = Field(default=0.5, ge=0.0, le=1.0)
    W_BRAND_ARTICLES: float = Field(default=0.3, ge=0.0, le=1.0)
    W_BRAND_KEYWORDS: float = Field(default=0.2, ge=0.0, le=1.0)
    BRAND_KEYWORD_BONUS: float = Field(default=0.2, ge=0.0, le=1.0)

    # Potential score weights
    W_POTENTIAL_STAGE: float = Field(default=0.4, ge=0.0, le=1.0)
    W_POTENTIAL_FUNDING: float = Field(default=0.3, ge=0.0, le=1.0)
    W_POTENTIAL_BRAND: float = Field(default=0.3, ge=0.0, le=1.0)

    @model_validator(mode="after")
    def validate_score_weights(self):
        """Validate every score's weight group sums to 1.0."""
        groups = {
            "funding": [self.W_FUNDING_AMOUNT, self.W_FUNDING_ROUNDS],
            "operations": [self.W_OPS_EMPLOYEES, self.W_OPS_ACTIVE],
            "brand_trend": [self.W_BRAND_RANK, self.W_BRAND_ARTICLES, self.W_BRAND_KEYWORDS],
            "potential": [self.W_POTENTIAL_STAGE, self.W_POTENTIAL_FUNDING, self.W_POTENTIAL_BRAND],
        }
        for name, weights in groups.items():
            total = sum(weights)
            if abs(total - 1.0) > 0.001:
                raise ValueError(f"{name} weights must sum to 1.0, got {total}")
        return self

    @model_validator(mode="after")
    def validate_production_settings(self):
        """Ensure production has required settings."""
        if self.APP_ENV == "production":
            if self.DEBUG:
                raise ValueError("DEBUG must be False in production")
            if not self.ANTHROPIC_API_KEY:
                raise ValueError("ANTHROPIC_API_KEY required in production")
        return self


@lru_cache
def get_settings() -> Settings:
    return Settings()

settings = get_settings()
