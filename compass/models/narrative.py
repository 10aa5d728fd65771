from pydantic import BaseModel, ConfigDict, Field
from typing import List


class CompanyAnalysis(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    executive_summary: str = Field(..., alias="executiveSummary")
    investment_verdict: str = Field(..., alias="investmentVerdict")
    competitive_edge: str = Field(..., alias="competitiveEdge")


class InvestorAnalysis(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    investment_thesis: str = Field(..., alias="investmentThesis")
    portfolio_composition: str = Field(..., alias="portfolioComposition")
    strategic_focus: str = Field(..., alias="strategicFocus")


class GroundingSource(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str = "Source"
    uri: str


class LiveIntelResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    markdown: str
    sources: List[GroundingSource] = Field(default_factory=list)


# Fixed payloads returned when the collaborator fails
COMPANY_ANALYSIS_PLACEHOLDER = CompanyAnalysis(
    executive_summary="Failed to generate analysis.",
    investment_verdict="Analysis unavailable due to an error.",
    competitive_edge="Please check logs for details.",
)

INVESTOR_ANALYSIS_PLACEHOLDER = InvestorAnalysis(
    investment_thesis="Could not analyze portfolio.",
    portfolio_composition="Data unavailable.",
    strategic_focus="Error generating insights.",
)

LIVE_INTEL_PLACEHOLDER = LiveIntelResult(
    markdown="## Error\nCould not fetch live intelligence. Please check your API key permissions.",
    sources=[],
)
