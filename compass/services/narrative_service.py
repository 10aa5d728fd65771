"""
Narrative Service - Generative-Text Collaborator Boundary
compass/services/narrative_service.py

Asks an Anthropic model for narrative elaboration of a scored company or an
investor rollup, and for a web-grounded briefing on a name.

Failures (no API key, SDK/transport errors, empty or non-JSON answers) are
caught here and converted to fixed placeholder payloads. Nothing raised by
this module reaches the batch pipeline.
"""

from __future__ import annotations

import json
from typing import Any, Dict, List, Optional

import anthropic
import structlog
from pydantic import ValidationError

from compass.config import Settings, get_settings
from compass.core.exceptions import MissingCredentialsError, NarrativeUnavailableError
from compass.models.company import ScoredCompany
from compass.models.enumerations import IntelContext
from compass.models.investor import InvestorStat
from compass.models.narrative import (
    COMPANY_ANALYSIS_PLACEHOLDER,
    INVESTOR_ANALYSIS_PLACEHOLDER,
    LIVE_INTEL_PLACEHOLDER,
    CompanyAnalysis,
    GroundingSource,
    InvestorAnalysis,
    LiveIntelResult,
)

logger = structlog.get_logger(__name__)

NO_INFORMATION = "No information found."


# ---------------------------------------------------------------------------
# Prompt builders
# ---------------------------------------------------------------------------

def build_company_prompt(company: ScoredCompany) -> str:
    rec = company.record
    s = company.scores
    return f"""You are a Senior Venture Capital Analyst. Analyze this company for a potential investment.

Company Profile:
- Name: {rec.name}
- Description: {rec.best_description or "Unknown"}
- Industry: {rec.industries or "Unknown"}
- Stage: {rec.last_funding_type or "Unknown"}
- Employees: {rec.employees or "Unknown"}

Internal Proprietary Scores (0-100 scale):
- Funding Strength: {s.funding:.0f}
- Operational Stability: {s.operations:.0f}
- Brand/Trend Alignment: {s.brand_trend:.0f}
- Overall Potential Score: {s.potential:.0f}

Respond with a single JSON object and nothing else, with these string fields:
1. executiveSummary: A concise 1-2 sentence overview of what the company does.
2. investmentVerdict: A direct assessment. Is this worth investing in? Why or why not? Reference the scores and stage in your reasoning.
3. competitiveEdge: Analyze their competitiveness. Do they have a moat? Is the market crowded?
"""


def build_investor_prompt(investor: InvestorStat) -> str:
    portfolio = "\n".join(
        f"- {item.company_name} (Themes: {', '.join(t.value for t in item.themes)})"
        for item in investor.portfolio
    )
    return f"""You are a Limited Partner (LP) Analyst evaluating a Venture Capital firm based on their recent deal flow in our dataset.

Investor: {investor.name}
Deal Count in Dataset: {investor.count}
Top Themes: {', '.join(t.value for t in investor.top_themes)}

Portfolio Samples:
{portfolio}

Based ONLY on the portfolio data provided above, respond with a single JSON object and nothing else, with these string fields:
1. investmentThesis: Infer their investment strategy. Do they favor deep tech, consumer apps, or B2B? What connects these companies?
2. portfolioComposition: Analyze the diversity. Is it highly concentrated in one sector or broad?
3. strategicFocus: Identify any shifts in interest or specific niches they seem to be doubling down on.
"""


def build_intel_prompt(name: str, context: IntelContext) -> str:
    if context is IntelContext.COMPANY:
        return f"""Perform a real-time market research deep dive on the company: "{name}".

Structure your response with the following EXACT Markdown headers:

## Latest Headlines
Find and list the 3 most recent and relevant news headlines or press releases. Use bullet points.

## Market Sentiment
Analyze the general public and industry sentiment based on recent search results. Write one concise paragraph.

## Key Voices
Select 3 specific, representative comments/quotes from investors, customers, or media. Use bullet points.
"""
    return f"""Perform a background check on the investor/firm: "{name}".

Structure your response with the following EXACT Markdown headers:

## Recent Activity
Find their latest deals, exits, or fund announcements. List the top 3 most recent events using bullet points.

## Reputation & Thesis
Summarize their reputation, known investment thesis, and any notable public feedback or founder reviews. Write one concise paragraph.
"""


# ---------------------------------------------------------------------------
# Response helpers
# ---------------------------------------------------------------------------

def response_text(response: Any) -> str:
    """Concatenate the text blocks of a Messages API response."""
    return "".join(
        block.text for block in response.content
        if getattr(block, "type", None) == "text"
    ).strip()


def extract_json(text: str) -> Dict[str, Any]:
    """Parse the outermost JSON object in text, tolerating code fences."""
    if not text:
        raise NarrativeUnavailableError("Empty response from model")
    start, end = text.find("{"), text.rfind("}")
    if start == -1 or end <= start:
        raise NarrativeUnavailableError("No JSON object in model response")
    try:
        return json.loads(text[start:end + 1])
    except json.JSONDecodeError as e:
        raise NarrativeUnavailableError(f"Malformed JSON in model response: {e}") from e


def collect_sources(response: Any) -> List[GroundingSource]:
    """Web citations attached to text blocks, deduplicated by URI."""
    sources: Dict[str, GroundingSource] = {}
    for block in response.content:
        for citation in getattr(block, "citations", None) or []:
            uri = getattr(citation, "url", None) or ""
            if not uri:
                continue
            title = getattr(citation, "title", None) or "Source"
            sources[uri] = GroundingSource(title=title, uri=uri)
    return list(sources.values())


class NarrativeService:
    """Narrative elaboration with placeholder fallback on any failure."""

    def __init__(
        self,
        settings: Optional[Settings] = None,
        client: Optional[anthropic.Anthropic] = None,
    ):
        self.settings = settings or get_settings()
        self._client = client

    def _get_client(self) -> anthropic.Anthropic:
        if self._client is None:
            key = self.settings.ANTHROPIC_API_KEY
            if key is None or not key.get_secret_value():
                raise MissingCredentialsError("anthropic")
            self._client = anthropic.Anthropic(
                api_key=key.get_secret_value(),
                timeout=self.settings.LLM_TIMEOUT_SECONDS,
            )
        return self._client

    def _create(self, prompt: str, tools: Optional[List[Dict[str, Any]]] = None) -> Any:
        kwargs: Dict[str, Any] = {
            "model": self.settings.DEFAULT_LLM_MODEL,
            "max_tokens": self.settings.LLM_MAX_TOKENS,
            "messages": [{"role": "user", "content": prompt}],
        }
        if tools:
            kwargs["tools"] = tools
        return self._get_client().messages.create(**kwargs)

    def analyze_company(self, company: ScoredCompany) -> CompanyAnalysis:
        try:
            response = self._create(build_company_prompt(company))
            return CompanyAnalysis.model_validate(extract_json(response_text(response)))
        except (NarrativeUnavailableError, anthropic.APIError, ValidationError) as e:
            logger.error("narrative_failed", kind="company", target=company.name, error=str(e))
            return COMPANY_ANALYSIS_PLACEHOLDER

    def analyze_investor(self, investor: InvestorStat) -> InvestorAnalysis:
        try:
            response = self._create(build_investor_prompt(investor))
            return InvestorAnalysis.model_validate(extract_json(response_text(response)))
        except (NarrativeUnavailableError, anthropic.APIError, ValidationError) as e:
            logger.error("narrative_failed", kind="investor", target=investor.name, error=str(e))
            return INVESTOR_ANALYSIS_PLACEHOLDER

    def live_intelligence(self, name: str, context: IntelContext) -> LiveIntelResult:
        tools = [{
            "type": "web_search_20250305",
            "name": "web_search",
            "max_uses": self.settings.LLM_WEB_SEARCH_MAX_USES,
        }]
        try:
            response = self._create(build_intel_prompt(name, context), tools=tools)
            return LiveIntelResult(
                markdown=response_text(response) or NO_INFORMATION,
                sources=collect_sources(response),
            )
        except (NarrativeUnavailableError, anthropic.APIError) as e:
            logger.error("narrative_failed", kind="intel", target=name, context=context.value, error=str(e))
            return LIVE_INTEL_PLACEHOLDER
