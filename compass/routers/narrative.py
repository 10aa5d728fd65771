"""
Narrative Router - Capital Compass
compass/routers/narrative.py

Thin pass-through to the generative-text collaborator. These endpoints always
answer 200; collaborator failures come back as placeholder text.
"""

from fastapi import APIRouter, Depends, Query

from compass.config import settings
from compass.core.dependencies import get_narrative_service
from compass.models.company import ScoredCompany
from compass.models.enumerations import IntelContext
from compass.models.investor import InvestorStat
from compass.models.narrative import CompanyAnalysis, InvestorAnalysis, LiveIntelResult
from compass.services.narrative_service import NarrativeService

router = APIRouter(prefix=f"{settings.API_V1_PREFIX}/narrative", tags=["Narrative"])


@router.post("/company", response_model=CompanyAnalysis)
def company_analysis(
    company: ScoredCompany,
    service: NarrativeService = Depends(get_narrative_service),
) -> CompanyAnalysis:
    return service.analyze_company(company)


@router.post("/investor", response_model=InvestorAnalysis)
def investor_analysis(
    investor: InvestorStat,
    service: NarrativeService = Depends(get_narrative_service),
) -> InvestorAnalysis:
    return service.analyze_investor(investor)


@router.get("/intel", response_model=LiveIntelResult)
def live_intel(
    name: str = Query(..., min_length=1, max_length=255),
    context: IntelContext = Query(default=IntelContext.COMPANY),
    service: NarrativeService = Depends(get_narrative_service),
) -> LiveIntelResult:
    return service.live_intelligence(name, context)
