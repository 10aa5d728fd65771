"""
Analysis Router - Capital Compass
compass/routers/analysis.py

Upload one or more company CSV exports and get back the scored batch,
the analysis CSV, a score distribution, or a headquarters-city rollup.
"""

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, File, Query, Response, UploadFile

from compass.config import settings
from compass.core.dependencies import get_analysis_service
from compass.core.exceptions import EmptyUploadError
from compass.models.analysis import AnalysisResult, CityRollup, ScoreDistribution
from compass.models.enumerations import ScoreCategory, Theme
from compass.pipelines.exporters import export_companies_csv, export_filename
from compass.services.analysis_service import AnalysisService
from compass.services.summary_service import (
    filter_companies,
    location_rollup,
    score_distribution,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix=f"{settings.API_V1_PREFIX}/analysis", tags=["Analysis"])


def read_uploads(files: List[UploadFile]) -> List[str]:
    """Decode uploaded files as UTF-8 text, dropping a leading BOM."""
    if not files:
        raise EmptyUploadError()
    texts = []
    for upload in files:
        text = upload.file.read().decode("utf-8", errors="replace")
        texts.append(text.lstrip("\ufeff"))
        logger.info(f"Received {upload.filename}: {len(text)} chars")
    return texts


@router.post(
    "",
    response_model=AnalysisResult,
    response_model_exclude_none=True,
    summary="Score, classify and aggregate uploaded company CSVs",
)
def analyze(
    files: List[UploadFile] = File(...),
    service: AnalysisService = Depends(get_analysis_service),
) -> AnalysisResult:
    return service.process_texts(read_uploads(files))


@router.post("/export", summary="Download the ranked analysis CSV")
def export(
    files: List[UploadFile] = File(...),
    service: AnalysisService = Depends(get_analysis_service),
) -> Response:
    result = service.process_texts(read_uploads(files))
    return Response(
        content=export_companies_csv(result.companies),
        media_type="text/csv; charset=utf-8",
        headers={"Content-Disposition": f"attachment; filename={export_filename()}"},
    )


@router.post(
    "/distribution",
    response_model=ScoreDistribution,
    summary="Five-bucket histogram of one score category",
)
def distribution(
    files: List[UploadFile] = File(...),
    metric: ScoreCategory = Query(default=ScoreCategory.COMPREHENSIVE),
    start_year: Optional[int] = Query(default=None, ge=1800, le=2100),
    end_year: Optional[int] = Query(default=None, ge=1800, le=2100),
    service: AnalysisService = Depends(get_analysis_service),
) -> ScoreDistribution:
    result = service.process_texts(read_uploads(files))
    year_range = None
    if start_year is not None or end_year is not None:
        year_range = (start_year or 1800, end_year or 2100)
    return score_distribution(result.companies, metric=metric, year_range=year_range)


@router.post(
    "/locations",
    response_model=List[CityRollup],
    summary="Headquarters-city rollup of the filtered batch",
)
def locations(
    files: List[UploadFile] = File(...),
    min_score: float = Query(default=0.0, ge=0, le=100),
    themes: List[Theme] = Query(default=[]),
    stages: List[str] = Query(default=[]),
    service: AnalysisService = Depends(get_analysis_service),
) -> List[CityRollup]:
    result = service.process_texts(read_uploads(files))
    selected = filter_companies(result.companies, min_score=min_score, themes=themes, stages=stages)
    logger.info(f"Location rollup over {len(selected)} of {len(result.companies)} companies")
    return location_rollup(selected)
