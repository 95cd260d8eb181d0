from fastapi import APIRouter, Depends

from ....schemas.pydantic import (
    ErrorResponse,
    ResumeAnalysisRequest,
    ResumeAnalysisModel,
)
from ....services import AnalysisService

analysis_router = APIRouter()


def get_analysis_service() -> AnalysisService:
    return AnalysisService()


@analysis_router.post(
    "/analyze-resume",
    response_model=ResumeAnalysisModel,
    response_model_exclude_none=True,
    responses={
        400: {"model": ErrorResponse},
        402: {"model": ErrorResponse},
        429: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
        502: {"model": ErrorResponse},
    },
    summary="Compare resume keywords against a job description",
)
async def analyze_resume(
    payload: ResumeAnalysisRequest,
    analysis_service: AnalysisService = Depends(get_analysis_service),
):
    """
    Extracts keywords from both texts, splits the job description keywords
    into present and missing, and optionally adds AI bullet suggestions for
    the missing ones.
    """
    return await analysis_service.analyze(
        resume=payload.resume,
        job_description=payload.job_description,
        generate_suggestions=bool(payload.generate_suggestions),
    )
