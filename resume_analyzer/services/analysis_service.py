import logging

from typing import Optional

from .exceptions import AnalysisValidationError
from .keyword_service import compare_keywords, extract_keywords
from .suggestion_service import SuggestionService
from ..schemas.pydantic import ResumeAnalysisModel

logger = logging.getLogger(__name__)


class AnalysisService:
    """
    Compares the keywords of a resume against those of a job description
    and, on request, asks for bullet points covering the gap.
    """

    def __init__(self, suggestion_service: Optional[SuggestionService] = None):
        self._suggestion_service = suggestion_service

    @property
    def suggestion_service(self) -> SuggestionService:
        # Built on first use so analyses without suggestions never touch the
        # provider configuration.
        if self._suggestion_service is None:
            self._suggestion_service = SuggestionService()
        return self._suggestion_service

    @staticmethod
    def _validate(resume: Optional[str], job_description: Optional[str]) -> None:
        if not resume or not resume.strip() or not job_description or not job_description.strip():
            raise AnalysisValidationError()

    async def analyze(
        self,
        resume: Optional[str],
        job_description: Optional[str],
        generate_suggestions: bool = False,
    ) -> ResumeAnalysisModel:
        self._validate(resume, job_description)
        logger.info(f"Analyzing resume... generate_suggestions={generate_suggestions}")

        jd_keywords = extract_keywords(job_description)
        resume_keywords = extract_keywords(resume)
        present_keywords, missing_keywords = compare_keywords(jd_keywords, resume_keywords)

        logger.info(
            f"Keywords extracted: jd={len(jd_keywords)} "
            f"present={len(present_keywords)} missing={len(missing_keywords)}"
        )

        suggestions = None
        if generate_suggestions and missing_keywords:
            suggestions = await self.suggestion_service.generate(missing_keywords)

        return ResumeAnalysisModel(
            jd_keywords=jd_keywords,
            present_keywords=present_keywords,
            missing_keywords=missing_keywords,
            suggestions=suggestions,
        )
