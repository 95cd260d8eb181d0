from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field


class ResumeAnalysisRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    # Missing or blank values are rejected by the service with a readable
    # error rather than by pydantic, so the text fields are optional here.
    resume: Optional[str] = None
    job_description: Optional[str] = Field(default=None, alias="jobDescription")
    generate_suggestions: Optional[bool] = Field(default=False, alias="generateSuggestions")


class ResumeAnalysisModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    jd_keywords: List[str] = Field(alias="jdKeywords")
    present_keywords: List[str] = Field(alias="presentKeywords")
    missing_keywords: List[str] = Field(alias="missingKeywords")
    suggestions: Optional[List[str]] = None
