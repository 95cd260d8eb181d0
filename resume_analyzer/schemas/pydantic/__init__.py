from .base import ErrorResponse, HealthResponse
from .document import ParseDocumentRequest, ParseDocumentResponse
from .resume_analysis import ResumeAnalysisRequest, ResumeAnalysisModel

__all__ = [
    "ErrorResponse",
    "HealthResponse",
    "ParseDocumentRequest",
    "ParseDocumentResponse",
    "ResumeAnalysisRequest",
    "ResumeAnalysisModel",
]
