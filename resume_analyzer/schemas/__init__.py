from .pydantic import (
    ErrorResponse,
    HealthResponse,
    ParseDocumentRequest,
    ParseDocumentResponse,
    ResumeAnalysisRequest,
    ResumeAnalysisModel,
)

__all__ = [
    "ErrorResponse",
    "HealthResponse",
    "ParseDocumentRequest",
    "ParseDocumentResponse",
    "ResumeAnalysisRequest",
    "ResumeAnalysisModel",
]
