from .analysis_service import AnalysisService
from .document_service import DocumentService, extract_text
from .suggestion_service import SuggestionService
from .keyword_service import extract_keywords, compare_keywords, STOP_WORDS
from .exceptions import (
    ServiceError,
    AnalysisValidationError,
    DocumentValidationError,
    UnsupportedFileTypeError,
    TextExtractionError,
    DocumentDownloadError,
    StorageConfigurationError,
)

__all__ = [
    "AnalysisService",
    "DocumentService",
    "SuggestionService",
    "extract_text",
    "extract_keywords",
    "compare_keywords",
    "STOP_WORDS",
    "ServiceError",
    "AnalysisValidationError",
    "DocumentValidationError",
    "UnsupportedFileTypeError",
    "TextExtractionError",
    "DocumentDownloadError",
    "StorageConfigurationError",
]
