from typing import Optional


class ServiceError(Exception):
    """
    Base class for failures surfaced to the caller as an ``{"error": ...}``
    payload. Subclasses pin the HTTP status and the default message.
    """

    status_code: int = 500
    default_message: str = "Unknown error"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class AnalysisValidationError(ServiceError):
    """Raised when the resume or the job description is missing."""

    status_code = 400
    default_message = "Resume and job description are required"


class DocumentValidationError(ServiceError):
    """Raised when a parse request carries no file path."""

    status_code = 400
    default_message = "File path is required"


class UnsupportedFileTypeError(ServiceError):
    """Raised when no text extractor is registered for the content type."""

    status_code = 415
    default_message = "Unsupported file type"

    def __init__(self, content_type: Optional[str] = None, message: Optional[str] = None):
        self.content_type = content_type
        super().__init__(message)


class TextExtractionError(ServiceError):
    """Raised when best-effort extraction yields too little text."""

    status_code = 422
    default_message = (
        "Could not extract text from file. Please try uploading a different "
        "format or paste the text directly."
    )


class DocumentDownloadError(ServiceError):
    """
    Raised when the object storage download fails.

    Carries the storage path and the underlying error for logging; the
    message returned to the caller stays generic.
    """

    status_code = 502
    default_message = "Failed to download file"

    def __init__(
        self,
        path: Optional[str] = None,
        original_error: Optional[str] = None,
        message: Optional[str] = None,
    ):
        self.path = path
        self.original_error = original_error
        super().__init__(message)


class StorageConfigurationError(ServiceError):
    """Raised when the storage URL or service key is not configured."""

    status_code = 500
    default_message = "File storage not configured"
