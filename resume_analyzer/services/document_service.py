import logging

from typing import Optional

from .exceptions import (
    DocumentValidationError,
    TextExtractionError,
    UnsupportedFileTypeError,
)
from ..parsers import get_text_extractor
from ..storage.base import ObjectStorage

logger = logging.getLogger(__name__)

MIN_EXTRACTED_LENGTH = 10


def extract_text(data: bytes, content_type: Optional[str]) -> str:
    """
    Best-effort text from a plain-text, PDF or DOCX byte stream.

    Raises:
        UnsupportedFileTypeError: no extractor handles ``content_type``
        TextExtractionError: fewer than 10 characters came out
    """
    extractor = get_text_extractor(content_type)
    if extractor is None:
        raise UnsupportedFileTypeError(content_type=content_type)

    text = extractor.extract(data)
    if len(text) < MIN_EXTRACTED_LENGTH:
        raise TextExtractionError()
    return text


class DocumentService:
    """Downloads an uploaded resume and scrapes its text."""

    def __init__(self, storage: Optional[ObjectStorage] = None):
        self._storage = storage

    @property
    def storage(self) -> ObjectStorage:
        if self._storage is None:
            from ..storage.supabase import SupabaseStorage
            self._storage = SupabaseStorage()
        return self._storage

    async def parse(self, file_path: Optional[str]) -> str:
        if not file_path or not file_path.strip():
            raise DocumentValidationError()

        logger.info(f"Parsing resume file: {file_path}")
        stored = await self.storage.download(file_path)
        logger.info(f"File downloaded, size: {stored.size} type: {stored.content_type}")

        text = extract_text(stored.data, stored.content_type)
        logger.info(f"Text extracted, length: {len(text)}")
        return text
