from typing import Dict, Optional

from .base import TextExtractor
from .plain_text import PlainTextExtractor
from .pdf import PdfTextExtractor
from .docx import DocxTextExtractor

_EXTRACTORS: Dict[str, TextExtractor] = {
    content_type: extractor
    for extractor in (PlainTextExtractor(), PdfTextExtractor(), DocxTextExtractor())
    for content_type in extractor.content_types
}


def normalize_content_type(content_type: Optional[str]) -> str:
    """``"Text/Plain; charset=UTF-8"`` -> ``"text/plain"``"""
    if not content_type:
        return ""
    return content_type.split(";", 1)[0].strip().lower()


def get_text_extractor(content_type: Optional[str]) -> Optional[TextExtractor]:
    return _EXTRACTORS.get(normalize_content_type(content_type))


__all__ = [
    "TextExtractor",
    "PlainTextExtractor",
    "PdfTextExtractor",
    "DocxTextExtractor",
    "get_text_extractor",
    "normalize_content_type",
]
