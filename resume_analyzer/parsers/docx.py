"""
Heuristic DOCX text scraper.

Looks for WordprocessingML text runs (``<w:t>...</w:t>``) directly in the
file bytes. This only finds anything when the document XML is stored
uncompressed inside the archive; swap in a real parser if that matters.
"""

import re

from .base import TextExtractor, decode_bytes

_TEXT_RUN = re.compile(r"<w:t[^>]*>([^<]+)</w:t>")
_WHITESPACE = re.compile(r"\s+")


class DocxTextExtractor(TextExtractor):
    content_types = (
        "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
    )

    def extract(self, data: bytes) -> str:
        runs = _TEXT_RUN.findall(decode_bytes(data))
        return _WHITESPACE.sub(" ", " ".join(runs)).strip()
