"""
Heuristic PDF text scraper.

Visible text in an uncompressed PDF content stream is written as string
operands in parentheses, e.g. ``(Senior Engineer) Tj``. Collecting those
runs recovers most of the text of simple PDFs. Compressed streams, hex
strings and CID fonts defeat it, in which case we fall back to every
printable ASCII character in the file.
"""

import re

from .base import TextExtractor, decode_bytes

MIN_TEXT_LENGTH = 50

_STRING_OPERAND = re.compile(r"\(([^)]+)\)")
_ESCAPED_NEWLINE = re.compile(r"\\r\\n|\\n|\\r")
_NON_PRINTABLE = re.compile(r"[^\x20-\x7E\n\r]")
_WHITESPACE = re.compile(r"\s+")


class PdfTextExtractor(TextExtractor):
    content_types = ("application/pdf",)

    def extract(self, data: bytes) -> str:
        content = decode_bytes(data)
        text = " ".join(_STRING_OPERAND.findall(content))
        text = _ESCAPED_NEWLINE.sub(" ", text)
        if len(text) < MIN_TEXT_LENGTH:
            text = self._printable_fallback(content)
        return text

    @staticmethod
    def _printable_fallback(content: str) -> str:
        text = _NON_PRINTABLE.sub(" ", content)
        return _WHITESPACE.sub(" ", text).strip()
