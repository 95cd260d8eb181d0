from .base import TextExtractor, decode_bytes


class PlainTextExtractor(TextExtractor):
    content_types = ("text/plain",)

    def extract(self, data: bytes) -> str:
        return decode_bytes(data)
