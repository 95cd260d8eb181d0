from abc import ABC, abstractmethod


class TextExtractor(ABC):
    """
    Pulls readable text out of the raw bytes of one document format.

    Implementations are best-effort: they return whatever text they could
    find, possibly empty. Deciding whether that is enough is up to the
    caller.
    """

    content_types: tuple[str, ...] = ()

    @abstractmethod
    def extract(self, data: bytes) -> str: ...


def decode_bytes(data: bytes) -> str:
    """
    UTF-8 decode that never fails; undecodable bytes become U+FFFD and a
    leading byte order mark is dropped.
    """
    return data.decode("utf-8-sig", errors="replace")
