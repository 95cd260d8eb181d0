from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class StoredObject:
    """A downloaded file and the content type the store reported for it."""
    path: str
    data: bytes
    content_type: str

    @property
    def size(self) -> int:
        return len(self.data)


class ObjectStorage(ABC):
    @abstractmethod
    async def download(self, path: str) -> StoredObject: ...
