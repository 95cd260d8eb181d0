from abc import ABC, abstractmethod
from typing import Any, Optional

from ..providers.base import Provider


class Strategy(ABC):
    """Turns the raw text a provider returns into a usable result."""

    @abstractmethod
    async def __call__(
        self, prompt: str, provider: Provider, system: Optional[str] = None, **generation_args: Any
    ) -> Any: ...
