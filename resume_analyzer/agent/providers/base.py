from abc import ABC, abstractmethod
from typing import Any, Optional


class Provider(ABC):
    """
    Abstract base class for text completion providers.

    A provider turns a prompt (plus an optional system prompt) into text.
    Everything else, such as turning that text into bullet points, is the
    job of a strategy.
    """

    @abstractmethod
    async def __call__(
        self, prompt: str, system: Optional[str] = None, **generation_args: Any
    ) -> str: ...
