import re
import logging

from typing import Any, List, Optional

from .base import Strategy
from ..exceptions import StrategyError
from ..providers.base import Provider

logger = logging.getLogger(__name__)

# Models like to open with "Here are some bullet points..." or
# "Based on the missing keywords...". Those lines are not bullets.
PREAMBLE_PATTERN = re.compile(r"^(Here|Based)", re.IGNORECASE)

MAX_BULLETS = 5


def parse_bullet_lines(text: str, limit: int = MAX_BULLETS) -> List[str]:
    """
    Split model output into bullet candidates: one per non-empty line,
    trimmed, preamble lines dropped, at most ``limit`` of them.
    """
    lines = (line.strip() for line in text.split("\n"))
    bullets = [line for line in lines if line and not PREAMBLE_PATTERN.match(line)]
    return bullets[:limit]


class BulletListWrapper(Strategy):
    def __init__(self, limit: int = MAX_BULLETS):
        self.limit = limit

    async def __call__(
        self, prompt: str, provider: Provider, system: Optional[str] = None, **generation_args: Any
    ) -> List[str]:
        response = await provider(prompt, system=system, **generation_args)
        if not isinstance(response, str):
            raise StrategyError(f"Expected text from provider, got {type(response).__name__}")
        bullets = parse_bullet_lines(response, self.limit)
        logger.debug(f"Parsed {len(bullets)} bullet(s) from {len(response)} characters")
        return bullets


class TextWrapper(Strategy):
    async def __call__(
        self, prompt: str, provider: Provider, system: Optional[str] = None, **generation_args: Any
    ) -> str:
        response = await provider(prompt, system=system, **generation_args)
        if not isinstance(response, str):
            raise StrategyError(f"Expected text from provider, got {type(response).__name__}")
        return response.strip()
