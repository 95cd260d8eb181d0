import logging

from typing import List, Optional

from ..agent import AgentManager
from ..prompt import RESUME_SUGGESTIONS_PROMPT, RESUME_SUGGESTIONS_SYSTEM_PROMPT

logger = logging.getLogger(__name__)


class SuggestionService:
    """
    Asks the completion provider for resume bullet points covering the
    keywords a resume is missing.
    """

    def __init__(self, agent_manager: Optional[AgentManager] = None):
        self.agent_manager = agent_manager or AgentManager(strategy="lines")

    @staticmethod
    def build_prompt(missing_keywords: List[str]) -> str:
        return RESUME_SUGGESTIONS_PROMPT.format(", ".join(missing_keywords))

    async def generate(self, missing_keywords: List[str]) -> List[str]:
        """
        Returns up to five bullet points, or an empty list without calling
        the provider when nothing is missing. Provider errors propagate.
        """
        if not missing_keywords:
            return []

        logger.info("Generating AI suggestions...")
        suggestions = await self.agent_manager.run(
            self.build_prompt(missing_keywords),
            system=RESUME_SUGGESTIONS_SYSTEM_PROMPT,
        )
        logger.info(f"AI suggestions generated: {len(suggestions)}")
        return suggestions
