from .resume_suggestions import PROMPT as RESUME_SUGGESTIONS_PROMPT
from .resume_suggestions import SYSTEM_PROMPT as RESUME_SUGGESTIONS_SYSTEM_PROMPT

__all__ = ["RESUME_SUGGESTIONS_PROMPT", "RESUME_SUGGESTIONS_SYSTEM_PROMPT"]
