from .manager import AgentManager
from .exceptions import (
    ProviderError,
    ConfigurationError,
    RateLimitError,
    QuotaExceededError,
    StrategyError,
)

__all__ = [
    "AgentManager",
    "ProviderError",
    "ConfigurationError",
    "RateLimitError",
    "QuotaExceededError",
    "StrategyError",
]
