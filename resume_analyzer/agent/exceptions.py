class ProviderError(RuntimeError):
    """Raised when the underlying LLM provider fails"""

    default_message = "Failed to generate suggestions"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ConfigurationError(ProviderError):
    """Raised when a provider is selected but its credential is missing."""

    default_message = "AI service not configured"


class RateLimitError(ProviderError):
    """Raised when the provider answers HTTP 429."""

    default_message = "Rate limit exceeded. Please try again later."


class QuotaExceededError(ProviderError):
    """Raised when the provider answers HTTP 402.

    The account behind the credential has no credits left; retrying will not
    help until it is topped up.
    """

    default_message = "AI credits exhausted. Please add credits to continue."


class StrategyError(RuntimeError):
    """Raised when a Strategy cannot parse/return expected output"""

    default_message = "Failed to generate suggestions"

    def __init__(self, detail: str | None = None):
        # detail is for the logs; clients only see default_message
        self.detail = detail
        self.message = self.default_message
        super().__init__(detail or self.message)
