"""
OpenAI-compatible chat completions provider.

Talks to any gateway exposing ``POST {base_url}/chat/completions`` with a
bearer credential (the Lovable AI gateway by default, but OpenAI, Groq,
OpenRouter and friends speak the same protocol).

Status handling:
    429 -> RateLimitError
    402 -> QuotaExceededError
    any other non-2xx, or a transport failure -> ProviderError
"""

import logging

import httpx
from typing import Any, Dict, List, Optional
from fastapi.concurrency import run_in_threadpool

from ..exceptions import (
    ProviderError,
    ConfigurationError,
    RateLimitError,
    QuotaExceededError,
)
from .base import Provider
from ...core import settings

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://ai.gateway.lovable.dev/v1"


def _message_content(data: Any) -> str:
    """``choices[0].message.content``, or "" when any step is missing or mistyped."""
    choices = data.get("choices") if isinstance(data, dict) else None
    if not isinstance(choices, list) or not choices:
        return ""
    message = choices[0].get("message") if isinstance(choices[0], dict) else None
    content = message.get("content") if isinstance(message, dict) else None
    return content if isinstance(content, str) else ""


class GatewayProvider(Provider):
    def __init__(
        self,
        api_key: Optional[str] = settings.LLM_API_KEY,
        api_base_url: Optional[str] = settings.LLM_BASE_URL,
        model_name: str = settings.LL_MODEL,
        timeout: Optional[float] = settings.LLM_TIMEOUT,
        opts: Optional[Dict[str, Any]] = None,
    ):
        if not api_key:
            logger.error("LLM_API_KEY not found")
            raise ConfigurationError()
        self.opts = opts or {}
        self._api_key = api_key
        base_url = (api_base_url or DEFAULT_BASE_URL).rstrip("/")
        self._url = f"{base_url}/chat/completions"
        self._model = model_name
        self._timeout = timeout

    def _build_payload(self, prompt: str, system: Optional[str]) -> Dict[str, Any]:
        messages: List[Dict[str, str]] = []
        if system:
            messages.append({"role": "system", "content": system})
        messages.append({"role": "user", "content": prompt})

        payload: Dict[str, Any] = {"model": self._model, "messages": messages}
        # Only forward options that were actually set; gateways differ in
        # what they accept.
        if self.opts.get("temperature") is not None:
            payload["temperature"] = self.opts["temperature"]
        if self.opts.get("max_tokens") is not None:
            payload["max_tokens"] = self.opts["max_tokens"]
        return payload

    def _generate_sync(self, prompt: str, system: Optional[str] = None) -> str:
        """
        Send a single chat completion request and return the message text.
        """
        headers = {
            "Authorization": f"Bearer {self._api_key}",
            "Content-Type": "application/json",
        }
        try:
            with httpx.Client(timeout=self._timeout) as client:
                response = client.post(
                    self._url,
                    headers=headers,
                    json=self._build_payload(prompt, system),
                )
        except httpx.RequestError as e:
            logger.error(f"AI gateway request error: {e}")
            raise ProviderError() from e

        if response.is_error:
            logger.error(f"AI API error: {response.status_code} {response.text}")
            if response.status_code == 429:
                raise RateLimitError()
            if response.status_code == 402:
                raise QuotaExceededError()
            raise ProviderError()

        try:
            data = response.json()
        except ValueError as e:
            logger.error(f"AI gateway returned invalid JSON: {e}")
            raise ProviderError() from e

        return _message_content(data)

    async def __call__(
        self, prompt: str, system: Optional[str] = None, **generation_args: Any
    ) -> str:
        if generation_args:
            logger.warning(f"GatewayProvider ignoring generation_args {generation_args}")
        return await run_in_threadpool(self._generate_sync, prompt, system)
