"""
LlamaIndex Provider Integration

Lets any LlamaIndex LLM class stand in for the completion gateway, selected
by its fully-qualified class path, e.g.

    LLM_PROVIDER="llama_index.llms.anthropic.Anthropic"
    LLM_PROVIDER="llama_index.llms.openai_like.OpenAILike"

A path that does not import, or does not name an LLM class, is a
configuration problem and raises ConfigurationError.
"""

import logging

from importlib import import_module
from typing import Any, Dict, Optional
from fastapi.concurrency import run_in_threadpool
from llama_index.core.base.llms.base import BaseLLM

from ..exceptions import ProviderError, ConfigurationError
from .base import Provider
from ...core import settings

logger = logging.getLogger(__name__)


def load_llm_class(class_path: Any) -> type:
    """Import ``package.module.ClassName`` and check it is a LlamaIndex LLM."""
    if not isinstance(class_path, str) or "." not in class_path.strip(". "):
        raise ConfigurationError(f"Invalid LLM provider '{class_path}'")
    module_path, _, class_name = class_path.rpartition(".")
    try:
        llm_class = getattr(import_module(module_path), class_name)
    except (ImportError, AttributeError) as e:
        logger.error(f"Cannot load LLM provider '{class_path}': {e}")
        raise ConfigurationError(f"Unknown LLM provider '{class_path}'") from e
    if not isinstance(llm_class, type) or not issubclass(llm_class, BaseLLM):
        raise ConfigurationError(f"'{class_path}' is not a LlamaIndex LLM class")
    return llm_class


class LlamaIndexProvider(Provider):
    def __init__(
        self,
        api_key: Optional[str] = settings.LLM_API_KEY,
        api_base_url: Optional[str] = settings.LLM_BASE_URL,
        model_name: str = settings.LL_MODEL,
        provider: str = settings.LLM_PROVIDER,
        opts: Optional[Dict[str, Any]] = None,
    ):
        self.opts = opts or {}
        llm_class = load_llm_class(provider)
        if not api_key:
            logger.error(f"LLM_API_KEY not found for {provider}")
            raise ConfigurationError()

        init_args: Dict[str, Any] = {"api_key": api_key}
        if api_base_url:
            init_args["base_url"] = api_base_url
        for name in ("temperature", "max_tokens"):
            if self.opts.get(name) is not None:
                init_args[name] = self.opts[name]
        self._client = self._instantiate(llm_class, model_name, init_args)

    @staticmethod
    def _instantiate(llm_class: type, model_name: str, init_args: Dict[str, Any]) -> BaseLLM:
        # Most integrations take ``model``; a few older ones only ``model_name``.
        try:
            return llm_class(model=model_name, **init_args)
        except TypeError as e:
            logger.debug(f"{llm_class} rejected model=, retrying with model_name=: {e}")
            return llm_class(model_name=model_name, **init_args)

    def _generate_sync(self, prompt: str, system: Optional[str] = None) -> str:
        """
        Generate a response from the model. ``complete`` has no separate
        system slot, so the system prompt is prepended.
        """
        full_prompt = f"{system}\n\n{prompt}" if system else prompt
        try:
            return self._client.complete(full_prompt).text
        except Exception as e:
            logger.error(f"llama_index sync error: {e}")
            raise ProviderError() from e

    async def __call__(self, prompt: str, system: Optional[str] = None, **generation_args: Any) -> str:
        if generation_args:
            logger.warning(f"LlamaIndexProvider ignoring generation_args: {generation_args}")
        return await run_in_threadpool(self._generate_sync, prompt, system)
