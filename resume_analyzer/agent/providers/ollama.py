import logging
import ollama
from ollama._types import ResponseError as OllamaResponseError

from typing import Any, Dict, List, Optional
from fastapi.concurrency import run_in_threadpool

from ..exceptions import ProviderError, RateLimitError
from .base import Provider
from ...core import settings

logger = logging.getLogger(__name__)


class OllamaProvider(Provider):
    """Ollama LLM provider for text generation."""

    _client: ollama.Client

    def __init__(
        self,
        model_name: str = settings.LL_MODEL,
        api_base_url: Optional[str] = None,
        opts: Optional[Dict[str, Any]] = None
    ):
        self.opts = opts or {}
        self.model = model_name
        self._client = ollama.Client(host=api_base_url) if api_base_url else ollama.Client()
        self._ensure_model_pulled(model_name)

    def _installed_models(self) -> List[str]:
        return [m.model for m in self._client.list().models]

    def _ensure_model_pulled(self, model_name: str) -> None:
        """
        Ensure model is available locally.
        - If it's already in /api/tags, skip pulling.
        - If pull fails but model is actually present, continue.
        - Raises ProviderError with clear message if model unavailable.
        """
        try:
            installed = self._installed_models()
            # "llama3" should match "llama3:latest"
            if model_name in installed or any(m.startswith(model_name) for m in installed):
                logger.debug(f"Ollama model '{model_name}' already installed")
                return
        except Exception as e:
            logger.warning(f"Failed to list Ollama models: {e}")

        try:
            logger.info(f"Pulling Ollama model '{model_name}'...")
            self._client.pull(model_name)
            logger.info(f"Successfully pulled Ollama model '{model_name}'")
        except Exception as e:
            error_msg = (
                f"Ollama model '{model_name}' is unavailable. "
                f"Please run 'ollama pull {model_name}' and restart the backend. "
                f"Original error: {e}"
            )
            logger.error(error_msg)
            raise ProviderError(error_msg) from e

    def _options(self) -> Dict[str, Any]:
        # Ollama calls max_tokens num_predict
        options: Dict[str, Any] = {}
        if self.opts.get("temperature") is not None:
            options["temperature"] = self.opts["temperature"]
        if self.opts.get("max_tokens") is not None:
            options["num_predict"] = self.opts["max_tokens"]
        return options

    def _generate_sync(self, prompt: str, system: Optional[str] = None) -> str:
        """Generate a response from the model synchronously."""
        try:
            response = self._client.generate(
                model=self.model,
                prompt=prompt,
                system=system,
                options=self._options(),
            )
            return response["response"].strip()
        except OllamaResponseError as e:
            logger.error(f"Ollama generation error: status={e.status_code}, message={e}")
            if e.status_code == 429:
                raise RateLimitError() from e
            raise ProviderError() from e
        except Exception as e:
            logger.error(f"Ollama sync error: {e}")
            raise ProviderError() from e

    async def __call__(
        self, prompt: str, system: Optional[str] = None, **generation_args: Any
    ) -> str:
        if generation_args:
            logger.warning(f"OllamaProvider ignoring generation_args {generation_args}")
        return await run_in_threadpool(self._generate_sync, prompt, system)
