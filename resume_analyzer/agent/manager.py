from typing import Any, Optional
from fastapi.concurrency import run_in_threadpool

from ..core import settings
from .strategies.wrapper import BulletListWrapper, TextWrapper
from .providers.base import Provider

class AgentManager:
    def __init__(self,
                 strategy: str | None = None,
                 model: str = settings.LL_MODEL,
                 model_provider: str = settings.LLM_PROVIDER,
                 api_key: Optional[str] = settings.LLM_API_KEY,
                 base_url: Optional[str] = settings.LLM_BASE_URL,
                 timeout: Optional[float] = settings.LLM_TIMEOUT,
                 ) -> None:
        match strategy:
            case "text":
                self.strategy = TextWrapper()
            case "lines":
                self.strategy = BulletListWrapper()
            case _:
                self.strategy = BulletListWrapper()
        self.model = model
        self.model_provider = (model_provider or "gateway").strip()
        self.api_key = api_key
        self.base_url = base_url
        self.timeout = timeout

    async def _get_provider(self, **kwargs: Any) -> Provider:
        # Default options for any LLM. Not all can handle them but each
        # provider can make best effort.
        opts = {
            "temperature": settings.LLM_TEMPERATURE,
            "max_tokens": settings.LLM_MAX_TOKENS,
        }
        opts.update(kwargs)
        match self.model_provider:
            case 'gateway':
                from .providers.gateway import GatewayProvider
                return GatewayProvider(api_key=self.api_key,
                                       api_base_url=self.base_url,
                                       model_name=self.model,
                                       timeout=self.timeout,
                                       opts=opts)
            case 'ollama':
                from .providers.ollama import OllamaProvider
                # construction lists/pulls models over blocking HTTP
                return await run_in_threadpool(OllamaProvider,
                                               model_name=self.model,
                                               api_base_url=self.base_url,
                                               opts=opts)
            case _:
                from .providers.llama_index import LlamaIndexProvider
                return LlamaIndexProvider(api_key=self.api_key,
                                          model_name=self.model,
                                          api_base_url=self.base_url,
                                          provider=self.model_provider,
                                          opts=opts)

    async def run(self, prompt: str, system: Optional[str] = None, **kwargs: Any) -> Any:
        """
        Run the agent with the given prompt and generation arguments.
        """
        provider = await self._get_provider(**kwargs)
        return await self.strategy(prompt, provider, system=system)
