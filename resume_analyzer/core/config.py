import sys
import logging

from typing import List, Optional
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    PROJECT_NAME: str = "Resume Keyword Analyzer"
    ALLOWED_ORIGINS: List[str] = ["*"]
    LOG_LEVEL: str = "INFO"

    # Completion provider. "gateway" is an OpenAI-compatible chat completions
    # endpoint; "ollama" a local server; anything else is taken as a dotted
    # llama_index LLM class path.
    LLM_PROVIDER: str = "gateway"
    LL_MODEL: str = "google/gemini-2.5-flash"
    LLM_API_KEY: Optional[str] = None
    # Unset means the provider default (the public gateway, or localhost for ollama)
    LLM_BASE_URL: Optional[str] = None
    LLM_TEMPERATURE: Optional[float] = None
    LLM_MAX_TOKENS: Optional[int] = None
    LLM_TIMEOUT: Optional[float] = 60.0

    SUPABASE_URL: Optional[str] = None
    SUPABASE_SERVICE_ROLE_KEY: Optional[str] = None
    STORAGE_BUCKET: str = "resumes"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


settings = Settings()


def setup_logging(level: Optional[str] = None) -> None:
    """
    Configure the root logger once for the process.

    Uvicorn installs its own handlers for its loggers; everything under the
    application package propagates to the root handler set up here.
    Unknown level names fall back to INFO.
    """
    numeric_level = logging.getLevelName((level or settings.LOG_LEVEL).upper())
    if not isinstance(numeric_level, int):
        numeric_level = logging.INFO
    logging.basicConfig(
        level=numeric_level,
        format="[%(asctime)s - %(name)s - %(levelname)s] %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )
    # httpx logs every request at INFO, which drowns the request logs
    logging.getLogger("httpx").setLevel(logging.WARNING)
