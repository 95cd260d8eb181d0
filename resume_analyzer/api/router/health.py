from fastapi import APIRouter

from ...core import settings
from ...schemas.pydantic import HealthResponse

health_check = APIRouter()


@health_check.get("/api/v1/health", response_model=HealthResponse, tags=["Health"])
async def ping():
    ai_enabled = bool(settings.LLM_API_KEY) or settings.LLM_PROVIDER == "ollama"
    return HealthResponse(ai_enabled=ai_enabled)
