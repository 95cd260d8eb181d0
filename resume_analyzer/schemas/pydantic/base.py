from pydantic import BaseModel, ConfigDict, Field


class ErrorResponse(BaseModel):
    error: str


class HealthResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    status: str = "ok"
    ai_enabled: bool = Field(alias="aiEnabled")
