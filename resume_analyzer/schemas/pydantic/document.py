from typing import Optional
from pydantic import BaseModel, ConfigDict, Field


class ParseDocumentRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    file_path: Optional[str] = Field(default=None, alias="filePath")


class ParseDocumentResponse(BaseModel):
    text: str
