from fastapi import APIRouter, Depends

from ....schemas.pydantic import (
    ErrorResponse,
    ParseDocumentRequest,
    ParseDocumentResponse,
)
from ....services import DocumentService

document_router = APIRouter()


def get_document_service() -> DocumentService:
    return DocumentService()


@document_router.post(
    "/parse-resume",
    response_model=ParseDocumentResponse,
    responses={
        400: {"model": ErrorResponse},
        415: {"model": ErrorResponse},
        422: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
        502: {"model": ErrorResponse},
    },
    summary="Extract text from an uploaded resume file",
)
async def parse_resume(
    payload: ParseDocumentRequest,
    document_service: DocumentService = Depends(get_document_service),
):
    text = await document_service.parse(payload.file_path)
    return ParseDocumentResponse(text=text)
