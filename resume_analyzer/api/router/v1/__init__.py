from fastapi import APIRouter

from .analysis import analysis_router
from .document import document_router

v1_router = APIRouter(prefix="/api/v1")
v1_router.include_router(analysis_router, tags=["Analysis"])
v1_router.include_router(document_router, tags=["Documents"])

__all__ = ["v1_router"]
