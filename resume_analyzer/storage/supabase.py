import logging

import httpx
from typing import Optional
from urllib.parse import quote

from .base import ObjectStorage, StoredObject
from ..core import settings
from ..services.exceptions import DocumentDownloadError, StorageConfigurationError

logger = logging.getLogger(__name__)


class SupabaseStorage(ObjectStorage):
    """
    Downloads objects from a Supabase Storage bucket over its REST API
    (``GET /storage/v1/object/{bucket}/{path}``) with the service role key.
    """

    def __init__(
        self,
        url: Optional[str] = settings.SUPABASE_URL,
        service_key: Optional[str] = settings.SUPABASE_SERVICE_ROLE_KEY,
        bucket: str = settings.STORAGE_BUCKET,
        timeout: Optional[float] = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        if not url or not service_key:
            logger.error("SUPABASE_URL or SUPABASE_SERVICE_ROLE_KEY not set")
            raise StorageConfigurationError()
        self._base_url = url.rstrip("/")
        self._service_key = service_key
        self.bucket = bucket
        self._timeout = timeout
        self._transport = transport

    def object_url(self, path: str) -> str:
        return f"{self._base_url}/storage/v1/object/{self.bucket}/{quote(path.lstrip('/'))}"

    async def download(self, path: str) -> StoredObject:
        headers = {
            "Authorization": f"Bearer {self._service_key}",
            "apikey": self._service_key,
        }
        async with httpx.AsyncClient(timeout=self._timeout, transport=self._transport) as client:
            try:
                response = await client.get(self.object_url(path), headers=headers)
                response.raise_for_status()
            except httpx.HTTPStatusError as e:
                logger.error(f"Download error: {e.response.status_code} {e.response.text}")
                raise DocumentDownloadError(path=path, original_error=str(e)) from e
            except httpx.RequestError as e:
                logger.error(f"Download error: {e}")
                raise DocumentDownloadError(path=path, original_error=str(e)) from e

        return StoredObject(
            path=path,
            data=response.content,
            content_type=response.headers.get("content-type", ""),
        )
