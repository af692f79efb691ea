from collections.abc import AsyncIterator

import httpx
from pydantic import ValidationError

from cloudmedia.core.config import Credentials
from cloudmedia.core.constants import DEFAULT_API_HOST, DEFAULT_CHUNK_SIZE, UploadVisibility
from cloudmedia.core.errors import ResponseDecodeError, TransportError
from cloudmedia.integrations.cloudinary.base import FileSource
from cloudmedia.integrations.cloudinary.endpoint import EndpointBuilder
from cloudmedia.schemas.media import UploadResult


async def iter_frames(source: FileSource, chunk_size: int = DEFAULT_CHUNK_SIZE) -> AsyncIterator[bytes]:
    """Yield the source's bytes in order, in frames of at most ``chunk_size``."""
    while True:
        chunk = await source.read(chunk_size)
        if not chunk:
            return
        # some sources ignore the size hint
        for start in range(0, len(chunk), chunk_size):
            yield bytes(chunk[start : start + chunk_size])


def _provider_error(payload: object) -> str | None:
    if isinstance(payload, dict) and isinstance(payload.get("error"), dict):
        message = payload["error"].get("message")
        if message:
            return str(message)
    return None


def decode_upload_response(response: httpx.Response) -> UploadResult:
    try:
        payload = response.json()
    except ValueError as exc:
        raise ResponseDecodeError(
            f"provider returned a non-JSON body (status {response.status_code})"
        ) from exc
    try:
        return UploadResult.model_validate(payload)
    except ValidationError as exc:
        detail = _provider_error(payload) or "response is missing asset_id"
        raise ResponseDecodeError(f"{detail} (status {response.status_code})") from exc


class CloudinaryUploader:
    def __init__(
        self,
        credentials: Credentials,
        api_host: str = DEFAULT_API_HOST,
        chunk_size: int = DEFAULT_CHUNK_SIZE,
        client: httpx.AsyncClient | None = None,
    ):
        self.endpoints = EndpointBuilder(credentials, api_host=api_host)
        self.chunk_size = chunk_size
        self._client = client

    async def _post(self, client: httpx.AsyncClient, url: httpx.URL, source: FileSource) -> httpx.Response:
        try:
            return await client.post(url, content=iter_frames(source, self.chunk_size))
        except httpx.TransportError as exc:
            raise TransportError(str(exc) or exc.__class__.__name__) from exc

    async def upload(self, file: FileSource, visibility: UploadVisibility) -> UploadResult:
        url = self.endpoints.build(visibility)
        if self._client is not None:
            response = await self._post(self._client, url, file)
        else:
            async with httpx.AsyncClient(timeout=None) as client:
                response = await self._post(client, url, file)
        return decode_upload_response(response)
