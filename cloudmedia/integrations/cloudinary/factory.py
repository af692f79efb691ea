import httpx

from cloudmedia.core.config import get_settings, load_credentials
from cloudmedia.integrations.cloudinary.uploader import CloudinaryUploader


def get_uploader(client: httpx.AsyncClient | None = None) -> CloudinaryUploader:
    settings = get_settings()
    return CloudinaryUploader(
        load_credentials(settings),
        api_host=settings.cloudinary_api_host,
        chunk_size=settings.upload_chunk_size,
        client=client,
    )
