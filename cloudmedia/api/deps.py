from cloudmedia.integrations.cloudinary.factory import get_uploader
from cloudmedia.services.media_service import MediaService


def get_media_service() -> MediaService:
    return MediaService(get_uploader())
