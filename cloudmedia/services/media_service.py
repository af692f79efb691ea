import structlog

from cloudmedia.core.constants import UploadVisibility
from cloudmedia.core.errors import MediaUploadError
from cloudmedia.integrations.cloudinary.base import FileSource
from cloudmedia.integrations.cloudinary.uploader import CloudinaryUploader
from cloudmedia.schemas.media import UploadResult

logger = structlog.get_logger()


class MediaService:
    def __init__(self, uploader: CloudinaryUploader):
        self.uploader = uploader

    async def upload(
        self,
        file: FileSource,
        visibility: UploadVisibility,
        file_name: str | None = None,
    ) -> UploadResult:
        log = logger.bind(visibility=str(visibility), file_name=file_name)
        log.info("media_upload_started")
        try:
            result = await self.uploader.upload(file, visibility)
        except MediaUploadError as exc:
            log.warning("media_upload_failed", error=exc.message, error_type=exc.__class__.__name__)
            raise
        log.info("media_upload_completed", asset_id=result.asset_id)
        return result
