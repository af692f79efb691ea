from enum import StrEnum


class UploadVisibility(StrEnum):
    PUBLIC = "public"
    PRIVATE = "private"

    @property
    def path_segment(self) -> str:
        if self is UploadVisibility.PRIVATE:
            return "private"
        return "upload"


DEFAULT_API_HOST = "api.cloudinary.com"
DEFAULT_CHUNK_SIZE = 64 * 1024
