class MediaUploadError(Exception):
    """Single error channel for everything that can go wrong around an upload."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ConfigurationError(MediaUploadError):
    pass


class ClockError(MediaUploadError):
    pass


class TransportError(MediaUploadError):
    pass


class ResponseDecodeError(MediaUploadError):
    pass
