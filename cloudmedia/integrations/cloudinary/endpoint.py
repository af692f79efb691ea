import time

import httpx

from cloudmedia.core.config import Credentials
from cloudmedia.core.constants import DEFAULT_API_HOST, UploadVisibility
from cloudmedia.core.errors import ClockError
from cloudmedia.integrations.cloudinary.base import SignedRequestParams
from cloudmedia.integrations.cloudinary.signer import RequestSigner


def current_timestamp() -> int:
    now = time.time()
    if now < 0:
        raise ClockError("system clock reports a time before the Unix epoch")
    return int(now)


class EndpointBuilder:
    def __init__(self, credentials: Credentials, api_host: str = DEFAULT_API_HOST):
        self.credentials = credentials
        self.api_host = api_host
        self.signer = RequestSigner(credentials.api_secret)

    def upload_path(self, visibility: UploadVisibility) -> str:
        return f"/v1_1/{self.credentials.cloud_name}/auto/{visibility.path_segment}"

    def sign_request(self, timestamp: int | None = None) -> SignedRequestParams:
        if timestamp is None:
            timestamp = current_timestamp()
        return SignedRequestParams(
            api_key=self.credentials.api_key,
            timestamp=timestamp,
            signature=self.signer.sign(timestamp),
        )

    def build(self, visibility: UploadVisibility, timestamp: int | None = None) -> httpx.URL:
        signed = self.sign_request(timestamp)
        return httpx.URL(
            f"https://{self.api_host}{self.upload_path(visibility)}",
            params=signed.as_query(),
        )
