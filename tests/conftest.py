import pytest

from cloudmedia.core.config import Credentials, Settings, get_settings

TEST_ENV = {
    "CLOUDINARY_API_KEY": "123456789012345",
    "CLOUDINARY_API_SECRET": "abcd",
    "CLOUDINARY_CLOUD_NAME": "demo",
}


@pytest.fixture(autouse=True)
def cloudinary_env(monkeypatch):
    monkeypatch.setitem(Settings.model_config, "env_file", None)
    for key, value in TEST_ENV.items():
        monkeypatch.setenv(key, value)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def credentials() -> Credentials:
    return Credentials(api_key="123456789012345", api_secret="abcd", cloud_name="demo")


class MemorySource:
    """Async byte source backed by a bytes object."""

    def __init__(self, data: bytes, max_read: int | None = None):
        self.data = data
        self.offset = 0
        self.max_read = max_read
        self.reads = 0

    async def read(self, size: int = -1) -> bytes:
        self.reads += 1
        if size < 0:
            size = len(self.data) - self.offset
        if self.max_read is not None:
            size = self.max_read
        chunk = self.data[self.offset : self.offset + size]
        self.offset += len(chunk)
        return chunk


class SyntheticSource:
    """Produces ``total`` bytes lazily without ever holding them all."""

    def __init__(self, total: int):
        self.remaining = total
        self.largest_request = 0

    async def read(self, size: int = -1) -> bytes:
        self.largest_request = max(self.largest_request, size)
        n = min(size, self.remaining)
        self.remaining -= n
        return b"\x5a" * n
