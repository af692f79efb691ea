from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from cloudmedia.core.constants import DEFAULT_API_HOST, DEFAULT_CHUNK_SIZE
from cloudmedia.core.errors import ConfigurationError

BASE_DIR = Path(__file__).resolve().parents[2]

REQUIRED_ENV = ("CLOUDINARY_API_KEY", "CLOUDINARY_API_SECRET", "CLOUDINARY_CLOUD_NAME")


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=str(BASE_DIR / ".env"),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    app_env: Literal["dev", "staging", "prod"] = "dev"
    app_name: str = "Cloudmedia API"
    api_prefix: str = "/api/v1"
    debug: bool = False
    log_level: str = "INFO"

    cloudinary_api_key: str = Field(min_length=1)
    cloudinary_api_secret: str = Field(min_length=1)
    cloudinary_cloud_name: str = Field(min_length=1)
    cloudinary_api_host: str = DEFAULT_API_HOST

    upload_chunk_size: int = Field(default=DEFAULT_CHUNK_SIZE, gt=0)


@dataclass(frozen=True)
class Credentials:
    api_key: str
    api_secret: str
    cloud_name: str

    @classmethod
    def from_settings(cls, settings: Settings) -> "Credentials":
        return cls(
            api_key=settings.cloudinary_api_key,
            api_secret=settings.cloudinary_api_secret,
            cloud_name=settings.cloudinary_cloud_name,
        )


def _missing_fields(exc: ValidationError) -> list[str]:
    names = []
    for error in exc.errors():
        if error.get("loc"):
            names.append(str(error["loc"][0]).upper())
    return names


@lru_cache
def get_settings() -> Settings:
    try:
        return Settings()
    except ValidationError as exc:
        missing = ", ".join(_missing_fields(exc)) or ", ".join(REQUIRED_ENV)
        raise ConfigurationError(f"invalid or missing environment: {missing}") from exc


def load_credentials(settings: Settings | None = None) -> Credentials:
    """Resolve the credential triple, raising ConfigurationError if any is absent."""
    return Credentials.from_settings(settings or get_settings())
