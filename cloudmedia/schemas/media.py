from pydantic import BaseModel, ConfigDict

from cloudmedia.core.constants import UploadVisibility


class UploadResult(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)

    asset_id: str


class UploadOut(BaseModel):
    asset_id: str
    visibility: UploadVisibility
