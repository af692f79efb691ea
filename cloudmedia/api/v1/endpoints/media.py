from fastapi import APIRouter, Depends, File, HTTPException, Query, UploadFile, status
from prometheus_client import Counter

from cloudmedia.api.deps import get_media_service
from cloudmedia.core.constants import UploadVisibility
from cloudmedia.core.errors import MediaUploadError
from cloudmedia.schemas.media import UploadOut
from cloudmedia.services.media_service import MediaService

router = APIRouter(prefix="/media", tags=["media"])
UPLOAD_COUNTER = Counter(
    "cloudmedia_uploads_total",
    "Media uploads forwarded to the provider",
    ["visibility", "outcome"],
)


@router.post("/uploads", response_model=UploadOut)
async def upload_media(
    file: UploadFile = File(...),
    visibility: UploadVisibility = Query(UploadVisibility.PUBLIC),
    service: MediaService = Depends(get_media_service),
):
    try:
        result = await service.upload(file, visibility, file_name=file.filename)
    except MediaUploadError as exc:
        UPLOAD_COUNTER.labels(visibility=visibility.value, outcome="error").inc()
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=exc.message) from exc
    finally:
        await file.close()
    UPLOAD_COUNTER.labels(visibility=visibility.value, outcome="ok").inc()
    return UploadOut(asset_id=result.asset_id, visibility=visibility)
