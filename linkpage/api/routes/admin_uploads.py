"""Admin routes for image uploads (avatars, custom link icons, content images)."""

from fastapi import APIRouter, Depends, File, HTTPException, UploadFile
from pydantic import BaseModel

from linkpage.adapters.fs.filestore import FileSystemStore
from linkpage.api.deps import get_current_user, get_file_store, get_upload_config
from linkpage.components.uploads import UploadConfig, UploadInput, UploadKind, run_upload
from linkpage.domain.entities import Owner

router = APIRouter()


class UploadResponse(BaseModel):
    public_url: str
    path: str


@router.post("/uploads/{kind}", response_model=UploadResponse, status_code=201)
def upload_image(
    kind: UploadKind,
    file: UploadFile = File(...),
    current_user: Owner = Depends(get_current_user),
    storage: FileSystemStore = Depends(get_file_store),
    config: UploadConfig = Depends(get_upload_config),
) -> UploadResponse:
    """
    Store an image and return its public URL.

    The URL is not attached to anything here; the client saves it on the
    profile, link or block afterwards.
    """
    inp = UploadInput(
        kind=kind,
        owner_id=current_user.id,
        filename=file.filename or "upload",
        data=file.file.read(),
        mime_type=file.content_type,
    )
    result = run_upload(inp, storage, config)

    if not result.success:
        detail = [
            {"code": e.code, "message": e.message, "field": e.field, "retryable": e.retryable}
            for e in result.errors
        ]
        retryable = any(e.retryable for e in result.errors)
        raise HTTPException(status_code=502 if retryable else 400, detail=detail)

    assert result.result is not None
    return UploadResponse(public_url=result.result.public_url, path=result.result.path)
