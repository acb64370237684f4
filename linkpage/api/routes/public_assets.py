"""Serves uploaded images back from the file store."""

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import FileResponse

from linkpage.adapters.fs.filestore import FileSystemStore
from linkpage.api.deps import get_file_store

router = APIRouter()

# Avatars are overwritten in place on re-upload
CACHE_CONTROL = "public, max-age=300"

# Assets share the page origin; nothing served here may run script
ASSET_HEADERS = {
    "Cache-Control": CACHE_CONTROL,
    "Content-Security-Policy": "default-src 'none'; style-src 'unsafe-inline'; sandbox",
    "X-Content-Type-Options": "nosniff",
}


@router.get("/{path:path}")
def get_asset(path: str, store: FileSystemStore = Depends(get_file_store)) -> FileResponse:
    try:
        target = store.resolve(path)
    except (FileNotFoundError, ValueError) as e:
        raise HTTPException(status_code=404, detail="Asset not found") from e

    return FileResponse(target, headers=ASSET_HEADERS)
