# app/features/files/router.py
from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import FileResponse

from app.lib.deps import base_url, get_store
from app.lib.paths import ROOT_SCOPE
from app.lib.store import JobFileStore
from app.logger import get_logger
from .schemas import FileInfo, FilesListResponse

router = APIRouter(prefix="/api", tags=["files"])
log = get_logger(__name__)

@router.get("/files", response_model=FilesListResponse)
def list_files_endpoint(
    request: Request,
    path: str = Query("", description="Directory relative to the upload root; empty lists the root"),
    store: JobFileStore = Depends(get_store),
):
    entries = store.list_entries(path, base_url=base_url(request))
    files = [
        FileInfo(
            name=e.name,
            size=e.size,
            url=e.url,
            uploaded_at=e.modified,
            is_dir=e.is_dir,
        )
        for e in entries
    ]
    log.info(f"Listed {len(files)} entries under {path.strip('/') or '/'}")
    return FilesListResponse(path=path.strip("/"), files=files, total=len(files))

def _serve(store: JobFileStore, scope: str, filename: str) -> FileResponse:
    fetched = store.fetch_file(scope, filename)
    log.debug(f"serving {scope}/{filename} ({fetched.size} bytes, {fetched.content_type})")
    return FileResponse(fetched.path, media_type=fetched.content_type)

@router.get("/files/{scope}/{filename}")
def fetch_file_endpoint(scope: str, filename: str, store: JobFileStore = Depends(get_store)):
    return _serve(store, scope, filename)

@router.get("/files/{filename}")
def fetch_root_file_endpoint(filename: str, store: JobFileStore = Depends(get_store)):
    # flat variant: files stored directly under the upload root
    return _serve(store, ROOT_SCOPE, filename)
