# app/features/upload/router.py
import os
from typing import Optional

from fastapi import APIRouter, Depends, File, Form, Header, Request, UploadFile
from fastapi.concurrency import run_in_threadpool

from app.lib.deps import base_url, get_store
from app.lib.errors import InvalidArgument
from app.lib.store import JobFileStore
from app.logger import get_logger
from .schemas import UploadResponse

router = APIRouter(prefix="/api", tags=["upload"])
log = get_logger(__name__)

def _declared_size(upload: UploadFile) -> int:
    if upload.size is not None:
        return upload.size
    # no size from the multipart parser; measure the spooled body
    f = upload.file
    f.seek(0, os.SEEK_END)
    size = f.tell()
    f.seek(0)
    return size

@router.post("/upload", response_model=UploadResponse)
async def upload_endpoint(
    request: Request,
    file: Optional[UploadFile] = File(None),
    job_name_field: Optional[str] = Form(None, alias="jobName"),
    x_job_name: Optional[str] = Header(None),
    store: JobFileStore = Depends(get_store),
):
    if file is None:
        raise InvalidArgument("Failed to get file from form")
    job_name = x_job_name or job_name_field
    if not job_name or not job_name.strip():
        raise InvalidArgument("Job name is required (X-Job-Name header or jobName field)")

    stored = await run_in_threadpool(
        store.store_file,
        job_name,
        file.filename,
        file.file,
        _declared_size(file),
        base_url=base_url(request),
    )
    log.info(f"File uploaded successfully: {stored.name} (job: {stored.job}, size: {stored.size} bytes)")
    return UploadResponse(name=stored.name, size=stored.size, url=stored.url, job=stored.job)
