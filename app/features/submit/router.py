# app/features/submit/router.py
import uuid

from fastapi import APIRouter, Depends

from app.lib.deps import get_store
from app.lib.store import JobFileStore
from app.logger import get_logger
from .schemas import SubmitRequest, SubmitResponse

router = APIRouter(prefix="/api", tags=["submit"])
log = get_logger(__name__)

@router.post("/submit", response_model=SubmitResponse)
def submit_endpoint(req: SubmitRequest, store: JobFileStore = Depends(get_store)):
    """
    Explicit job submission. Only guarantees the job directory exists;
    the id is generated per request and not persisted anywhere.
    """
    store.submit_job(req.job_name)
    job_id = str(uuid.uuid4())
    log.info(f"Job submitted: ID={job_id}, Name={req.job_name}, Files={len(req.files)}, Priority={req.priority}")
    return SubmitResponse(
        id=job_id,
        status="submitted",
        message=f"Job '{req.job_name}' submitted successfully with {len(req.files)} files",
        job_name=req.job_name,
        priority=req.priority,
    )
