# app/features/upload/schemas.py
from pydantic import BaseModel, Field

class UploadResponse(BaseModel):
    name: str = Field(..., description="Original filename, kept as-is")
    size: int = Field(..., ge=0, description="Bytes actually written")
    url: str = Field(..., description="Retrieval URL for the stored file")
    job: str
