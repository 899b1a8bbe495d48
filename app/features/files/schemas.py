# app/features/files/schemas.py
from datetime import datetime
from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field

class FileInfo(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: str
    size: int
    # None for files nested below a job directory (not addressable by scope/filename)
    url: Optional[str] = None
    uploaded_at: datetime = Field(..., alias="uploadedAt")
    is_dir: bool = Field(False, alias="isDir")

class FilesListResponse(BaseModel):
    path: str = ""
    files: List[FileInfo]
    total: int
