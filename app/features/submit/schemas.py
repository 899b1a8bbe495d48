# app/features/submit/schemas.py
from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator

PRIORITIES = {"low", "normal", "high"}

class SubmittedFile(BaseModel):
    # Echo of an earlier /api/upload response; only counted, never trusted as a path
    id: Optional[str] = None
    name: Optional[str] = None
    size: Optional[int] = None
    url: Optional[str] = None

class SubmitRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    job_name: str = Field(..., alias="jobName", description="Directory label for the job")
    description: Optional[str] = None
    priority: str = "normal"
    files: List[SubmittedFile] = Field(default_factory=list)

    @field_validator("priority", mode="before")
    @classmethod
    def default_unknown_priority(cls, v):
        # unknown priorities fall back to normal instead of failing the request
        if isinstance(v, str) and v.strip().lower() in PRIORITIES:
            return v.strip().lower()
        return "normal"

class SubmitResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    status: str
    message: str
    job_name: str = Field(..., alias="jobName")
    priority: str
