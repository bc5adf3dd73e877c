from typing import Generic, TypeVar

from pydantic import BaseModel

from models.schemas.resume_analysis import ResumeAnalysis

DataT = TypeVar("DataT")


class ApiResponse(BaseModel, Generic[DataT]):
    """Envelope wrapped around every route result."""
    success: bool = True
    data: DataT | None = None
    message: str = ""


class HealthStatus(BaseModel):
    status: str = "ok"


class SampleResume(BaseModel):
    resume_text: str


class SampleJob(BaseModel):
    job_text: str


class UploadedResumeAnalysis(ResumeAnalysis):
    file_name: str | None = None
    file_size: str = ""  # e.g. "12.34 KB"
    extracted_text_preview: str = ""
