from pydantic import BaseModel, Field


class ResumeTextRequest(BaseModel):
    resume_text: str = Field("", max_length=50000, description="Plain text resume content")


class JobTextRequest(BaseModel):
    job_text: str = Field("", max_length=20000, description="Job description text")


class CompareRequest(BaseModel):
    resume_text: str = Field("", max_length=50000, description="Plain text resume content")
    job_text: str = Field("", max_length=20000, description="Job description text")


class SkillsRequest(BaseModel):
    skills_text: str = Field("", max_length=10000, description="Free-text listing of current skills")
    target_role: str | None = Field(None, max_length=200, description="Role the user is aiming for")
