import logging

from fastapi import APIRouter, File, Request, UploadFile
from slowapi import Limiter
from slowapi.util import get_remote_address
from starlette.concurrency import run_in_threadpool

from config import settings
from models.requests import CompareRequest, JobTextRequest, ResumeTextRequest, SkillsRequest
from models.responses import (
    ApiResponse,
    HealthStatus,
    SampleJob,
    SampleResume,
    UploadedResumeAnalysis,
)
from models.schemas import (
    InterviewPreparation,
    JobAnalysis,
    MatchResult,
    ResumeAnalysis,
    SkillCategorySummary,
    SkillRecommendation,
)
from services import document_parser
from services.errors import AnalyzerError, DocumentDecodeError, InputTooShortError, UploadTooLargeError
from services.interview_prep import prepare_interview
from services.job_analyzer import analyze_job
from services.recommender import list_skill_categories, recommend_skills
from services.resume_analyzer import analyze_resume
from services.scoring import compare_resume_to_job

logger = logging.getLogger(__name__)

router = APIRouter()
limiter = Limiter(key_func=get_remote_address, enabled=settings.rate_limit_enabled)

PREVIEW_CHARS = 300

SAMPLE_RESUME = """
John Doe
Email: john.doe@email.com | Phone: +94 77 123 4567
LinkedIn: linkedin.com/in/johndoe | GitHub: github.com/johndoe

PROFESSIONAL SUMMARY
Experienced Full Stack Developer with 3 years of expertise in building scalable web applications
using React, Node.js, and MongoDB. Passionate about clean code and agile methodologies.

WORK EXPERIENCE
Full Stack Developer | ABC Tech Solutions | Jan 2022 - Present
- Developed and maintained 5+ web applications serving 10,000+ users
- Implemented RESTful APIs using Node.js and Express
- Improved application performance by 40% through optimization
- Led a team of 3 junior developers

Junior Developer | XYZ Company | Jun 2020 - Dec 2021
- Built responsive user interfaces using React and TypeScript
- Collaborated with designers to implement pixel-perfect designs
- Wrote unit tests achieving 85% code coverage

EDUCATION
Bachelor of Science in Computer Science
University of Colombo | 2016 - 2020
GPA: 3.7/4.0

TECHNICAL SKILLS
Frontend: React, JavaScript, TypeScript, HTML, CSS, Redux
Backend: Node.js, Express, NestJS
Databases: MongoDB, PostgreSQL
Tools: Git, Docker, VS Code, Postman

PROJECTS
E-Commerce Platform
- Built a full-stack e-commerce solution with payment integration
- Technologies: React, Node.js, MongoDB, Stripe API

CERTIFICATIONS
AWS Certified Developer Associate | 2023
"""

SAMPLE_JOB = """
Senior Full Stack Developer

ABC Tech Company is seeking an experienced Full Stack Developer to join our growing team.

Responsibilities:
- Design and develop scalable web applications using modern frameworks
- Collaborate with cross-functional teams to define and ship new features
- Write clean, maintainable code following best practices
- Mentor junior developers and conduct code reviews
- Optimize applications for maximum speed and scalability
- Participate in agile development processes

Required Qualifications:
- 5+ years of professional software development experience
- Strong proficiency in JavaScript/TypeScript and Node.js
- Experience with React or Angular for frontend development
- Solid understanding of RESTful APIs and microservices architecture
- Experience with SQL and NoSQL databases (PostgreSQL, MongoDB)
- Proficiency with Git version control
- Bachelor's degree in Computer Science or related field

Preferred Qualifications:
- Experience with NestJS framework
- Knowledge of Docker and Kubernetes
- Familiarity with AWS or Azure cloud platforms
- Experience with CI/CD pipelines
- Understanding of GraphQL
- Open source contributions

What We Offer:
- Competitive salary and benefits
- Remote work flexibility
- Professional development opportunities
- Collaborative team environment
"""


def _require_text(text: str | None, field: str, minimum: int) -> str:
    if not text or len(text.strip()) < minimum:
        logger.warning("Rejected %s: shorter than %d characters", field.lower(), minimum)
        raise InputTooShortError(field, minimum)
    return text


@router.get("/health", response_model=ApiResponse[HealthStatus])
async def health():
    return ApiResponse(data=HealthStatus(), message="Service is healthy")


# ---------------------------------------------------------------------------
# Resume
# ---------------------------------------------------------------------------

@router.post("/resume/analyze", response_model=ApiResponse[ResumeAnalysis])
@limiter.limit(settings.rate_limit)
def resume_analyze(request: Request, body: ResumeTextRequest):
    text = _require_text(body.resume_text, "Resume text", settings.min_document_chars)
    return ApiResponse(data=analyze_resume(text), message="Resume analyzed successfully")


@router.post("/resume/upload", response_model=ApiResponse[UploadedResumeAnalysis])
@limiter.limit(settings.rate_limit)
async def resume_upload(request: Request, file: UploadFile | None = File(None)):
    if file is None:
        raise AnalyzerError("Please upload a file")

    # Validates the type before the body is read
    document_parser.resolve_mime(file.content_type, file.filename)

    content = await file.read()
    if len(content) > settings.max_upload_size_mb * 1024 * 1024:
        logger.warning("Rejected upload %r: %d bytes", file.filename, len(content))
        raise UploadTooLargeError(settings.max_upload_size_mb)

    text = await run_in_threadpool(
        document_parser.decode_document, content, file.content_type, file.filename
    )
    if len(text.strip()) < settings.min_document_chars:
        logger.warning("Upload %r yielded too little text", file.filename)
        raise DocumentDecodeError(
            "Could not extract enough text from the file. "
            "Please ensure the file is not empty or image-based."
        )

    analysis = await run_in_threadpool(analyze_resume, text)
    result = UploadedResumeAnalysis(
        **analysis.model_dump(),
        file_name=file.filename,
        file_size=f"{len(content) / 1024:.2f} KB",
        extracted_text_preview=text[:PREVIEW_CHARS] + "...",
    )
    return ApiResponse(data=result, message="Resume file analyzed successfully")


@router.post("/resume/sample", response_model=ApiResponse[SampleResume])
async def resume_sample():
    return ApiResponse(data=SampleResume(resume_text=SAMPLE_RESUME), message="Sample resume retrieved")


# ---------------------------------------------------------------------------
# Job description
# ---------------------------------------------------------------------------

@router.post("/job-description/analyze", response_model=ApiResponse[JobAnalysis])
@limiter.limit(settings.rate_limit)
def job_analyze(request: Request, body: JobTextRequest):
    text = _require_text(body.job_text, "Job description", settings.min_document_chars)
    return ApiResponse(data=analyze_job(text), message="Job description analyzed successfully")


@router.post("/job-description/compare", response_model=ApiResponse[MatchResult])
@limiter.limit(settings.rate_limit)
def job_compare(request: Request, body: CompareRequest):
    resume_text = _require_text(body.resume_text, "Resume text", settings.min_document_chars)
    job_text = _require_text(body.job_text, "Job description", settings.min_document_chars)
    return ApiResponse(
        data=compare_resume_to_job(resume_text, job_text),
        message="Resume and job description compared successfully",
    )


@router.post("/job-description/sample", response_model=ApiResponse[SampleJob])
async def job_sample():
    return ApiResponse(data=SampleJob(job_text=SAMPLE_JOB), message="Sample job description retrieved")


# ---------------------------------------------------------------------------
# Skills
# ---------------------------------------------------------------------------

@router.post("/skills/recommendations", response_model=ApiResponse[SkillRecommendation])
@limiter.limit(settings.rate_limit)
def skills_recommendations(request: Request, body: SkillsRequest):
    text = _require_text(body.skills_text, "Skills text", settings.min_skills_chars)
    return ApiResponse(
        data=recommend_skills(text, body.target_role),
        message="Skill recommendations generated successfully",
    )


@router.post("/skills/interview-prep", response_model=ApiResponse[InterviewPreparation])
@limiter.limit(settings.rate_limit)
def skills_interview_prep(request: Request, body: SkillsRequest):
    text = _require_text(body.skills_text, "Skills text", settings.min_skills_chars)
    return ApiResponse(
        data=prepare_interview(text, body.target_role),
        message="Interview preparation generated successfully",
    )


@router.get("/skills/categories", response_model=ApiResponse[list[SkillCategorySummary]])
async def skills_categories():
    return ApiResponse(
        data=list_skill_categories(),
        message="Skill categories retrieved successfully",
    )
