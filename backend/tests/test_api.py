import io

from docx import Document
from fastapi.testclient import TestClient

from config import settings
from main import app

client = TestClient(app)

RESUME_TEXT = """Jane Smith
Email: jane.smith@email.com | Phone: 555-123-4567
Summary
Dedicated engineer with 4 years of experience in React and Node.js.
Skills: JavaScript, React, Node.js, MongoDB, Git
"""

JOB_TEXT = """Frontend Engineer
Must have: React and JavaScript with 3+ years of experience.
TypeScript is required as well.
"""


def test_health():
    response = client.get("/health")
    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert body["data"]["status"] == "ok"


class TestResume:
    def test_analyze(self):
        response = client.post("/resume/analyze", json={"resume_text": RESUME_TEXT})
        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        assert body["message"] == "Resume analyzed successfully"
        data = body["data"]
        assert 0 <= data["overall_score"] <= 100
        assert data["experience"]["years"] == 4
        assert "react" in data["skills"]["found"]

    def test_analyze_too_short(self):
        response = client.post("/resume/analyze", json={"resume_text": "x" * 49})
        assert response.status_code == 400
        body = response.json()
        assert body["success"] is False
        assert body["data"] is None
        assert "at least 50 characters" in body["message"]

    def test_analyze_exactly_minimum_length(self):
        response = client.post("/resume/analyze", json={"resume_text": "x" * 50})
        assert response.status_code == 200
        assert response.json()["data"]["overall_score"] <= 100

    def test_analyze_whitespace_does_not_count(self):
        response = client.post("/resume/analyze", json={"resume_text": " " * 100 + "short"})
        assert response.status_code == 400

    def test_analyze_missing_field(self):
        response = client.post("/resume/analyze", json={})
        assert response.status_code == 400

    def test_upload_text_file(self):
        response = client.post(
            "/resume/upload",
            files={"file": ("resume.txt", RESUME_TEXT.encode(), "text/plain")},
        )
        assert response.status_code == 200
        data = response.json()["data"]
        assert data["file_name"] == "resume.txt"
        assert data["file_size"].endswith(" KB")
        assert data["extracted_text_preview"].startswith("Jane Smith")
        assert data["extracted_text_preview"].endswith("...")
        assert "overall_score" in data

    def test_upload_docx_file(self):
        doc = Document()
        for line in RESUME_TEXT.splitlines():
            doc.add_paragraph(line)
        buffer = io.BytesIO()
        doc.save(buffer)
        response = client.post(
            "/resume/upload",
            files={"file": ("resume.docx", buffer.getvalue(), "application/octet-stream")},
        )
        assert response.status_code == 200
        assert "react" in response.json()["data"]["skills"]["found"]

    def test_upload_rejects_unsupported_type(self):
        response = client.post(
            "/resume/upload",
            files={"file": ("photo.png", b"\x89PNG", "image/png")},
        )
        assert response.status_code == 400
        assert "Only PDF, DOCX, DOC, and TXT" in response.json()["message"]

    def test_upload_rejects_corrupt_pdf(self):
        response = client.post(
            "/resume/upload",
            files={"file": ("resume.pdf", b"definitely not a pdf", "application/pdf")},
        )
        assert response.status_code == 400
        assert response.json()["success"] is False

    def test_upload_rejects_nearly_empty_text(self):
        response = client.post(
            "/resume/upload",
            files={"file": ("resume.txt", b"too short", "text/plain")},
        )
        assert response.status_code == 400
        assert "Could not extract enough text" in response.json()["message"]

    def test_upload_rejects_oversized_file(self):
        content = b"a" * (settings.max_upload_size_mb * 1024 * 1024 + 1)
        response = client.post(
            "/resume/upload",
            files={"file": ("resume.txt", content, "text/plain")},
        )
        assert response.status_code == 400
        assert "File too large" in response.json()["message"]

    def test_upload_without_file(self):
        response = client.post("/resume/upload")
        assert response.status_code == 400
        assert response.json()["message"] == "Please upload a file"

    def test_sample(self):
        response = client.post("/resume/sample")
        assert response.status_code == 200
        assert "John Doe" in response.json()["data"]["resume_text"]


class TestJobDescription:
    def test_analyze(self):
        response = client.post("/job-description/analyze", json={"job_text": JOB_TEXT})
        assert response.status_code == 200
        data = response.json()["data"]
        assert data["role"] == "Frontend Engineer"
        assert "react" in data["required_skills"]
        assert data["experience_level"]["minimum"] == 3
        assert data["match_score"] is None

    def test_analyze_too_short(self):
        response = client.post("/job-description/analyze", json={"job_text": "React dev"})
        assert response.status_code == 400
        assert response.json()["message"].startswith("Job description is too short")

    def test_compare(self):
        response = client.post(
            "/job-description/compare",
            json={"resume_text": RESUME_TEXT, "job_text": JOB_TEXT},
        )
        assert response.status_code == 200
        data = response.json()["data"]
        assert 0 <= data["match_score"] <= 100
        assert isinstance(data["recommendations"], list)
        assert any("typescript" in r for r in data["recommendations"])

    def test_compare_requires_both_texts(self):
        response = client.post(
            "/job-description/compare",
            json={"resume_text": RESUME_TEXT, "job_text": "short"},
        )
        assert response.status_code == 400

    def test_sample_round_trip(self):
        sample = client.post("/job-description/sample").json()["data"]["job_text"]
        response = client.post("/job-description/analyze", json={"job_text": sample})
        assert response.status_code == 200
        data = response.json()["data"]
        assert data["role"] == "Senior Full Stack Developer"
        assert data["experience_level"]["minimum"] == 5
        assert len(data["responsibilities"]) == 6


class TestSkills:
    def test_recommendations(self):
        response = client.post(
            "/skills/recommendations",
            json={"skills_text": "React, HTML and CSS", "target_role": "Frontend Developer"},
        )
        assert response.status_code == 200
        data = response.json()["data"]
        assert data["target_role"] == "Frontend Developer"
        assert data["recommended_skills"][0]["skill"] == "TypeScript"
        assert len(data["recommended_skills"]) <= 10
        assert data["career_paths"]

    def test_recommendations_too_short(self):
        response = client.post("/skills/recommendations", json={"skills_text": "React"})
        assert response.status_code == 400
        assert "at least 10 characters" in response.json()["message"]

    def test_interview_prep(self):
        response = client.post(
            "/skills/interview-prep",
            json={"skills_text": "JavaScript and React", "target_role": "Full Stack Developer"},
        )
        assert response.status_code == 200
        data = response.json()["data"]
        assert 0 < len(data["questions"]) <= 15
        texts = [q["question"] for q in data["questions"]]
        assert len(texts) == len(set(texts))
        assert data["focus_areas"]
        assert len(data["prep_tips"]) >= 5

    def test_categories(self):
        response = client.get("/skills/categories")
        assert response.status_code == 200
        data = response.json()["data"]
        assert len(data) == 9
        assert {"category", "skill_count", "related_roles", "sample_skills"} <= set(data[0])
