from fastapi.testclient import TestClient

from config import Settings, get_settings
from main import app

client = TestClient(app)


RESUME_TEXT = """Jane Doe
jane@example.com
Phone: 555-123-4567

Work Experience
Acme Corp - Engineer | 2019 - Present
- Built internal tools
"""


def _override_settings(**values):
    app.dependency_overrides[get_settings] = lambda: Settings(**values)


def test_health():
    response = client.get("/health")
    assert response.status_code == 200
    data = response.json()
    assert data["route"] == "/health"
    assert data["data"] == {"health": "Server is healthy."}


def test_parse_text():
    response = client.post("/api/resume/parse-text", json={"text": RESUME_TEXT})
    assert response.status_code == 200
    data = response.json()
    assert "parsed_at" in data
    resume = data["resume_data"]
    assert resume["firstName"] == "Jane"
    assert resume["lastName"] == "Doe"
    assert resume["email"] == "jane@example.com"
    assert resume["contactNumber"] == "555-123-4567"
    assert resume["workExperiences"][0]["company"] == "Acme Corp"


def test_parse_text_uses_reference_year():
    _override_settings(reference_year=2024)
    try:
        response = client.post("/api/resume/parse-text", json={"text": RESUME_TEXT})
    finally:
        app.dependency_overrides.clear()
    assert response.status_code == 200
    assert response.json()["resume_data"]["experience"] == 5


def test_parse_empty_text_returns_defaults():
    response = client.post("/api/resume/parse-text", json={"text": ""})
    assert response.status_code == 200
    resume = response.json()["resume_data"]
    assert resume["email"] == ""
    assert resume["experience"] == 0
    assert resume["projects"][0]["name"] == "Project"


def test_parse_text_requires_text():
    response = client.post("/api/resume/parse-text", json={})
    assert response.status_code == 422


def test_parse_uploaded_txt():
    response = client.post(
        "/api/resume/parse",
        files={"file": ("resume.txt", RESUME_TEXT.encode("utf-8"), "text/plain")},
    )
    assert response.status_code == 200
    resume = response.json()["resume_data"]
    assert resume["email"] == "jane@example.com"
    assert resume["firstName"] == "Jane"


def test_parse_rejects_unsupported_file():
    response = client.post(
        "/api/resume/parse",
        files={"file": ("resume.exe", b"MZ binary", "application/octet-stream")},
    )
    assert response.status_code == 400
    assert "Invalid file type" in response.json()["detail"]


def test_parse_rejects_large_file():
    _override_settings(max_upload_size_mb=0)
    try:
        response = client.post(
            "/api/resume/parse",
            files={"file": ("resume.txt", b"Jane Doe", "text/plain")},
        )
    finally:
        app.dependency_overrides.clear()
    assert response.status_code == 413
