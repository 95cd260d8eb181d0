"""
Endpoint tests for the FastAPI application.

These tests verify:
1. analyze-resume returns camelCase keyword lists and omits absent suggestions
2. parse-resume returns extracted text
3. Every failure is an {"error": ...} payload with a matching status
4. CORS pre-flight succeeds for any origin, and error responses keep the
   CORS header
"""

import pytest
from fastapi.testclient import TestClient
from unittest.mock import AsyncMock, MagicMock

from resume_analyzer.agent.exceptions import (
    ConfigurationError,
    ProviderError,
    QuotaExceededError,
    RateLimitError,
    StrategyError,
)
from resume_analyzer.api.router.v1.analysis import get_analysis_service
from resume_analyzer.api.router.v1.document import get_document_service
from resume_analyzer.base import create_app
from resume_analyzer.services import AnalysisService, DocumentService
from resume_analyzer.services.exceptions import DocumentDownloadError
from resume_analyzer.storage import StoredObject

DOCX_MIME = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"

ANALYSIS_WITH_SUGGESTIONS = {
    "resume": "Python developer",
    "jobDescription": "Kubernetes engineer",
    "generateSuggestions": True,
}


@pytest.fixture
def app():
    return create_app()


@pytest.fixture
def suggestion_service():
    service = MagicMock()
    service.generate = AsyncMock(return_value=["- Deployed services to Kubernetes"])
    return service


@pytest.fixture
def storage():
    storage = MagicMock()
    storage.download = AsyncMock()
    return storage


@pytest.fixture
def client(app, suggestion_service, storage):
    app.dependency_overrides[get_analysis_service] = lambda: AnalysisService(
        suggestion_service=suggestion_service
    )
    app.dependency_overrides[get_document_service] = lambda: DocumentService(storage=storage)
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


class TestAnalyzeResume:
    URL = "/api/v1/analyze-resume"

    def test_analysis_without_suggestions(self, client, suggestion_service):
        response = client.post(
            self.URL,
            json={
                "resume": "Experienced Python developer",
                "jobDescription": "Looking for Python and Go engineer",
                "generateSuggestions": False,
            },
        )

        assert response.status_code == 200
        body = response.json()
        assert set(body) == {"jdKeywords", "presentKeywords", "missingKeywords"}
        assert "python" in body["presentKeywords"]
        assert "engineer" in body["missingKeywords"]
        assert len(body["jdKeywords"]) <= 40
        suggestion_service.generate.assert_not_called()

    def test_analysis_with_suggestions(self, client, suggestion_service):
        response = client.post(
            self.URL,
            json={
                "resume": "Experienced Python developer",
                "jobDescription": "Python engineer with Kubernetes",
                "generateSuggestions": True,
            },
        )

        assert response.status_code == 200
        body = response.json()
        assert body["suggestions"] == ["- Deployed services to Kubernetes"]
        suggestion_service.generate.assert_awaited_once_with(body["missingKeywords"])

    @pytest.mark.parametrize(
        "payload",
        [
            {"resume": "", "jobDescription": "Python engineer"},
            {"resume": None, "jobDescription": None, "generateSuggestions": None},
            {"resume": "Python engineer"},
            {},
        ],
    )
    def test_missing_fields(self, client, payload):
        response = client.post(self.URL, json=payload)

        assert response.status_code == 400
        assert response.json() == {"error": "Resume and job description are required"}

    def test_malformed_body(self, client):
        response = client.post(
            self.URL, content="not json", headers={"content-type": "application/json"}
        )

        assert response.status_code == 400
        assert "error" in response.json()

    @pytest.mark.parametrize(
        "error, status_code",
        [
            (ConfigurationError(), 500),
            (RateLimitError(), 429),
            (QuotaExceededError(), 402),
            (ProviderError(), 502),
        ],
    )
    def test_provider_errors(self, client, suggestion_service, error, status_code):
        suggestion_service.generate.side_effect = error

        response = client.post(
            self.URL,
            json={
                "resume": "Python developer",
                "jobDescription": "Kubernetes engineer",
                "generateSuggestions": True,
            },
        )

        assert response.status_code == status_code
        assert response.json() == {"error": error.message}


class TestParseResume:
    URL = "/api/v1/parse-resume"

    def test_plain_text(self, client, storage):
        storage.download.return_value = StoredObject(
            path="cv.txt", data=b"Jane Doe, Python engineer", content_type="text/plain"
        )

        response = client.post(self.URL, json={"filePath": "cv.txt"})

        assert response.status_code == 200
        assert response.json() == {"text": "Jane Doe, Python engineer"}
        storage.download.assert_awaited_once_with("cv.txt")

    def test_docx(self, client, storage):
        storage.download.return_value = StoredObject(
            path="cv.docx",
            data=b"<w:t>Jane Doe</w:t><w:t>Python engineer</w:t>",
            content_type=DOCX_MIME,
        )

        response = client.post(self.URL, json={"filePath": "cv.docx"})

        assert response.json() == {"text": "Jane Doe Python engineer"}

    def test_missing_path(self, client, storage):
        response = client.post(self.URL, json={})

        assert response.status_code == 400
        assert response.json() == {"error": "File path is required"}
        storage.download.assert_not_called()

    def test_unsupported_type(self, client, storage):
        storage.download.return_value = StoredObject(
            path="cv.png", data=b"\x89PNG", content_type="image/png"
        )

        response = client.post(self.URL, json={"filePath": "cv.png"})

        assert response.status_code == 415
        assert response.json() == {"error": "Unsupported file type"}

    def test_too_little_text(self, client, storage):
        storage.download.return_value = StoredObject(
            path="cv.txt", data=b"Jane", content_type="text/plain"
        )

        response = client.post(self.URL, json={"filePath": "cv.txt"})

        assert response.status_code == 422
        assert response.json()["error"].startswith("Could not extract text from file.")

    def test_download_failure(self, client, storage):
        storage.download.side_effect = DocumentDownloadError(path="cv.pdf", original_error="404")

        response = client.post(self.URL, json={"filePath": "cv.pdf"})

        assert response.status_code == 502
        assert response.json() == {"error": "Failed to download file"}


class TestCors:
    @pytest.mark.parametrize("path", ["/api/v1/analyze-resume", "/api/v1/parse-resume"])
    def test_preflight(self, client, path):
        response = client.options(
            path,
            headers={
                "Origin": "https://resume-analyzer.example",
                "Access-Control-Request-Method": "POST",
                "Access-Control-Request-Headers": "authorization, content-type",
            },
        )

        assert response.status_code == 200
        assert response.headers["access-control-allow-origin"] == "*"

    def test_simple_request_carries_cors_header(self, client):
        response = client.post(
            "/api/v1/analyze-resume",
            json={"resume": "", "jobDescription": ""},
            headers={"Origin": "https://resume-analyzer.example"},
        )

        assert response.headers["access-control-allow-origin"] == "*"

    def test_unusable_ai_output_carries_cors_header(self, client, suggestion_service):
        suggestion_service.generate.side_effect = StrategyError("Expected text, got dict")

        response = client.post(
            "/api/v1/analyze-resume",
            json=ANALYSIS_WITH_SUGGESTIONS,
            headers={"Origin": "https://resume-analyzer.example"},
        )

        assert response.status_code == 502
        assert response.json() == {"error": "Failed to generate suggestions"}
        assert response.headers["access-control-allow-origin"] == "*"

    def test_unexpected_error_carries_cors_header(self, client, suggestion_service):
        suggestion_service.generate.side_effect = KeyError("choices")

        response = client.post(
            "/api/v1/analyze-resume",
            json=ANALYSIS_WITH_SUGGESTIONS,
            headers={"Origin": "https://resume-analyzer.example"},
        )

        assert response.status_code == 500
        assert response.json() == {"error": "'choices'"}
        assert response.headers["access-control-allow-origin"] == "*"


class TestHealth:
    def test_health(self, client):
        response = client.get("/api/v1/health")

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "ok"
        assert isinstance(body["aiEnabled"], bool)
