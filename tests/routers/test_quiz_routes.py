from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

from career_quiz.errors import StorageError
from career_quiz.routers.dependencies import get_lifecycle, get_report_assembler
from career_quiz.services.lifecycle import SessionLifecycle
from career_quiz.synthesis.report import ReportAssembler
from career_quiz.synthesis.summary import SummaryGenerator
from main import app

SCORES = {"R": 6, "I": 4, "A": 2, "S": 7, "E": 1, "C": 3}


@pytest.fixture
def lifecycle_mock():
    return MagicMock(spec=SessionLifecycle)


@pytest.fixture
def client(lifecycle_mock):
    app.dependency_overrides[get_lifecycle] = lambda: lifecycle_mock
    app.dependency_overrides[get_report_assembler] = lambda: ReportAssembler(SummaryGenerator(remote=None))
    yield TestClient(app)
    app.dependency_overrides.clear()


def test_register_user(client, lifecycle_mock):
    lifecycle_mock.register.return_value = "quiz_123_abc"
    response = client.post(
        "/api/register-user",
        json={"fullName": "Ram Thapa", "education": "bachelors", "age": ""},
        headers={"User-Agent": "pytest", "X-Forwarded-For": "203.0.113.7, 10.0.0.1"},
    )
    assert response.status_code == 200
    assert response.json() == {"success": True, "sessionId": "quiz_123_abc"}

    profile, user_agent, ip_address = lifecycle_mock.register.call_args.args
    assert profile.full_name == "Ram Thapa"
    assert profile.age is None
    assert user_agent == "pytest"
    assert ip_address == "203.0.113.7"


@pytest.mark.parametrize("payload", [{}, {"fullName": "   "}, {"fullName": "Ram", "age": "old"}])
def test_register_user_rejects_malformed_profile(client, lifecycle_mock, payload):
    response = client.post("/api/register-user", json=payload)
    assert response.status_code == 422
    lifecycle_mock.register.assert_not_called()


def test_register_user_storage_failure(client, lifecycle_mock):
    lifecycle_mock.register.side_effect = StorageError("db down")
    response = client.post("/api/register-user", json={"fullName": "Ram"})
    assert response.status_code == 500
    assert response.json() == {"error": "Failed to register user"}


def test_save_quiz(client, lifecycle_mock, make_session):
    lifecycle_mock.complete.return_value = make_session(session_id="quiz_1", top_three_code="SRI")
    response = client.post("/api/save-quiz", json={
        "sessionId": "quiz_1", "scores": SCORES, "answers": {"q1": "yes"}, "timeTaken": 300,
    })
    assert response.status_code == 200
    assert response.json() == {"success": True, "sessionId": "quiz_1", "topThreeCode": "SRI"}

    request = lifecycle_mock.complete.call_args.args[0]
    assert request.session_id == "quiz_1"
    assert request.scores == SCORES
    assert request.time_taken == 300


@pytest.mark.parametrize("scores", [{"R": 8}, {"Q": 1}, {"R": -2}, {"R": "many"}])
def test_save_quiz_rejects_malformed_scores(client, lifecycle_mock, scores):
    response = client.post("/api/save-quiz", json={"sessionId": "quiz_1", "scores": scores})
    assert response.status_code == 422
    lifecycle_mock.complete.assert_not_called()


def test_save_quiz_storage_failure(client, lifecycle_mock):
    lifecycle_mock.complete.side_effect = StorageError("db down")
    response = client.post("/api/save-quiz", json={"scores": SCORES})
    assert response.status_code == 500
    assert "error" in response.json()


def test_generate_report_html(client):
    response = client.post("/api/generate-report", json={
        "fullName": "Asha Gurung", "scores": SCORES, "topThreeCode": "SRI", "education": "bachelors",
    })
    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/html")
    assert 'filename="RIASEC_Report_Asha_Gurung.html"' in response.headers["content-disposition"]
    assert "Asha Gurung" in response.text


def test_generate_pdf_path_is_kept(client):
    response = client.post("/api/generate-pdf", json={"fullName": "Asha", "scores": SCORES, "topThreeCode": "SRI"})
    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/html")


def test_generate_report_json(client):
    response = client.post("/api/generate-report?format=json", json={"fullName": "Asha", "scores": SCORES})
    assert response.status_code == 200
    body = response.json()
    assert body["code"] == "SRI"
    assert [s["code"] for s in body["sections"] if s["kind"] == "type_detail"] == ["S", "R", "I"]


def test_generate_report_unknown_code(client):
    response = client.post("/api/generate-report", json={"fullName": "Asha", "scores": SCORES, "topThreeCode": "XYZ"})
    assert response.status_code == 422
    assert "error" in response.json()


def test_generate_report_all_zero_scores(client):
    zeros = {code: 0 for code in "RIASEC"}
    response = client.post("/api/generate-report?format=json", json={"fullName": "Asha", "scores": zeros})
    assert response.status_code == 200
    assert response.json()["code"] == "RIA"


def test_generate_report_lowercase_code(client):
    response = client.post(
        "/api/generate-report?format=json",
        json={"fullName": "Asha", "scores": SCORES, "topThreeCode": " sri "},
    )
    assert response.status_code == 200
    assert response.json()["code"] == "SRI"


def test_generate_report_without_scores_or_code(client):
    response = client.post("/api/generate-report?format=json", json={"fullName": "Asha"})
    assert response.status_code == 422


def test_health(client):
    response = client.get("/")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"
