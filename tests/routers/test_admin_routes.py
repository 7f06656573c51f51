from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

from career_quiz.auth.token_store import InMemoryAdminTokenStore, get_token_store
from career_quiz.constants import ADMIN_COOKIE_NAME, SessionStatus
from career_quiz.errors import StorageError
from career_quiz.routers.dependencies import get_lifecycle, get_report_assembler
from career_quiz.schemas.quiz import SessionCounts
from career_quiz.services.lifecycle import SessionLifecycle
from career_quiz.synthesis.report import ReportAssembler
from career_quiz.synthesis.summary import SummaryGenerator
from main import app


@pytest.fixture
def lifecycle_mock():
    return MagicMock(spec=SessionLifecycle)


@pytest.fixture
def token_store():
    return InMemoryAdminTokenStore(ttl_seconds=3600)


@pytest.fixture
def client(lifecycle_mock, token_store):
    app.dependency_overrides[get_lifecycle] = lambda: lifecycle_mock
    app.dependency_overrides[get_token_store] = lambda: token_store
    app.dependency_overrides[get_report_assembler] = lambda: ReportAssembler(SummaryGenerator(remote=None))
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def admin_headers(client):
    response = client.post("/api/admin/login", json={"username": "admin", "password": "admin"})
    assert response.status_code == 200
    token = response.cookies.get(ADMIN_COOKIE_NAME)
    assert token
    client.cookies.clear()
    return {"Cookie": f"{ADMIN_COOKIE_NAME}={token}"}


def stored(make_session, record_id, **overrides):
    record = make_session(**overrides)
    record.id = record_id
    return record


# --- Auth ---

def test_login_sets_http_only_cookie(client):
    response = client.post("/api/admin/login", json={"username": "admin", "password": "admin"})
    assert response.status_code == 200
    assert response.json() == {"success": True}
    set_cookie = response.headers["set-cookie"].lower()
    assert "httponly" in set_cookie
    assert "max-age=86400" in set_cookie


def test_login_rejects_bad_credentials(client):
    response = client.post("/api/admin/login", json={"username": "admin", "password": "nope"})
    assert response.status_code == 401
    assert response.json() == {"error": "Invalid credentials"}


def test_check_auth(client, admin_headers):
    assert client.get("/api/admin/check-auth", headers=admin_headers).json() == {"authenticated": True}
    response = client.get("/api/admin/check-auth")
    assert response.status_code == 401
    assert response.json() == {"authenticated": False}


def test_logout_revokes_token(client, admin_headers):
    assert client.post("/api/admin/logout", headers=admin_headers).json() == {"success": True}
    assert client.get("/api/admin/check-auth", headers=admin_headers).status_code == 401


@pytest.mark.parametrize("method,path", [
    ("get", "/api/admin/results"),
    ("get", "/api/admin/stats"),
    ("post", "/api/admin/delete"),
    ("get", "/api/admin/export-csv"),
    ("get", "/api/admin/analytics"),
    ("get", "/api/admin/user-report?id=1"),
    ("get", "/api/admin/user-answers?id=1"),
])
def test_admin_routes_require_token(client, lifecycle_mock, method, path):
    response = getattr(client, method)(path, headers={"Cookie": f"{ADMIN_COOKIE_NAME}=forged"})
    assert response.status_code == 401
    assert response.json() == {"error": "Unauthorized"}
    assert not lifecycle_mock.method_calls


# --- Data ---

def test_results_with_status_filter(client, lifecycle_mock, admin_headers, make_session):
    lifecycle_mock.list_by_status.return_value = [stored(make_session, 2, session_id="quiz_b")]
    response = client.get("/api/admin/results?status=complete", headers=admin_headers)
    assert response.status_code == 200
    body = response.json()
    assert body[0]["id"] == 2
    assert body[0]["session_id"] == "quiz_b"
    assert body[0]["top_three_code"] == "SRI"
    lifecycle_mock.list_by_status.assert_awaited_once_with(SessionStatus.COMPLETE)


def test_results_rejects_unknown_status(client, admin_headers):
    assert client.get("/api/admin/results?status=archived", headers=admin_headers).status_code == 422


def test_results_storage_failure(client, lifecycle_mock, admin_headers):
    lifecycle_mock.list_by_status.side_effect = StorageError()
    response = client.get("/api/admin/results", headers=admin_headers)
    assert response.status_code == 500
    assert response.json() == {"error": "Failed to fetch results"}


def test_stats(client, lifecycle_mock, admin_headers):
    lifecycle_mock.count_by_status.return_value = SessionCounts(total=5, complete=3, incomplete=2, today=1)
    response = client.get("/api/admin/stats", headers=admin_headers)
    assert response.json() == {"total": 5, "complete": 3, "incomplete": 2, "today": 1}


def test_delete(client, lifecycle_mock, admin_headers):
    lifecycle_mock.delete_by_id.return_value = True
    assert client.post("/api/admin/delete", json={"id": 4}, headers=admin_headers).json() == {"success": True}
    lifecycle_mock.delete_by_id.assert_awaited_once_with(4)

    lifecycle_mock.delete_by_id.return_value = False
    assert client.post("/api/admin/delete", json={"id": 4}, headers=admin_headers).status_code == 404
    assert client.post("/api/admin/delete", json={}, headers=admin_headers).status_code == 400


def test_export_csv(client, lifecycle_mock, admin_headers, make_session):
    lifecycle_mock.list_by_status.return_value = [stored(make_session, 1), stored(make_session, 2)]
    response = client.get("/api/admin/export-csv", headers=admin_headers)
    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/csv")
    assert "riasec_quiz_data_" in response.headers["content-disposition"]
    assert len(response.text.strip().splitlines()) == 3


def test_analytics(client, lifecycle_mock, admin_headers, make_session):
    lifecycle_mock.list_by_status.return_value = [stored(make_session, 1)]
    response = client.get("/api/admin/analytics", headers=admin_headers)
    assert response.status_code == 200
    body = response.json()
    assert body["topHollandCodes"] == [{"top_three_code": "SRI", "count": 1}]
    lifecycle_mock.list_by_status.assert_awaited_once_with(SessionStatus.COMPLETE)


def test_user_answers(client, lifecycle_mock, admin_headers, make_session):
    lifecycle_mock.get_by_id.return_value = stored(make_session, 7, full_name="Sita", answers={"q1": "no"})
    response = client.get("/api/admin/user-answers?id=7", headers=admin_headers)
    assert response.json() == {"fullName": "Sita", "answers": {"q1": "no"}}

    assert client.get("/api/admin/user-answers", headers=admin_headers).status_code == 400
    lifecycle_mock.get_by_id.return_value = None
    response = client.get("/api/admin/user-answers?id=8", headers=admin_headers)
    assert response.status_code == 404
    assert response.json() == {"error": "User not found"}


def test_user_report(client, lifecycle_mock, admin_headers, make_session):
    lifecycle_mock.get_by_id.return_value = stored(make_session, 3, full_name="Ram Thapa", top_three_code="RIC",
                                                   scores={"R": 7, "I": 6, "A": 1, "S": 2, "E": 0, "C": 5})
    response = client.get("/api/admin/user-report?id=3", headers=admin_headers)
    assert response.status_code == 200
    assert "inline" in response.headers["content-disposition"]
    assert "Ram Thapa" in response.text

    body = client.get("/api/admin/user-report?id=3&format=json", headers=admin_headers).json()
    assert [s["code"] for s in body["sections"] if s["kind"] == "type_detail"] == ["R", "I", "C"]


def test_user_report_errors(client, lifecycle_mock, admin_headers, make_session):
    assert client.get("/api/admin/user-report", headers=admin_headers).status_code == 400

    lifecycle_mock.get_by_id.return_value = None
    assert client.get("/api/admin/user-report?id=1", headers=admin_headers).status_code == 404

    lifecycle_mock.get_by_id.return_value = stored(make_session, 1, status=SessionStatus.INCOMPLETE.value,
                                                   scores=None, top_three_code=None)
    assert client.get("/api/admin/user-report?id=1", headers=admin_headers).status_code == 409

    lifecycle_mock.get_by_id.return_value = stored(make_session, 1, top_three_code="QQQ")
    response = client.get("/api/admin/user-report?id=1", headers=admin_headers)
    assert response.status_code == 500
    assert response.json() == {"error": "Failed to generate report"}
