"""
Tests for the page-facing endpoints.

The StudentPaymentClient dependency is replaced with one talking to a
fake remote, so the full path page -> portal -> remote is exercised.
"""

import datetime as dt

import pytest
from fastapi.testclient import TestClient

from payment_portal.app.api import get_client
from payment_portal.app.client import StudentPaymentClient
from payment_portal.app.main import create_app
from conftest import API_URL, run


@pytest.fixture
def app(remote):
    http_client = remote.client()
    portal_client = StudentPaymentClient(API_URL, client=http_client)
    app = create_app()
    app.dependency_overrides[get_client] = lambda: portal_client
    yield app
    run(http_client.aclose())


@pytest.fixture
def http(app):
    return TestClient(app)


def test_health(http):
    response = http.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


class TestLogin:

    def test_success_returns_class(self, http, remote):
        remote.body = {"success": True, "class": "ALL"}

        response = http.post("/api/login", json={"username": " admin ", "pin": "9999"})

        assert response.status_code == 200
        assert response.json() == {"success": True, "class": "ALL"}
        assert remote.payloads == [{"action": "login", "username": "admin", "pin": "9999"}]

    def test_numeric_pin_is_stringified(self, http, remote):
        remote.body = {"success": True, "class": "A"}

        response = http.post("/api/login", json={"username": "a", "pin": 1234})

        assert response.status_code == 200
        assert response.json() == {"success": True, "class": "A"}
        assert remote.payloads == [{"action": "login", "username": "a", "pin": "1234"}]

    def test_missing_pin_is_a_result_not_an_error(self, http, remote):
        response = http.post("/api/login", json={"username": "admin"})

        assert response.status_code == 200
        assert response.json() == {"success": False, "message": "Username and PIN required"}
        assert remote.requests == []

    def test_remote_down(self, http, remote):
        remote.status_code = 500

        response = http.post("/api/login", json={"username": "admin", "pin": "1"})

        assert response.json() == {"success": False, "message": "Network error: 500 Internal Server Error"}


class TestStudents:

    def test_all_by_default(self, http, remote):
        remote.body = {"success": True}

        response = http.get("/api/students")

        assert response.json() == {"success": True, "students": []}
        assert remote.payloads == [{"action": "getStudents", "class": "ALL"}]

    def test_class_query(self, http, remote):
        remote.body = {"success": True, "students": [{"name": "Ann"}]}

        response = http.get("/api/students", params={"class": "B"})

        assert response.json() == {"success": True, "students": [{"name": "Ann"}]}
        assert remote.payloads == [{"action": "getStudents", "class": "B"}]


class TestPayments:

    def test_numeric_class_is_passed_through(self, http, remote):
        record = {"name": "A", "amount": 10, "class": 10, "mode": "cash", "date": "2024-01-01"}

        response = http.post("/api/payments", json=record)

        assert response.status_code == 200
        assert response.json() == {"success": True}
        assert remote.payloads == [{"action": "addPayment", "payment": record}]

    def test_records_payment(self, http, remote):
        record = {"name": "A", "amount": 10, "class": "B", "mode": "cash", "date": "2024-01-01"}

        response = http.post("/api/payments", json=record)

        assert response.json() == {"success": True}
        assert remote.payloads == [{"action": "addPayment", "payment": record}]

    def test_missing_date_is_today(self, http, remote):
        http.post("/api/payments", json={"name": "A", "amount": 10})

        assert remote.payloads[0]["payment"]["date"] == dt.date.today().strftime("%Y-%m-%d")

    def test_missing_name(self, http, remote):
        response = http.post("/api/payments", json={"amount": 10})

        assert response.status_code == 200
        assert response.json() == {"success": False, "message": "Missing payment data"}
        assert remote.requests == []


def test_client_not_started_is_503():
    app = create_app()

    response = TestClient(app).get("/api/students")

    assert response.status_code == 503
