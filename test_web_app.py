"""
In-process tests for the EC2 Hello Service web application
"""

import logging
import re
from datetime import datetime, timedelta, timezone

import pytest
from fastapi.testclient import TestClient

from hello_service.models import IncomingRequest
from hello_service.routes import HEALTH_BODY, ROOT_GREETING, ROUTES
from hello_service.web_app import HelloWebApp

REQUEST_LINE = r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}\.\d{3}Z - [A-Z]+ /\S*$"


@pytest.fixture
def client():
    return TestClient(HelloWebApp().app)


def request_lines(caplog):
    return [r.getMessage() for r in caplog.records if r.name == 'request_log']


def test_root_greeting(client):
    response = client.get("/")
    assert response.status_code == 200
    assert response.text == ROOT_GREETING == "Hello from EC2 instance! Server is running."
    assert response.headers["content-type"].startswith("text/plain")


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.text == HEALTH_BODY == "ok"


def test_head_answers_like_get(client):
    assert client.head("/").status_code == 200
    assert client.head("/health").status_code == 200


@pytest.mark.parametrize("path", ["/missing", "/health/", "/HEALTH", "/index.html", "/docs", "/openapi.json"])
def test_unknown_paths_are_not_found(client, path):
    response = client.get(path)
    assert response.status_code == 404
    assert response.json() == {"detail": "Not Found"}


@pytest.mark.parametrize("method", ["POST", "PUT", "DELETE", "PATCH"])
def test_other_methods_on_known_paths_are_not_found(client, method):
    assert client.request(method, "/").status_code == 404
    assert client.request(method, "/health").status_code == 404


def test_query_string_is_ignored(client):
    response = client.get("/health?verbose=1")
    assert response.status_code == 200
    assert response.text == "ok"


def test_one_log_line_per_request(client, caplog):
    caplog.set_level(logging.INFO, logger='request_log')
    sent = [("GET", "/"), ("GET", "/health"), ("GET", "/missing"), ("POST", "/"), ("DELETE", "/nope")]
    for method, path in sent:
        client.request(method, path)

    lines = request_lines(caplog)
    assert len(lines) == len(sent)
    for line, (method, path) in zip(lines, sent):
        assert re.match(REQUEST_LINE, line)
        assert line.endswith(f" - {method} {path}")


def test_log_line_shape(client, caplog):
    caplog.set_level(logging.INFO, logger='request_log')
    client.get("/health?x=1")

    [line] = request_lines(caplog)
    assert re.match(REQUEST_LINE, line)
    assert line.endswith(" - GET /health")


def test_logged_path_is_raw_and_percent_encoded(client, caplog):
    caplog.set_level(logging.INFO, logger='request_log')
    client.get("/a%20b?x=1")
    client.get("/x%0A2024-01-01T00:00:00.000Z%20-%20GET%20/forged")

    lines = request_lines(caplog)
    assert len(lines) == 2
    assert lines[0].endswith(" - GET /a%20b")
    assert lines[1].endswith(" - GET /x%0A2024-01-01T00:00:00.000Z%20-%20GET%20/forged")
    assert all(re.match(REQUEST_LINE, line) for line in lines)


def test_route_table_is_exact_and_ordered():
    assert [route.path for route in ROUTES] == ["/", "/health"]
    for route in ROUTES:
        assert set(route.methods) == {"GET", "HEAD"}
        assert route.status_code == 200


def test_incoming_request_log_line():
    arrived_at = datetime(2024, 5, 1, 12, 0, 0, 123456, tzinfo=timezone.utc)
    request = IncomingRequest(method="GET", path="/health", arrived_at=arrived_at)
    assert request.log_line() == "2024-05-01T12:00:00.123Z - GET /health"


def test_incoming_request_timestamp_is_normalised_to_utc():
    arrived_at = datetime(2024, 5, 1, 14, 30, 0, tzinfo=timezone(timedelta(hours=2)))
    request = IncomingRequest(method="POST", path="/", arrived_at=arrived_at)
    assert request.log_line() == "2024-05-01T12:30:00.000Z - POST /"


def test_incoming_request_defaults_to_now():
    before = datetime.now(timezone.utc)
    request = IncomingRequest(method="GET", path="/")
    assert before <= request.arrived_at <= datetime.now(timezone.utc)
