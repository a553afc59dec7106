"""Behaviour of the ERRORS and ENABLE_CRUD flags at request time."""

import time

import pytest
from fastapi.testclient import TestClient

from octopets_api.app.core.config import Settings
from octopets_api.app.main import create_app
from octopets_api.app.repositories import InMemoryListingRepository


@pytest.fixture
def seeded_client(client, set_flags):
    set_flags()
    response = client.post("/api/listings/", json={"name": "Rex"})
    assert response.status_code == 201
    return client


def test_crud_disabled_rejects_create_without_touching_repository(seeded_client, set_flags):
    set_flags(enable_crud=False)
    response = seeded_client.post("/api/listings/", json={"name": "Blocked"})

    assert response.status_code == 500
    error = response.json()["error"]
    assert error["code"] == "CRUD_DISABLED"
    assert error["category"] == "operational"
    assert error["message"] == "CRUD operations are currently disabled"
    assert [item["name"] for item in seeded_client.get("/api/listings/").json()] == ["Rex"]


def test_crud_disabled_rejects_update(seeded_client, set_flags):
    set_flags(enable_crud=False)
    response = seeded_client.put("/api/listings/1", json={"name": "Changed"})

    assert response.status_code == 500
    assert response.json()["error"]["code"] == "CRUD_DISABLED"
    assert seeded_client.get("/api/listings/1").json()["name"] == "Rex"


def test_crud_disabled_rejects_delete(seeded_client, set_flags):
    set_flags(enable_crud=False)
    response = seeded_client.delete("/api/listings/1")

    assert response.status_code == 500
    assert response.json()["error"]["code"] == "CRUD_DISABLED"
    assert seeded_client.get("/api/listings/1").status_code == 200


def test_crud_disabled_checked_before_lookup(client, set_flags):
    # An unknown id still yields the operational error, not 404.
    set_flags(enable_crud=False)
    assert client.put("/api/listings/99", json={"name": "x"}).status_code == 500
    assert client.delete("/api/listings/99").status_code == 500


def test_reads_still_work_with_crud_disabled(seeded_client, set_flags):
    set_flags(enable_crud=False)
    assert seeded_client.get("/api/listings/").status_code == 200
    assert seeded_client.get("/api/listings/1").status_code == 200


def test_errors_flag_delays_get_by_id(seeded_client, set_flags, settings):
    set_flags(errors=True)
    started = time.perf_counter()
    response = seeded_client.get("/api/listings/1")
    elapsed = time.perf_counter() - started

    assert response.status_code == 200
    assert elapsed >= settings.slow_operation_seconds


def test_errors_flag_still_returns_404_for_missing(client, set_flags):
    set_flags(errors=True)
    assert client.get("/api/listings/5").status_code == 404


def test_errors_flag_does_not_slow_list_all(seeded_client, set_flags, settings):
    set_flags(errors=True)
    started = time.perf_counter()
    assert seeded_client.get("/api/listings/").status_code == 200
    assert time.perf_counter() - started < settings.slow_operation_seconds


def test_default_slow_path_takes_about_a_second(monkeypatch):
    monkeypatch.setenv("ERRORS", "true")
    repository = InMemoryListingRepository()
    client = TestClient(create_app(settings=Settings(repository_backend="memory"), repository=repository))
    client.post("/api/listings/", json={"name": "Rex"})

    started = time.perf_counter()
    response = client.get("/api/listings/1")
    assert response.status_code == 200
    assert time.perf_counter() - started >= 1.0


def test_flags_are_read_from_environment_per_request(client, monkeypatch):
    monkeypatch.delenv("ENABLE_CRUD", raising=False)
    monkeypatch.delenv("ERRORS", raising=False)
    assert client.post("/api/listings/", json={"name": "Rex"}).status_code == 201

    monkeypatch.setenv("ENABLE_CRUD", "false")
    assert client.post("/api/listings/", json={"name": "Blocked"}).status_code == 500

    monkeypatch.setenv("ENABLE_CRUD", "TRUE")
    assert client.delete("/api/listings/1").status_code == 204


def test_health_reports_current_flags(client, monkeypatch):
    monkeypatch.setenv("ERRORS", "1")
    monkeypatch.setenv("ENABLE_CRUD", "no")
    response = client.get("/api/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok", "errors": True, "enable_crud": False}
