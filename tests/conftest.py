"""Shared fixtures: an app on a fresh in-memory repository and flag overrides."""

from typing import Callable

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from octopets_api.app.api.deps import get_feature_flags
from octopets_api.app.core.config import FeatureFlags, Settings
from octopets_api.app.main import create_app
from octopets_api.app.repositories import InMemoryListingRepository


@pytest.fixture
def settings() -> Settings:
    # Short slow path so the ERRORS tests stay quick.
    return Settings(
        repository_backend="memory",
        slow_operation_iterations=1000,
        slow_operation_seconds=0.2,
    )


@pytest.fixture
def repository() -> InMemoryListingRepository:
    return InMemoryListingRepository()


@pytest.fixture
def app(settings: Settings, repository: InMemoryListingRepository) -> FastAPI:
    return create_app(settings=settings, repository=repository)


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    return TestClient(app)


@pytest.fixture
def set_flags(app: FastAPI) -> Callable[..., FeatureFlags]:
    """Pin the per-request flag snapshot to fixed values."""

    def _set(errors: bool = False, enable_crud: bool = True) -> FeatureFlags:
        flags = FeatureFlags(errors=errors, enable_crud=enable_crud)
        app.dependency_overrides[get_feature_flags] = lambda: flags
        return flags

    yield _set
    app.dependency_overrides.clear()
