"""
FastAPI dependencies shared by the endpoints.

``get_feature_flags`` builds a fresh ``FeatureFlags`` snapshot for
every request so that flag changes are picked up without a restart;
tests replace it through ``app.dependency_overrides``.
``get_listing_repository`` and ``get_settings`` hand out the objects
``create_app`` stored on ``app.state``.
"""

from fastapi import Request

from octopets_api.app.core.config import FeatureFlags, Settings
from octopets_api.app.repositories.base import ListingRepository


def get_feature_flags() -> FeatureFlags:
    return FeatureFlags.from_env()


def get_listing_repository(request: Request) -> ListingRepository:
    return request.app.state.listing_repository


def get_settings(request: Request) -> Settings:
    return request.app.state.settings
