"""
Listing repositories.

``ListingRepository`` is the contract the endpoints depend on;
``build_repository`` picks an implementation from the settings.
"""

from octopets_api.app.core.config import Settings
from octopets_api.app.repositories.base import ListingRepository
from octopets_api.app.repositories.memory import InMemoryListingRepository
from octopets_api.app.repositories.sqlite import SQLiteListingRepository

__all__ = [
    "ListingRepository",
    "InMemoryListingRepository",
    "SQLiteListingRepository",
    "build_repository",
]


def build_repository(settings: Settings) -> ListingRepository:
    """Create the repository selected by ``settings.repository_backend``."""
    backend = settings.repository_backend.strip().lower()
    if backend == "memory":
        return InMemoryListingRepository()
    if backend == "sqlite":
        return SQLiteListingRepository(settings.database_url)
    raise ValueError(f"Unknown repository backend: {settings.repository_backend!r}")
