"""
Top‑level API router.

Aggregates the domain routers under a unified prefix.  The application
mounts this router at ``/api``.
"""

from fastapi import APIRouter

from .endpoints import health, listings

router = APIRouter()

router.include_router(listings.router, prefix="/listings", tags=["Listings"])
router.include_router(health.router, prefix="/health", tags=["Health"])
