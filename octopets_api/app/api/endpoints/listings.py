"""
Listing endpoints.

These routes expose a CRUD API for listings under ``/api/listings``.
Every handler delegates to the injected ``ListingRepository``.  Two
feature flags, read per request, change the behaviour:

* ``ERRORS`` makes ``GET /{listing_id}`` run the synthetic slow
  operation first.
* ``ENABLE_CRUD`` (on by default) gates create, update and delete.
  When it is off the handler raises ``CrudDisabledError`` before the
  repository is called, so nothing is modified.
"""

import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Path, Request, Response, status
from fastapi.concurrency import run_in_threadpool

from octopets_api.app.api.deps import get_feature_flags, get_listing_repository, get_settings
from octopets_api.app.core.config import FeatureFlags, Settings
from octopets_api.app.core.errors import CrudDisabledError
from octopets_api.app.repositories.base import ListingRepository
from octopets_api.app.schemas.listing import ListingCreate, ListingRead
from octopets_api.app.services.slow_operation import simulate_expensive_operation

logger = logging.getLogger(__name__)

router = APIRouter()

LISTING_NOT_FOUND = "Listing not found"


def _ensure_crud_enabled(flags: FeatureFlags, operation: str) -> None:
    if not flags.enable_crud:
        logger.warning("Rejected %s: CRUD operations are disabled", operation)
        raise CrudDisabledError(operation)


@router.get(
    "/",
    response_model=List[ListingRead],
    name="GetAllListings",
    description="Gets all listings",
)
async def get_all_listings(
    repository: ListingRepository = Depends(get_listing_repository),
) -> List[ListingRead]:
    return await repository.get_all()


@router.get(
    "/{listing_id}",
    response_model=ListingRead,
    name="GetListingById",
    description="Gets a listing by its ID",
)
async def get_listing_by_id(
    listing_id: int = Path(..., description="The ID of the listing"),
    repository: ListingRepository = Depends(get_listing_repository),
    flags: FeatureFlags = Depends(get_feature_flags),
    settings: Settings = Depends(get_settings),
) -> ListingRead:
    """Retrieve a single listing by ID.

    With ``ERRORS`` on, the request is held for about a second by the
    slow operation, which runs in the threadpool so other requests
    keep being served.  Returns HTTP 404 if the listing is not found.
    """
    if flags.errors:
        logger.warning("ERRORS flag is set; running slow operation for listing %s", listing_id)
        await run_in_threadpool(
            simulate_expensive_operation,
            iterations=settings.slow_operation_iterations,
            min_duration=settings.slow_operation_seconds,
        )

    listing = await repository.get_by_id(listing_id)
    if listing is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=LISTING_NOT_FOUND)
    return listing


@router.post(
    "/",
    response_model=ListingRead,
    status_code=status.HTTP_201_CREATED,
    name="CreateListing",
    description="Creates a new listing",
)
async def create_listing(
    listing_in: ListingCreate,
    request: Request,
    response: Response,
    repository: ListingRepository = Depends(get_listing_repository),
    flags: FeatureFlags = Depends(get_feature_flags),
) -> ListingRead:
    """Create a listing and point the ``Location`` header at it."""
    _ensure_crud_enabled(flags, "create")
    listing = await repository.create(listing_in)
    response.headers["Location"] = request.app.url_path_for("GetListingById", listing_id=listing.id)
    return listing


@router.put(
    "/{listing_id}",
    response_model=ListingRead,
    name="UpdateListing",
    description="Updates an existing listing",
)
async def update_listing(
    listing_in: ListingCreate,
    listing_id: int = Path(..., description="The ID of the listing"),
    repository: ListingRepository = Depends(get_listing_repository),
    flags: FeatureFlags = Depends(get_feature_flags),
) -> ListingRead:
    _ensure_crud_enabled(flags, "update")
    listing = await repository.update(listing_id, listing_in)
    if listing is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=LISTING_NOT_FOUND)
    return listing


@router.delete(
    "/{listing_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    name="DeleteListing",
    description="Deletes a listing",
)
async def delete_listing(
    listing_id: int = Path(..., description="The ID of the listing"),
    repository: ListingRepository = Depends(get_listing_repository),
    flags: FeatureFlags = Depends(get_feature_flags),
) -> None:
    _ensure_crud_enabled(flags, "delete")
    deleted = await repository.delete(listing_id)
    if not deleted:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=LISTING_NOT_FOUND)
    return None
