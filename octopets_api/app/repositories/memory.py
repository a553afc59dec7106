"""
In‑memory listing repository.

Listings live in a dict keyed by id for the lifetime of the process.
Ids come from a counter and are never reused, even after a delete.
A lock guards both because FastAPI may call into the repository from
threadpool workers.  Callers always receive copies, so mutating a
returned listing never changes the store.
"""

from __future__ import annotations

import logging
import threading
from typing import Dict, Iterable, List, Optional

from octopets_api.app.schemas.listing import ListingCreate, ListingRead

logger = logging.getLogger(__name__)


class InMemoryListingRepository:
    """Process‑local ``ListingRepository`` implementation."""

    def __init__(self, seed: Optional[Iterable[ListingCreate]] = None) -> None:
        self._listings: Dict[int, ListingRead] = {}
        self._next_id = 1
        self._lock = threading.Lock()
        for data in seed or ():
            self._insert(data)

    def _insert(self, data: ListingCreate) -> ListingRead:
        with self._lock:
            listing = ListingRead(id=self._next_id, **data.model_dump())
            self._listings[listing.id] = listing
            self._next_id += 1
        return listing.model_copy(deep=True)

    async def get_all(self) -> List[ListingRead]:
        with self._lock:
            return [self._listings[key].model_copy(deep=True) for key in sorted(self._listings)]

    async def get_by_id(self, listing_id: int) -> Optional[ListingRead]:
        with self._lock:
            listing = self._listings.get(listing_id)
        return listing.model_copy(deep=True) if listing is not None else None

    async def create(self, data: ListingCreate) -> ListingRead:
        listing = self._insert(data)
        logger.info("Created listing %s", listing.id)
        return listing

    async def update(self, listing_id: int, data: ListingCreate) -> Optional[ListingRead]:
        with self._lock:
            if listing_id not in self._listings:
                return None
            listing = ListingRead(id=listing_id, **data.model_dump())
            self._listings[listing_id] = listing
        logger.info("Updated listing %s", listing_id)
        return listing.model_copy(deep=True)

    async def delete(self, listing_id: int) -> bool:
        with self._lock:
            removed = self._listings.pop(listing_id, None)
        if removed is None:
            return False
        logger.info("Deleted listing %s", listing_id)
        return True
