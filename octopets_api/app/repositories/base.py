"""
Repository contract for listings.

The endpoints only see this protocol; storage lives behind it.  The
methods are async because implementations may do IO.  Absence is
reported with ``None`` (lookups, updates) or ``False`` (deletes),
never with an exception.
"""

from typing import List, Optional, Protocol

from octopets_api.app.schemas.listing import ListingCreate, ListingRead


class ListingRepository(Protocol):
    """Contract for listing persistence."""

    async def get_all(self) -> List[ListingRead]: ...

    async def get_by_id(self, listing_id: int) -> Optional[ListingRead]: ...

    async def create(self, data: ListingCreate) -> ListingRead: ...

    async def update(self, listing_id: int, data: ListingCreate) -> Optional[ListingRead]: ...

    async def delete(self, listing_id: int) -> bool: ...
