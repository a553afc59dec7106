"""
SQLite listing repository.

Each call opens its own connection through ``core.db`` and closes it
before returning, so the repository holds no connection state and is
safe to share between requests.  List attributes (``allowed_pets``,
``amenities``) are stored as JSON text.  ``AUTOINCREMENT`` on the
primary key keeps ids from being reused after a delete.

All queries use parameterized statements.
"""

from __future__ import annotations

import json
import logging
import sqlite3
from contextlib import contextmanager
from typing import Iterator, List, Optional

from octopets_api.app.core.db import get_connection, init_db
from octopets_api.app.core.errors import DatabaseError
from octopets_api.app.schemas.listing import ListingCreate, ListingRead

logger = logging.getLogger(__name__)

# SQLite INTEGER is a signed 64-bit value; larger ids cannot exist in the table.
SQLITE_MIN_ID = -(2 ** 63)
SQLITE_MAX_ID = 2 ** 63 - 1


class SQLiteListingRepository:
    """``ListingRepository`` backed by the ``listings`` table."""

    def __init__(self, database_url: str, migrate: bool = True) -> None:
        self.database_url = database_url
        if migrate:
            version = init_db(database_url)
            logger.info("SQLite listings store ready at %s (schema v%s)", database_url, version)

    @contextmanager
    def _connection(self, operation: str) -> Iterator[sqlite3.Connection]:
        conn = get_connection(self.database_url)
        try:
            yield conn
            conn.commit()
        except sqlite3.Error as exc:
            raise DatabaseError(str(exc), operation) from exc
        finally:
            conn.close()

    async def get_all(self) -> List[ListingRead]:
        with self._connection("select") as conn:
            rows = conn.execute("SELECT * FROM listings ORDER BY id ASC").fetchall()
            return [self._row_to_listing_read(row) for row in rows]

    async def get_by_id(self, listing_id: int) -> Optional[ListingRead]:
        if not _storable_id(listing_id):
            return None
        with self._connection("select") as conn:
            row = conn.execute(
                "SELECT * FROM listings WHERE id = ?", (listing_id,)
            ).fetchone()
            if not row:
                return None
            return self._row_to_listing_read(row)

    async def create(self, data: ListingCreate) -> ListingRead:
        """Insert a new listing and return the stored record."""
        with self._connection("insert") as conn:
            cursor = conn.execute(
                """
                INSERT INTO listings (name, type, description, address, allowed_pets, amenities, rating)
                VALUES (?, ?, ?, ?, ?, ?, ?)
                """,
                self._to_params(data),
            )
            listing_id = cursor.lastrowid
            row = conn.execute("SELECT * FROM listings WHERE id = ?", (listing_id,)).fetchone()
        logger.info("Created listing %s", listing_id)
        return self._row_to_listing_read(row)

    async def update(self, listing_id: int, data: ListingCreate) -> Optional[ListingRead]:
        """Replace every attribute of an existing listing.

        Returns the updated listing or ``None`` if the record does not
        exist.
        """
        if not _storable_id(listing_id):
            return None
        with self._connection("update") as conn:
            cursor = conn.execute(
                """
                UPDATE listings
                SET name = ?, type = ?, description = ?, address = ?, allowed_pets = ?,
                    amenities = ?, rating = ?, updated_at = CURRENT_TIMESTAMP
                WHERE id = ?
                """,
                (*self._to_params(data), listing_id),
            )
            if cursor.rowcount == 0:
                return None
            row = conn.execute("SELECT * FROM listings WHERE id = ?", (listing_id,)).fetchone()
        logger.info("Updated listing %s", listing_id)
        return self._row_to_listing_read(row)

    async def delete(self, listing_id: int) -> bool:
        """Delete a listing by ID.

        Returns ``True`` if a record was deleted, ``False`` otherwise.
        """
        if not _storable_id(listing_id):
            return False
        with self._connection("delete") as conn:
            affected = conn.execute("DELETE FROM listings WHERE id = ?", (listing_id,)).rowcount
        if affected:
            logger.info("Deleted listing %s", listing_id)
        return affected > 0

    @staticmethod
    def _to_params(data: ListingCreate) -> tuple:
        return (
            data.name,
            data.type,
            data.description,
            data.address,
            json.dumps(data.allowed_pets),
            json.dumps(data.amenities),
            data.rating,
        )

    @staticmethod
    def _row_to_listing_read(row: sqlite3.Row) -> ListingRead:
        """Convert a database row to a ListingRead schema instance."""
        return ListingRead(
            id=row["id"],
            name=row["name"],
            type=row["type"],
            description=row["description"],
            address=row["address"],
            allowed_pets=_load_list(row["allowed_pets"]),
            amenities=_load_list(row["amenities"]),
            rating=row["rating"],
        )


def _storable_id(listing_id: int) -> bool:
    return SQLITE_MIN_ID <= listing_id <= SQLITE_MAX_ID


def _load_list(raw: Optional[str]) -> List[str]:
    # Rows written by hand may hold NULL or malformed JSON.
    if not raw:
        return []
    try:
        value = json.loads(raw)
    except (TypeError, json.JSONDecodeError):
        return []
    return value if isinstance(value, list) else []
