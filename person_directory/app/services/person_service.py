"""
Service layer for persons.

Persons are stored in the ``individuos`` table (columns ``id`` and
``nome``).  Every public method issues exactly one statement through
the ``Database`` handle it was constructed with.  Driver failures are
re-raised as ``StorageError`` with a message naming the failed action,
so the API layer can report them without knowing about ``sqlite3``.

All queries use parameterized statements.
"""

from __future__ import annotations

import logging
import sqlite3
from typing import List, Optional

from fastapi import Depends

from person_directory.app.core.db import Database, get_db
from person_directory.app.schemas.person import PersonRead, PersonWrite

logger = logging.getLogger(__name__)


class StorageError(Exception):
    """A statement against the persons table failed."""


class PersonService:
    """CRUD operations on the ``individuos`` table."""

    def __init__(self, db: Database) -> None:
        self.db = db

    def list_persons(self) -> List[PersonRead]:
        """Return every person in ascending ``id`` order."""
        try:
            with self.db.cursor() as cursor:
                rows = cursor.execute("SELECT id, nome FROM individuos ORDER BY id").fetchall()
        except sqlite3.Error as exc:
            raise StorageError(f"Error fetching persons: {exc}") from exc
        return [self._row_to_person(row) for row in rows]

    def get_person(self, person_id: int) -> Optional[PersonRead]:
        """Retrieve a single person, or ``None`` if no row matches."""
        try:
            with self.db.cursor() as cursor:
                row = cursor.execute(
                    "SELECT id, nome FROM individuos WHERE id = ?",
                    (person_id,),
                ).fetchone()
        except sqlite3.Error as exc:
            raise StorageError(f"Error fetching person: {exc}") from exc
        if row is None:
            return None
        return self._row_to_person(row)

    def create_person(self, data: PersonWrite) -> PersonRead:
        """Insert a new person and return it with the id assigned by storage."""
        try:
            with self.db.cursor() as cursor:
                cursor.execute("INSERT INTO individuos (nome) VALUES (?)", (data.name,))
                person_id = cursor.lastrowid
        except sqlite3.Error as exc:
            raise StorageError(f"Error inserting person: {exc}") from exc
        logger.info("Created person %s", person_id)
        return PersonRead(id=person_id, name=data.name)

    def update_person(self, person_id: int, data: PersonWrite) -> Optional[PersonRead]:
        """Rename a person.

        Returns the updated person, or ``None`` when the update
        affected no rows.
        """
        try:
            with self.db.cursor() as cursor:
                cursor.execute(
                    "UPDATE individuos SET nome = ? WHERE id = ?",
                    (data.name, person_id),
                )
                affected = cursor.rowcount
        except sqlite3.Error as exc:
            raise StorageError(f"Error updating person: {exc}") from exc
        if affected == 0:
            return None
        logger.info("Updated person %s", person_id)
        return PersonRead(id=person_id, name=data.name)

    def delete_person(self, person_id: int) -> bool:
        """Delete a person by id.

        Returns ``True`` if a row was deleted.  Deleting an id that does
        not exist is not an error.
        """
        try:
            with self.db.cursor() as cursor:
                cursor.execute("DELETE FROM individuos WHERE id = ?", (person_id,))
                affected = cursor.rowcount
        except sqlite3.Error as exc:
            raise StorageError(f"Error deleting person: {exc}") from exc
        if affected:
            logger.info("Deleted person %s", person_id)
        return affected > 0

    @staticmethod
    def _row_to_person(row: sqlite3.Row) -> PersonRead:
        return PersonRead(id=row["id"], name=row["nome"])


def get_person_service(db: Database = Depends(get_db)) -> PersonService:
    """FastAPI dependency building a ``PersonService`` over the app's database."""
    return PersonService(db)
