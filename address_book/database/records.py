"""
Database operations for address book records.

File: database/records.py
Author: Aidan Allchin
Created: 2026-10-12
Last Modified: 2026-10-14
"""

import logging
from pathlib import Path
from typing import Any, List, Sequence

import aiosqlite

from ..errors import PhoneAlreadyInUseError, RecordStoreError
from ..models import Record
from ..query import (
    build_delete,
    build_insert,
    build_phone_lookup,
    build_select,
    build_update,
)
from .common import LOCAL_DB_PATH, bind_positional
from .create_tables import init_local_database

log = logging.getLogger(__name__)


class RecordStore:
    """
    Executes generated address book SQL against a SQLite file.

    Every operation opens and closes its own connection.
    """

    def __init__(self, db_path: Path = LOCAL_DB_PATH):
        self.db_path = Path(db_path)

    async def init(self) -> None:
        """Create the table if it does not exist yet."""
        try:
            await init_local_database(self.db_path)
        except aiosqlite.Error as e:
            log.error(f"Error initializing database at {self.db_path}: {e}")
            raise RecordStoreError(f"cannot initialize database: {e}") from e

    async def _execute(self, sql: str, args: Sequence[Any]) -> aiosqlite.Cursor:
        async with aiosqlite.connect(self.db_path) as conn:
            cursor = await conn.execute(sql, bind_positional(args))
            await conn.commit()
            return cursor

    async def save_record(self, record: Record) -> int:
        """
        Insert a record. The phone must already be canonical.

        Args:
            record: Record to store (its id is ignored)

        Returns:
            The id the database assigned

        Raises:
            PhoneAlreadyInUseError: If another record has the same phone
            RecordStoreError: On any other database failure
        """
        sql, args = build_insert(record)
        try:
            cursor = await self._execute(sql, args)
        except aiosqlite.IntegrityError as e:
            log.info(f"Phone number already in use: {record.phone}")
            raise PhoneAlreadyInUseError(f"phone number already in use: {record.phone}") from e
        except aiosqlite.Error as e:
            log.error(f"Error saving record for {record.phone}: {e}")
            raise RecordStoreError(f"cannot save record: {e}") from e

        log.info(f"Saved record {cursor.lastrowid} for {record.phone}")
        return cursor.lastrowid

    async def get_records(self, record: Record) -> List[Record]:
        """
        Fetch every record matching the fields set on ``record``.

        An entirely empty record matches everything.
        """
        sql, args = build_select(record)
        result = []
        try:
            async with aiosqlite.connect(self.db_path) as conn:
                async with conn.execute(sql, bind_positional(args)) as cursor:
                    async for row in cursor:
                        result.append(Record.from_db_row(row))
        except aiosqlite.Error as e:
            log.error(f"Error fetching records: {e}")
            raise RecordStoreError(f"cannot fetch records: {e}") from e

        log.debug(f"Fetched {len(result)} records with {len(args)} conditions")
        return result

    async def update_record(self, record: Record) -> int:
        """
        Update the record identified by ``record.phone``.

        Returns:
            Number of rows changed (0 if the phone is unknown)

        Raises:
            NoFieldsToUpdateError: If the record sets nothing besides the phone
            RecordStoreError: On database failure
        """
        sql, args = build_update(record)
        try:
            cursor = await self._execute(sql, args)
        except aiosqlite.Error as e:
            log.error(f"Error updating record {record.phone}: {e}")
            raise RecordStoreError(f"cannot update record: {e}") from e

        log.info(f"Updated {cursor.rowcount} record(s) for {record.phone}")
        return cursor.rowcount

    async def delete_record_by_phone(self, phone: str) -> int:
        """Delete the record with the given canonical phone; returns rows removed."""
        sql, args = build_delete(phone)
        try:
            cursor = await self._execute(sql, args)
        except aiosqlite.Error as e:
            log.error(f"Error deleting record {phone}: {e}")
            raise RecordStoreError(f"cannot delete record: {e}") from e

        log.info(f"Deleted {cursor.rowcount} record(s) for {phone}")
        return cursor.rowcount

    async def phone_exists(self, phone: str) -> bool:
        """
        Check whether a canonical phone number is already stored.

        A failed lookup raises instead of reporting the phone as taken.

        Raises:
            RecordStoreError: If the lookup itself fails
        """
        sql, args = build_phone_lookup(phone)
        try:
            async with aiosqlite.connect(self.db_path) as conn:
                async with conn.execute(sql, bind_positional(args)) as cursor:
                    row = await cursor.fetchone()
        except aiosqlite.Error as e:
            log.error(f"Error looking up phone {phone}: {e}")
            raise RecordStoreError(f"cannot look up phone: {e}") from e

        return row is not None
