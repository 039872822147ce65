"""
File: database/create_tables.py
Author: Aidan Allchin
Created: 2026-10-12
Last Modified: 2026-10-16
"""

import logging
from pathlib import Path

import aiosqlite

from ..models import TABLE_NAME

log = logging.getLogger(__name__)


async def init_local_database(db_path: Path) -> None:
    """Initialize the SQLite database with the address book table."""
    db_path.parent.mkdir(parents=True, exist_ok=True)

    async with aiosqlite.connect(db_path) as conn:
        await conn.execute(f"""
            CREATE TABLE IF NOT EXISTS {TABLE_NAME} (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                name TEXT NOT NULL DEFAULT '',
                last_name TEXT NOT NULL DEFAULT '',
                middle_name TEXT NOT NULL DEFAULT '',
                address TEXT NOT NULL DEFAULT '',
                phone TEXT NOT NULL,  -- canonical 8XXXXXXXXXX
                UNIQUE(phone)
            )
        """)

        await conn.commit()
        log.info(f"Local database initialized at {db_path}")
