"""
File: database/__init__.py
Author: Aidan Allchin
Created: 2026-10-12
Last Modified: 2026-10-13
"""

from .common import DATA_DIR, LOCAL_DB_PATH, bind_positional
from .create_tables import init_local_database
from .records import RecordStore

__all__ = [
    "DATA_DIR",
    "LOCAL_DB_PATH",
    "bind_positional",
    "init_local_database",
    "RecordStore",
]
