"""
Common database constants and utilities

File: database/common.py
Author: Aidan Allchin
Created: 2026-10-12
Last Modified: 2026-10-13
"""

from pathlib import Path
from typing import Any, Dict, Sequence

DATA_DIR = Path(__file__).parent.parent.parent / "data"
LOCAL_DB_PATH = DATA_DIR / "address_book.db"


def bind_positional(args: Sequence[Any]) -> Dict[str, Any]:
    """
    Map positional args onto ``$1, $2, ...`` placeholders.

    SQLite reads ``$1`` as a named parameter called "1", so the args are
    passed as {"1": args[0], "2": args[1], ...}.
    """
    return {str(i): value for i, value in enumerate(args, start=1)}


__all__ = [
    "DATA_DIR",
    "LOCAL_DB_PATH",
    "bind_positional",
]
