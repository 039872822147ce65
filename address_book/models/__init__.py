"""
Shared data models for the address book.
"""

from .record import ColumnMapping, EXCLUDED_COLUMNS, Record, TABLE_NAME, mapped_columns

__all__ = [
    "ColumnMapping",
    "EXCLUDED_COLUMNS",
    "Record",
    "TABLE_NAME",
    "mapped_columns",
]
