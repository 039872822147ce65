"""
SQL generation from sparse records.

File: query/__init__.py
Author: Aidan Allchin
Created: 2026-10-12
Last Modified: 2026-10-13
"""

from .fields import extract_fields, get_column_mapping, is_default_value
from .builder import (
    Condition,
    Query,
    build_conditions,
    build_delete,
    build_insert,
    build_phone_lookup,
    build_select,
    build_update,
)

__all__ = [
    "extract_fields",
    "get_column_mapping",
    "is_default_value",
    "Condition",
    "Query",
    "build_conditions",
    "build_delete",
    "build_insert",
    "build_phone_lookup",
    "build_select",
    "build_update",
]
