"""
Extract (column, value) pairs from sparse records.

File: query/fields.py
Author: Aidan Allchin
Created: 2026-10-12
Last Modified: 2026-10-16
"""

from typing import Any, List, Optional, Tuple

from pydantic import BaseModel

from ..errors import NotARecordError
from ..models import ColumnMapping, mapped_columns


def is_default_value(value: Any) -> bool:
    """
    Check whether a value is its type's default, i.e. "not supplied".

    Defaults are None, False, numeric zero, and empty strings, bytes,
    sequences and mappings. Anything else counts as supplied.
    """
    if value is None:
        return True
    if isinstance(value, bool):
        return not value
    if isinstance(value, (int, float, complex)):
        return value == 0
    if isinstance(value, (str, bytes, bytearray, list, tuple, set, frozenset, dict)):
        return len(value) == 0
    return False


def get_column_mapping(record: Any) -> ColumnMapping:
    """Return the column mapping a record type declares."""
    mapping = getattr(type(record), "sql_columns", None)
    if mapping is None:
        raise NotARecordError(f"{type(record).__name__} does not declare sql_columns")
    return mapping


def extract_fields(
        record: Any,
        mapping: Optional[ColumnMapping] = None,
    ) -> List[Tuple[str, Any]]:
    """
    List the mapped columns a record actually sets, in mapping order.

    Attributes whose column is excluded, or whose value is the type default,
    are skipped.

    Args:
        record: A pydantic model instance
        mapping: Ordered (attribute, column) pairs; defaults to the record's own sql_columns

    Returns:
        List of (column, value) pairs, e.g. [("name", "John"), ("phone", "89995554422")]

    Raises:
        NotARecordError: If record is not a model, or a mapped attribute is missing
    """
    if not isinstance(record, BaseModel):
        raise NotARecordError(f"expected a record, got {type(record).__name__}")

    if mapping is None:
        mapping = get_column_mapping(record)

    fields = []
    for attribute, column in mapped_columns(mapping):
        try:
            value = getattr(record, attribute)
        except AttributeError as e:
            raise NotARecordError(
                f"{type(record).__name__} has no attribute {attribute!r}"
            ) from e
        if is_default_value(value):
            continue
        fields.append((column, value))

    return fields
