"""
Contact record model.

File: models/record.py
Author: Aidan Allchin
Created: 2026-10-12
Last Modified: 2026-10-16
"""

from typing import Any, ClassVar, Dict, Iterator, Optional, Tuple

from pydantic import BaseModel, Field, ConfigDict

# Ordered (attribute, column) pairs. A column of None or "-" keeps the attribute out of SQL.
ColumnMapping = Tuple[Tuple[str, Optional[str]], ...]

TABLE_NAME = "address_book"

# Column markers that keep an attribute out of SQL
EXCLUDED_COLUMNS = frozenset({None, "", "-"})


def mapped_columns(mapping: ColumnMapping) -> Iterator[Tuple[str, str]]:
    """Yield the (attribute, column) pairs of a mapping that take part in SQL."""
    for attribute, column in mapping:
        if column not in EXCLUDED_COLUMNS:
            yield attribute, column


class Record(BaseModel):
    """
    A single address book entry.

    Records are sparse: any string field left as "" means "not supplied", both
    as a filter criterion and as an update target. A field therefore cannot be
    updated *to* the empty string.
    """
    model_config = ConfigDict(
        validate_assignment=True,
        extra='ignore'
    )

    sql_columns: ClassVar[ColumnMapping] = (
        ("id", "id"),
        ("name", "name"),
        ("last_name", "last_name"),
        ("middle_name", "middle_name"),
        ("address", "address"),
        ("phone", "phone"),
    )

    id: int = Field(0, description="Store-assigned identity, never client-supplied", ge=0, exclude=True)
    name: str = Field("", description="First name")
    last_name: str = Field("", description="Family name")
    middle_name: str = Field("", description="Patronymic / middle name")
    address: str = Field("", description="Free-text postal address")
    phone: str = Field("", description="Canonical 11-digit phone (8XXXXXXXXXX), unique in the store")

    def has_updatable_fields(self) -> bool:
        """True if at least one non-key field is set."""
        return any((self.name, self.last_name, self.middle_name, self.address))

    @classmethod
    def from_db_row(cls, row: Tuple[Any, ...]) -> "Record":
        """Create a Record from a row in column-mapping order"""
        attributes = [attr for attr, _ in mapped_columns(cls.sql_columns)]
        data: Dict[str, Any] = dict(zip(attributes, row))
        # SQLite hands back NULL for columns never written
        for key, value in data.items():
            if value is None:
                data[key] = 0 if key == "id" else ""
        return cls(**data)
