"""
Parameterized SQL for address book records.

Statements use positional ``$1, $2, ...`` placeholders. Table and column names
come from the record's static column mapping, never from input; only values
are bound as parameters.

File: query/builder.py
Author: Aidan Allchin
Created: 2026-10-12
Last Modified: 2026-10-16
"""

from dataclasses import dataclass
from typing import Any, List, Tuple

from ..errors import MissingLookupKeyError, NoFieldsToUpdateError
from ..models import Record, TABLE_NAME, mapped_columns
from .fields import extract_fields, get_column_mapping

Query = Tuple[str, List[Any]]

KEY_COLUMN = "phone"
# Never assignable through an update
IMMUTABLE_COLUMNS = ("id", KEY_COLUMN)


@dataclass(frozen=True)
class Condition:
    """One ``column = $index`` fragment and the value bound to it."""

    column: str
    value: Any
    index: int
    connector: str = ""

    @property
    def placeholder(self) -> str:
        return f"${self.index}"

    def render(self) -> str:
        fragment = f"{self.column} = {self.placeholder}"
        if self.connector:
            return f"{self.connector} {fragment}"
        return fragment


def _select_columns(record: Any) -> str:
    return ", ".join(column for _, column in mapped_columns(get_column_mapping(record)))


def build_conditions(record: Any) -> List[Condition]:
    """Turn a sparse record into AND-joined conditions, in mapping order."""
    return [
        Condition(column=column, value=value, index=i, connector="AND" if i > 1 else "")
        for i, (column, value) in enumerate(extract_fields(record), start=1)
    ]


def build_select(record: Any, table: str = TABLE_NAME) -> Query:
    """
    Build a SELECT filtering on every field the record sets.

    Args:
        record: Sparse record; empty fields are not filter criteria
        table: Table to select from

    Returns:
        (sql, args). With no fields set this selects every row with no args.

    Examples:
        >>> build_select(Record(name="John", phone="89995554422"))
        ('SELECT id, name, last_name, middle_name, address, phone FROM address_book WHERE name = $1 AND phone = $2;', ['John', '89995554422'])
    """
    columns = _select_columns(record)
    conditions = build_conditions(record)
    if not conditions:
        return f"SELECT {columns} FROM {table};", []

    where = " ".join(cond.render() for cond in conditions)
    return f"SELECT {columns} FROM {table} WHERE {where};", [cond.value for cond in conditions]


def build_update(record: Any, table: str = TABLE_NAME) -> Query:
    """
    Build an UPDATE assigning every set field except the phone key.

    The phone is always the last argument, bound to the WHERE clause.

    Raises:
        MissingLookupKeyError: If the record has no phone
        NoFieldsToUpdateError: If nothing besides the phone is set
    """
    fields = extract_fields(record)
    key_value = getattr(record, KEY_COLUMN, "")
    if not key_value:
        raise MissingLookupKeyError("update requires a phone number to look the record up")

    assignments = [(column, value) for column, value in fields if column not in IMMUTABLE_COLUMNS]
    if not assignments:
        raise NoFieldsToUpdateError(f"no fields to update for phone {key_value}")

    fragments = [f"{column} = ${i}" for i, (column, _) in enumerate(assignments, start=1)]
    args = [value for _, value in assignments]
    args.append(key_value)

    sql = f"UPDATE {table} SET {', '.join(fragments)} WHERE {KEY_COLUMN} = ${len(args)};"
    return sql, args


def build_insert(record: Record, table: str = TABLE_NAME) -> Query:
    """Build an INSERT of every mapped column except the store-assigned id."""
    columns = [
        (attribute, column)
        for attribute, column in mapped_columns(get_column_mapping(record))
        if column != "id"
    ]
    placeholders = ", ".join(f"${i}" for i in range(1, len(columns) + 1))
    column_list = ", ".join(column for _, column in columns)
    args = [getattr(record, attribute) for attribute, _ in columns]
    return f"INSERT INTO {table} ({column_list}) VALUES ({placeholders});", args


def build_delete(phone: str, table: str = TABLE_NAME) -> Query:
    """Build a DELETE by canonical phone number."""
    if not phone:
        raise MissingLookupKeyError("delete requires a phone number")
    return f"DELETE FROM {table} WHERE {KEY_COLUMN} = $1;", [phone]


def build_phone_lookup(phone: str, table: str = TABLE_NAME) -> Query:
    return f"SELECT {KEY_COLUMN} FROM {table} WHERE {KEY_COLUMN} = $1;", [phone]
