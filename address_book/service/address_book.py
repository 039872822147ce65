"""
Request-level address book operations.

Each operation takes a record (or a decoded mapping), validates that the data
it needs is present, normalizes the phone number and then talks to the store.
Errors propagate as AddressBookError subclasses; callers show their
``user_message``.

File: service/address_book.py
Author: Aidan Allchin
Created: 2026-10-13
Last Modified: 2026-10-16
"""

import logging
from typing import Any, List, Mapping, Union

from ..database import RecordStore
from ..errors import (
    PhoneAlreadyInUseError,
    PhoneNotFoundError,
    RequiredDataMissingError,
)
from ..models import Record
from ..normalization import is_canonical_phone_number, normalize_phone_number

log = logging.getLogger(__name__)

RecordInput = Union[Record, Mapping[str, Any]]

CREATE_REQUIRED_FIELDS = ("name", "last_name", "address", "phone")


def canonical_phone(phone: str) -> str:
    """Return phone in canonical form, skipping normalization if it already is."""
    if is_canonical_phone_number(phone):
        return phone
    return normalize_phone_number(phone)


def to_record(data: RecordInput) -> Record:
    """
    Decode inbound data into a fresh Record.

    The id is store-assigned, so any id the caller supplies is dropped.
    """
    if isinstance(data, Record):
        return data.model_copy(update={"id": 0})
    return Record.model_validate({k: v for k, v in data.items() if k != "id"})


class AddressBookService:
    """Create, find, update and delete contacts on top of a RecordStore."""

    def __init__(self, store: RecordStore):
        self.store = store

    async def create_record(self, data: RecordInput) -> Record:
        """
        Store a new contact.

        name, last_name, address and phone are required; middle_name is not.

        Returns:
            The stored record with its assigned id and canonical phone
        """
        record = to_record(data)

        missing = [name for name in CREATE_REQUIRED_FIELDS if not getattr(record, name)]
        if missing:
            log.info(f"Create rejected, missing {missing}: {record.model_dump()}")
            raise RequiredDataMissingError(f"required data is missing: {', '.join(missing)}")

        record.phone = canonical_phone(record.phone)

        if await self.store.phone_exists(record.phone):
            log.info(f"Create rejected, phone number already in use: {record.phone}")
            raise PhoneAlreadyInUseError(f"phone number already in use: {record.phone}")

        record.id = await self.store.save_record(record)
        return record

    async def get_records(self, data: RecordInput) -> List[Record]:
        """Find contacts matching every supplied field; nothing supplied lists all."""
        record = to_record(data)
        if record.phone:
            record.phone = canonical_phone(record.phone)
        return await self.store.get_records(record)

    async def update_record(self, data: RecordInput) -> Record:
        """
        Update the contact identified by phone.

        The phone itself cannot be changed, and since empty means "not
        supplied", no field can be cleared through an update.
        """
        record = to_record(data)

        if not record.phone or not record.has_updatable_fields():
            log.info(f"Update rejected, required data is missing: {record.model_dump()}")
            raise RequiredDataMissingError("update needs a phone number and at least one field to change")

        record.phone = canonical_phone(record.phone)

        if not await self.store.phone_exists(record.phone):
            log.info(f"Update rejected, phone number not found: {record.phone}")
            raise PhoneNotFoundError(f"phone number not found: {record.phone}")

        await self.store.update_record(record)
        return record

    async def delete_record(self, data: RecordInput) -> str:
        """
        Delete the contact identified by phone.

        Returns:
            The canonical phone number that was removed
        """
        record = to_record(data)

        if not record.phone:
            log.info("Delete rejected, phone data is missing")
            raise RequiredDataMissingError("phone data is missing")

        phone = canonical_phone(record.phone)

        if not await self.store.phone_exists(phone):
            log.info(f"Delete rejected, phone number not found: {phone}")
            raise PhoneNotFoundError(f"phone number not found: {phone}")

        await self.store.delete_record_by_phone(phone)
        return phone
