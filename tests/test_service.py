"""Tests for AddressBookService request validation."""

import pytest

from address_book.errors import (
    InvalidCountryCodeError,
    PhoneAlreadyInUseError,
    PhoneNotFoundError,
    PhoneNumberError,
    RequiredDataMissingError,
)
from address_book.models import Record
from address_book.service import AddressBookService, canonical_phone, to_record
from address_book.service import address_book as service_module

NEW_CONTACT = {
    "name": "John",
    "last_name": "Doe",
    "middle_name": "Smith",
    "address": "123 Main St",
    "phone": "+7 (999) 555-44-22",
}


class TestToRecord:
    def test_drops_client_id(self):
        assert to_record({"id": 5, "name": "John"}).id == 0
        assert to_record(Record(id=5, name="John")).id == 0

    def test_ignores_unknown_keys(self):
        record = to_record({"name": "John", "nickname": "JJ"})
        assert record.name == "John"

    def test_does_not_mutate_input_record(self):
        original = Record(id=5, phone="+79995554422")
        to_record(original)
        assert original.id == 5


class TestCanonicalPhone:
    def test_normalizes_free_form(self):
        assert canonical_phone("+7 (999) 555-44-22") == "89995554422"

    def test_skips_normalizing_canonical_phone(self, monkeypatch: pytest.MonkeyPatch):
        def fail(phone: str) -> str:
            raise AssertionError(f"normalized {phone} again")

        monkeypatch.setattr(service_module, "normalize_phone_number", fail)
        assert canonical_phone("89995554422") == "89995554422"

    def test_bad_phone_still_rejected(self):
        with pytest.raises(InvalidCountryCodeError):
            canonical_phone("+19995554422")

    @pytest.mark.asyncio
    async def test_canonical_filter_not_renormalized(
        self, service: AddressBookService, monkeypatch: pytest.MonkeyPatch
    ):
        await service.create_record(NEW_CONTACT)
        monkeypatch.setattr(service_module, "normalize_phone_number", lambda phone: "")
        [stored] = await service.get_records({"phone": "89995554422"})
        assert stored.name == "John"


class TestCreate:
    @pytest.mark.asyncio
    async def test_create_normalizes_phone(self, service: AddressBookService):
        record = await service.create_record(NEW_CONTACT)
        assert record.phone == "89995554422"
        assert record.id > 0

        [stored] = await service.get_records({"phone": "8 999 555 44 22"})
        assert stored.name == "John"
        assert stored.middle_name == "Smith"

    @pytest.mark.asyncio
    async def test_middle_name_optional(self, service: AddressBookService):
        data = {k: v for k, v in NEW_CONTACT.items() if k != "middle_name"}
        record = await service.create_record(data)
        assert record.middle_name == ""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("missing", ["name", "last_name", "address", "phone"])
    async def test_required_fields(self, service: AddressBookService, missing: str):
        data = {k: v for k, v in NEW_CONTACT.items() if k != missing}
        with pytest.raises(RequiredDataMissingError):
            await service.create_record(data)

    @pytest.mark.asyncio
    async def test_bad_phone(self, service: AddressBookService):
        with pytest.raises(InvalidCountryCodeError):
            await service.create_record({**NEW_CONTACT, "phone": "+19995554422"})

    @pytest.mark.asyncio
    async def test_same_phone_any_format_is_duplicate(self, service: AddressBookService):
        await service.create_record(NEW_CONTACT)
        with pytest.raises(PhoneAlreadyInUseError):
            await service.create_record({**NEW_CONTACT, "phone": "79995554422"})


class TestGet:
    @pytest.mark.asyncio
    async def test_empty_query_lists_all(self, service: AddressBookService):
        await service.create_record(NEW_CONTACT)
        await service.create_record({**NEW_CONTACT, "phone": "89995554423"})
        assert len(await service.get_records({})) == 2

    @pytest.mark.asyncio
    async def test_bad_phone_filter(self, service: AddressBookService):
        with pytest.raises(PhoneNumberError):
            await service.get_records({"phone": "12"})


class TestUpdate:
    @pytest.mark.asyncio
    async def test_update(self, service: AddressBookService):
        await service.create_record(NEW_CONTACT)
        await service.update_record({"phone": "+79995554422", "address": "Elm St"})
        [stored] = await service.get_records({"phone": "89995554422"})
        assert stored.address == "Elm St"
        assert stored.last_name == "Doe"

    @pytest.mark.asyncio
    async def test_update_needs_a_field(self, service: AddressBookService):
        await service.create_record(NEW_CONTACT)
        with pytest.raises(RequiredDataMissingError):
            await service.update_record({"phone": "89995554422"})

    @pytest.mark.asyncio
    async def test_update_needs_phone(self, service: AddressBookService):
        with pytest.raises(RequiredDataMissingError):
            await service.update_record({"name": "John"})

    @pytest.mark.asyncio
    async def test_update_unknown_phone(self, service: AddressBookService):
        with pytest.raises(PhoneNotFoundError):
            await service.update_record({"phone": "89995554422", "name": "X"})


class TestDelete:
    @pytest.mark.asyncio
    async def test_delete(self, service: AddressBookService):
        await service.create_record(NEW_CONTACT)
        assert await service.delete_record({"phone": "8 (999) 555-44-22"}) == "89995554422"
        assert await service.get_records({}) == []

    @pytest.mark.asyncio
    async def test_delete_needs_phone(self, service: AddressBookService):
        with pytest.raises(RequiredDataMissingError):
            await service.delete_record({})

    @pytest.mark.asyncio
    async def test_delete_unknown_phone(self, service: AddressBookService):
        with pytest.raises(PhoneNotFoundError):
            await service.delete_record({"phone": "89995554422"})
