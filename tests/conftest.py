"""Shared fixtures."""

from pathlib import Path

import pytest_asyncio

from address_book.database import RecordStore
from address_book.service import AddressBookService


@pytest_asyncio.fixture
async def store(tmp_path: Path) -> RecordStore:
    """Create a RecordStore with a temporary, initialized database."""
    store = RecordStore(tmp_path / "test_address_book.db")
    await store.init()
    return store


@pytest_asyncio.fixture
async def service(store: RecordStore) -> AddressBookService:
    return AddressBookService(store)
