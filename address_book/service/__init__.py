"""
File: service/__init__.py
Author: Aidan Allchin
Created: 2026-10-13
Last Modified: 2026-10-16
"""

from .address_book import AddressBookService, RecordInput, canonical_phone, to_record

__all__ = [
    "AddressBookService",
    "RecordInput",
    "canonical_phone",
    "to_record",
]
