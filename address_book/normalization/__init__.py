"""
Input normalization for address book records.

File: normalization/__init__.py
Author: Aidan Allchin
Created: 2026-10-12
Last Modified: 2026-10-12
"""

from .phone_number import (
    CANONICAL_PREFIX,
    MAX_LENGTH,
    NEEDED_LENGTH,
    is_canonical_phone_number,
    normalize_phone_number,
)

__all__ = [
    "CANONICAL_PREFIX",
    "MAX_LENGTH",
    "NEEDED_LENGTH",
    "is_canonical_phone_number",
    "normalize_phone_number",
]
