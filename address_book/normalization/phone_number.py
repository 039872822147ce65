"""
Phone number normalization to the canonical 8XXXXXXXXXX form.

The canonical form is the only phone representation ever stored or used as a
lookup key, so every inbound number passes through here first.

File: normalization/phone_number.py
Author: Aidan Allchin
Created: 2026-10-12
Last Modified: 2026-10-14
"""

import logging

from ..errors import (
    InvalidCharacterError,
    InvalidCountryCodeError,
    InvalidFirstCharacterError,
    InvalidPhoneLengthError,
    PhoneTooLongError,
    PhoneTooShortError,
)

log = logging.getLogger(__name__)

ALLOWED_CHARS = frozenset("1234567890 +-()")
IGNORED_CHARS = frozenset(" +-()")
CANONICAL_PREFIX = "8"
NEEDED_LENGTH = 11
MAX_LENGTH = 20


def normalize_phone_number(phone: str) -> str:
    """
    Normalize a free-form phone number to the canonical ``8XXXXXXXXXX`` form.

    Steps, each of which can fail and stop processing:
    - reject input longer than MAX_LENGTH characters
    - strip surrounding whitespace, then reject anything shorter than NEEDED_LENGTH
    - replace the country code ("+7", "7" or "8") with "8"
    - walk the rest, dropping separators and keeping digits
    - require exactly NEEDED_LENGTH characters in the result

    Args:
        phone: Raw phone number (e.g., "+7 (999) 555-44-22", "89995554422")

    Returns:
        Canonical 11-character phone number starting with "8"

    Raises:
        PhoneNumberError: One of its subclasses, naming the rule that failed

    Examples:
        >>> normalize_phone_number("+79995554422")
        '89995554422'
        >>> normalize_phone_number("8(999) 555-44-22")
        '89995554422'
    """
    if len(phone) > MAX_LENGTH:
        log.debug(f"Phone number too long: {phone!r}")
        raise PhoneTooLongError(f"phone number too long (max {MAX_LENGTH} characters): {phone}")

    phone = phone.strip()
    if len(phone) < NEEDED_LENGTH:
        log.debug(f"Phone number too short: {phone!r}")
        raise PhoneTooShortError(f"phone number too short (min {NEEDED_LENGTH} characters): {phone}")

    # Country code
    first = phone[0]
    if first == "+":
        if phone[1] != "7":
            log.debug(f"Invalid country code in {phone!r}")
            raise InvalidCountryCodeError(f"invalid country code: {phone}")
        body = phone[2:]
    elif first in ("8", "7"):
        body = phone[1:]
    else:
        log.debug(f"Invalid first character in {phone!r}")
        raise InvalidFirstCharacterError(f"invalid first character in phone number: {first!r}")

    digits = [CANONICAL_PREFIX]
    for char in body:
        if char not in ALLOWED_CHARS:
            log.debug(f"Invalid character {char!r} in {phone!r}")
            raise InvalidCharacterError(char, phone)
        if char in IGNORED_CHARS:
            continue
        digits.append(char)

    normalized = "".join(digits)
    if len(normalized) != NEEDED_LENGTH:
        log.debug(f"Normalized phone number has wrong length: {normalized!r}")
        raise InvalidPhoneLengthError(
            f"invalid phone number length (need {NEEDED_LENGTH} characters): {normalized}"
        )

    return normalized


def is_canonical_phone_number(phone: str) -> bool:
    """Check whether a string is already in canonical form."""
    return (
        len(phone) == NEEDED_LENGTH
        and phone.startswith(CANONICAL_PREFIX)
        and all(c in "0123456789" for c in phone)
    )
