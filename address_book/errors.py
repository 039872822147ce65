"""
Exception hierarchy for the address book.

Every error carries a short ``user_message`` suitable for showing to whoever
made the request; the exception text itself holds the detail for the logs.

File: errors.py
Author: Aidan Allchin
Created: 2026-10-12
Last Modified: 2026-10-14
"""


class AddressBookError(Exception):
    """Base class for all address book errors."""

    user_message = "internal error"


# Phone normalization

class PhoneNumberError(AddressBookError, ValueError):
    """Raw phone input could not be turned into the canonical form."""

    user_message = "wrong phone"


class PhoneTooLongError(PhoneNumberError):
    pass


class PhoneTooShortError(PhoneNumberError):
    pass


class InvalidPhoneLengthError(PhoneNumberError):
    """Digit count after normalization is not exactly 11."""


class InvalidCountryCodeError(PhoneNumberError):
    """A leading '+' not followed by '7'."""


class InvalidFirstCharacterError(PhoneNumberError):
    pass


class InvalidCharacterError(PhoneNumberError):
    """A character outside the allowed set appeared in the number."""

    def __init__(self, character: str, phone_number: str = ""):
        self.character = character
        self.phone_number = phone_number
        super().__init__(f"invalid character in phone number: {character!r}")


# Query building

class NotARecordError(AddressBookError, TypeError):
    """Field extraction was handed something that is not a mapped record."""


class NoFieldsToUpdateError(AddressBookError, ValueError):
    user_message = "nothing to update"


class MissingLookupKeyError(AddressBookError, ValueError):
    user_message = "phone data is missing"


# Service / store

class RequiredDataMissingError(AddressBookError, ValueError):
    user_message = "required data is missing"


class PhoneAlreadyInUseError(AddressBookError):
    user_message = "phone number already in use"


class PhoneNotFoundError(AddressBookError):
    user_message = "phone number not found"


class RecordStoreError(AddressBookError):
    """The underlying database failed for a reason unrelated to the request."""

    user_message = "storage error"


__all__ = [
    "AddressBookError",
    "PhoneNumberError",
    "PhoneTooLongError",
    "PhoneTooShortError",
    "InvalidPhoneLengthError",
    "InvalidCountryCodeError",
    "InvalidFirstCharacterError",
    "InvalidCharacterError",
    "NotARecordError",
    "NoFieldsToUpdateError",
    "MissingLookupKeyError",
    "RequiredDataMissingError",
    "PhoneAlreadyInUseError",
    "PhoneNotFoundError",
    "RecordStoreError",
]
