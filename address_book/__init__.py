"""
Address book: contact records keyed by canonical phone number, stored in SQLite.
"""

__version__ = "0.1.0"
