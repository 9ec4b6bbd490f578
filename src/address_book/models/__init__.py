"""Address book models package.

Re-exports the address entity, the raw lookup record, results and errors.
"""

from __future__ import annotations

from address_book.models.address import Address, Coordinate, LookupRecord
from address_book.models.errors import (
    PACKAGE_NAME,
    AddressBookError,
    AddressBookValidationError,
)
from address_book.models.results import LookupResult

__all__ = [
    # Errors
    "PACKAGE_NAME",
    "AddressBookError",
    "AddressBookValidationError",
    # Models
    "Address",
    "Coordinate",
    "LookupRecord",
    # Results
    "LookupResult",
]
