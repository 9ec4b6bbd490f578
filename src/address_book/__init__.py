"""address-book: look up addresses by postcode and keep a personal address book.

This package provides:
- A keyed form field state container with reset-to-defaults
- Normalization of address lookup records into canonical Address entities
- A deduplicating, ordered address book store driven by a pure reducer
- An httpx client for the lookup API and a session tying it all together

Quick Start:
    >>> from address_book import AddressBookStore, normalize_address
    >>> address = normalize_address(
    ...     {"city": "Town", "lat": 52.1, "long": 4.3, "postcode": "1000AB", "street": "Main"},
    ...     "12",
    ... )
    >>> address.id
    '52.1_4.3'
    >>> store = AddressBookStore()
    >>> _ = store.add(address.with_person("Ada", "Lovelace"))
    >>> store.list()[0].first_name
    'Ada'
"""

from __future__ import annotations

from address_book.fields import FieldState, FieldStateContainer
from address_book.models import (
    PACKAGE_NAME,
    Address,
    AddressBookError,
    AddressBookValidationError,
    LookupRecord,
    LookupResult,
)
from address_book.normalizer import normalize_address, normalize_lookup_response
from address_book.protocols import AddressLookupProtocol
from address_book.remote import AddressLookupClient, LookupConfig
from address_book.session import AddressBookSession
from address_book.store import (
    AddAddress,
    AddressBookState,
    AddressBookStore,
    RemoveAddress,
    UpdateAddresses,
    address_book_reducer,
    select_addresses,
)
from address_book.validation import (
    PersonFieldsValidator,
    SearchFieldsValidator,
)

__version__ = "0.1.0"
__package_name__ = "address-book"

__all__ = [
    # Version
    "__version__",
    "PACKAGE_NAME",
    # Form fields
    "FieldState",
    "FieldStateContainer",
    # Models
    "Address",
    "LookupRecord",
    "LookupResult",
    # Errors
    "AddressBookError",
    "AddressBookValidationError",
    # Normalization
    "normalize_address",
    "normalize_lookup_response",
    # Address book store
    "AddAddress",
    "RemoveAddress",
    "UpdateAddresses",
    "AddressBookState",
    "AddressBookStore",
    "address_book_reducer",
    "select_addresses",
    # Validation
    "PersonFieldsValidator",
    "SearchFieldsValidator",
    # Lookup
    "AddressLookupClient",
    "AddressLookupProtocol",
    "LookupConfig",
    # Session
    "AddressBookSession",
]
