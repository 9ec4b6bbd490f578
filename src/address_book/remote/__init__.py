from __future__ import annotations

from address_book.remote.client import AddressLookupClient
from address_book.remote.config import LookupConfig

__all__ = [
    "AddressLookupClient",
    "LookupConfig",
]
