from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from address_book.models import LookupResult


@runtime_checkable
class AddressLookupProtocol(Protocol):
    """Protocol for address lookup backends.

    Implementations fetch the candidates for a postcode and house number
    and return them normalized.
    """

    def find_addresses(self, postcode: str, house_number: str) -> LookupResult:
        """Look up the addresses at ``postcode`` / ``house_number``.

        Args:
            postcode: Postcode to search.
            house_number: House number to search.

        Returns:
            LookupResult with the normalized candidates.
        """
        ...
