"""Page-level flow: search, select, name and store addresses.

``AddressBookSession`` owns the form fields, the current lookup candidates
and the address book of one user session, and exposes the actions of the
address book page.
"""

from __future__ import annotations

import logging

from address_book.fields import FieldStateContainer
from address_book.models import Address, AddressBookError, AddressBookValidationError
from address_book.protocols import AddressLookupProtocol
from address_book.store import AddressBookStore
from address_book.validation import (
    PersonFieldsValidator,
    SearchFieldsValidator,
    first_error_message,
)

logger = logging.getLogger(__name__)

FORM_DEFAULTS: dict[str, str] = {
    "postCode": "",
    "houseNumber": "",
    "firstName": "",
    "lastName": "",
    "selectedAddress": "",
}

NO_SELECTION_MESSAGE = "No address selected, try to select an address or find one if you haven't"
SELECTION_NOT_FOUND_MESSAGE = "Selected address not found"
LOOKUP_FAILED_MESSAGE = "An error occurred while fetching data"


class AddressBookSession:
    """Address book page state for one session.

    Example:
        >>> session = AddressBookSession(AddressLookupClient())
        >>> _ = session.fields.on_change("postCode", "1345")
        >>> _ = session.fields.on_change("houseNumber", "350")
        >>> candidates = session.find_addresses()
        >>> session.select(candidates[0].id)
        >>> _ = session.fields.on_change("firstName", "Ada")
        >>> _ = session.fields.on_change("lastName", "Lovelace")
        >>> session.add_selected()
        True
    """

    def __init__(
        self,
        lookup: AddressLookupProtocol,
        book: AddressBookStore | None = None,
    ) -> None:
        self._lookup = lookup
        self.book = book if book is not None else AddressBookStore()
        self.fields = FieldStateContainer(FORM_DEFAULTS)
        self.candidates: list[Address] = []
        self.error: str | None = None
        self._search_validator = SearchFieldsValidator()
        self._person_validator = PersonFieldsValidator()

    def find_addresses(self) -> list[Address]:
        """Search for the postcode and house number in the form.

        Candidates are only replaced by a successful lookup. On failure
        ``error`` holds the message to show and the previous candidates stay.
        """
        values = self.fields.read()

        message = first_error_message(self._search_validator.validate(values))
        if message is not None:
            self.error = message
            return self.candidates

        self.error = None
        postcode = values["postCode"]
        house_number = values["houseNumber"]
        try:
            result = self._lookup.find_addresses(postcode, house_number)
        except (AddressBookError, AddressBookValidationError) as exc:
            logger.warning("Lookup for %s %s failed: %s", postcode, house_number, exc)
            self.error = str(exc) or LOOKUP_FAILED_MESSAGE
            return self.candidates

        self.candidates = list(result.addresses)
        return self.candidates

    def select(self, address_id: str) -> None:
        """Mark the candidate with ``address_id`` as selected."""
        self.fields.on_change("selectedAddress", address_id)

    def add_selected(self) -> bool:
        """Store the selected candidate under the names in the form.

        Returns:
            True if the address book was asked to add the address (a
            duplicate id still leaves the book unchanged), False if a form
            error prevented it; ``error`` then holds the message.
        """
        self.error = None
        values = self.fields.read()

        message = first_error_message(self._person_validator.validate(values))
        if message is not None:
            self.error = message
            return False

        selected = values["selectedAddress"]
        if not selected or not self.candidates:
            self.error = NO_SELECTION_MESSAGE
            return False

        found = next((c for c in self.candidates if c.id == selected), None)
        if found is None:
            self.error = SELECTION_NOT_FOUND_MESSAGE
            return False

        self.book.add(found.with_person(values["firstName"], values["lastName"]))
        return True

    def clear(self) -> None:
        """Clear all form fields, search results and error messages."""
        self.fields.reset()
        self.candidates = []
        self.error = None
