"""Form validation for the address book flow."""

from address_book.validation.validators import (
    PERSON_FIELDS_MESSAGE,
    SEARCH_FIELDS_MESSAGE,
    PersonFieldsValidator,
    RequiredFieldsValidator,
    SearchFieldsValidator,
    first_error_message,
)

__all__ = [
    "PERSON_FIELDS_MESSAGE",
    "SEARCH_FIELDS_MESSAGE",
    "PersonFieldsValidator",
    "RequiredFieldsValidator",
    "SearchFieldsValidator",
    "first_error_message",
]
