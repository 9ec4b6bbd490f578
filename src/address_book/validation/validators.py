"""Form validators for the address book flow.

Each validator checks one form of the page: the address search form and
the personal info form. They operate on the field state mapping.
"""

from __future__ import annotations

from collections.abc import Mapping

from abstract_validation_base import BaseValidator, ValidationResult

SEARCH_FIELDS_MESSAGE = "Postcode and house number fields mandatory!"
PERSON_FIELDS_MESSAGE = "First name and last name fields mandatory!"


class RequiredFieldsValidator(BaseValidator[Mapping[str, str]]):
    """Validates that a group of fields is filled in.

    A field counts as missing when it is absent or empty. Whitespace counts
    as a value. All missing fields share one message, matching how the form
    reports them.
    """

    def __init__(self, name: str, fields: tuple[str, ...], message: str) -> None:
        """Initialize required fields validator.

        Args:
            name: Name of this validator for error reporting.
            fields: Field names that must be non-empty.
            message: Message attached to each missing field.
        """
        self._name = name
        self._fields = fields
        self._message = message

    @property
    def name(self) -> str:
        """Name of this validator."""
        return self._name

    @property
    def message(self) -> str:
        """Message reported for missing fields."""
        return self._message

    def validate(self, values: Mapping[str, str]) -> ValidationResult:
        """Validate the required fields of ``values``.

        Args:
            values: Current field state.

        Returns:
            ValidationResult with one error per missing field.
        """
        result = ValidationResult(is_valid=True)
        for field in self._fields:
            value = values.get(field)
            if not value:
                result.add_error(field, self._message, value)
        return result


class SearchFieldsValidator(RequiredFieldsValidator):
    """Postcode and house number are required to search."""

    def __init__(self) -> None:
        super().__init__("search_fields", ("postCode", "houseNumber"), SEARCH_FIELDS_MESSAGE)


class PersonFieldsValidator(RequiredFieldsValidator):
    """First and last name are required to add an address."""

    def __init__(self) -> None:
        super().__init__("person_fields", ("firstName", "lastName"), PERSON_FIELDS_MESSAGE)


def first_error_message(result: ValidationResult) -> str | None:
    """Message of the first error in ``result``, or None if it is valid."""
    if result.is_valid or not result.errors:
        return None
    return result.errors[0].message
