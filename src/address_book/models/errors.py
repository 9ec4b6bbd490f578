"""Address book error classes.

These classes provide package-specific error handling for normalization,
form state and lookup operations.
"""

from __future__ import annotations

from pydantic import ValidationError
from pydantic_core import PydanticCustomError

# Package identifier for error context
PACKAGE_NAME = "address_book"


class AddressBookError(PydanticCustomError):
    """Typed failure raised by address book components.

    Inherits from PydanticCustomError so callers get the same ``type``,
    ``message_template`` and ``context`` accessors Pydantic errors expose.
    Raisers put ``PACKAGE_NAME`` under the ``package`` context key.
    """


class AddressBookValidationError(Exception):
    """Malformed input rejected during normalization.

    Wraps a pydantic.ValidationError, tagging it with the package and the
    operation that rejected the input. The message lists each failing
    location as ``loc: msg``.
    """

    def __init__(self, validation_error: ValidationError, context: dict | None = None):
        self.original_error = validation_error
        self.context = {"package": PACKAGE_NAME, **(context or {})}
        super().__init__(
            "; ".join(
                f"{'.'.join(map(str, e['loc']))}: {e['msg']}" if e["loc"] else e["msg"]
                for e in validation_error.errors()
            )
        )

    def errors(self) -> list:
        """Error dictionaries of the wrapped ValidationError."""
        return self.original_error.errors()

    def __repr__(self) -> str:
        return f"AddressBookValidationError({self.original_error!r}, context={self.context})"
