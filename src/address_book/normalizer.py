"""Normalization of address lookup responses into Address entities.

The lookup API returns loosely typed records with numeric coordinates.
``normalize_address`` turns one record into the canonical ``Address``;
``normalize_lookup_response`` does the same for a whole response payload.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from decimal import Decimal
from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError

from address_book.models import (
    Address,
    AddressBookValidationError,
    LookupRecord,
    LookupResult,
)

logger = logging.getLogger(__name__)


class LookupResponse(BaseModel):
    """Envelope of the lookup API response."""

    model_config = ConfigDict(extra="ignore")

    status: str | None = None
    details: list[Any]


def _validate_record(raw: LookupRecord | Mapping[str, Any]) -> LookupRecord:
    if isinstance(raw, LookupRecord):
        return raw
    try:
        return LookupRecord.model_validate(raw)
    except ValidationError as exc:
        raise AddressBookValidationError(exc, {"operation": "normalize_address"}) from exc


def _number_text(value: int | float) -> str:
    """Text of a JSON number the way the lookup frontend prints it.

    Integral values have no fractional part, ``-0.0`` is ``"0"`` and
    magnitudes in ``[1e-7, 1e21)`` are written positionally; anything
    outside that range uses ``<mantissa>e<sign><exponent>``.
    """
    if isinstance(value, int):
        return str(value)
    if value == 0:
        return "0"
    magnitude = abs(value)
    if 1e-7 <= magnitude < 1e21:
        if value.is_integer():
            return str(int(value))
        # repr gives the shortest round-tripping digits, possibly in exponent form.
        return format(Decimal(repr(value)), "f")
    mantissa, exponent = repr(value).split("e")
    return f"{mantissa}e{int(exponent):+d}"


def normalize_address(
    raw: LookupRecord | Mapping[str, Any],
    searched_house_number: str,
) -> Address:
    """Convert a raw lookup record into an Address.

    Args:
        raw: Lookup record with ``city``, ``postcode``, ``street`` and numeric
            ``lat``/``long`` (``lon`` is accepted too).
        searched_house_number: House number the lookup was made with. It
            always wins over any house number inside the record.

    Returns:
        Address with textual coordinates, a ``"<lat>_<lon>"`` id and empty
        owner names.

    Raises:
        AddressBookValidationError: If the record is malformed.
    """
    record = _validate_record(raw)
    lat = _number_text(record.lat)
    lon = _number_text(record.lon)

    try:
        return Address(
            id=f"{lat}_{lon}",
            street=record.street,
            city=record.city,
            postcode=record.postcode,
            house_number=searched_house_number,
            lat=lat,
            lon=lon,
        )
    except ValidationError as exc:
        # Only the caller-supplied house number can be of the wrong type here.
        raise AddressBookValidationError(exc, {"operation": "normalize_address"}) from exc


def normalize_lookup_response(
    payload: Mapping[str, Any],
    searched_house_number: str,
) -> LookupResult:
    """Normalize every record of a lookup response, in response order.

    Malformed records are skipped and recorded as process errors on the
    returned result.

    Raises:
        AddressBookValidationError: If the payload has no ``details`` list.
    """
    try:
        response = LookupResponse.model_validate(payload)
    except ValidationError as exc:
        raise AddressBookValidationError(exc, {"operation": "normalize_lookup_response"}) from exc

    result = LookupResult(searched_house_number=searched_house_number, status=response.status)

    for index, raw in enumerate(response.details):
        try:
            record = _validate_record(raw)
        except AddressBookValidationError as exc:
            logger.warning("Skipping lookup record %d: %s", index, exc)
            result.add_process_error(
                field=f"details[{index}]",
                message=str(exc),
                value=raw,
                context={"fields": ", ".join(".".join(map(str, e["loc"])) for e in exc.errors())},
            )
            continue

        record_number = None if record.house_number is None else str(record.house_number)
        if record_number is not None and record_number != searched_house_number:
            result.add_process_cleaning(
                field=f"details[{index}].houseNumber",
                original_value=record_number,
                new_value=searched_house_number,
                reason="Replaced record house number with the searched house number",
            )

        result.addresses.append(normalize_address(record, searched_house_number))

    logger.debug(
        "Normalized %d of %d lookup records",
        len(result.addresses),
        len(response.details),
    )
    return result
