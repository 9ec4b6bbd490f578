"""Address model classes.

This module contains the canonical Address entity stored in the address
book and the LookupRecord model describing one raw record of an address
lookup response.
"""

from __future__ import annotations

import math
from typing import Annotated, Any, Self

from pydantic import (
    AfterValidator,
    AliasChoices,
    BaseModel,
    ConfigDict,
    Field,
    StrictFloat,
    StrictInt,
    field_validator,
)


def _require_finite(value: int | float) -> int | float:
    if not math.isfinite(value):
        raise ValueError("coordinate must be a finite number")
    return value


# Booleans and numeric strings are rejected; ints keep their integer form.
Coordinate = Annotated[StrictInt | StrictFloat, AfterValidator(_require_finite)]


class Address(BaseModel):
    """Geocoded address, optionally owned by a person.

    Instances are immutable. The ``id`` is derived from the coordinates of
    the lookup record and is the identity used for deduplication in the
    address book. Attribute names are snake_case; ``to_dict()`` emits the
    camelCase names used by the lookup API and the UI.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    id: str = Field(description="Coordinate-derived identity, '<lat>_<lon>'")
    street: str = Field(default="", description="Street name")
    city: str = Field(default="", description="City or place name")
    postcode: str = Field(default="", description="Postal code as entered by the lookup API")
    house_number: str = Field(
        default="",
        description="House number the address was searched with",
        validation_alias=AliasChoices("houseNumber", "house_number"),
        serialization_alias="houseNumber",
    )
    lat: str = Field(description="Latitude in the textual form of the source number")
    lon: str = Field(description="Longitude in the textual form of the source number")
    first_name: str = Field(
        default="",
        validation_alias=AliasChoices("firstName", "first_name"),
        serialization_alias="firstName",
    )
    last_name: str = Field(
        default="",
        validation_alias=AliasChoices("lastName", "last_name"),
        serialization_alias="lastName",
    )

    def to_dict(self) -> dict[str, str]:
        """Convert address to a dictionary keyed by the camelCase field names."""
        return self.model_dump(by_alias=True)

    def with_person(self, first_name: str, last_name: str) -> Self:
        """Return a copy of this address owned by the given person."""
        return self.model_copy(update={"first_name": first_name, "last_name": last_name})

    def display_lines(self) -> tuple[str, str]:
        """Two display rows: street with house number, then postcode with city."""
        return (
            f"{self.street} {self.house_number}".strip(),
            f"{self.postcode}, {self.city}",
        )


class LookupRecord(BaseModel):
    """One record of the address lookup response.

    The record's own house number is informational only and accepted in any
    shape; the normalizer uses the house number that was searched for.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    city: str
    postcode: str
    street: str
    house_number: Any = Field(
        default=None,
        validation_alias=AliasChoices("houseNumber", "house_number"),
    )
    lat: Coordinate
    lon: Coordinate = Field(validation_alias=AliasChoices("long", "lon"))

    @field_validator("lat")
    @classmethod
    def _check_latitude(cls, value: int | float) -> int | float:
        if not -90 <= value <= 90:
            raise ValueError("latitude must be between -90 and 90")
        return value

    @field_validator("lon")
    @classmethod
    def _check_longitude(cls, value: int | float) -> int | float:
        if not -180 <= value <= 180:
            raise ValueError("longitude must be between -180 and 180")
        return value
