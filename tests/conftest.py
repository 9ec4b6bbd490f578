"""Shared pytest fixtures and Hypothesis configuration.

This module provides pytest fixtures and configures Hypothesis profiles
for the test suite.
"""

from __future__ import annotations

from typing import Any

import pytest
from hypothesis import Verbosity, settings

from address_book import Address, normalize_address

# Configure Hypothesis settings for the test suite
settings.register_profile("ci", max_examples=200, deadline=None)
settings.register_profile("dev", max_examples=50, deadline=None)
settings.register_profile("debug", max_examples=10, deadline=None, verbosity=Verbosity.verbose)


@pytest.fixture
def raw_record() -> dict[str, Any]:
    """A well-formed lookup record as returned by the lookup API."""
    return {
        "city": "Town",
        "houseNumber": "14",
        "lat": 52.1,
        "long": 4.3,
        "postcode": "1000AB",
        "street": "Main",
    }


@pytest.fixture
def lookup_payload(raw_record: dict[str, Any]) -> dict[str, Any]:
    """A lookup response with two distinct records."""
    return {
        "status": "ok",
        "details": [
            raw_record,
            {
                "city": "Town",
                "houseNumber": "12",
                "lat": 52.2,
                "long": 4.4,
                "postcode": "1000AB",
                "street": "Side",
            },
        ],
    }


@pytest.fixture
def make_address():
    """Factory building addresses from distinct coordinates."""

    def _make(lat: float, lon: float, street: str = "Main") -> Address:
        return normalize_address(
            {"city": "Town", "lat": lat, "long": lon, "postcode": "1000AB", "street": street},
            "12",
        )

    return _make
