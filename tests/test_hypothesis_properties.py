"""Property-based tests using Hypothesis for core components.

This module contains property tests that verify invariants of the
normalizer, the address book reducer and the field state container.
"""

from __future__ import annotations

from typing import Any

from hypothesis import HealthCheck, given, settings
from hypothesis import strategies as st

from address_book import (
    AddAddress,
    Address,
    AddressBookState,
    FieldStateContainer,
    RemoveAddress,
    UpdateAddresses,
    address_book_reducer,
    normalize_address,
)
from tests.strategies import (
    address_list_strategy,
    address_strategy,
    field_defaults_strategy,
    house_number_strategy,
    lookup_record_strategy,
)

# =============================================================================
# Normalizer Property Tests
# =============================================================================


class TestNormalizerProperties:
    """Property tests for normalize_address."""

    @given(lookup_record_strategy(), house_number_strategy())
    @settings(max_examples=100, suppress_health_check=[HealthCheck.too_slow])
    def test_id_is_built_from_coordinate_text(
        self, record: dict[str, Any], house_number: str
    ) -> None:
        address = normalize_address(record, house_number)

        assert address.id == f"{address.lat}_{address.lon}"
        assert float(address.lat) == record["lat"]
        assert float(address.lon) == record["long"]

    @given(lookup_record_strategy())
    @settings(max_examples=100, suppress_health_check=[HealthCheck.too_slow])
    def test_coordinate_text_has_no_float_artifacts(self, record: dict[str, Any]) -> None:
        address = normalize_address(record, "1")

        for source, text in ((record["lat"], address.lat), (record["long"], address.lon)):
            assert not text.endswith(".0")
            assert text != "-0"
            if source == 0 or abs(source) >= 1e-7:
                assert "e" not in text

    @given(lookup_record_strategy(), house_number_strategy())
    @settings(max_examples=100, suppress_health_check=[HealthCheck.too_slow])
    def test_searched_house_number_always_used(
        self, record: dict[str, Any], house_number: str
    ) -> None:
        address = normalize_address(record, house_number)

        assert address.house_number == house_number
        assert address.first_name == address.last_name == ""

    @given(lookup_record_strategy())
    @settings(max_examples=50, suppress_health_check=[HealthCheck.too_slow])
    def test_normalization_is_deterministic(self, record: dict[str, Any]) -> None:
        assert normalize_address(record, "1") == normalize_address(record, "1")


# =============================================================================
# Reducer Property Tests
# =============================================================================


class TestReducerProperties:
    """Property tests for address_book_reducer."""

    @given(address_list_strategy(), address_strategy())
    @settings(max_examples=100, suppress_health_check=[HealthCheck.too_slow])
    def test_add_is_idempotent(self, existing: list[Address], address: Address) -> None:
        state = AddressBookState(addresses=tuple(existing))

        once = address_book_reducer(state, AddAddress(address))
        twice = address_book_reducer(once, AddAddress(address))

        assert twice is once

    @given(st.lists(address_strategy(), max_size=15))
    @settings(max_examples=100, suppress_health_check=[HealthCheck.too_slow])
    def test_adds_keep_ids_unique_in_first_seen_order(self, addresses: list[Address]) -> None:
        state = AddressBookState()
        for address in addresses:
            state = address_book_reducer(state, AddAddress(address))

        ids = [a.id for a in state.addresses]
        assert len(ids) == len(set(ids))
        assert ids == list(dict.fromkeys(a.id for a in addresses))

    @given(address_list_strategy(), st.data())
    @settings(max_examples=100, suppress_health_check=[HealthCheck.too_slow])
    def test_remove_preserves_relative_order(
        self, addresses: list[Address], data: st.DataObject
    ) -> None:
        state = AddressBookState(addresses=tuple(addresses))
        ids = [a.id for a in addresses] + ["absent"]
        target = data.draw(st.sampled_from(ids))

        next_state = address_book_reducer(state, RemoveAddress(target))

        assert [a.id for a in next_state.addresses] == [i for i in ids[:-1] if i != target]

    @given(address_list_strategy(), st.lists(address_strategy(), max_size=5))
    @settings(max_examples=50, suppress_health_check=[HealthCheck.too_slow])
    def test_update_is_verbatim(self, before: list[Address], after: list[Address]) -> None:
        state = address_book_reducer(
            AddressBookState(addresses=tuple(before)), UpdateAddresses(after)
        )

        assert state.addresses == tuple(after)


# =============================================================================
# Field State Property Tests
# =============================================================================


class TestFieldStateProperties:
    """Property tests for FieldStateContainer."""

    @given(field_defaults_strategy(), st.lists(st.tuples(st.text(max_size=15), st.text())))
    @settings(max_examples=100, suppress_health_check=[HealthCheck.too_slow])
    def test_key_set_never_changes(
        self, defaults: dict[str, str], changes: list[tuple[str, str]]
    ) -> None:
        fields = FieldStateContainer(defaults)

        for name, value in changes:
            fields.on_change(name, value)

        assert set(fields.read()) == set(defaults)

    @given(field_defaults_strategy(), st.lists(st.tuples(st.text(max_size=15), st.text())))
    @settings(max_examples=100, suppress_health_check=[HealthCheck.too_slow])
    def test_reset_restores_snapshot(
        self, defaults: dict[str, str], changes: list[tuple[str, str]]
    ) -> None:
        expected = dict(defaults)
        fields = FieldStateContainer(defaults)

        for name, value in changes:
            fields.on_change(name, value)
        defaults.clear()
        fields.reset()

        assert fields.read() == expected
