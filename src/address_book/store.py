"""Address book state, actions and the owning store.

State transitions are expressed as a pure reducer over immutable values;
``AddressBookStore`` owns the current state for one session and applies
dispatched actions one at a time.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field

from address_book.models import Address

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AddressBookState:
    """Ordered collection of addresses; order is display order."""

    addresses: tuple[Address, ...] = ()


@dataclass(frozen=True)
class AddAddress:
    """Append an address unless one with the same id is already stored."""

    address: Address


@dataclass(frozen=True)
class RemoveAddress:
    """Remove the address with the given id, if present."""

    address_id: str


@dataclass(frozen=True)
class UpdateAddresses:
    """Replace the whole collection with the given addresses, verbatim."""

    addresses: tuple[Address, ...] = field(default=())

    def __post_init__(self) -> None:
        # Accept any iterable but store an immutable snapshot.
        object.__setattr__(self, "addresses", tuple(self.addresses))


AddressBookAction = AddAddress | RemoveAddress | UpdateAddresses
StateListener = Callable[[AddressBookState], None]


def _index_of(addresses: tuple[Address, ...], address_id: str) -> int:
    for index, address in enumerate(addresses):
        if address.id == address_id:
            return index
    return -1


def address_book_reducer(state: AddressBookState, action: AddressBookAction) -> AddressBookState:
    """Compute the next state for ``action``.

    No-op transitions (adding a duplicate id, removing an absent id) return
    ``state`` itself, so callers can detect them with an identity check.

    Raises:
        TypeError: If ``action`` is not an address book action.
    """
    if isinstance(action, AddAddress):
        if _index_of(state.addresses, action.address.id) != -1:
            logger.debug("Address %s already in address book", action.address.id)
            return state
        return AddressBookState(addresses=(*state.addresses, action.address))

    if isinstance(action, RemoveAddress):
        index = _index_of(state.addresses, action.address_id)
        if index == -1:
            logger.debug("Address %s not in address book", action.address_id)
            return state
        return AddressBookState(
            addresses=state.addresses[:index] + state.addresses[index + 1 :]
        )

    if isinstance(action, UpdateAddresses):
        return AddressBookState(addresses=action.addresses)

    raise TypeError(f"Unknown address book action: {action!r}")


def select_addresses(state: AddressBookState) -> tuple[Address, ...]:
    """Selector for the stored addresses in display order."""
    return state.addresses


class AddressBookStore:
    """Owns the address book state for the lifetime of a session.

    Example:
        >>> store = AddressBookStore()
        >>> _ = store.add(address)
        >>> _ = store.add(address)  # duplicate id, ignored
        >>> len(store.list())
        1
    """

    def __init__(self, initial: AddressBookState | None = None) -> None:
        self._state = initial if initial is not None else AddressBookState()
        self._listeners: list[StateListener] = []

    @property
    def state(self) -> AddressBookState:
        """Current state."""
        return self._state

    def dispatch(self, action: AddressBookAction) -> AddressBookState:
        """Apply ``action`` and return the resulting state.

        Listeners are notified once when the state changed.
        """
        next_state = address_book_reducer(self._state, action)
        if next_state is not self._state:
            self._state = next_state
            for listener in list(self._listeners):
                listener(next_state)
        return self._state

    def add(self, address: Address) -> AddressBookState:
        """Add ``address`` unless its id is already stored."""
        return self.dispatch(AddAddress(address))

    def remove(self, address_id: str) -> AddressBookState:
        """Remove the address with ``address_id`` if stored."""
        return self.dispatch(RemoveAddress(address_id))

    def replace_all(self, addresses: Iterable[Address]) -> AddressBookState:
        """Replace the whole collection with ``addresses``."""
        return self.dispatch(UpdateAddresses(tuple(addresses)))

    def list(self) -> tuple[Address, ...]:
        """Stored addresses in display order."""
        return select_addresses(self._state)

    def subscribe(self, listener: StateListener) -> Callable[[], None]:
        """Register ``listener`` for state changes; returns an unsubscribe callable."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def __len__(self) -> int:
        return len(self._state.addresses)

    def __contains__(self, address_id: object) -> bool:
        return isinstance(address_id, str) and _index_of(self._state.addresses, address_id) != -1
