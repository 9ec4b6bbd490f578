"""Keyed form field state.

A ``FieldStateContainer`` tracks a fixed set of named string fields, for
example the inputs of a search form. The field names are declared by the
defaults given at construction; changes to any other name are ignored.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator, Mapping
from types import MappingProxyType

from address_book.models import PACKAGE_NAME, AddressBookError

logger = logging.getLogger(__name__)

FieldState = Mapping[str, str]
FieldListener = Callable[[FieldState], None]


class FieldStateContainer:
    """Holder for a fixed mapping of named string fields.

    Example:
        >>> fields = FieldStateContainer({"postCode": "", "houseNumber": ""})
        >>> fields.on_change("postCode", "1000AB")
        True
        >>> fields.on_change("street", "Main")  # not a declared field
        False
        >>> dict(fields.read())
        {'postCode': '1000AB', 'houseNumber': ''}
        >>> fields.reset()
        >>> fields["postCode"]
        ''
    """

    def __init__(self, defaults: Mapping[str, str]) -> None:
        """Snapshot ``defaults`` as both the current state and the reset target.

        Args:
            defaults: Field names and their initial values. The mapping is
                copied; later changes to it have no effect on the container.

        Raises:
            AddressBookError: If a name or default value is not a string.
        """
        snapshot: dict[str, str] = {}
        for name, value in defaults.items():
            self._check_value(name, value)
            snapshot[name] = value

        self._defaults = MappingProxyType(snapshot)
        self._values: dict[str, str] = dict(snapshot)
        self._listeners: list[FieldListener] = []

    @classmethod
    def initialize(cls, defaults: Mapping[str, str]) -> FieldStateContainer:
        """Create a container from ``defaults``."""
        return cls(defaults)

    @staticmethod
    def _check_value(name: object, value: object) -> None:
        if not isinstance(name, str) or not isinstance(value, str):
            raise AddressBookError(
                "field_state",
                "Field names and values must be strings",
                {"package": PACKAGE_NAME, "field": repr(name), "value": repr(value)},
            )

    @property
    def fields(self) -> tuple[str, ...]:
        """Declared field names, in declaration order."""
        return tuple(self._defaults)

    @property
    def defaults(self) -> FieldState:
        """Read-only view of the reset target."""
        return self._defaults

    def read(self) -> FieldState:
        """Return the current state as a read-only mapping."""
        return MappingProxyType(self._values)

    def on_change(self, field_name: str, new_value: str) -> bool:
        """Set ``field_name`` to ``new_value``.

        Unknown field names are ignored: the state is left as it was and no
        listener is notified.

        Returns:
            True if the change was applied, False if it was ignored.

        Raises:
            AddressBookError: If ``new_value`` is not a string.
        """
        if field_name not in self._defaults:
            logger.debug("Ignoring change to undeclared field %r", field_name)
            return False
        self._check_value(field_name, new_value)

        self._values = {**self._values, field_name: new_value}
        self._notify()
        return True

    def reset(self) -> None:
        """Restore every field to the value captured at construction."""
        self._values = dict(self._defaults)
        self._notify()

    def subscribe(self, listener: FieldListener) -> Callable[[], None]:
        """Register ``listener`` to receive the new state after each change.

        Returns:
            A callable that removes the listener again.
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self) -> None:
        state = self.read()
        for listener in list(self._listeners):
            listener(state)

    def __getitem__(self, field_name: str) -> str:
        return self._values[field_name]

    def __contains__(self, field_name: object) -> bool:
        return field_name in self._defaults

    def __iter__(self) -> Iterator[str]:
        return iter(self._defaults)

    def __len__(self) -> int:
        return len(self._defaults)

    def __repr__(self) -> str:
        return f"FieldStateContainer({dict(self._values)!r})"
