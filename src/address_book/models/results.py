"""Result classes for address lookup normalization."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from abstract_validation_base import ProcessEntry, ProcessLog

if TYPE_CHECKING:
    from address_book.models.address import Address


@dataclass
class LookupResult:
    """Normalized candidates of one lookup response with its process log.

    Records that could not be normalized do not abort the batch; they are
    logged as errors in ``process_log`` and left out of ``addresses``.
    """

    searched_house_number: str
    addresses: list[Address] = field(default_factory=list)
    status: str | None = None
    process_log: ProcessLog = field(default_factory=ProcessLog)

    @property
    def is_empty(self) -> bool:
        """True when no record could be normalized."""
        return not self.addresses

    @property
    def rejected_count(self) -> int:
        """Number of records rejected during normalization."""
        return len(self.process_log.errors)

    def add_process_error(
        self,
        field: str,
        message: str,
        value: Any = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        """Track a record that failed normalization.

        Args:
            field: Name of the offending field (or record position).
            message: Error message describing the issue.
            value: The problematic value (optional).
            context: Additional context dict (optional).
        """
        entry = ProcessEntry(
            entry_type="error",
            field=field,
            message=message,
            original_value=str(value) if value is not None else None,
            context=context or {},
        )
        self.process_log.errors.append(entry)

    def add_process_cleaning(
        self,
        field: str,
        original_value: Any,
        new_value: Any,
        reason: str,
        operation_type: str = "normalization",
    ) -> None:
        """Track a value that was replaced during normalization."""
        entry = ProcessEntry(
            entry_type="cleaning",
            field=field,
            message=reason,
            original_value=str(original_value) if original_value is not None else None,
            new_value=str(new_value) if new_value is not None else None,
            context={"operation_type": operation_type},
        )
        self.process_log.cleaning.append(entry)

    def aggregate_logs(self) -> list[dict[str, Any]]:
        """Combine cleaning and error entries, sorted by timestamp.

        Returns:
            List of dicts suitable for tabular export.
        """
        entries = [entry.model_dump() for entry in self.process_log.cleaning]
        entries.extend(entry.model_dump() for entry in self.process_log.errors)
        return sorted(entries, key=lambda x: x.get("timestamp", ""))
