"""Record store interface and in-memory implementation."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import Any


@dataclass
class Record:
    """Simple FieldAccessible record."""

    id: Any
    values: dict[str, Any] = field(default_factory=dict)

    def get(self, field_name: str) -> Any:
        if field_name == "id":
            return self.id
        return self.values.get(field_name)


class RecordStore(ABC):
    """Record store collaborator used for bulk sync and search resolution."""

    @abstractmethod
    def iterate_in_windows(self, window_size: int) -> Iterator[list[Any]]:
        """Yield every record, `window_size` records at a time."""
        ...

    @abstractmethod
    def fetch_by_ids(self, ids: list[Any]) -> list[Any]:
        """Return the records with the given ids; unknown ids are skipped."""
        ...


class InMemoryRecordStore(RecordStore):
    """In-memory record store for testing."""

    def __init__(self, records: Iterable[Any] = ()) -> None:
        self._records: dict[str, Any] = {}
        for record in records:
            self.put(record)

    def put(self, record: Any) -> None:
        self._records[str(record.id)] = record

    def remove(self, record_id: Any) -> None:
        self._records.pop(str(record_id), None)

    def iterate_in_windows(self, window_size: int) -> Iterator[list[Any]]:
        if window_size <= 0:
            raise ValueError(f"invalid window size: {window_size}")
        records = list(self._records.values())
        for start in range(0, len(records), window_size):
            yield records[start : start + window_size]

    def fetch_by_ids(self, ids: list[Any]) -> list[Any]:
        # Storage order, like an SQL "id IN (...)" query.
        wanted = {str(i) for i in ids}
        return [r for key, r in self._records.items() if key in wanted]

    def __len__(self) -> int:
        return len(self._records)
