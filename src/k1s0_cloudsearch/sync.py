"""Keeps the search index in step with record lifecycle events."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Any

import structlog

from .client import CloudSearchClient
from .config import CloudSearchConfig
from .exceptions import DocumentUpdateError
from .models import (
    FieldAccessible,
    SearchOptions,
    make_document_id,
    split_document_id,
    validate_type_tag,
)
from .query import convert_date_or_time
from .results import ResultSet
from .store import RecordStore

logger = structlog.get_logger(__name__)

INSERT_WINDOW_SIZE = 100
DELETE_WINDOW_SIZE = 1000

IndexabilityRule = str | Callable[[Any], bool]
ErrorHandler = Callable[[DocumentUpdateError], None]


def raise_error(error: DocumentUpdateError) -> None:
    """Default error handler: re-raise to the caller."""
    raise error


class IndexSyncPolicy:
    """Index synchronization rules for one record type.

    Args:
        client: client for the CloudSearch domain holding this record type
        type_tag: document id prefix for this record type (no digits)
        fields: record fields sent to the index, in order
        when: optional indexability rule; a field/accessor name read via
            `record.get`, or a callable taking the record
        store: record store used by batch_insert, batch_delete and find
        on_error: receives every DocumentUpdateError raised while syncing;
            defaults to re-raising. A handler that returns lets the
            triggering operation continue.
    """

    def __init__(
        self,
        client: CloudSearchClient,
        type_tag: str,
        fields: Sequence[str],
        when: IndexabilityRule | None = None,
        store: RecordStore | None = None,
        on_error: ErrorHandler | None = None,
    ) -> None:
        self.client = client
        self.type_tag = validate_type_tag(type_tag)
        self.fields = list(fields)
        self.when = when
        self.store = store
        self.on_error: ErrorHandler = on_error or raise_error

    @classmethod
    def from_config(
        cls,
        config: CloudSearchConfig,
        type_tag: str,
        fields: Sequence[str],
        when: IndexabilityRule | None = None,
        store: RecordStore | None = None,
        on_error: ErrorHandler | None = None,
    ) -> IndexSyncPolicy:
        return cls(
            CloudSearchClient(config),
            type_tag,
            fields,
            when=when,
            store=store,
            on_error=on_error,
        )

    def _require_store(self) -> RecordStore:
        if self.store is None:
            raise RuntimeError(f"no record store configured for {self.type_tag!r}")
        return self.store

    def document_id(self, record: FieldAccessible) -> str:
        return make_document_id(self.type_tag, record.id)

    def should_index(self, record: FieldAccessible) -> bool:
        if self.when is None:
            return True
        if callable(self.when):
            return bool(self.when(record))
        value = record.get(self.when)
        if callable(value):
            value = value()
        return bool(value)

    def build_fields(self, record: FieldAccessible, *, blank_as_empty: bool = True) -> dict[str, Any]:
        """Read the configured fields off the record.

        With `blank_as_empty`, None values become "" (later stripped by the
        document client); otherwise they pass through unchanged.
        """
        data: dict[str, Any] = {}
        for name in self.fields:
            value = convert_date_or_time(record.get(name))
            if value is None and blank_as_empty:
                value = ""
            data[name] = value
        return data

    def on_create(self, record: FieldAccessible) -> None:
        if not self.should_index(record):
            return
        try:
            self.client.add_item(self.document_id(record), self.build_fields(record))
        except DocumentUpdateError as e:
            self.on_error(e)

    def on_update(self, record: FieldAccessible) -> None:
        if not self.should_index(record):
            # The record no longer qualifies, so take it out of the index.
            self.on_destroy(record)
            return
        try:
            self.client.update_item(
                self.document_id(record), self.build_fields(record, blank_as_empty=False)
            )
        except DocumentUpdateError as e:
            self.on_error(e)

    def on_destroy(self, record: FieldAccessible) -> None:
        try:
            self.client.remove_item(self.document_id(record))
        except DocumentUpdateError as e:
            self.on_error(e)

    def batch_insert(self) -> int:
        """Index every eligible record in the store, one request per window.

        Returns the number of documents submitted.
        """
        submitted = 0
        for window in self._require_store().iterate_in_windows(INSERT_WINDOW_SIZE):
            items = [
                (self.document_id(record), self.build_fields(record))
                for record in window
                if self.should_index(record)
            ]
            if not items:
                continue
            try:
                self.client.add_items(items)
            except DocumentUpdateError as e:
                self.on_error(e)
                continue
            submitted += len(items)
            logger.info("indexed window", type_tag=self.type_tag, documents=len(items))
        return submitted

    def batch_delete(self) -> int:
        """Remove every record in the store from the index, one request per window.

        Returns the number of ids submitted.
        """
        submitted = 0
        for window in self._require_store().iterate_in_windows(DELETE_WINDOW_SIZE):
            ids = [self.document_id(record) for record in window]
            if not ids:
                continue
            try:
                self.client.remove_items(ids)
            except DocumentUpdateError as e:
                self.on_error(e)
                continue
            submitted += len(ids)
            logger.info("removed window", type_tag=self.type_tag, documents=len(ids))
        return submitted

    def find(self, term: Any, options: SearchOptions | None = None) -> ResultSet:
        """Search the index and resolve hits of this record type to records.

        The returned ResultSet holds records in search rank order.
        """
        results = self.client.search(term, options)
        record_ids: list[int] = []
        for document_id in results:
            parts = split_document_id(str(document_id))
            if parts is not None and parts[0] == self.type_tag:
                record_ids.append(parts[1])

        if not record_ids:
            return results.replace([])
        fetched = {str(r.id): r for r in self._require_store().fetch_by_ids(record_ids)}
        ordered = [fetched[str(i)] for i in record_ids if str(i) in fetched]
        return results.replace(ordered)
