"""CloudSearchClient: search and document updates for one domain."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from .config import CloudSearchConfig
from .documents import DocumentBatchClient
from .models import SearchOptions, SyncOperation
from .results import ResultSet
from .search import SearchClient


class CloudSearchClient:
    """Facade over SearchClient and DocumentBatchClient sharing one config."""

    def __init__(
        self,
        config: CloudSearchConfig,
        search_client: SearchClient | None = None,
        document_client: DocumentBatchClient | None = None,
    ) -> None:
        self.config = config
        self._search = search_client or SearchClient(config)
        self._documents = document_client or DocumentBatchClient(config)

    def search(self, term: Any, options: SearchOptions | None = None) -> ResultSet:
        return self._search.search(term, options)

    def submit(self, operations: Iterable[SyncOperation]) -> None:
        self._documents.submit(operations)

    def add_item(self, id: Any, fields: Mapping[str, Any]) -> None:
        self._documents.add_item(id, fields)

    def update_item(self, id: Any, fields: Mapping[str, Any]) -> None:
        self._documents.update_item(id, fields)

    def remove_item(self, id: Any) -> None:
        self._documents.remove_item(id)

    def add_items(self, items: Iterable[tuple[Any, Mapping[str, Any]]]) -> None:
        self._documents.add_items(items)

    def remove_items(self, ids: Iterable[Any]) -> None:
        self._documents.remove_items(ids)
