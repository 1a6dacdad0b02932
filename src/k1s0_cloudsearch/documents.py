"""Batch document endpoint client."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

import httpx
import structlog

from .config import CloudSearchConfig
from .exceptions import DocumentUpdateError
from .models import AddOperation, DeleteOperation, SyncOperation

logger = structlog.get_logger(__name__)


def is_blank(value: Any) -> bool:
    """True for None, whitespace-only strings and empty collections."""
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    if isinstance(value, (list, tuple, set, dict)):
        return len(value) == 0
    return False


def strip_blank_fields(fields: Mapping[str, Any]) -> dict[str, Any]:
    # CloudSearch rejects documents carrying blank field values.
    return {name: value for name, value in fields.items() if not is_blank(value)}


class DocumentBatchClient:
    """Sends add/delete operations to the documents/batch endpoint using httpx."""

    def __init__(self, config: CloudSearchConfig) -> None:
        self._config = config

    def _make_client(self) -> httpx.Client:
        return httpx.Client(timeout=self._config.timeout_seconds)

    def submit(self, operations: Iterable[SyncOperation]) -> None:
        """Submit the operations as one batch request.

        Raises DocumentUpdateError on a transport failure or a non-200 response.
        """
        if self._config.sandbox:
            logger.debug("sandbox mode, skipping document batch")
            return None
        payload = [op.to_dict() for op in operations]
        if not payload:
            return None

        url = self._config.document_url
        logger.debug("submitting document batch", url=url, size=len(payload), operations=payload)
        try:
            with self._make_client() as client:
                resp = client.post(url, json=payload)
        except Exception as e:
            logger.warning("document batch request failed", url=url, error=str(e))
            raise DocumentUpdateError(f"{type(e).__name__}: {e}", cause=e) from e

        if resp.status_code != 200:
            logger.warning(
                "document batch rejected", url=url, status=resp.status_code, body=resp.text
            )
            raise DocumentUpdateError(
                f"{resp.status_code}: {resp.reason_phrase}",
                status_code=resp.status_code,
            )
        return None

    def add_item(self, id: Any, fields: Mapping[str, Any]) -> None:
        """Add a document to the index, dropping blank field values."""
        self.submit([AddOperation(id=str(id), fields=strip_blank_fields(fields))])

    def update_item(self, id: Any, fields: Mapping[str, Any]) -> None:
        # CloudSearch uses the add opcode for updates.
        self.add_item(id, fields)

    def remove_item(self, id: Any) -> None:
        """Remove a document. Removing an id that is not indexed still succeeds."""
        self.submit([DeleteOperation(id=str(id))])

    def add_items(self, items: Iterable[tuple[Any, Mapping[str, Any]]]) -> None:
        self.submit(
            AddOperation(id=str(doc_id), fields=strip_blank_fields(fields))
            for doc_id, fields in items
        )

    def remove_items(self, ids: Iterable[Any]) -> None:
        self.submit(DeleteOperation(id=str(doc_id)) for doc_id in ids)
