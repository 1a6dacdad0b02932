"""Data models for search requests and document operations."""

from __future__ import annotations

import dataclasses
import re
from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any, Protocol

_DOCUMENT_ID_PATTERN = re.compile(r"(\D+)_(\d+)")


class FieldAccessible(Protocol):
    """A record whose fields can be read by name."""

    id: Any

    def get(self, field_name: str) -> Any: ...


class QueryType(StrEnum):
    """Search query parameter flavor."""

    TERM = "term"
    BOOLEAN = "boolean"


class RankDirection(StrEnum):
    """Sort direction for a rank field."""

    ASC = "asc"
    DESC = "desc"


RankSpec = str | tuple[str, str]


@dataclass
class SearchOptions:
    """Search request options."""

    query_type: QueryType = QueryType.TERM
    page_size: int = 10
    page: int | None = None  # 1-based
    rank: RankSpec | None = None
    return_fields: list[str] | None = None
    boolean_query: str | None = None

    def __post_init__(self) -> None:
        if self.page_size < 1:
            raise ValueError(f"invalid page_size: {self.page_size} (must be >= 1)")
        if self.page is not None and self.page < 1:
            raise ValueError(f"invalid page: {self.page} (must be >= 1)")

    def with_page(self, page: int) -> SearchOptions:
        return dataclasses.replace(self, page=page)


class OperationType(StrEnum):
    """Batch document operation type."""

    ADD = "add"
    DELETE = "delete"


@dataclass
class AddOperation:
    """Add (or replace) a document in the index."""

    id: str
    fields: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return {"type": OperationType.ADD.value, "id": self.id, "fields": self.fields}


@dataclass
class DeleteOperation:
    """Remove a document from the index."""

    id: str

    def to_dict(self) -> dict[str, Any]:
        return {"type": OperationType.DELETE.value, "id": self.id}


SyncOperation = AddOperation | DeleteOperation


def make_document_id(type_tag: str, record_id: Any) -> str:
    """Build the index document id for a record of the given type."""
    return f"{type_tag}_{record_id}"


def split_document_id(document_id: str) -> tuple[str, int] | None:
    """Split a document id into (type_tag, record_id).

    Returns None when the id was not built from a digit-free tag and a numeric record id.
    """
    match = _DOCUMENT_ID_PATTERN.fullmatch(document_id)
    if match is None:
        return None
    return match.group(1), int(match.group(2))


def validate_type_tag(type_tag: str) -> str:
    if not type_tag or any(ch.isdigit() for ch in type_tag):
        raise ValueError(f"invalid type tag: {type_tag!r} (must be non-empty and contain no digits)")
    return type_tag
