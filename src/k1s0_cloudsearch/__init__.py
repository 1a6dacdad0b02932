"""k1s0 cloudsearch library."""

from .client import CloudSearchClient
from .config import CloudSearchConfig
from .documents import DocumentBatchClient, is_blank, strip_blank_fields
from .exceptions import (
    CloudSearchError,
    CloudSearchErrorCodes,
    ConfigurationError,
    DocumentUpdateError,
    SearchError,
)
from .lifecycle import LifecycleEvent, LifecycleNotifier
from .models import (
    AddOperation,
    DeleteOperation,
    FieldAccessible,
    OperationType,
    QueryType,
    RankDirection,
    SearchOptions,
    SyncOperation,
    make_document_id,
    split_document_id,
)
from .query import QueryBuilder, convert_date_or_time, normalize_rank
from .results import ResultSet
from .search import SearchClient
from .store import InMemoryRecordStore, Record, RecordStore
from .sync import IndexSyncPolicy, raise_error

__all__ = [
    "AddOperation",
    "CloudSearchClient",
    "CloudSearchConfig",
    "CloudSearchError",
    "CloudSearchErrorCodes",
    "ConfigurationError",
    "DeleteOperation",
    "DocumentBatchClient",
    "DocumentUpdateError",
    "FieldAccessible",
    "InMemoryRecordStore",
    "IndexSyncPolicy",
    "LifecycleEvent",
    "LifecycleNotifier",
    "OperationType",
    "QueryBuilder",
    "QueryType",
    "RankDirection",
    "Record",
    "RecordStore",
    "ResultSet",
    "SearchClient",
    "SearchError",
    "SearchOptions",
    "SyncOperation",
    "convert_date_or_time",
    "is_blank",
    "make_document_id",
    "normalize_rank",
    "raise_error",
    "split_document_id",
    "strip_blank_fields",
]
