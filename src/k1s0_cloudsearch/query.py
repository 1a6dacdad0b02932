"""Search request URL construction."""

from __future__ import annotations

from datetime import date, datetime
from typing import Any

import httpx

from .config import CloudSearchConfig
from .models import QueryType, RankDirection, RankSpec, SearchOptions


def normalize_rank(rank: RankSpec) -> str:
    """Turn a rank option into the `rank` parameter value.

    A bare field name ranks ascending. `(field, "desc")` becomes `-field`;
    any other direction is treated as ascending.
    """
    if isinstance(rank, (tuple, list)):
        field_name = rank[0]
        direction = rank[1] if len(rank) > 1 else RankDirection.ASC
    else:
        field_name, direction = rank, RankDirection.ASC
    if direction == RankDirection.DESC:
        return f"-{field_name}"
    return str(field_name)


def convert_date_or_time(value: Any) -> Any:
    """Return epoch seconds for datetime/date values, anything else unchanged."""
    if isinstance(value, datetime):
        return int(value.timestamp())
    if isinstance(value, date):
        return int(datetime(value.year, value.month, value.day).timestamp())
    return value


def _param(value: Any) -> str:
    return str(convert_date_or_time(value))


class QueryBuilder:
    """Builds search endpoint URLs for a CloudSearch domain."""

    def __init__(self, config: CloudSearchConfig) -> None:
        self._config = config

    def params(self, term: Any, options: SearchOptions | None = None) -> list[tuple[str, str]]:
        """Query parameters in request order; `bq` may appear twice."""
        options = options or SearchOptions()
        key = "bq" if options.query_type == QueryType.BOOLEAN else "q"
        params: list[tuple[str, str]] = [(key, _param(term)), ("size", str(options.page_size))]
        if options.boolean_query and options.query_type != QueryType.BOOLEAN:
            params.append(("bq", _param(options.boolean_query)))
        if options.return_fields:
            params.append(("return-fields", ",".join(options.return_fields)))
        if options.page is not None:
            params.append(("start", str((options.page - 1) * options.page_size)))
        if options.rank:
            params.append(("rank", normalize_rank(options.rank)))
        return params

    def build(self, term: Any, options: SearchOptions | None = None) -> httpx.URL:
        return httpx.URL(self._config.search_url, params=self.params(term, options))
