"""Search endpoint client."""

from __future__ import annotations

from typing import Any

import httpx
import structlog

from .config import CloudSearchConfig
from .exceptions import SearchError
from .models import SearchOptions
from .query import QueryBuilder
from .results import ResultSet

logger = structlog.get_logger(__name__)


class SearchClient:
    """Runs searches against a CloudSearch domain using httpx."""

    def __init__(self, config: CloudSearchConfig, builder: QueryBuilder | None = None) -> None:
        self._config = config
        self._builder = builder or QueryBuilder(config)

    def _make_client(self) -> httpx.Client:
        return httpx.Client(timeout=self._config.timeout_seconds)

    def search(self, term: Any, options: SearchOptions | None = None) -> ResultSet:
        """Search for `term` and return the requested page of document ids.

        Returns an empty ResultSet when nothing matches.

        Raises:
            SearchError: the request could not be sent or the server answered non-200
        """
        if self._config.sandbox:
            logger.debug("sandbox mode, returning empty result set")
            return ResultSet.sandbox_fake()

        options = options or SearchOptions()
        url = self._builder.build(term, options)
        logger.debug("searching", url=str(url))
        try:
            with self._make_client() as client:
                resp = client.get(url)
        except Exception as e:
            logger.warning("search request failed", url=str(url), error=str(e))
            raise SearchError(f"{type(e).__name__}: {e}", cause=e) from e

        if resp.status_code != 200:
            logger.warning(
                "search rejected", url=str(url), status=resp.status_code, body=resp.text
            )
            raise SearchError(
                f"{resp.status_code}: {resp.reason_phrase}",
                status_code=resp.status_code,
            )

        try:
            body: dict[str, Any] = resp.json()
        except ValueError as e:
            raise SearchError(f"{type(e).__name__}: {e}", cause=e) from e

        def fetch_page(page: int) -> ResultSet:
            return self.search(term, options.with_page(page))

        return ResultSet.from_response(
            body,
            options.page_size,
            current_page=options.page or 1,
            fetch_page=fetch_page,
        )
