"""SearchClient unit tests (respx mocks)."""

import httpx
import pytest
import respx
from conftest import SEARCH_URL
from k1s0_cloudsearch.config import CloudSearchConfig
from k1s0_cloudsearch.exceptions import CloudSearchErrorCodes, ConfigurationError, SearchError
from k1s0_cloudsearch.models import QueryType, SearchOptions
from k1s0_cloudsearch.search import SearchClient


def make_client(config: CloudSearchConfig) -> SearchClient:
    return SearchClient(config)


def hits(ids: list[str], found: int, start: int = 0) -> dict:
    return {
        "status": {"rid": "abc", "time-ms": 3},
        "hits": {"found": found, "start": start, "hit": [{"id": i} for i in ids]},
    }


@respx.mock
def test_search_success(config: CloudSearchConfig) -> None:
    """Document ids come back in server rank order."""
    route = respx.get(SEARCH_URL).mock(
        return_value=httpx.Response(200, json=hits(["13", "28"], found=2))
    )
    result = make_client(config).search("fritters")
    assert result == ["13", "28"]
    assert result.total_entries == 2
    params = route.calls.last.request.url.params
    assert params["q"] == "fritters"
    assert params["size"] == "10"


@respx.mock
def test_search_no_results(config: CloudSearchConfig) -> None:
    respx.get(SEARCH_URL).mock(return_value=httpx.Response(200, json=hits([], found=0)))
    result = make_client(config).search("nothing")
    assert list(result) == []
    assert result.total_entries == 0


@respx.mock
def test_search_request_params(config: CloudSearchConfig) -> None:
    route = respx.get(SEARCH_URL).mock(return_value=httpx.Response(200, json=hits([], found=0)))
    options = SearchOptions(
        page=3,
        page_size=10,
        rank=("title", "desc"),
        return_fields=["name", "title"],
        boolean_query="published:1",
    )
    make_client(config).search("apple fritters", options)
    params = route.calls.last.request.url.params
    assert params["q"] == "apple fritters"
    assert params["start"] == "20"
    assert params["rank"] == "-title"
    assert params["return-fields"] == "name,title"
    assert params.get_list("bq") == ["published:1"]


@respx.mock
def test_boolean_search(config: CloudSearchConfig) -> None:
    route = respx.get(SEARCH_URL).mock(return_value=httpx.Response(200, json=hits([], found=0)))
    make_client(config).search(
        "(and name:'fritters')", SearchOptions(query_type=QueryType.BOOLEAN)
    )
    params = route.calls.last.request.url.params
    assert params["bq"] == "(and name:'fritters')"
    assert "q" not in params


@respx.mock
def test_page_size_is_the_requested_one(config: CloudSearchConfig) -> None:
    """Paging math uses the requested page size, not the number of hits returned."""
    respx.get(SEARCH_URL).mock(
        return_value=httpx.Response(200, json=hits(["a", "b", "c"], found=30, start=5))
    )
    result = make_client(config).search("x", SearchOptions(page_size=5, page=2))
    assert result.page_size == 5
    assert result.current_page == 2
    assert result.total_pages == 6


@respx.mock
def test_iter_all_fetches_following_pages(config: CloudSearchConfig) -> None:
    route = respx.get(SEARCH_URL).mock(
        side_effect=[
            httpx.Response(200, json=hits(["a", "b"], found=3, start=0)),
            httpx.Response(200, json=hits(["c"], found=3, start=2)),
        ]
    )
    result = make_client(config).search("x", SearchOptions(page_size=2))
    assert route.call_count == 1
    assert list(result.iter_all()) == ["a", "b", "c"]
    assert route.call_count == 2
    assert route.calls.last.request.url.params["start"] == "2"


@respx.mock
def test_search_http_error(config: CloudSearchConfig) -> None:
    """A non-200 answer raises SearchError carrying status and reason."""
    respx.get(SEARCH_URL).mock(return_value=httpx.Response(500, text="Internal Server Error"))
    with pytest.raises(SearchError) as exc_info:
        make_client(config).search("fritters")
    assert exc_info.value.code == CloudSearchErrorCodes.SEARCH_FAILED
    assert exc_info.value.status_code == 500
    assert "500: Internal Server Error" in str(exc_info.value)


@respx.mock
def test_search_invalid_json(config: CloudSearchConfig) -> None:
    respx.get(SEARCH_URL).mock(return_value=httpx.Response(200, text="<html>"))
    with pytest.raises(SearchError):
        make_client(config).search("fritters")


def test_search_network_error(config: CloudSearchConfig) -> None:
    """Transport errors become SearchError with the original exception chained."""
    with respx.mock:
        respx.get(SEARCH_URL).mock(side_effect=httpx.ConnectError("Connection refused"))
        with pytest.raises(SearchError) as exc_info:
            make_client(config).search("fritters")
    assert "ConnectError: Connection refused" in str(exc_info.value)
    assert isinstance(exc_info.value.__cause__, httpx.ConnectError)


def test_sandbox_search_makes_no_request(sandbox_config: CloudSearchConfig) -> None:
    with respx.mock(assert_all_called=False) as mock:
        route = mock.get(SEARCH_URL).mock(return_value=httpx.Response(500))
        result = make_client(sandbox_config).search("fritters")
        assert list(result) == []
        assert result.total_entries == 0
        assert not route.called


def test_sandbox_is_per_client(config: CloudSearchConfig, sandbox_config: CloudSearchConfig) -> None:
    """A sandboxed client does not switch other clients into sandbox mode."""
    with respx.mock:
        route = respx.get(SEARCH_URL).mock(
            return_value=httpx.Response(200, json=hits(["1"], found=1))
        )
        assert list(make_client(sandbox_config).search("x")) == []
        assert list(make_client(config).search("x")) == ["1"]
        assert route.call_count == 1


def test_search_without_domain_fails_fast() -> None:
    with pytest.raises(ConfigurationError):
        make_client(CloudSearchConfig()).search("fritters")


def test_paging_without_start_in_response(config: CloudSearchConfig) -> None:
    """Pagination follows the requested pages even when responses carry no start offset."""
    data = ["a", "b", "c", "d", "e"]

    def serve(request: httpx.Request) -> httpx.Response:
        start = int(request.url.params.get("start", "0"))
        size = int(request.url.params["size"])
        page = [{"id": i} for i in data[start : start + size]]
        return httpx.Response(200, json={"hits": {"found": len(data), "hit": page}})

    with respx.mock:
        route = respx.get(SEARCH_URL).mock(side_effect=serve)
        client = make_client(config)
        assert list(client.search("x", SearchOptions(page_size=2)).iter_all()) == data
        assert route.call_count == 3

        third = client.search("x", SearchOptions(page_size=2, page=3))
        assert third.current_page == 3
        assert list(third) == ["e"]
        assert third.fetch_next_page() is None
