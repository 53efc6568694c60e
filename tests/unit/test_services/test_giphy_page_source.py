"""GiphyPageSource tests (respx mocks)."""

import httpx
import pytest
import respx

from gifload.config import ApiSettings
from gifload.domain import FetchFailed, RawRecord
from gifload.services import GiphyPageSource

BASE_URL = "https://api.giphy.com/v1/"


def trending_route():
    return respx.route(method="GET", host="api.giphy.com", path="/v1/gifs/trending")


def gif(gif_id: str, width="200", height="100") -> dict:
    return {
        "id": gif_id,
        "title": "ignored",
        "images": {
            "fixed_height": {
                "url": f"https://media.giphy.com/media/{gif_id}/200.gif",
                "width": width,
                "height": height,
            },
            "original": {"url": "ignored"},
        },
    }


def make_source() -> GiphyPageSource:
    return GiphyPageSource(ApiSettings(base_url=BASE_URL, api_key="test-key"))


@respx.mock
async def test_fetch_page_parses_records() -> None:
    trending_route().mock(
        return_value=httpx.Response(200, json={"data": [gif("a"), gif("b", "356")]})
    )

    records = await make_source().fetch_page(page_size=20, offset=0)

    assert records == [
        RawRecord(id="a", url="https://media.giphy.com/media/a/200.gif", width="200", height="100"),
        RawRecord(id="b", url="https://media.giphy.com/media/b/200.gif", width="356", height="100"),
    ]


@respx.mock
async def test_fetch_page_sends_query_params() -> None:
    route = trending_route().mock(return_value=httpx.Response(200, json={"data": []}))

    await make_source().fetch_page(page_size=20, offset=40)

    params = route.calls.last.request.url.params
    assert params["api_key"] == "test-key"
    assert params["limit"] == "20"
    assert params["offset"] == "40"


@respx.mock
async def test_fetch_page_base_url_without_trailing_slash() -> None:
    route = trending_route().mock(return_value=httpx.Response(200, json={"data": []}))
    source = GiphyPageSource(ApiSettings(base_url="https://api.giphy.com/v1"))

    await source.fetch_page(page_size=5, offset=0)

    assert route.called


@respx.mock
async def test_fetch_page_empty_data() -> None:
    trending_route().mock(return_value=httpx.Response(200, json={"data": []}))

    assert await make_source().fetch_page(page_size=20, offset=1000) == []


@respx.mock
async def test_fetch_page_missing_or_numeric_dimensions() -> None:
    payload = gif("a")
    del payload["images"]["fixed_height"]["width"]
    payload["images"]["fixed_height"]["height"] = 150
    trending_route().mock(return_value=httpx.Response(200, json={"data": [payload]}))

    records = await make_source().fetch_page(page_size=20, offset=0)

    assert records[0].width is None
    assert records[0].height == "150"


@respx.mock
async def test_fetch_page_http_error_status() -> None:
    trending_route().mock(return_value=httpx.Response(403, json={"message": "Invalid key"}))

    with pytest.raises(FetchFailed) as exc_info:
        await make_source().fetch_page(page_size=20, offset=0)
    assert exc_info.value.description == "HTTP 403"


@respx.mock
async def test_fetch_page_transport_error() -> None:
    trending_route().mock(side_effect=httpx.ConnectTimeout("timeout"))

    with pytest.raises(FetchFailed) as exc_info:
        await make_source().fetch_page(page_size=20, offset=0)
    assert exc_info.value.description == "timeout"


@respx.mock
async def test_fetch_page_invalid_json() -> None:
    trending_route().mock(return_value=httpx.Response(200, text="<html>"))

    with pytest.raises(FetchFailed) as exc_info:
        await make_source().fetch_page(page_size=20, offset=0)
    assert exc_info.value.description.startswith("Invalid response")


@respx.mock
async def test_fetch_page_unexpected_shape() -> None:
    trending_route().mock(
        return_value=httpx.Response(200, json={"data": [{"id": "a", "images": {}}]})
    )

    with pytest.raises(FetchFailed):
        await make_source().fetch_page(page_size=20, offset=0)


@pytest.mark.parametrize("status", [301, 302, 304])
async def test_fetch_page_redirect_status(status) -> None:
    with respx.mock:
        trending_route().mock(return_value=httpx.Response(status, json={"data": []}))

        with pytest.raises(FetchFailed) as exc_info:
            await make_source().fetch_page(page_size=20, offset=0)
    assert exc_info.value.description == f"HTTP {status}"
