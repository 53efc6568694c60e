"""GIPHY trending endpoint page source."""

import logging
from typing import List, Optional, Union

import httpx
from pydantic import BaseModel, ValidationError

from gifload.config import ApiSettings
from gifload.domain import FetchFailed, RawRecord

logger = logging.getLogger("GifLoad.GiphyPageSource")

TRENDING_PATH = "gifs/trending"


class ImageInfo(BaseModel):
    url: str
    width: Optional[Union[str, int]] = None
    height: Optional[Union[str, int]] = None


class Images(BaseModel):
    fixed_height: ImageInfo


class GifData(BaseModel):
    id: str
    images: Images


class GiphyResponse(BaseModel):
    data: List[GifData]


def _as_text(value: Optional[Union[str, int]]) -> Optional[str]:
    return None if value is None else str(value)


class GiphyPageSource:
    """Fetches pages of trending GIFs over HTTP."""

    def __init__(self, settings: ApiSettings):
        self._settings = settings
        # httpx joins relative paths onto the base URL only with a trailing slash
        self._base_url = settings.base_url.rstrip("/") + "/"

    def _make_client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=self._base_url,
            timeout=httpx.Timeout(
                self._settings.read_timeout,
                connect=self._settings.connect_timeout,
            ),
        )

    async def fetch_page(self, page_size: int, offset: int) -> List[RawRecord]:
        params = {
            "api_key": self._settings.api_key,
            "limit": page_size,
            "offset": offset,
        }
        logger.debug(f"GET {TRENDING_PATH} limit={page_size} offset={offset}")

        try:
            async with self._make_client() as client:
                resp = await client.get(TRENDING_PATH, params=params)
        except httpx.HTTPError as e:
            logger.warning(f"Trending request failed: {type(e).__name__}: {e}")
            raise FetchFailed(str(e)) from e

        if not resp.is_success:
            raise FetchFailed(f"HTTP {resp.status_code}")

        try:
            payload = GiphyResponse.model_validate(resp.json())
        except (ValueError, ValidationError) as e:
            logger.warning(f"Unparseable trending payload: {e}")
            raise FetchFailed(f"Invalid response: {e}") from e

        return [
            RawRecord(
                id=gif.id,
                url=gif.images.fixed_height.url,
                width=_as_text(gif.images.fixed_height.width),
                height=_as_text(gif.images.fixed_height.height),
            )
            for gif in payload.data
        ]
