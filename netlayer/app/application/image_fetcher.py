"""Image fetcher: cache-first, best-effort image loading.

The only signal to the caller is the success callback. Failures are turned
into an ImageFetchFailure outcome, logged at debug level and discarded on
purpose; callers that never see their callback fire have hit one of them.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Union

from loguru import logger

from netlayer.app.constants import IMAGE_STATUS_CEILING, MISSING_STATUS_FALLBACK, SERVICE_NAME
from netlayer.app.domain.url_builder import parse_absolute_url
from netlayer.app.ports.http_transport import HttpTransport, HttpTransportError, OutgoingRequest
from netlayer.app.ports.image_decoder import ImageDecoder
from netlayer.app.ports.response_cache import CachedResponse, CacheKey, ResponseCache

ImageCallback = Callable[[Any], None]


@dataclass(frozen=True)
class ImageFetched:
    image: Any
    from_cache: bool


@dataclass(frozen=True)
class ImageFetchFailure:
    url: str
    reason: str


ImageFetchOutcome = Union[ImageFetched, ImageFetchFailure]


def _log(event: str, **kwargs: Any) -> None:
    logger.bind(service_name=SERVICE_NAME, event=event, **kwargs).info("")


class ImageFetcher:
    """Fetches images through a shared ResponseCache; fire-on-success-only."""

    def __init__(
        self,
        transport: HttpTransport,
        cache: ResponseCache,
        decoder: ImageDecoder,
    ) -> None:
        self._transport = transport
        self._cache = cache
        self._decoder = decoder

    async def fetch_image(self, url: str, on_success: ImageCallback | None) -> None:
        outcome = await self.load(url)
        if isinstance(outcome, ImageFetchFailure):
            logger.debug("image fetch dropped for {}: {}", outcome.url, outcome.reason)
            return
        if on_success is not None:
            on_success(outcome.image)

    async def load(self, url: str) -> ImageFetchOutcome:
        """Resolve ``url`` to an image, cache first, without raising for fetch failures."""
        parsed = parse_absolute_url(url)
        if parsed is None:
            return ImageFetchFailure(url=url, reason="invalid url")

        key = CacheKey.for_request("GET", url)
        cached = self._cache.lookup(key)
        if cached is not None:
            image = self._decoder.decode(cached.content)
            if image is not None:
                _log("image_cache_hit", url=url)
                return ImageFetched(image=image, from_cache=True)

        request = OutgoingRequest(method="GET", url=url)
        try:
            response = await self._transport.send(request)
        except HttpTransportError as exc:
            return ImageFetchFailure(url=url, reason=f"transport: {exc.__cause__ or exc}")

        data = response.content
        if not data:
            return ImageFetchFailure(url=url, reason="no data")
        status = response.status_code if response.status_code is not None else MISSING_STATUS_FALLBACK
        if status >= IMAGE_STATUS_CEILING:
            return ImageFetchFailure(url=url, reason=f"status {status}")
        image = self._decoder.decode(data)
        if image is None:
            return ImageFetchFailure(url=url, reason="not an image")

        self._cache.store(
            key,
            CachedResponse(
                status_code=response.status_code,
                url=response.url,
                content=data,
                headers=dict(response.headers),
            ),
        )
        _log("image_fetched", url=url, status_code=status, size=len(data))
        return ImageFetched(image=image, from_cache=False)
