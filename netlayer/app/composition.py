"""Composition root: build concrete dependencies for the request executor and image fetcher.

Composition may: import concrete classes, call factories, store interface types.
"""
from __future__ import annotations

from netlayer.app.application.image_fetcher import ImageFetcher
from netlayer.app.application.request_executor import RequestExecutor
from netlayer.app.config.settings import Settings
from netlayer.app.infrastructure.cache.factory import shared_response_cache
from netlayer.app.infrastructure.http.factory import create_http_transport
from netlayer.app.infrastructure.imaging.opencv_decoder import OpenCvImageDecoder
from netlayer.app.ports.http_transport import HttpTransport
from netlayer.app.ports.image_decoder import ImageDecoder
from netlayer.app.ports.response_cache import ResponseCache


class NetworkDependencies:
    """Holds the wired executor and image fetcher."""

    def __init__(
        self,
        *,
        settings: Settings,
        transport: HttpTransport | None = None,
        cache: ResponseCache | None = None,
        decoder: ImageDecoder | None = None,
    ) -> None:
        self._settings = settings
        self._transport = transport if transport is not None else create_http_transport(settings)
        self._cache = cache if cache is not None else shared_response_cache(settings)

        default_headers: dict[str, str] | None = None
        if settings.default_user_agent:
            default_headers = {"User-Agent": settings.default_user_agent}

        self._request_executor = RequestExecutor(
            self._transport,
            default_headers=default_headers,
            log_http_traffic=settings.log_http_traffic,
        )
        self._image_fetcher = ImageFetcher(
            self._transport,
            self._cache,
            decoder if decoder is not None else OpenCvImageDecoder(),
        )

    @property
    def settings(self) -> Settings:
        return self._settings

    @property
    def transport(self) -> HttpTransport:
        return self._transport

    @property
    def cache(self) -> ResponseCache:
        return self._cache

    @property
    def request_executor(self) -> RequestExecutor:
        return self._request_executor

    @property
    def image_fetcher(self) -> ImageFetcher:
        return self._image_fetcher


def create_network_dependencies(settings: Settings | None = None, **overrides) -> NetworkDependencies:
    return NetworkDependencies(settings=settings or Settings(), **overrides)
