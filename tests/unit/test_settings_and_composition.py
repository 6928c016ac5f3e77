from __future__ import annotations

import asyncio

from netlayer.app.composition import create_network_dependencies
from netlayer.app.config.settings import Settings
from netlayer.app.domain.models import ApiRoute
from netlayer.app.infrastructure.cache.in_memory_cache import InMemoryResponseCache
from netlayer.app.infrastructure.http.httpx_transport import HttpxTransport
from netlayer.app.infrastructure.imaging.opencv_decoder import OpenCvImageDecoder
from tests.fakes import CountingCache, FakeResponse, FakeTransport


def test_settings_defaults(monkeypatch):
    for name in ("LOG_HTTP_TRAFFIC", "DEFAULT_USER_AGENT", "IMAGE_CACHE_MAX_ENTRIES"):
        monkeypatch.delenv(name, raising=False)

    settings = Settings()

    assert settings.log_http_traffic is False
    assert settings.default_user_agent == ""
    assert settings.image_cache_max_entries == 256


def test_settings_read_environment(monkeypatch):
    monkeypatch.setenv("LOG_HTTP_TRAFFIC", "true")
    monkeypatch.setenv("DEFAULT_USER_AGENT", "CardForm/1.0")
    monkeypatch.setenv("IMAGE_CACHE_MAX_ENTRIES", "10")

    settings = Settings()

    assert settings.log_http_traffic is True
    assert settings.default_user_agent == "CardForm/1.0"
    assert settings.image_cache_max_entries == 10


def test_composition_wires_user_agent_and_shared_transport():
    transport = FakeTransport(FakeResponse(500, b""))
    cache = CountingCache()
    deps = create_network_dependencies(
        Settings(DEFAULT_USER_AGENT="CardForm/1.0", LOG_HTTP_TRAFFIC=True),
        transport=transport,
        cache=cache,
    )

    asyncio.run(deps.request_executor.execute(ApiRoute(scheme="https", host="api.example.com", path="/"), dict))

    assert deps.cache is cache
    assert transport.sent[0].headers == {"User-Agent": "CardForm/1.0"}


def test_composition_defaults_to_httpx_transport():
    deps = create_network_dependencies(Settings(), cache=CountingCache())

    request = deps.request_executor.build_request(ApiRoute(scheme="https", host="api.example.com", path="/v1"))

    assert request is not None
    assert request.headers == {}
    assert isinstance(deps.transport, HttpxTransport)


def test_composition_keeps_injected_empty_collaborators():
    transport = FakeTransport()
    cache = InMemoryResponseCache(max_entries=4)
    decoder = OpenCvImageDecoder()

    deps = create_network_dependencies(Settings(), transport=transport, cache=cache, decoder=decoder)

    assert len(cache) == 0
    assert deps.cache is cache
    assert deps.transport is transport
    assert deps.image_fetcher._decoder is decoder
