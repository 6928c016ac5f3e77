from __future__ import annotations

from typing import Any, Mapping, TypeVar

from loguru import logger

from netlayer.app.constants import (
    BODY_CARRYING_METHODS,
    SERVICE_NAME,
    SUCCESS_STATUS_MAX,
    SUCCESS_STATUS_MIN,
)
from netlayer.app.domain.decoding import decode_body, extract_error_fields, pretty_json
from netlayer.app.domain.errors import (
    InvalidResponseShapeError,
    InvalidURLError,
    NoResponseDataError,
    StatusCodeError,
    TransportFailureError,
)
from netlayer.app.domain.models import Failure, Result, Success
from netlayer.app.domain.url_builder import compose_url
from netlayer.app.ports.http_transport import HttpTransport, HttpTransportError, OutgoingRequest
from netlayer.app.ports.router import Router

T = TypeVar("T")


def _log(event: str, **kwargs: Any) -> None:
    logger.bind(service_name=SERVICE_NAME, event=event, **kwargs).info("")


def method_carries_body(method: str) -> bool:
    """Only POST requests carry the router body; the comparison is exact (case-sensitive)."""
    return method in BODY_CARRYING_METHODS


class RequestExecutor:
    """
    Performs one typed request per call and resolves it to exactly one Result.

    Holds no per-call state; every call goes out on a fresh transport session.
    Nothing is retried: the caller owns retry and backoff. Status codes outside
    200-299 all map to StatusCodeError; a 2xx body that does not decode into
    the target type fails with the raw json/pydantic error, not a NetworkError.
    """

    def __init__(
        self,
        transport: HttpTransport,
        *,
        default_headers: Mapping[str, str] | None = None,
        log_http_traffic: bool = False,
    ) -> None:
        self._transport = transport
        self._default_headers = dict(default_headers) if default_headers else {}
        self._log_http_traffic = log_http_traffic

    def build_request(self, router: Router) -> OutgoingRequest | None:
        """Compose the outgoing request, or None when the URL is invalid."""
        url = compose_url(router)
        if url is None:
            return None

        headers = dict(self._default_headers)
        if router.headers:
            for name, value in router.headers.items():
                # Drop any default spelled with different case so the router value wins.
                for existing in [h for h in headers if h.lower() == name.lower()]:
                    del headers[existing]
                headers[name] = value

        body = router.body if method_carries_body(router.method) else None
        return OutgoingRequest(method=router.method, url=str(url), headers=headers, body=body)

    async def execute(self, router: Router, target: type[T]) -> Result[T]:
        request = self.build_request(router)
        if request is None:
            _log("request_invalid_url", scheme=router.scheme, host=router.host, path=router.path)
            return Failure(InvalidURLError())

        if self._log_http_traffic:
            logger.debug("HTTP request: {}\nParams: {}", request.url, pretty_json(router.body))

        try:
            response = await self._transport.send(request)
        except HttpTransportError as exc:
            underlying = exc.__cause__ or exc
            logger.warning("transport failure for {} {}: {}", request.method, request.url, underlying)
            return Failure(TransportFailureError(underlying))

        data = response.content
        if data is None:
            return Failure(NoResponseDataError())
        status = response.status_code
        if status is None:
            return Failure(InvalidResponseShapeError())

        if self._log_http_traffic:
            logger.debug("HTTP response: {}\nParams: {}", response.url, pretty_json(data))

        if not SUCCESS_STATUS_MIN <= status <= SUCCESS_STATUS_MAX:
            message, user_message = extract_error_fields(data)
            _log("request_status_error", url=request.url, status_code=status)
            return Failure(StatusCodeError(status, message, user_message))

        try:
            value = decode_body(data, target)
        except (ValueError, RecursionError) as exc:
            # json.JSONDecodeError and pydantic.ValidationError are both ValueErrors;
            # json raises RecursionError on deeply nested bodies.
            logger.warning("response decode failed for {}: {}", request.url, exc)
            return Failure(exc)
        return Success(value)
