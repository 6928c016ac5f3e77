"""HttpxTransport against httpx.MockTransport, driven through the executor."""
from __future__ import annotations

import httpx
import pytest
from pydantic import BaseModel

from netlayer.app.application.request_executor import RequestExecutor
from netlayer.app.domain.errors import StatusCodeError, TransportFailureError
from netlayer.app.domain.models import ApiRoute, Success
from netlayer.app.infrastructure.http.httpx_transport import HttpxTransport
from netlayer.app.ports.http_transport import HttpTransportError, OutgoingRequest


class PaymentMethod(BaseModel):
    paymentMethodId: str
    paymentTypeId: str


class _Recorder:
    def __init__(self, response: httpx.Response) -> None:
        self.response = response
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.response


@pytest.mark.asyncio
async def test_post_request_goes_out_with_method_headers_and_body():
    recorder = _Recorder(httpx.Response(200, json={"payment_method_id": "visa", "payment_type_id": "credit_card"}))
    executor = RequestExecutor(HttpxTransport(httpx.MockTransport(recorder)))
    route = ApiRoute(
        scheme="https",
        host="api.example.com",
        path="/v1/payment_methods",
        method="POST",
        parameters=[("site_id", "MLA")],
        headers={"X-Product-Id": "cardform"},
        body=b'{"bin":"450995"}',
    )

    result = await executor.execute(route, PaymentMethod)

    assert result == Success(PaymentMethod(paymentMethodId="visa", paymentTypeId="credit_card"))
    sent = recorder.requests[0]
    assert sent.method == "POST"
    assert str(sent.url) == "https://api.example.com/v1/payment_methods?site_id=MLA"
    assert sent.headers["X-Product-Id"] == "cardform"
    assert sent.content == b'{"bin":"450995"}'


@pytest.mark.asyncio
async def test_get_request_is_sent_without_body():
    recorder = _Recorder(httpx.Response(404, json={"message": "not found"}))
    executor = RequestExecutor(HttpxTransport(httpx.MockTransport(recorder)))
    route = ApiRoute(scheme="https", host="api.example.com", path="/v1/cards", body=b"ignored")

    result = await executor.execute(route, PaymentMethod)

    assert result.error == StatusCodeError(404, "not found", None)
    assert recorder.requests[0].content == b""


@pytest.mark.asyncio
async def test_httpx_connect_error_becomes_transport_failure():
    def _refuse(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    executor = RequestExecutor(HttpxTransport(httpx.MockTransport(_refuse)))
    route = ApiRoute(scheme="https", host="api.example.com", path="/v1/cards")

    result = await executor.execute(route, PaymentMethod)

    assert isinstance(result.error, TransportFailureError)
    assert isinstance(result.error.underlying, httpx.ConnectError)
    assert result.error.error_code == 0


@pytest.mark.asyncio
async def test_transport_raises_port_error_with_httpx_cause():
    def _timeout(request: httpx.Request) -> httpx.Response:
        raise httpx.ReadTimeout("read timed out", request=request)

    transport = HttpxTransport(httpx.MockTransport(_timeout))

    with pytest.raises(HttpTransportError) as excinfo:
        await transport.send(OutgoingRequest(method="GET", url="https://api.example.com/"))

    assert isinstance(excinfo.value.__cause__, httpx.ReadTimeout)


@pytest.mark.asyncio
async def test_response_adapter_exposes_status_content_and_url():
    recorder = _Recorder(httpx.Response(201, content=b"\x89PNG", headers={"Content-Type": "image/png"}))
    transport = HttpxTransport(httpx.MockTransport(recorder))

    response = await transport.send(OutgoingRequest(method="GET", url="https://cdn.example.com/a.png"))

    assert response.status_code == 201
    assert response.content == b"\x89PNG"
    assert response.url == "https://cdn.example.com/a.png"
    assert response.headers["content-type"] == "image/png"
