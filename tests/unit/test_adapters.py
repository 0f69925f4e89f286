"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
CausaDB Python client, a product of Garudex Labs

Tests for transport adapters.
"""

import json

import httpx
import pytest

from causadb.adapters.base import SDKRequest, SDKResponse, resource_path
from causadb.adapters.http import HttpAdapter
from causadb.adapters.mock import MockAdapter
from causadb.exceptions import ServerRequestError


class TestSDKResponse:
    @pytest.mark.parametrize("status,ok", [(200, True), (201, True), (299, True), (301, False), (404, False), (500, False)])
    def test_ok(self, status, ok):
        assert SDKResponse(status_code=status).ok is ok


class TestResourcePath:
    def test_plain_name(self):
        assert resource_path("models", "m1") == "/models/m1"

    def test_name_is_single_segment(self):
        assert resource_path("data", "a/b c") == "/data/a%2Fb%20c"


class TestMockAdapter:
    @pytest.mark.asyncio
    async def test_send_returns_matched_response(self):
        expected = SDKResponse(status_code=200, body={"ok": True}, elapsed_ms=0.5)
        adapter = MockAdapter(responses={("POST", "/models/m1"): expected})

        req = SDKRequest(method="post", path="/models/m1", headers={})
        result = await adapter.send(req)
        assert result is expected

    @pytest.mark.asyncio
    async def test_send_returns_404_for_unmocked(self):
        adapter = MockAdapter()
        result = await adapter.send(SDKRequest(method="GET", path="/unknown"))
        assert result.status_code == 404
        assert result.body == {"error": "not mocked"}

    @pytest.mark.asyncio
    async def test_add_response_replaces(self):
        adapter = MockAdapter()
        adapter.add_response("get", "/data", SDKResponse(status_code=500))
        adapter.add_response("GET", "/data", SDKResponse(status_code=200))
        result = await adapter.send(SDKRequest(method="GET", path="/data"))
        assert result.status_code == 200

    @pytest.mark.asyncio
    async def test_close_clears_state(self):
        adapter = MockAdapter(responses={("GET", "/x"): SDKResponse(status_code=200)})
        await adapter.send(SDKRequest(method="GET", path="/x"))
        await adapter.close()
        assert adapter.sent_requests == []
        assert adapter.is_connected is True  # mock is always "connected"


def _adapter_with(handler) -> HttpAdapter:
    return HttpAdapter(
        base_url="https://api.example.test/v1/",
        transport=httpx.MockTransport(handler),
    )


class TestHttpAdapter:
    def test_initialization_strips_trailing_slash(self):
        adapter = HttpAdapter(base_url="http://localhost:8000///")
        assert adapter.base_url == "http://localhost:8000"
        assert adapter.is_connected is False

    @pytest.mark.asyncio
    async def test_send_joins_base_path_and_headers(self):
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["url"] = str(request.url)
            seen["token"] = request.headers.get("token")
            seen["accept"] = request.headers.get("accept")
            return httpx.Response(200, json={"models": []})

        adapter = _adapter_with(handler)
        response = await adapter.send(
            SDKRequest(method="GET", path="/models", headers={"token": "tok"})
        )
        await adapter.close()

        assert seen["url"] == "https://api.example.test/v1/models"
        assert seen["token"] == "tok"
        assert seen["accept"] == "application/json"
        assert response.status_code == 200
        assert response.body == {"models": []}

    @pytest.mark.asyncio
    async def test_send_posts_json_body(self):
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["body"] = request.read()
            return httpx.Response(201)

        adapter = _adapter_with(handler)
        response = await adapter.send(
            SDKRequest(method="POST", path="/data/d1", body={"data": [{"x": 1}]})
        )

        assert json.loads(seen["body"]) == {"data": [{"x": 1}]}
        assert response.status_code == 201
        assert response.body is None

    @pytest.mark.asyncio
    async def test_error_status_is_returned_not_raised(self):
        adapter = _adapter_with(lambda request: httpx.Response(500, text="boom"))
        response = await adapter.send(SDKRequest(method="GET", path="/data"))
        assert response.status_code == 500
        assert response.ok is False
        assert response.body == "boom"

    @pytest.mark.asyncio
    async def test_invalid_json_on_success_raises(self):
        adapter = _adapter_with(lambda request: httpx.Response(200, text="not json"))
        with pytest.raises(ServerRequestError) as exc_info:
            await adapter.send(SDKRequest(method="GET", path="/data"))
        assert exc_info.value.status_code == 200

    @pytest.mark.asyncio
    async def test_transport_error_raises_server_request_error(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        adapter = _adapter_with(handler)
        with pytest.raises(ServerRequestError) as exc_info:
            await adapter.send(SDKRequest(method="GET", path="/account"))
        assert isinstance(exc_info.value.__cause__, httpx.ConnectError)
        assert exc_info.value.status_code is None

    @pytest.mark.asyncio
    async def test_non_utf8_error_body_is_returned_as_text(self):
        adapter = _adapter_with(
            lambda request: httpx.Response(500, content=b"<html>caf\xe9</html>")
        )
        response = await adapter.send(SDKRequest(method="GET", path="/models"))
        assert response.status_code == 500
        assert response.ok is False
        assert response.body == "<html>caf\ufffd</html>"

    @pytest.mark.asyncio
    async def test_non_utf8_success_body_raises(self):
        adapter = _adapter_with(lambda request: httpx.Response(200, content=b"caf\xe9"))
        with pytest.raises(ServerRequestError) as exc_info:
            await adapter.send(SDKRequest(method="GET", path="/models"))
        assert exc_info.value.status_code == 200

    @pytest.mark.asyncio
    async def test_non_ascii_header_raises_server_request_error(self):
        calls = []

        def handler(request: httpx.Request) -> httpx.Response:
            calls.append(request)
            return httpx.Response(200, json={})

        adapter = _adapter_with(handler)
        with pytest.raises(ServerRequestError):
            await adapter.send(
                SDKRequest(method="GET", path="/account", headers={"token": "töken"})
            )
        assert calls == []

    @pytest.mark.asyncio
    async def test_close(self):
        adapter = _adapter_with(lambda request: httpx.Response(200, json={}))
        await adapter.send(SDKRequest(method="GET", path="/account"))
        assert adapter.is_connected is True
        await adapter.close()
        assert adapter.is_connected is False
