from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING, Any

import pytest
from aiohttp import web

from handlers.async_comm import AsyncCommError, AsyncCommInvalidContentTypeError, AsyncCommTimeoutError, AsyncHttp

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator


async def _echo(request: web.Request) -> web.Response:
    body: Any = await request.json()
    return web.json_response({"received": body, "auth": request.headers.get("Authorization")})


async def _rate_limited(request: web.Request) -> web.Response:
    _ = request
    return web.json_response({"error": "slow down"}, status=429)


async def _plain(request: web.Request) -> web.Response:
    _ = request
    return web.Response(text="进球", content_type="text/plain")


async def _binary(request: web.Request) -> web.Response:
    _ = request
    return web.Response(body=b"\x00\x01", content_type="application/octet-stream")


async def _broken_json(request: web.Request) -> web.Response:
    _ = request
    return web.Response(text="{not json", content_type="application/json")


async def _slow(request: web.Request) -> web.Response:
    _ = request
    await asyncio.sleep(0.5)
    return web.json_response({})


@pytest.fixture
async def base_url() -> AsyncGenerator[str]:
    app = web.Application()
    app.router.add_post("/echo", _echo)
    app.router.add_post("/rate-limited", _rate_limited)
    app.router.add_get("/plain", _plain)
    app.router.add_get("/binary", _binary)
    app.router.add_get("/broken-json", _broken_json)
    app.router.add_get("/slow", _slow)

    runner = web.AppRunner(app)
    await runner.setup()
    site = web.TCPSite(runner, "127.0.0.1", 0)
    await site.start()
    host, port = runner.addresses[0][:2]
    yield f"http://{host}:{port}"
    await runner.cleanup()


@pytest.fixture
async def http() -> AsyncGenerator[AsyncHttp]:
    client = AsyncHttp()
    yield client
    await client.close()


@pytest.mark.asyncio
async def test_session_is_created_lazily(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.DEBUG)

    http = AsyncHttp()
    assert not http.is_open
    assert not any("session initialized" in rec.message for rec in caplog.records)

    _ = http.session
    assert http.is_open
    assert any("AsyncHttp session initialized" in rec.message for rec in caplog.records)
    await http.close()


@pytest.mark.asyncio
async def test_reenter_after_close_initializes_session(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.DEBUG)

    http = AsyncHttp()
    async with http:
        assert http.is_open
    assert not http.is_open

    caplog.clear()
    async with http:
        pass

    assert any("AsyncHttp session initialized" in rec.message for rec in caplog.records)


@pytest.mark.asyncio
async def test_close_without_session_is_noop() -> None:
    http = AsyncHttp()

    await http.close()

    assert not http.is_open


@pytest.mark.asyncio
async def test_post_json(http: AsyncHttp, base_url: str) -> None:
    result: Any = await http.post(
        url=f"{base_url}/echo", data={"model": "deepseek-chat"}, headers={"Authorization": "Bearer k"}
    )

    assert result == {"received": {"model": "deepseek-chat"}, "auth": "Bearer k"}


@pytest.mark.asyncio
async def test_get_plain_text(http: AsyncHttp, base_url: str) -> None:
    assert await http.get(url=f"{base_url}/plain") == "进球"


@pytest.mark.asyncio
async def test_error_status_is_reported(http: AsyncHttp, base_url: str) -> None:
    with pytest.raises(AsyncCommError) as exc_info:
        await http.post(url=f"{base_url}/rate-limited", data={})

    assert exc_info.value.status == 429
    assert "429" in str(exc_info.value)


@pytest.mark.asyncio
async def test_unknown_content_type(http: AsyncHttp, base_url: str) -> None:
    with pytest.raises(AsyncCommInvalidContentTypeError):
        await http.get(url=f"{base_url}/binary")


@pytest.mark.asyncio
async def test_undecodable_json(http: AsyncHttp, base_url: str) -> None:
    with pytest.raises(AsyncCommInvalidContentTypeError):
        await http.get(url=f"{base_url}/broken-json")


@pytest.mark.asyncio
async def test_timeout(http: AsyncHttp, base_url: str) -> None:
    with pytest.raises(AsyncCommTimeoutError):
        await http.get(url=f"{base_url}/slow", total_timeout=0.05)


@pytest.mark.asyncio
async def test_unreachable_server(http: AsyncHttp) -> None:
    with pytest.raises(AsyncCommError):
        await http.get(url="http://127.0.0.1:9/unreachable", total_timeout=2.0)
