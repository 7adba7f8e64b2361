"""Fixtures for module tests against real local HTTP servers."""

import socketserver
import threading
from collections.abc import AsyncGenerator, Awaitable, Callable, Generator
from typing import TypeAlias

import pytest
from aiohttp import web
from aiohttp.test_utils import TestServer

ServerFactory: TypeAlias = Callable[[int], Awaitable[str]]


@pytest.fixture
async def status_server() -> AsyncGenerator[ServerFactory]:
    """Start servers answering every GET with a fixed status code."""
    servers: list[TestServer] = []

    async def _start(status: int) -> str:
        async def handler(request: web.Request) -> web.Response:
            return web.Response(status=status, text=f"status {status}")

        app = web.Application()
        app.router.add_get("/", handler)
        server = TestServer(app)
        await server.start_server()
        servers.append(server)
        return str(server.make_url("/"))

    yield _start

    for server in servers:
        await server.close()


class _HangUpHandler(socketserver.BaseRequestHandler):
    """Accepts a connection and closes it without answering."""

    def handle(self) -> None:
        pass


@pytest.fixture
def closing_server_url() -> Generator[str]:
    """URL of a server that drops every connection immediately."""
    with socketserver.ThreadingTCPServer(("127.0.0.1", 0), _HangUpHandler) as server:
        thread = threading.Thread(target=server.serve_forever, daemon=True)
        thread.start()
        host, port = server.server_address[:2]
        yield f"http://{host}:{port}/"
        server.shutdown()
        thread.join()
