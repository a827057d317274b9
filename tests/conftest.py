"""Shared fixtures: fake remote APIs on top of httpx.MockTransport."""

import asyncio
from typing import Any, Optional

import httpx
import pytest

from core.http_client import open_json_client


class FakeApi:
    """A remote JSON API answering from a path -> body table.

    A body may be plain JSON data (served with 200) or a ready httpx.Response.
    Unknown paths answer 404.  Every request is recorded.
    """

    def __init__(self, base_url: str, routes: Optional[dict[str, Any]] = None) -> None:
        self.base_url = base_url
        self.routes = dict(routes or {})
        self.requests: list[httpx.Request] = []

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        body = self.routes.get(request.url.path)
        if body is None:
            return httpx.Response(404, json={"detail": "not found"})
        if isinstance(body, httpx.Response):
            return body
        return httpx.Response(200, json=body)

    def provider(self):
        return open_json_client(
            self.base_url,
            headers={"User-Agent": "weather-tool/1.0"},
            transport=httpx.MockTransport(self.handler),
        )

    def call(self, tool, *args):
        """Run a core coroutine `tool(client, *args)` on a fresh connection."""

        async def invoke():
            async with self.provider() as client:
                return await tool(client, *args)

        return asyncio.run(invoke())


@pytest.fixture
def weather_api() -> FakeApi:
    return FakeApi("https://api.weather.gov")


@pytest.fixture
def logistics_api() -> FakeApi:
    return FakeApi("https://gocodeart.com")
