import asyncio
import io
import pytest
import pytest_asyncio
from typing import List, NamedTuple
from aiohttp import web
from aiohttp.test_utils import TestServer
from multidict import CIMultiDict
from medium_sdk import MediumClient


class RecordedRequest(NamedTuple):
    method: str
    path: str
    headers: CIMultiDict
    body: bytes


class RecordingServer:
    """Local HTTP server that records requests and replays a canned response."""

    def __init__(self):
        self.requests: List[RecordedRequest] = []
        self.status = 200
        self.body = '{"data": null}'
        self.delay = 0.0
        self.url = ""

    @property
    def last(self) -> RecordedRequest:
        return self.requests[-1]

    async def handle(self, request: web.Request) -> web.Response:
        body = await request.read()
        self.requests.append(RecordedRequest(
            method=request.method,
            path=request.path,
            headers=request.headers.copy(),
            body=body
        ))
        if self.delay:
            await asyncio.sleep(self.delay)
        return web.Response(status=self.status, text=self.body, content_type="application/json")


class FakeFS:
    """File system that serves the same bytes for every path."""

    def __init__(self, contents: bytes = b"contents"):
        self.contents = contents
        self.opened = []

    def open(self, path):
        self.opened.append(path)
        return io.BytesIO(self.contents)


class BrokenFS:
    def open(self, path):
        raise FileNotFoundError(2, "No such file or directory", path)


@pytest_asyncio.fixture
async def medium_server():
    """Provide a running recording server."""
    recorder = RecordingServer()
    app = web.Application()
    app.router.add_route("*", "/{tail:.*}", recorder.handle)

    server = TestServer(app)
    await server.start_server()
    recorder.url = f"http://{server.host}:{server.port}"

    yield recorder

    await server.close()


@pytest.fixture
def fake_fs():
    return FakeFS()


@pytest.fixture
def client(medium_server, fake_fs):
    """Provide a client pointed at the recording server."""
    return MediumClient(
        client_id="clientId",
        client_secret="clientSecret",
        access_token="token",
        host=medium_server.url,
        fs=fake_fs
    )


@pytest.fixture
def mock_user():
    return {
        "id": "5303d74c64f66366f00cb9b2a94f3251bf5",
        "username": "majelbstoat",
        "name": "Jamie Talbot",
        "url": "https://medium.com/@majelbstoat",
        "imageUrl": "https://images.medium.com/0*fkfQiTzT7TlUGGyI.png"
    }


@pytest.fixture
def mock_post():
    return {
        "id": "e6f36a",
        "title": "Liverpool FC",
        "authorId": "5303d74c64f66366f00cb9b2a94f3251bf5",
        "tags": ["football", "sport", "Liverpool"],
        "url": "https://medium.com/@majelbstoat/liverpool-fc-e6f36a",
        "canonicalUrl": "http://jamietalbot.com/posts/liverpool-fc",
        "publishStatus": "public",
        "publishedAt": 1442286338435,
        "license": "all-rights-reserved",
        "licenseUrl": "https://medium.com/policy/9db0094a1e0f"
    }


@pytest.fixture
def broken_fs():
    return BrokenFS()
