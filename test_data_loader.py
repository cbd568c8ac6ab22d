"""
Test data loaders

The HTTP loader runs against an in-process aiohttp server; the file loader
against temporary files.
"""
import json

import pytest
from aiohttp import web
from aiohttp.test_utils import TestServer as AiohttpServer

from alert_widget.data_loader import (
    FileDataLoader,
    HttpDataLoader,
    create_loader,
    extract_events
)
from alert_widget.exceptions import DataLoadError

from conftest import AUTH_EVENT


def build_app(status: int = 200, body: str = None) -> web.Application:
    payload = body if body is not None else json.dumps({"Events": [AUTH_EVENT]})

    async def handler(request):
        return web.Response(status=status, text=payload, content_type="application/json")

    app = web.Application()
    app.router.add_get("/data.json", handler)
    return app


# =============================================================================
# HTTP LOADER
# =============================================================================

class TestHttpDataLoader:

    @pytest.mark.asyncio
    async def test_fetch_success(self):
        async with AiohttpServer(build_app()) as server:
            loader = HttpDataLoader(str(server.make_url("/data.json")))
            document = await loader.fetch()

        assert document == {"Events": [AUTH_EVENT]}

    @pytest.mark.asyncio
    async def test_http_error_status(self):
        async with AiohttpServer(build_app(status=500, body="boom")) as server:
            loader = HttpDataLoader(str(server.make_url("/data.json")))
            with pytest.raises(DataLoadError, match="HTTP 500"):
                await loader.fetch()

    @pytest.mark.asyncio
    async def test_missing_route(self):
        async with AiohttpServer(build_app()) as server:
            loader = HttpDataLoader(str(server.make_url("/missing.json")))
            with pytest.raises(DataLoadError, match="HTTP 404"):
                await loader.fetch()

    @pytest.mark.asyncio
    async def test_invalid_json(self):
        async with AiohttpServer(build_app(body="not json")) as server:
            loader = HttpDataLoader(str(server.make_url("/data.json")))
            with pytest.raises(DataLoadError, match="Invalid JSON"):
                await loader.fetch()

    @pytest.mark.asyncio
    async def test_document_without_events(self):
        async with AiohttpServer(build_app(body=json.dumps({"events": []}))) as server:
            loader = HttpDataLoader(str(server.make_url("/data.json")))
            with pytest.raises(DataLoadError, match="Events array"):
                await loader.fetch()


# =============================================================================
# FILE LOADER
# =============================================================================

class TestFileDataLoader:

    @pytest.mark.asyncio
    async def test_fetch_success(self, tmp_path):
        path = tmp_path / "data.json"
        path.write_text(json.dumps({"Events": [AUTH_EVENT]}), encoding="utf-8")

        document = await FileDataLoader(path).fetch()

        assert document["Events"] == [AUTH_EVENT]

    @pytest.mark.asyncio
    async def test_missing_file(self, tmp_path):
        with pytest.raises(DataLoadError, match="Cannot read data file"):
            await FileDataLoader(tmp_path / "missing.json").fetch()

    @pytest.mark.asyncio
    async def test_invalid_json(self, tmp_path):
        path = tmp_path / "data.json"
        path.write_text("{", encoding="utf-8")

        with pytest.raises(DataLoadError, match="Invalid JSON"):
            await FileDataLoader(path).fetch()

    @pytest.mark.asyncio
    async def test_nesting_too_deep(self, tmp_path):
        path = tmp_path / "data.json"
        path.write_text('{"Events": ' + "[" * 100000 + "]" * 100000 + "}", encoding="utf-8")

        with pytest.raises(DataLoadError, match="Invalid JSON"):
            await FileDataLoader(path).fetch()

# =============================================================================
# HELPERS
# =============================================================================

class TestExtractEvents:

    def test_returns_events(self):
        assert extract_events({"Events": [1, 2]}) == [1, 2]

    @pytest.mark.parametrize("document", [[], "Events", {"Events": {}}, {"Events": None}, {}])
    def test_rejects_bad_documents(self, document):
        with pytest.raises(DataLoadError):
            extract_events(document)


class TestCreateLoader:

    def test_http_source(self):
        loader = create_loader("https://alerts.example.com/data.json")
        assert isinstance(loader, HttpDataLoader)
        assert loader.url == "https://alerts.example.com/data.json"

    def test_file_source(self):
        loader = create_loader("assets/data.json")
        assert isinstance(loader, FileDataLoader)
        assert str(loader.path) == "assets/data.json"
