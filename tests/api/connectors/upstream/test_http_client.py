"""Testes do cliente HTTP do upstream (httpx.MockTransport)."""

from __future__ import annotations

from collections.abc import AsyncIterator, Callable
from contextlib import asynccontextmanager

import httpx
import pytest

from api.connectors.upstream.http_client import UpstreamHttpClient, create_upstream_client
from config.settings import UpstreamSettings
from utils.errors import UpstreamNotFoundError, UpstreamUnavailableError

BASE_URL = "https://upstream.test/v1/secret"


@asynccontextmanager
async def _build_client(
    handler: Callable[[httpx.Request], httpx.Response],
    *,
    api_key: str = "secret-key",
) -> AsyncIterator[UpstreamHttpClient]:
    settings = UpstreamSettings(base_url=BASE_URL, api_key=api_key)
    async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as http_client:
        yield UpstreamHttpClient(settings, http_client=http_client)


class TestListFiles:
    """Testes para list_files."""

    @pytest.mark.asyncio
    async def test_returns_file_names_and_sends_credential(self) -> None:
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json={"files": ["test1.csv", "test2.csv"]})

        async with _build_client(handler) as client:
            assert await client.list_files() == ["test1.csv", "test2.csv"]

        assert str(seen[0].url) == f"{BASE_URL}/files"
        assert seen[0].headers["Authorization"] == "secret-key"

    @pytest.mark.asyncio
    async def test_empty_listing(self) -> None:
        async with _build_client(lambda request: httpx.Response(200, json={"files": []})) as client:
            assert await client.list_files() == []

    @pytest.mark.asyncio
    @pytest.mark.parametrize("status_code", [401, 404, 500, 503])
    async def test_error_status_is_unavailable(self, status_code: int) -> None:
        async with _build_client(lambda request: httpx.Response(status_code)) as client:
            with pytest.raises(UpstreamUnavailableError) as exc_info:
                await client.list_files()

        assert exc_info.value.status_code == status_code

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "response",
        [
            httpx.Response(200, text="not json"),
            httpx.Response(200, json=["a.csv"]),
            httpx.Response(200, json={"files": "a.csv"}),
            httpx.Response(200, json={"files": [1, 2]}),
            httpx.Response(200, json={}),
        ],
    )
    async def test_malformed_payload_is_unavailable(self, response: httpx.Response) -> None:
        async with _build_client(lambda request: response) as client:
            with pytest.raises(UpstreamUnavailableError):
                await client.list_files()

    @pytest.mark.asyncio
    async def test_transport_error_is_unavailable(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        async with _build_client(handler) as client:
            with pytest.raises(UpstreamUnavailableError) as exc_info:
                await client.list_files()

        assert isinstance(exc_info.value.__cause__, httpx.ConnectError)

    @pytest.mark.asyncio
    async def test_non_ascii_credential_is_unavailable(self) -> None:
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json={"files": []})

        async with _build_client(handler, api_key="chave-ç") as client:
            with pytest.raises(UpstreamUnavailableError) as exc_info:
                await client.list_files()

        assert isinstance(exc_info.value.__cause__, UnicodeEncodeError)
        assert seen == []


class TestFetchFile:
    """Testes para fetch_file."""

    @pytest.mark.asyncio
    async def test_returns_raw_body(self) -> None:
        body = "file,text,number,hex\ntest1.csv,example,1234,1234567890abcdef1234567890abcdef"
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, text=body, headers={"Content-Type": "text/csv"})

        async with _build_client(handler) as client:
            assert await client.fetch_file("test1.csv") == body

        assert str(seen[0].url) == f"{BASE_URL}/file/test1.csv"
        assert seen[0].headers["Authorization"] == "secret-key"

    @pytest.mark.asyncio
    async def test_name_is_encoded_as_single_segment(self) -> None:
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, text="header")

        async with _build_client(handler) as client:
            await client.fetch_file("dir/my file.csv")

        assert seen[0].url.raw_path == b"/v1/secret/file/dir%2Fmy%20file.csv"

    @pytest.mark.asyncio
    async def test_404_is_not_found(self) -> None:
        async with _build_client(
            lambda request: httpx.Response(404, json={"error": "nope"})
        ) as client:
            with pytest.raises(UpstreamNotFoundError) as exc_info:
                await client.fetch_file("missing.csv")

        assert exc_info.value.status_code == 404

    @pytest.mark.asyncio
    @pytest.mark.parametrize("status_code", [400, 401, 500, 502])
    async def test_other_error_status_is_unavailable(self, status_code: int) -> None:
        async with _build_client(lambda request: httpx.Response(status_code)) as client:
            with pytest.raises(UpstreamUnavailableError):
                await client.fetch_file("a.csv")

    @pytest.mark.asyncio
    async def test_timeout_is_unavailable(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ReadTimeout("timed out", request=request)

        async with _build_client(handler) as client:
            with pytest.raises(UpstreamUnavailableError):
                await client.fetch_file("a.csv")

    @pytest.mark.asyncio
    async def test_non_ascii_credential_is_unavailable(self) -> None:
        async with _build_client(
            lambda request: httpx.Response(200, text="header"), api_key="chave-ç"
        ) as client:
            with pytest.raises(UpstreamUnavailableError):
                await client.fetch_file("a.csv")


class TestLifecycle:
    """Propriedade do AsyncClient."""

    @pytest.mark.asyncio
    async def test_injected_http_client_is_not_closed(self) -> None:
        async with httpx.AsyncClient(
            transport=httpx.MockTransport(lambda r: httpx.Response(200))
        ) as http_client:
            client = UpstreamHttpClient(UpstreamSettings(base_url=BASE_URL), http_client=http_client)

            await client.aclose()

            assert not http_client.is_closed

    @pytest.mark.asyncio
    async def test_owned_http_client_is_closed(self) -> None:
        client = create_upstream_client(UpstreamSettings(base_url=BASE_URL, api_key="k"))

        await client.aclose()

        assert client._http_client.is_closed
        assert client.settings.api_key == "k"
