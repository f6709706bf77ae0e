"""Tests for HTTP-based adapters."""

import asyncio
import hashlib
from urllib.parse import parse_qs

import httpx
import pytest

from talent_agency.adapters.cloudinary_client import HttpxCloudinaryClient
from talent_agency.domain.errors import AssetDeletionError


def _client(handler, folder: str | None = None) -> HttpxCloudinaryClient:  # type: ignore[no-untyped-def]
    return HttpxCloudinaryClient(
        cloud_name="demo",
        api_key="key",
        api_secret="secret",
        http_client=httpx.AsyncClient(transport=httpx.MockTransport(handler)),
        folder=folder,
        clock=lambda: 1700000000.5,
    )


def test_cloudinary_delete_sends_signed_request() -> None:
    seen: dict[str, list[str]] = {}

    def handler(request: httpx.Request) -> httpx.Response:
        assert request.url.path == "/v1_1/demo/image/destroy"
        seen.update(parse_qs(request.content.decode()))
        return httpx.Response(200, json={"result": "ok"})

    client = _client(handler, folder="models/")

    asyncio.run(client.delete_asset("imgA"))

    expected = hashlib.sha1(  # noqa: S324
        b"public_id=models/imgA&timestamp=1700000000secret"
    ).hexdigest()
    assert seen["public_id"] == ["models/imgA"]
    assert seen["timestamp"] == ["1700000000"]
    assert seen["api_key"] == ["key"]
    assert seen["signature"] == [expected]


def test_cloudinary_delete_raises_when_not_found() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"result": "not found"})

    client = _client(handler)

    with pytest.raises(AssetDeletionError, match="not found"):
        asyncio.run(client.delete_asset("imgA"))


def test_cloudinary_delete_raises_on_http_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(401, json={"error": {"message": "Invalid Signature"}})

    client = _client(handler)

    with pytest.raises(httpx.HTTPStatusError):
        asyncio.run(client.delete_asset("imgA"))


def test_cloudinary_public_id_without_folder() -> None:
    client = _client(lambda request: httpx.Response(200, json={"result": "ok"}))

    assert client.qualified_public_id("imgA") == "imgA"
