"""Cloudinary image deletion client."""

import hashlib
import time
from collections.abc import Callable
from dataclasses import dataclass

import httpx

from talent_agency.domain.errors import AssetDeletionError
from talent_agency.services.assets import AssetClient

CLOUDINARY_API_BASE = "https://api.cloudinary.com/v1_1"


@dataclass
class HttpxCloudinaryClient(AssetClient):
    """Deletes images through Cloudinary's signed destroy endpoint."""

    cloud_name: str
    api_key: str
    api_secret: str
    http_client: httpx.AsyncClient
    folder: str | None = None
    clock: Callable[[], float] = time.time

    @classmethod
    def create(
        cls,
        cloud_name: str,
        api_key: str,
        api_secret: str,
        folder: str | None = None,
    ) -> "HttpxCloudinaryClient":
        """Create a Cloudinary client with a managed httpx session."""
        return cls(
            cloud_name=cloud_name,
            api_key=api_key,
            api_secret=api_secret,
            http_client=httpx.AsyncClient(),
            folder=folder,
        )

    def qualified_public_id(self, public_id: str) -> str:
        """Prefix the public id with the configured folder, if any."""
        if not self.folder:
            return public_id
        return f"{self.folder.strip('/')}/{public_id}"

    def sign(self, params: dict[str, str]) -> str:
        """Return the SHA-1 signature Cloudinary expects for ``params``."""
        to_sign = "&".join(f"{key}={params[key]}" for key in sorted(params))
        return hashlib.sha1(  # noqa: S324
            f"{to_sign}{self.api_secret}".encode()
        ).hexdigest()

    async def delete_asset(self, public_id: str) -> None:
        """Destroy one image; raise if Cloudinary does not confirm it."""
        params = {
            "public_id": self.qualified_public_id(public_id),
            "timestamp": str(int(self.clock())),
        }
        url = f"{CLOUDINARY_API_BASE}/{self.cloud_name}/image/destroy"
        response = await self.http_client.post(
            url,
            data={**params, "api_key": self.api_key, "signature": self.sign(params)},
            timeout=10,
        )
        response.raise_for_status()
        result = response.json().get("result")
        if result != "ok":
            raise AssetDeletionError(f"Cloudinary destroy returned {result!r}")

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()
