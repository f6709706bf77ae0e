"""Tracking and release of hosted image assets."""

import asyncio
import logging
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Protocol
from urllib.parse import unquote, urlsplit

from talent_agency.domain.assets import AssetRef, AssetRelease
from talent_agency.domain.errors import AssetDeletionError
from talent_agency.domain.models import ModelRecord

_logger = logging.getLogger(__name__)

NOT_CONFIGURED_REASON = "asset host not configured"


class AssetClient(Protocol):
    """Interface for deleting images from the asset host."""

    async def delete_asset(self, public_id: str) -> None:
        """Delete one image, raising when the host refuses or is unreachable."""


def asset_ref_from_url(url: str | None) -> AssetRef | None:
    """Derive the asset host's public id from an image URL.

    The public id is the last path segment with its extension removed, so
    ``https://host/models/imgA.jpg`` yields ``imgA``.
    """
    if not url:
        return None
    path = unquote(urlsplit(url.strip()).path)
    tail = path.rstrip("/").rsplit("/", maxsplit=1)[-1]
    stem, dot, _ = tail.rpartition(".")
    public_id = stem if dot and stem else tail
    if not public_id:
        return None
    return AssetRef(public_id=public_id, url=url)


def collect_asset_refs(record: ModelRecord) -> set[AssetRef]:
    """Return refs for the profile picture and every gallery image."""
    refs: set[AssetRef] = set()
    for url in (record.profile_picture, *record.gallery_images):
        ref = asset_ref_from_url(url)
        if ref is not None:
            refs.add(ref)
    return refs


@dataclass
class AssetService:
    """Best-effort release of images that belonged to a deleted model."""

    client: AssetClient | None = None

    async def release_assets(self, refs: Iterable[AssetRef]) -> list[AssetRelease]:
        """Ask the asset host to delete each ref independently."""
        ordered = sorted(refs, key=lambda ref: ref.public_id)
        if not ordered:
            return []
        if self.client is None:
            _logger.warning(
                "Asset host not configured; skipping cleanup of %s images",
                len(ordered),
            )
            return [
                AssetRelease(ref=ref, status="failed", reason=NOT_CONFIGURED_REASON)
                for ref in ordered
            ]
        return list(await asyncio.gather(*(self._release(ref) for ref in ordered)))

    async def _release(self, ref: AssetRef) -> AssetRelease:
        try:
            await self.client.delete_asset(ref.public_id)
        except Exception as exc:  # noqa: BLE001
            return AssetRelease(ref=ref, status="failed", reason=_failure_reason(exc))
        return AssetRelease(ref=ref, status="released")


def _failure_reason(exc: Exception) -> str:
    """Summarize a release failure without echoing host URLs or credentials."""
    if isinstance(exc, AssetDeletionError):
        return str(exc)
    response = getattr(exc, "response", None)
    status_code = getattr(response, "status_code", None)
    if isinstance(status_code, int):
        return f"{type(exc).__name__} (HTTP {status_code})"
    return type(exc).__name__
