"""Domain models for externally hosted image assets."""

from dataclasses import dataclass, field
from typing import Literal


@dataclass(frozen=True)
class AssetRef:
    """Reference to one hosted image, keyed by its public id."""

    public_id: str
    url: str = field(compare=False)


@dataclass(frozen=True)
class AssetRelease:
    """Outcome of asking the asset host to delete one image."""

    ref: AssetRef
    status: Literal["released", "failed"]
    reason: str | None = None

    @property
    def released(self) -> bool:
        return self.status == "released"
