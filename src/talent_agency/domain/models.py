"""Domain models for the talent roster."""

from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum
from uuid import UUID


class ModelCategory(StrEnum):
    """Roster section a model is listed under."""

    WOMEN = "Women"
    MEN = "Men"
    KIDS = "Kids"


@dataclass(frozen=True)
class ModelInput:
    """Caller-supplied fields for a new model, before validation."""

    name: str | None = None
    surname: str | None = None
    age: str | None = None
    height: str | None = None
    shoe: str | None = None
    shirt: str | None = None
    pants: str | None = None
    bio: str | None = None
    category: ModelCategory = ModelCategory.WOMEN
    profile_picture: str | None = None
    gallery_images: tuple[str, ...] = ()


@dataclass(frozen=True)
class ModelRecord:
    """Represents a model profile stored in the database."""

    id: UUID
    name: str
    profile_picture: str
    created_at: datetime
    updated_at: datetime
    surname: str | None = None
    age: str | None = None
    height: str | None = None
    shoe: str | None = None
    shirt: str | None = None
    pants: str | None = None
    bio: str | None = None
    category: ModelCategory = ModelCategory.WOMEN
    gallery_images: tuple[str, ...] = ()


@dataclass(frozen=True)
class ModelSort:
    """Ordering requested for a model listing."""

    field: str = "name"
    descending: bool = False
