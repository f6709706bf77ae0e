"""Pydantic models for the JSON API."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from talent_agency.domain.models import ModelCategory, ModelInput, ModelRecord


class CamelModel(BaseModel):
    """Base model exchanging camelCase keys with the frontend."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ModelCreateRequest(CamelModel):
    """Payload for creating a model profile."""

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
    gallery_images: list[str] = Field(default_factory=list)

    def to_input(self) -> ModelInput:
        return ModelInput(
            name=self.name,
            surname=self.surname,
            age=self.age,
            height=self.height,
            shoe=self.shoe,
            shirt=self.shirt,
            pants=self.pants,
            bio=self.bio,
            category=self.category,
            profile_picture=self.profile_picture,
            gallery_images=tuple(self.gallery_images),
        )


class ModelResponse(CamelModel):
    """Model profile as returned to clients."""

    id: UUID
    name: str
    surname: str | None
    age: str | None
    height: str | None
    shoe: str | None
    shirt: str | None
    pants: str | None
    bio: str | None
    category: ModelCategory
    profile_picture: str
    gallery_images: list[str]
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_record(cls, record: ModelRecord) -> "ModelResponse":
        return cls(
            id=record.id,
            name=record.name,
            surname=record.surname,
            age=record.age,
            height=record.height,
            shoe=record.shoe,
            shirt=record.shirt,
            pants=record.pants,
            bio=record.bio,
            category=record.category,
            profile_picture=record.profile_picture,
            gallery_images=list(record.gallery_images),
            created_at=record.created_at,
            updated_at=record.updated_at,
        )


class LoginRequest(BaseModel):
    """Admin login payload."""

    password: str
