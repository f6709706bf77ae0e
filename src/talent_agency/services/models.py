"""Model roster service."""

import logging
from dataclasses import dataclass, replace
from typing import Protocol
from uuid import UUID

from talent_agency.domain.assets import AssetRelease
from talent_agency.domain.errors import ModelNotFoundError, ModelValidationError
from talent_agency.domain.models import (
    ModelCategory,
    ModelInput,
    ModelRecord,
    ModelSort,
)
from talent_agency.services.assets import AssetService, collect_asset_refs

_logger = logging.getLogger(__name__)


class ModelRepository(Protocol):
    """Persistence interface for model profiles."""

    def create_model(self, model: ModelInput) -> ModelRecord:
        """Insert a validated model and return the stored record."""

    def list_models(
        self, sort: ModelSort, category: ModelCategory | None = None
    ) -> list[ModelRecord]:
        """Return models ordered by ``sort`` then by id."""

    def get_model(self, model_id: UUID) -> ModelRecord | None:
        """Return a model by id, if present."""

    def delete_model(self, model_id: UUID) -> ModelRecord | None:
        """Delete a model and return the removed record, if it existed."""


@dataclass
class ModelService:
    """Application service for the model roster."""

    repository: ModelRepository
    asset_service: AssetService
    require_surname: bool = False

    def required_fields(self) -> tuple[str, ...]:
        """Return the fields a new model must carry."""
        if self.require_surname:
            return ("name", "surname", "profile_picture")
        return ("name", "profile_picture")

    def create(self, model: ModelInput) -> ModelRecord:
        """Validate and store a new model."""
        cleaned = replace(
            model,
            name=_strip(model.name),
            surname=_strip(model.surname),
            profile_picture=_strip(model.profile_picture),
        )
        missing = [
            field_name
            for field_name in self.required_fields()
            if not getattr(cleaned, field_name)
        ]
        if missing:
            raise ModelValidationError(missing)
        record = self.repository.create_model(cleaned)
        _logger.info("Model created: id=%s name=%s", record.id, record.name)
        return record

    def list_models(
        self, sort: ModelSort | None = None, category: ModelCategory | None = None
    ) -> list[ModelRecord]:
        """Return models, by name ascending unless another sort is given."""
        return self.repository.list_models(sort or ModelSort(), category)

    def get_by_id(self, model_id: str | UUID) -> ModelRecord:
        """Return a model or raise when it does not exist."""
        parsed = _parse_model_id(model_id)
        record = self.repository.get_model(parsed)
        if record is None:
            raise ModelNotFoundError(model_id)
        return record

    def delete_by_id(self, model_id: str | UUID) -> ModelRecord:
        """Delete a model from the store and return what was removed."""
        parsed = _parse_model_id(model_id)
        record = self.repository.delete_model(parsed)
        if record is None:
            raise ModelNotFoundError(model_id)
        _logger.info("Model deleted: id=%s", record.id)
        return record

    async def remove(self, model_id: str | UUID) -> list[AssetRelease]:
        """Delete a model, then release its images on the asset host.

        Image cleanup is best effort: failures are logged and returned but
        never undo or fail the deletion itself.
        """
        record = self.delete_by_id(model_id)
        releases = await self.asset_service.release_assets(collect_asset_refs(record))
        for release in releases:
            if not release.released:
                _logger.warning(
                    "Failed to release asset: model_id=%s public_id=%s reason=%s",
                    record.id,
                    release.ref.public_id,
                    release.reason,
                )
        return releases


def _strip(value: str | None) -> str | None:
    if value is None:
        return None
    return value.strip()


def _parse_model_id(model_id: str | UUID) -> UUID:
    if isinstance(model_id, UUID):
        return model_id
    try:
        return UUID(model_id)
    except (TypeError, ValueError):
        raise ModelNotFoundError(model_id) from None
