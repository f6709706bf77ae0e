"""Supabase-backed model repository."""

from dataclasses import dataclass, field
from datetime import datetime
from uuid import UUID

import httpx
from supabase import Client, PostgrestAPIError

from talent_agency.domain.errors import InfrastructureError
from talent_agency.domain.models import (
    ModelCategory,
    ModelInput,
    ModelRecord,
    ModelSort,
)
from talent_agency.schema_registry import DocumentSchema, model_schema
from talent_agency.services.models import ModelRepository


@dataclass
class SupabaseModelRepository(ModelRepository):
    """Supabase implementation for model profile persistence."""

    client: Client
    schema: DocumentSchema = field(default_factory=model_schema)

    def create_model(self, model: ModelInput) -> ModelRecord:
        """Insert a model row and return it."""
        payload = {
            "name": model.name,
            "surname": model.surname,
            "age": model.age,
            "height": model.height,
            "shoe": model.shoe,
            "shirt": model.shirt,
            "pants": model.pants,
            "bio": model.bio,
            "category": model.category.value,
            "profile_picture": model.profile_picture,
            "gallery_images": list(model.gallery_images),
        }
        response = self._execute(self.client.table(self.schema.table).insert(payload))
        if not response.data:
            raise InfrastructureError("Failed to create model")
        return _row_to_record(response.data[0])

    def list_models(
        self, sort: ModelSort, category: ModelCategory | None = None
    ) -> list[ModelRecord]:
        """Return models ordered by the requested field, then by id."""
        if sort.field not in self.schema.sortable:
            raise ValueError(f"Unsupported sort field: {sort.field}")
        query = self.client.table(self.schema.table).select(self.schema.select_clause())
        if category is not None:
            query = query.eq("category", category.value)
        query = query.order(sort.field, desc=sort.descending).order("id")
        response = self._execute(query)
        return [_row_to_record(row) for row in response.data or []]

    def get_model(self, model_id: UUID) -> ModelRecord | None:
        """Return a model by id, if present."""
        response = self._execute(
            self.client.table(self.schema.table)
            .select(self.schema.select_clause())
            .eq("id", str(model_id))
            .limit(1)
        )
        if not response.data:
            return None
        return _row_to_record(response.data[0])

    def delete_model(self, model_id: UUID) -> ModelRecord | None:
        """Delete a model row and return it, if it existed."""
        response = self._execute(
            self.client.table(self.schema.table).delete().eq("id", str(model_id))
        )
        if not response.data:
            return None
        return _row_to_record(response.data[0])

    @staticmethod
    def _execute(query):  # type: ignore[no-untyped-def]
        try:
            return query.execute()
        except (PostgrestAPIError, httpx.HTTPError) as exc:
            raise InfrastructureError("Model store request failed") from exc


def _row_to_record(row: dict[str, object]) -> ModelRecord:
    return ModelRecord(
        id=UUID(str(row["id"])),
        name=str(row["name"]),
        surname=row.get("surname"),
        age=row.get("age"),
        height=row.get("height"),
        shoe=row.get("shoe"),
        shirt=row.get("shirt"),
        pants=row.get("pants"),
        bio=row.get("bio"),
        category=ModelCategory(row.get("category") or ModelCategory.WOMEN),
        profile_picture=str(row["profile_picture"]),
        gallery_images=tuple(row.get("gallery_images") or ()),
        created_at=datetime.fromisoformat(str(row["created_at"])),
        updated_at=datetime.fromisoformat(str(row["updated_at"])),
    )
