"""Model roster endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING, Literal

from fastapi import APIRouter, Depends, Request, status
from fastapi.exceptions import RequestValidationError
from pydantic import ValidationError

from talent_agency.api.auth import require_admin
from talent_agency.api.schemas import ModelCreateRequest, ModelResponse
from talent_agency.domain.models import ModelCategory, ModelSort

if TYPE_CHECKING:
    from talent_agency.containers import AppContainer

router = APIRouter(prefix="/api/models", tags=["models"])

_SORT_FIELDS = {
    "name": "name",
    "surname": "surname",
    "category": "category",
    "createdAt": "created_at",
}


@router.get("", response_model=list[ModelResponse])
async def list_models(
    request: Request,
    sort: Literal["name", "surname", "category", "createdAt"] = "name",
    direction: Literal["asc", "desc"] = "asc",
    category: ModelCategory | None = None,
) -> list[ModelResponse]:
    """Return the roster, sorted by name unless asked otherwise."""
    container: AppContainer = request.app.state.container
    records = container.model_service.list_models(
        ModelSort(field=_SORT_FIELDS[sort], descending=direction == "desc"),
        category=category,
    )
    return [ModelResponse.from_record(record) for record in records]


@router.get("/{model_id}", response_model=ModelResponse)
async def get_model(model_id: str, request: Request) -> ModelResponse:
    """Return a single model profile."""
    container: AppContainer = request.app.state.container
    return ModelResponse.from_record(container.model_service.get_by_id(model_id))


async def read_create_payload(
    request: Request, _: None = Depends(require_admin)
) -> ModelCreateRequest:
    """Parse the create payload, only once the admin gate has passed."""
    try:
        return ModelCreateRequest.model_validate_json(await request.body())
    except ValidationError as exc:
        errors = [
            {**error, "loc": ("body", *error["loc"])}
            for error in exc.errors(include_url=False)
        ]
        raise RequestValidationError(errors) from None


@router.post(
    "",
    response_model=ModelResponse,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_admin)],
)
async def create_model(
    request: Request,
    payload: ModelCreateRequest = Depends(read_create_payload),
) -> ModelResponse:
    """Create a model profile."""
    container: AppContainer = request.app.state.container
    record = container.model_service.create(payload.to_input())
    return ModelResponse.from_record(record)


@router.delete("/{model_id}", dependencies=[Depends(require_admin)])
async def delete_model(model_id: str, request: Request) -> dict[str, bool]:
    """Delete a model profile and clean up its hosted images."""
    container: AppContainer = request.app.state.container
    await container.model_service.remove(model_id)
    return {"success": True}
