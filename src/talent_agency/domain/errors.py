"""Domain errors raised by services and adapters."""

from collections.abc import Sequence


class ModelValidationError(Exception):
    """Raised when a model input is missing required fields."""

    def __init__(self, missing_fields: Sequence[str]) -> None:
        self.missing_fields = list(missing_fields)
        super().__init__(f"Missing required fields: {', '.join(self.missing_fields)}")


class ModelNotFoundError(Exception):
    """Raised when no model exists for the requested id."""

    def __init__(self, model_id: object) -> None:
        self.model_id = model_id
        super().__init__(f"Model not found: {model_id}")


class InfrastructureError(Exception):
    """Raised when the database or asset host cannot serve a request."""


class AssetDeletionError(Exception):
    """Raised when the asset host answers but does not delete the image."""
