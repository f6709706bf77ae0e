"""Process-wide registry of document schemas.

Binding a repository to its table goes through :func:`get_or_register`, so
repeated imports, app factories under hot reload, or several containers in
one process all share the schema registered first instead of defining it
again. Registration is a one-time startup operation, not a per-request one.
"""

import threading
from collections.abc import Callable
from dataclasses import dataclass

MODEL_SCHEMA_NAME = "Model"


@dataclass(frozen=True)
class DocumentSchema:
    """Table binding and column set for one stored entity."""

    name: str
    table: str
    columns: tuple[str, ...]
    sortable: frozenset[str]

    def select_clause(self) -> str:
        return ", ".join(self.columns)


_registry: dict[str, DocumentSchema] = {}
_lock = threading.Lock()


def get_or_register(name: str, factory: Callable[[], DocumentSchema]) -> DocumentSchema:
    """Return the schema registered under ``name``, registering it on first use."""
    with _lock:
        existing = _registry.get(name)
        if existing is not None:
            return existing
        schema = factory()
        if schema.name != name:
            raise ValueError(f"Schema factory for {name!r} built {schema.name!r}")
        _registry[name] = schema
        return schema


def registered_names() -> frozenset[str]:
    """Return the names of every schema registered in this process."""
    with _lock:
        return frozenset(_registry)


def _build_model_schema() -> DocumentSchema:
    return DocumentSchema(
        name=MODEL_SCHEMA_NAME,
        table="models",
        columns=(
            "id",
            "name",
            "surname",
            "age",
            "height",
            "shoe",
            "shirt",
            "pants",
            "bio",
            "category",
            "profile_picture",
            "gallery_images",
            "created_at",
            "updated_at",
        ),
        sortable=frozenset({"name", "surname", "category", "created_at"}),
    )


def model_schema() -> DocumentSchema:
    """Return the schema for model profiles."""
    return get_or_register(MODEL_SCHEMA_NAME, _build_model_schema)
