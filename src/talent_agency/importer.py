"""Bulk import of model profiles from a JSON export."""

import argparse
import asyncio
import json
import logging
import sys
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from pathlib import Path

from pydantic import ValidationError

from talent_agency.api.schemas import ModelCreateRequest
from talent_agency.app_logging import configure_logging
from talent_agency.containers import build_container
from talent_agency.domain.errors import InfrastructureError, ModelValidationError
from talent_agency.services.models import ModelService

_logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ImportSummary:
    """Counts of rows created and rejected by an import run."""

    created: int
    failed: int


def import_models(service: ModelService, rows: Iterable[object]) -> ImportSummary:
    """Create a model for every valid row, skipping rows that fail validation.

    Store failures are not row defects and propagate to the caller.
    """
    created = 0
    failed = 0
    for index, row in enumerate(rows):
        if not isinstance(row, dict):
            failed += 1
            _logger.warning("Skipping row %s: not a JSON object", index)
            continue
        try:
            payload = ModelCreateRequest.model_validate(row)
            service.create(payload.to_input())
        except (ValidationError, ModelValidationError) as exc:
            failed += 1
            _logger.warning("Skipping row %s: %s", index, exc)
            continue
        created += 1
    return ImportSummary(created=created, failed=failed)


def load_rows(path: Path) -> list[object]:
    """Read the JSON array of rows stored in ``path``."""
    data = json.loads(path.read_text(encoding="utf-8") or "[]")
    if not isinstance(data, list):
        raise ValueError(f"{path} must contain a JSON array")
    return data


def main(argv: Sequence[str] | None = None) -> int:
    """Import models from a JSON file into the configured store."""
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("path", type=Path, help="JSON file holding an array of models")
    args = parser.parse_args(argv)
    configure_logging()

    try:
        rows = load_rows(args.path)
    except (OSError, ValueError) as exc:
        _logger.error("Cannot read %s: %s", args.path, exc)
        return 1
    if not rows:
        _logger.info("No records found in %s", args.path)
        return 0

    container = build_container()
    try:
        summary = import_models(container.model_service, rows)
    except InfrastructureError:
        _logger.exception("Import of %s aborted: model store unavailable", args.path)
        return 1
    finally:
        asyncio.run(container.close_resources())
    _logger.info("Imported %s models, %s rejected", summary.created, summary.failed)
    return 0


if __name__ == "__main__":
    sys.exit(main())
