"""JSON Schemas for the content documents, derived from the models."""

from __future__ import annotations

from typing import Any

from jsonschema import Draft202012Validator, ValidationError

from .models import ADAPTERS

SCHEMAS: dict[str, dict[str, Any]] = {
    name: adapter.json_schema(by_alias=True) for name, adapter in ADAPTERS.items()
}


def validation_errors(name: str, instance: Any) -> list[ValidationError]:
    """Every schema violation in ``instance``, ordered by location in the document."""
    validator = Draft202012Validator(SCHEMAS[name])
    return sorted(validator.iter_errors(instance), key=lambda e: [str(part) for part in e.absolute_path])
