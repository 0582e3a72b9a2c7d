"""Turns the model's parsed JSON into a normalized filing record."""

from typing import Any

from medfiling.extraction.exceptions import ExtractionValidationError
from medfiling.extraction.models import ExtractedFields, ExtractionResult
from medfiling.extraction.vocabulary import normalize_fields


def validate_and_build(data: dict[str, Any]) -> ExtractionResult:
    """Validate raw parsed JSON and build an ExtractionResult.

    Missing, null or blank fields become empty strings and are reported in
    ``missing_fields`` in record order. Keys outside the record are dropped.

    Raises:
        ExtractionValidationError: when a field holds an object or a list.
    """
    values: dict[str, str] = {}
    missing: list[str] = []
    for name in ExtractedFields.FIELD_NAMES:
        value = _coerce_field(name, data.get(name))
        if not value.strip():
            missing.append(name)
        values[name] = value

    fields = normalize_fields(ExtractedFields(**values))
    return ExtractionResult(fields=fields, confidence="high", missing_fields=missing)


def _coerce_field(name: str, raw: Any) -> str:
    if raw is None:
        return ""
    if isinstance(raw, str):
        return raw
    if isinstance(raw, (dict, list)):
        raise ExtractionValidationError(f"'{name}' must be a string, got {type(raw).__name__}")
    return str(raw)
