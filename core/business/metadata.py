"""Metadata validator: checks free-form booking metadata per vertical.

Validation never raises on bad input. It returns a
``MetadataValidationResult`` holding either the validated blob or one
``FieldError`` per offending field, and leaves the decision to reject the
write (or keep partial data) to the caller.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Optional

from pydantic import ValidationError

from core.business.registry import resolve_vertical_config
from patterns.domain_config import Vertical


# ---------------------------------------------------------------------------
# Result types
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class FieldError:
    """One offending field."""

    path: str  # dotted, "" for the blob itself
    expected: str
    received: str
    message: str

    def to_dict(self) -> dict[str, str]:
        return {
            "path": self.path,
            "expected": self.expected,
            "received": self.received,
            "message": self.message,
        }


@dataclass
class MetadataValidationResult:
    """Outcome of validating one metadata blob."""

    vertical: Vertical
    data: Optional[dict[str, Any]] = None
    errors: list[FieldError] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.errors


class MetadataRejected(ValueError):
    """Raised by write paths that refuse to persist invalid metadata."""

    def __init__(self, vertical: Vertical, errors: list[FieldError]):
        self.vertical = vertical
        self.errors = errors
        fields_ = ", ".join(e.path or "<root>" for e in errors)
        super().__init__(f"Invalid {vertical.value} metadata: {fields_}")


# ---------------------------------------------------------------------------
# Error translation
# ---------------------------------------------------------------------------

# pydantic error type -> shape name shown to the caller
_EXPECTED_BY_TYPE = {
    "string_type": "string",
    "number_type": "number",
    "finite_number": "finite number",
    "bool_type": "boolean",
    "list_type": "array",
    "model_type": "object",
    "model_attributes_type": "object",
    "dict_type": "object",
    "missing": "required field",
}


def describe_value(value: Any) -> str:
    """Short description of a received value, e.g. ``str 'parked'``."""
    if value is None:
        return "null"
    text = repr(value)
    if len(text) > 60:
        text = text[:57] + "..."
    return f"{type(value).__name__} {text}"


def _expected_shape(error: dict) -> str:
    ctx = error.get("ctx") or {}
    if error["type"] == "literal_error" and "expected" in ctx:
        return f"one of {ctx['expected']}"
    return _EXPECTED_BY_TYPE.get(error["type"], error["type"])


def _to_field_errors(exc: ValidationError) -> list[FieldError]:
    errors: dict[str, FieldError] = {}
    for error in exc.errors():
        path = ".".join(str(part) for part in error["loc"])
        if path in errors:
            continue
        received = "missing" if error["type"] == "missing" else describe_value(error.get("input"))
        errors[path] = FieldError(
            path=path,
            expected=_expected_shape(error),
            received=received,
            message=error["msg"],
        )
    return list(errors.values())


# ---------------------------------------------------------------------------
# Validator
# ---------------------------------------------------------------------------

def validate_metadata(vertical: Optional[str], metadata: Any) -> MetadataValidationResult:
    """Validate a metadata blob against the vertical's schema.

    Unknown vertical labels resolve to the default vertical (see the
    registry); ``None`` metadata counts as an empty blob. Unknown keys are
    passed through untouched.

    Example::

        result = validate_metadata("garage", {"status": "parked"})
        result.is_valid          # False
        result.errors[0].path    # "status"
    """
    config = resolve_vertical_config(vertical)

    if metadata is None:
        metadata = {}
    if not isinstance(metadata, Mapping):
        return MetadataValidationResult(
            vertical=config.vertical,
            errors=[
                FieldError(
                    path="",
                    expected="object",
                    received=describe_value(metadata),
                    message="Metadata should be an object",
                )
            ],
        )

    raw = dict(metadata)
    try:
        model = config.metadata_schema.model_validate(raw)
    except ValidationError as exc:
        return MetadataValidationResult(
            vertical=config.vertical,
            errors=_to_field_errors(exc),
        )

    # Only the keys the caller supplied, declared or not
    dumped = model.model_dump()
    return MetadataValidationResult(
        vertical=config.vertical,
        data={key: dumped.get(key, raw[key]) for key in raw},
    )
