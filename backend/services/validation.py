"""
Design request validation.

Turns a raw submission (the JSON body of the design form) into an immutable
DesignRequest, or raises DesignValidationError listing every failing field
with a human-readable message.
"""

from dataclasses import dataclass
from typing import Any

from pydantic import ValidationError

from schemas import DesignRequest


FIELD_LABELS = {
    "room_length": "Room length",
    "room_width": "Room width",
    "room_height": "Room height",
    "room_shape": "Room shape",
    "number_of_windows": "Number of windows",
    "window_size_and_orientation": "Window size and orientation",
    "number_of_doors": "Number of doors",
    "ceiling_type": "Ceiling type",
    "location_city": "Location/city",
    "outdoor_design_temperature": "Outdoor design temperature",
    "humidity_level": "Humidity level",
    "sun_exposure": "Sun exposure",
    "room_type": "Room type",
    "number_of_occupants": "Number of occupants",
    "occupancy_duration": "Occupancy duration",
    "internal_heat_sources": "Internal heat sources",
    "usage_pattern": "Usage pattern",
}

# Input key (either alias or attribute name) -> attribute name
_FIELD_BY_KEY = {}
for _name, _info in DesignRequest.model_fields.items():
    _FIELD_BY_KEY[_name] = _name
    if _info.alias:
        _FIELD_BY_KEY[_info.alias] = _name

_NOT_A_NUMBER = {"float_parsing", "float_type", "int_parsing", "int_type", "finite_number"}

# Lower bound is 0.01, so "greater_than_equal" on these means not positive
POSITIVE_FIELDS = {"room_length", "room_width", "room_height"}


@dataclass(frozen=True)
class FieldError:
    field: str
    message: str


class DesignValidationError(Exception):
    """Raised when a submission violates one or more field constraints."""

    def __init__(self, errors: list[FieldError]):
        self.errors = errors
        summary = "; ".join(e.message for e in errors)
        super().__init__(f"Invalid design parameters: {summary}")


def _message_for(field: str, error: dict) -> str:
    label = FIELD_LABELS.get(field, field)
    kind = error["type"]

    if kind in ("missing", "string_too_short"):
        return f"{label} is required"
    if kind == "greater_than" or (kind == "greater_than_equal" and field in POSITIVE_FIELDS):
        return f"{label} must be positive"
    if kind == "greater_than_equal":
        return f"{label} cannot be negative"
    if kind in _NOT_A_NUMBER:
        return f"{label} must be a number"
    if kind == "int_from_float":
        return f"{label} must be a whole number"
    if kind == "enum":
        return f"{label} must be one of {error['ctx']['expected']}"
    if kind == "string_type":
        return f"{label} must be text"
    return f"{label}: {error['msg']}"


def validate_design_request(raw: Any) -> DesignRequest:
    """
    Validate a raw submission.

    Args:
        raw: Mapping of form fields, keyed by snake_case or camelCase names.

    Returns:
        The validated DesignRequest.

    Raises:
        DesignValidationError: with one FieldError per failing field.
    """
    try:
        return DesignRequest.model_validate(raw)
    except ValidationError as e:
        errors = []
        seen = set()
        for err in e.errors():
            if not err["loc"]:
                errors.append(FieldError("__root__", "Design parameters must be a JSON object"))
                continue
            key = str(err["loc"][0])
            field = _FIELD_BY_KEY.get(key, key)
            if field in seen:
                continue
            seen.add(field)
            errors.append(FieldError(field, _message_for(field, err)))
        raise DesignValidationError(errors) from None
