"""Validation of the design form submission."""

import pytest

from schemas import CeilingType, RoomType, RoomShape
from services.validation import validate_design_request, DesignValidationError


def _errors(raw):
    with pytest.raises(DesignValidationError) as exc:
        validate_design_request(raw)
    return {e.field: e.message for e in exc.value.errors}


def test_example_values_pass(example_payload):
    req = validate_design_request(example_payload)
    assert req.room_length == 5
    assert req.room_height == 2.8
    assert req.room_shape is RoomShape.RECTANGULAR
    assert req.room_type is RoomType.OFFICE
    assert req.location_city == "Phoenix, AZ"
    assert req.number_of_occupants == 2


def test_snake_case_keys_accepted(example_payload):
    from pydantic.alias_generators import to_snake
    snake = {to_snake(k): v for k, v in example_payload.items()}
    assert validate_design_request(snake).occupancy_duration == 8


def test_zero_room_length_names_field(example_payload):
    example_payload["roomLength"] = 0
    errors = _errors(example_payload)
    assert errors == {"room_length": "Room length must be positive"}


def test_unknown_room_type_rejected(example_payload):
    example_payload["roomType"] = "warehouse"
    errors = _errors(example_payload)
    assert list(errors) == ["room_type"]
    assert errors["room_type"].startswith("Room type must be one of")


def test_all_failures_reported(example_payload):
    example_payload["roomWidth"] = -1
    example_payload["numberOfDoors"] = -2
    example_payload["locationCity"] = "   "
    example_payload["humidityLevel"] = "extreme"
    del example_payload["usagePattern"]

    errors = _errors(example_payload)

    assert errors["room_width"] == "Room width must be positive"
    assert errors["number_of_doors"] == "Number of doors cannot be negative"
    assert errors["location_city"] == "Location/city is required"
    assert errors["humidity_level"].startswith("Humidity level must be one of")
    assert errors["usage_pattern"] == "Usage pattern is required"
    assert len(errors) == 5


def test_numeric_strings_are_coerced(example_payload):
    example_payload["roomLength"] = "6.5"
    example_payload["numberOfWindows"] = "3"
    req = validate_design_request(example_payload)
    assert req.room_length == 6.5
    assert req.number_of_windows == 3


def test_non_numeric_and_fractional_counts(example_payload):
    example_payload["roomHeight"] = "tall"
    example_payload["numberOfOccupants"] = 2.5
    errors = _errors(example_payload)
    assert errors["room_height"] == "Room height must be a number"
    assert errors["number_of_occupants"] == "Number of occupants must be a whole number"


def test_spaced_choices_normalized(example_payload):
    example_payload["ceilingType"] = "false ceiling"
    example_payload["roomType"] = "server room"
    req = validate_design_request(example_payload)
    assert req.ceiling_type is CeilingType.FALSE_CEILING
    assert req.room_type is RoomType.SERVER_ROOM


def test_zero_counts_and_duration_allowed(example_payload):
    example_payload["numberOfWindows"] = 0
    example_payload["numberOfOccupants"] = 0
    example_payload["occupancyDuration"] = 0
    req = validate_design_request(example_payload)
    assert req.number_of_windows == 0


def test_non_object_payload_rejected():
    errors = _errors(["not", "a", "form"])
    assert list(errors) == ["__root__"]


def test_request_is_immutable(example_payload):
    req = validate_design_request(example_payload)
    with pytest.raises(Exception):
        req.room_length = 10


def test_dimensions_below_one_centimetre_rejected(example_payload):
    example_payload["roomHeight"] = 0.005
    errors = _errors(example_payload)
    assert errors == {"room_height": "Room height must be positive"}

    example_payload["roomHeight"] = 0.01
    assert validate_design_request(example_payload).room_height == 0.01


@pytest.mark.parametrize("value", ["nan", "inf", "-inf"])
def test_non_finite_temperature_rejected(example_payload, value):
    example_payload["outdoorDesignTemperature"] = value
    errors = _errors(example_payload)
    assert errors == {"outdoor_design_temperature": "Outdoor design temperature must be a number"}
