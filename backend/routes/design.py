"""
HVAC design routes.

Validates the design form and returns the AI-generated HVAC design summary.
"""

from typing import Any

from fastapi import APIRouter, Body, Depends
from fastapi.responses import JSONResponse

from schemas import (
    DesignSummary, DesignValidationResponse, DesignErrorResponse, FieldErrorOut,
    RoomShape, CeilingType, HumidityLevel, SunExposure, RoomType, UsagePattern,
)
from services.design import generate_hvac_design, DesignGenerationError
from services.estimators import EstimatorSuite, default_estimators
from services.validation import DesignValidationError

router = APIRouter(prefix="/api/design", tags=["design"])

# Example values shown in the form before the user edits anything
FORM_DEFAULTS = {
    "room_length": 5,
    "room_width": 4,
    "room_height": 2.8,
    "room_shape": RoomShape.RECTANGULAR.value,
    "number_of_windows": 2,
    "window_size_and_orientation": "1.5x1m South, 1x1m West",
    "number_of_doors": 1,
    "ceiling_type": CeilingType.NORMAL.value,
    "location_city": "Phoenix, AZ",
    "outdoor_design_temperature": 42,
    "humidity_level": HumidityLevel.LOW.value,
    "sun_exposure": SunExposure.HIGH.value,
    "room_type": RoomType.OFFICE.value,
    "number_of_occupants": 2,
    "occupancy_duration": 8,
    "internal_heat_sources": "2 powerful workstations, 4 monitors, server rack",
    "usage_pattern": UsagePattern.CONTINUOUS.value,
}


def get_estimators() -> EstimatorSuite:
    """Estimator suite used by the design endpoint (overridable in tests)."""
    return default_estimators()


@router.post(
    "",
    response_model=DesignSummary,
    responses={422: {"model": DesignValidationResponse}, 502: {"model": DesignErrorResponse}},
)
async def create_design(
    payload: Any = Body(...),
    estimators: EstimatorSuite = Depends(get_estimators),
):
    """
    Generate an HVAC design summary from the room parameters.

    Returns all six summary blocks, or a single error when any part of the
    analysis fails.
    """
    try:
        return await generate_hvac_design(payload, estimators)
    except DesignValidationError as e:
        body = DesignValidationResponse(
            errors=[FieldErrorOut(field=err.field, message=err.message) for err in e.errors]
        )
        return JSONResponse(status_code=422, content=body.model_dump())
    except DesignGenerationError as e:
        return JSONResponse(status_code=502, content=DesignErrorResponse(error=str(e)).model_dump())


@router.get("/options")
async def design_options():
    """Choice sets for the form's select fields, plus example values."""
    return {
        "choices": {
            "room_shape": [c.value for c in RoomShape],
            "ceiling_type": [c.value for c in CeilingType],
            "humidity_level": [c.value for c in HumidityLevel],
            "sun_exposure": [c.value for c in SunExposure],
            "room_type": [c.value for c in RoomType],
            "usage_pattern": [c.value for c in UsagePattern],
        },
        "defaults": FORM_DEFAULTS,
    }
