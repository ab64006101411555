"""
HVAC design summary generation.

Fans one validated DesignRequest out to the five estimators concurrently,
waits for all of them and merges their results into a DesignSummary. The
operation is all-or-nothing: if any estimator fails, no summary is produced
and a single DesignGenerationError is raised.
"""

import asyncio
import logging
from typing import Any, Optional

from schemas import (
    DesignRequest, DesignSummary,
    CoolingLoadInput, CapacityInput, PlacementInput, AirflowInput, EfficiencyInput,
    CoolingLoadResult, CapacityResult, PlacementResult, AirflowResult, EfficiencyResult,
    RoomOverview, CoolingLoadAnalysis, RecommendedAcSystem,
    AcPlacement, AirflowDesign, EfficiencyRecommendations,
)
from services.estimators import EstimatorSuite, EstimatorError, default_estimators
from services.validation import validate_design_request

logger = logging.getLogger(__name__)

ERROR_PREFIX = (
    "An error occurred while generating the HVAC design. "
    "Please check your inputs and try again. Details: "
)


class DesignGenerationError(Exception):
    """Raised when any of the five estimator calls fails."""

    def __init__(self, message: str, estimator: Optional[str] = None):
        self.estimator = estimator
        super().__init__(message)


# ============================================================================
# REQUEST PROJECTIONS
# ============================================================================

def cooling_load_input(req: DesignRequest) -> CoolingLoadInput:
    return CoolingLoadInput(
        room_length=req.room_length,
        room_width=req.room_width,
        room_height=req.room_height,
        room_shape=req.room_shape,
        num_windows=req.number_of_windows,
        window_size_and_orientation=req.window_size_and_orientation,
        num_doors=req.number_of_doors,
        ceiling_type=req.ceiling_type,
        location_city=req.location_city,
        outdoor_design_temperature=req.outdoor_design_temperature,
        humidity_level=req.humidity_level,
        sun_exposure=req.sun_exposure,
        room_type=req.room_type,
        num_occupants=req.number_of_occupants,
        occupancy_duration=req.occupancy_duration,
        internal_heat_sources=req.internal_heat_sources,
        usage_pattern=req.usage_pattern,
    )


def capacity_input(req: DesignRequest) -> CapacityInput:
    return CapacityInput(**req.model_dump())


def placement_input(req: DesignRequest) -> PlacementInput:
    return PlacementInput(
        room_length=req.room_length,
        room_width=req.room_width,
        room_height=req.room_height,
        room_type=req.room_type,
    )


def airflow_input(req: DesignRequest) -> AirflowInput:
    return AirflowInput(
        room_length=req.room_length,
        room_width=req.room_width,
        room_height=req.room_height,
        room_type=req.room_type,
        number_of_occupants=req.number_of_occupants,
    )


def efficiency_input(req: DesignRequest) -> EfficiencyInput:
    return EfficiencyInput(
        room_type=req.room_type,
        climate=f"{req.location_city} ({req.humidity_level.value} humidity)",
    )


# ============================================================================
# SUMMARY ASSEMBLY
# ============================================================================

def format_number(value: float) -> str:
    """Render 5.0 as "5" and 2.8 as "2.8"."""
    if float(value).is_integer():
        return str(int(value))
    return str(value)


def format_capacity(capacity: CapacityResult) -> str:
    """"X TR", plus " / Y kW" only when the kW figure is present."""
    text = f"{format_number(capacity.ac_capacity_tr)} TR"
    if capacity.ac_capacity_kw:
        text += f" / {format_number(capacity.ac_capacity_kw)} kW"
    return text


def build_summary(
    req: DesignRequest,
    cooling_load: CoolingLoadResult,
    capacity: CapacityResult,
    placement: PlacementResult,
    airflow: AirflowResult,
    efficiency: EfficiencyResult,
) -> DesignSummary:
    """Merge the five estimator results and the request into one summary."""
    return DesignSummary(
        room_overview=RoomOverview(
            room_size=(
                f"{format_number(req.room_length)}m x "
                f"{format_number(req.room_width)}m x "
                f"{format_number(req.room_height)}m"
            ),
            usage_type=req.room_type.value,
            occupancy=f"{req.number_of_occupants} occupants",
        ),
        cooling_load_analysis=CoolingLoadAnalysis(
            estimated_cooling_load=cooling_load.cooling_load_estimate,
        ),
        recommended_ac_system=RecommendedAcSystem(
            ac_capacity=format_capacity(capacity),
            ac_type=capacity.ac_type.value,
            number_of_units=capacity.suggested_units,
        ),
        ac_placement=AcPlacement(
            recommended_position=placement.recommended_position,
            mounting_height=placement.mounting_height,
            reasoning=placement.reasoning,
        ),
        airflow_design=AirflowDesign(
            airflow_direction=airflow.airflow_direction,
            coverage_strategy=airflow.coverage_strategy,
            throw_length_consideration=airflow.throw_length_consideration,
            draft_avoidance=airflow.draft_avoidance,
        ),
        efficiency_recommendations=EfficiencyRecommendations(
            energy_saving_tips=efficiency.energy_saving_tips,
        ),
    )


# ============================================================================
# PUBLIC API
# ============================================================================

async def _named(name: str, estimator, data):
    """Run one estimator call, tagging any failure with the estimator name."""
    try:
        return await estimator(data)
    except EstimatorError:
        raise
    except Exception as e:
        raise EstimatorError(name, str(e) or e.__class__.__name__) from e


async def generate_summary(
    req: DesignRequest,
    estimators: Optional[EstimatorSuite] = None,
) -> DesignSummary:
    """
    Generate the HVAC design summary for a validated request.

    All five estimators are launched together and joined. The first failure
    cancels the calls still in flight and is reported as one
    DesignGenerationError.

    Raises:
        DesignGenerationError: if any estimator fails.
    """
    suite = estimators or default_estimators()

    tasks = [
        asyncio.ensure_future(_named("cooling_load", suite.cooling_load, cooling_load_input(req))),
        asyncio.ensure_future(_named("capacity", suite.capacity, capacity_input(req))),
        asyncio.ensure_future(_named("placement", suite.placement, placement_input(req))),
        asyncio.ensure_future(_named("airflow", suite.airflow, airflow_input(req))),
        asyncio.ensure_future(_named("efficiency", suite.efficiency, efficiency_input(req))),
    ]

    try:
        cooling_load, capacity, placement, airflow, efficiency = await asyncio.gather(*tasks)
    except EstimatorError as e:
        for task in tasks:
            task.cancel()
        logger.error("HVAC design generation failed in %s estimator: %s", e.estimator, e)
        raise DesignGenerationError(f"{ERROR_PREFIX}{e}", estimator=e.estimator) from e

    return build_summary(req, cooling_load, capacity, placement, airflow, efficiency)


async def generate_hvac_design(
    raw: Any,
    estimators: Optional[EstimatorSuite] = None,
) -> DesignSummary:
    """
    Submission interface: validate the raw form data, then generate.

    DesignValidationError is raised before any estimator is called.
    """
    req = validate_design_request(raw)
    return await generate_summary(req, estimators)
