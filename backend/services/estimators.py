"""
HVAC estimators.

Five independent LLM-backed capabilities, one per concern of the design
summary. Each takes its own input model and returns its own result model, or
raises EstimatorError. EstimatorSuite bundles them so the transport can be
swapped (tests use fakes).
"""

import logging
from dataclasses import dataclass
from typing import Awaitable, Callable, Type, TypeVar

from pydantic import BaseModel, ValidationError

from config import ESTIMATOR_TEMPERATURE
from schemas import (
    CoolingLoadInput, CoolingLoadResult,
    CapacityInput, CapacityResult,
    PlacementInput, PlacementResult,
    AirflowInput, AirflowResult,
    EfficiencyInput, EfficiencyResult,
)
from services import hvac_prompts
from services.llm import complete, extract_json_from_response

logger = logging.getLogger(__name__)

R = TypeVar("R", bound=BaseModel)


class EstimatorError(Exception):
    """One estimator call failed (transport, provider or malformed reply)."""

    def __init__(self, estimator: str, message: str):
        self.estimator = estimator
        super().__init__(message)


def _render(template: str, data: BaseModel) -> str:
    values = {
        key: ("not provided" if value is None else value)
        for key, value in data.model_dump(mode="json").items()
    }
    return template.format(**values)


async def _run_estimator(name: str, template: str, data: BaseModel, result_model: Type[R]) -> R:
    messages = [
        {"role": "system", "content": hvac_prompts.ENGINEER_SYSTEM_PROMPT},
        {"role": "user", "content": _render(template, data)},
    ]

    logger.debug("Estimator %s: requesting", name)
    try:
        reply = await complete(messages, temperature=ESTIMATOR_TEMPERATURE)
    except Exception as e:
        raise EstimatorError(name, f"{name} request failed: {e}") from e

    extracted = extract_json_from_response(reply)
    if extracted is None:
        raise EstimatorError(name, f"{name} reply contained no JSON object")

    try:
        result = result_model.model_validate(extracted)
    except ValidationError as e:
        raise EstimatorError(name, f"{name} reply did not match the expected format: {e}") from e

    logger.debug("Estimator %s: done", name)
    return result


async def estimate_cooling_load(data: CoolingLoadInput) -> CoolingLoadResult:
    """Estimate the cooling load with its heat gain factors and assumptions."""
    return await _run_estimator("cooling_load", hvac_prompts.COOLING_LOAD_PROMPT, data, CoolingLoadResult)


async def recommend_ac_capacity(data: CapacityInput) -> CapacityResult:
    """Recommend AC capacity (TR, optionally kW), unit count and AC type."""
    return await _run_estimator("capacity", hvac_prompts.CAPACITY_PROMPT, data, CapacityResult)


async def suggest_ac_placement(data: PlacementInput) -> PlacementResult:
    return await _run_estimator("placement", hvac_prompts.PLACEMENT_PROMPT, data, PlacementResult)


async def define_airflow_direction(data: AirflowInput) -> AirflowResult:
    return await _run_estimator("airflow", hvac_prompts.AIRFLOW_PROMPT, data, AirflowResult)


async def provide_efficiency_suggestions(data: EfficiencyInput) -> EfficiencyResult:
    return await _run_estimator("efficiency", hvac_prompts.EFFICIENCY_PROMPT, data, EfficiencyResult)


@dataclass(frozen=True)
class EstimatorSuite:
    """The five estimator capabilities consumed by the design aggregator."""
    cooling_load: Callable[[CoolingLoadInput], Awaitable[CoolingLoadResult]]
    capacity: Callable[[CapacityInput], Awaitable[CapacityResult]]
    placement: Callable[[PlacementInput], Awaitable[PlacementResult]]
    airflow: Callable[[AirflowInput], Awaitable[AirflowResult]]
    efficiency: Callable[[EfficiencyInput], Awaitable[EfficiencyResult]]


def default_estimators() -> EstimatorSuite:
    """LLM-backed estimators."""
    return EstimatorSuite(
        cooling_load=estimate_cooling_load,
        capacity=recommend_ac_capacity,
        placement=suggest_ac_placement,
        airflow=define_airflow_direction,
        efficiency=provide_efficiency_suggestions,
    )
