"""Shared fixtures: example form payload and fake estimator suites."""

import asyncio

import pytest

from schemas import (
    CoolingLoadResult, CapacityResult, PlacementResult, AirflowResult, EfficiencyResult,
)
from services.estimators import EstimatorSuite, EstimatorError

ESTIMATOR_NAMES = ("cooling_load", "capacity", "placement", "airflow", "efficiency")

FAKE_RESULTS = {
    "cooling_load": CoolingLoadResult(
        cooling_load_estimate="Approx. 4.6 kW sensible + latent. Solar gain through west glazing dominates."
    ),
    "capacity": CapacityResult(
        ac_capacity_tr=1.5,
        ac_capacity_kw=5.3,
        suggested_units="Single unit",
        ac_type="Split AC",
    ),
    "placement": PlacementResult(
        recommended_position="On the north wall, facing the workstations",
        mounting_height="2.2 m above floor",
        reasoning="Keeps the unit away from direct sun and gives an even throw.",
    ),
    "airflow": AirflowResult(
        airflow_direction="Horizontal",
        coverage_strategy="Single throw along the 5 m length",
        throw_length_consideration="A 5 m throw is well within a standard split unit's range.",
        draft_avoidance="Angle the louvers above head height of the seated occupants.",
    ),
    "efficiency": EfficiencyResult(
        energy_saving_tips="- Use an inverter AC\n- Add external shading to west windows\n- Set the thermostat to 24°C"
    ),
}


@pytest.fixture
def example_payload():
    """The example office room from the design form."""
    return {
        "roomLength": 5,
        "roomWidth": 4,
        "roomHeight": 2.8,
        "roomShape": "rectangular",
        "numberOfWindows": 2,
        "windowSizeAndOrientation": "1.5x1m South, 1x1m West",
        "numberOfDoors": 1,
        "ceilingType": "normal",
        "locationCity": "Phoenix, AZ",
        "outdoorDesignTemperature": 42,
        "humidityLevel": "low",
        "sunExposure": "high",
        "roomType": "office",
        "numberOfOccupants": 2,
        "occupancyDuration": 8,
        "internalHeatSources": "2 powerful workstations, 4 monitors, server rack",
        "usagePattern": "continuous",
    }


@pytest.fixture
def fake_estimators():
    """
    Factory for fake estimator suites.

    Args (of the returned factory):
        delays: {name: seconds} to sleep before answering.
        fail: name of the estimator that raises EstimatorError.
        results: {name: result} overrides.

    The suite's `calls` dict records each call's input, and `cancelled`
    collects names of calls that were cancelled while in flight.
    """
    def factory(delays=None, fail=None, results=None):
        delays = delays or {}
        answers = dict(FAKE_RESULTS, **(results or {}))
        calls = {}
        cancelled = []

        def make(name):
            async def estimator(data):
                calls[name] = data
                try:
                    await asyncio.sleep(delays.get(name, 0))
                except asyncio.CancelledError:
                    cancelled.append(name)
                    raise
                if name == fail:
                    raise EstimatorError(name, f"{name} service unavailable")
                return answers[name]
            return estimator

        suite = EstimatorSuite(**{name: make(name) for name in ESTIMATOR_NAMES})
        return suite, calls, cancelled

    return factory
