# conftest.py — shared fixtures for the newsvendor tests

import numpy as np
import pytest

from newsvendor.config import DEFAULT_PARAMS
from newsvendor.models import ScenarioResult, SimulationParameters


@pytest.fixture
def params():
    return SimulationParameters.from_dict(DEFAULT_PARAMS)


@pytest.fixture
def rng():
    return np.random.default_rng(2024)


@pytest.fixture
def make_result():
    """Build a ScenarioResult with only the fields a test cares about."""
    def _make(profit=0.0, excess=0, shortage=0, number=1, demand=0):
        return ScenarioResult(
            simulation_number=number,
            uniform=0.5,
            z_score=0.0,
            demand=demand,
            units_sold=0,
            excess_units=excess,
            shortage_units=shortage,
            profit=profit,
        )
    return _make
