"""Shared fixtures for the methane simulation tests."""

import sys
from pathlib import Path

import numpy as np
import pytest

sys.path.insert(0, str(Path(__file__).parent.parent))

from methane_simulation.simulator import run_simulation
from methane_simulation.types import EmissionsSeries, SimulationConfig


@pytest.fixture(scope="session")
def boundary_series():
    """Six years straddling the 2008 regime change, realistic magnitudes."""
    return EmissionsSeries(
        year=np.arange(2005, 2011),
        gas_production_volume=np.array([18051.0, 18504.0, 19266.0, 20159.0, 20624.0, 21316.0]),
        gas_downstream_volume=np.array([7904.0, 7393.0, 7870.0, 8034.0, 7870.0, 7887.0]),
        epa_methane_co2e=np.array([0.215, 0.212, 0.214, 0.217, 0.213, 0.206]),
        net_emissions=np.array([6.64, 6.53, 6.62, 6.41, 5.91, 6.13]),
    )


@pytest.fixture(scope="session")
def scenario_2005():
    """Single-year 2005 scenario with illustrative net and EPA methane."""
    return EmissionsSeries(
        year=np.array([2005]),
        gas_production_volume=np.array([18051.0]),
        gas_downstream_volume=np.array([7904.0]),
        epa_methane_co2e=np.array([0.2]),
        net_emissions=np.array([7.3]),
    )


@pytest.fixture(scope="session")
def seeded_config():
    return SimulationConfig(n_trials=200_000, seed=12345, keep_rate_draws=True)


@pytest.fixture(scope="session")
def boundary_result(boundary_series, seeded_config):
    return run_simulation(boundary_series, seeded_config)
