"""
simulator.py
------------

Monte Carlo propagation of methane-rate and GWP uncertainty into adjusted
gross US emissions.

Per run:
    1) Upstream/midstream leak rate, (year x trial), regime by year
    2) Downstream leak rate, (year x trial)
    3) Production and downstream volumes -> CH4 mass
    4) Methane emissions = Ru * production mass + Rd * downstream mass
    5) GWP100 and GWP20, one draw per trial, shared by all years
    6) Methane CO2e at both horizons
    7) Adjusted gross = net - EPA gas-system methane + methane CO2e

Draw order is fixed (upstream, downstream, GWP100, GWP20) so one seed
determines the whole result.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import numpy as np

from .sampling import draw_run_constant, draw_yearly_trials, make_rng
from .types import EmissionsSeries, SimulationConfig
from .units import to_co2e, volume_to_mass


@dataclass
class SimulationResult:
    """Raw (year x trial) outputs of one simulation run."""
    year: np.ndarray
    methane_emissions: np.ndarray  # Gt/a CH4
    methane_co2e100: np.ndarray    # Gt/a CO2e
    methane_co2e20: np.ndarray
    adjusted_gross100: np.ndarray
    adjusted_gross20: np.ndarray
    gwp100: np.ndarray             # (trial,)
    gwp20: np.ndarray
    upstream_rate: Optional[np.ndarray] = None
    downstream_rate: Optional[np.ndarray] = None

    @property
    def n_trials(self) -> int:
        return int(self.gwp100.shape[0])

    def methane_row(self, index: int) -> np.ndarray:
        return self.methane_emissions[index]


def adjust_gross(net_emissions, epa_methane_co2e, methane_co2e) -> np.ndarray:
    """Swap the EPA gas-system methane estimate for the simulated one."""
    baseline = np.asarray(net_emissions, dtype=float) - np.asarray(epa_methane_co2e, dtype=float)
    return baseline[:, None] + methane_co2e


def simulate_methane_emissions(series: EmissionsSeries, config: SimulationConfig, rng: np.random.Generator):
    """
    Steps 1-4: per-year, per-trial methane emissions [Gt/a CH4].

    Returns (methane, upstream_rate, downstream_rate).
    """
    n = config.n_trials
    up_means, up_stds = config.upstream.resolve_series(series.year)
    upstream_rate = draw_yearly_trials(rng, up_means, up_stds, n)

    ny = len(series)
    downstream_rate = draw_yearly_trials(
        rng,
        np.full(ny, config.downstream.mean),
        np.full(ny, config.downstream.std),
        n,
    )

    production_mass = volume_to_mass(series.gas_production_volume, config.gas_density, config.lb_per_tonne)
    downstream_mass = volume_to_mass(series.gas_downstream_volume, config.gas_density, config.lb_per_tonne)

    methane = upstream_rate * production_mass[:, None] + downstream_rate * downstream_mass[:, None]
    return methane, upstream_rate, downstream_rate


def run_simulation(
    series: EmissionsSeries,
    config: SimulationConfig | None = None,
    rng: np.random.Generator | None = None,
) -> SimulationResult:
    """
    Run one Monte Carlo simulation over the whole series.

    Parameters
    ----------
    series : EmissionsSeries
        Annual inventory inputs.
    config : SimulationConfig or None
        Trial count, seed and distributions; defaults if None.
    rng : np.random.Generator or None
        Explicit generator; if None one is created from ``config.seed``.

    Returns
    -------
    SimulationResult
    """
    if config is None:
        config = SimulationConfig()
    config.validate()
    rng = make_rng(config.seed, rng)

    methane, upstream_rate, downstream_rate = simulate_methane_emissions(series, config, rng)

    gwp100 = draw_run_constant(rng, config.gwp100, config.n_trials)
    gwp20 = draw_run_constant(rng, config.gwp20, config.n_trials)

    co2e100 = to_co2e(methane, gwp100)
    co2e20 = to_co2e(methane, gwp20)

    result = SimulationResult(
        year=series.year,
        methane_emissions=methane,
        methane_co2e100=co2e100,
        methane_co2e20=co2e20,
        adjusted_gross100=adjust_gross(series.net_emissions, series.epa_methane_co2e, co2e100),
        adjusted_gross20=adjust_gross(series.net_emissions, series.epa_methane_co2e, co2e20),
        gwp100=gwp100,
        gwp20=gwp20,
    )
    if config.keep_rate_draws:
        result.upstream_rate = upstream_rate
        result.downstream_rate = downstream_rate
    return result


__all__ = [
    "SimulationResult",
    "adjust_gross",
    "simulate_methane_emissions",
    "run_simulation",
]
