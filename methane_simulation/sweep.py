"""
sweep.py
--------

GWP sensitivity for a single year.

The methane-emission trials from a finished simulation are reused as-is;
only the GWP is replaced by a deterministic grid, which isolates the effect
of the GWP choice from emission-rate uncertainty.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from .errors import InputShapeError
from .simulator import SimulationResult
from .stats import SummaryInterval, summarize
from .types import EmissionsSeries, SweepConfig


@dataclass
class SweepResult:
    year: int
    gwp: np.ndarray              # (point,)
    adjusted_gross: np.ndarray   # (point x trial), Gt/a CO2e
    gwp100_summary: SummaryInterval
    gwp20_summary: SummaryInterval

    def closest_index(self, gwp_value: float) -> int:
        """Grid index whose GWP is nearest to ``gwp_value``."""
        return int(np.argmin(np.abs(self.gwp - gwp_value)))


def gwp_grid(gwp_min: float = 10.0, gwp_max: float = 115.0, n_points: int = 100) -> np.ndarray:
    SweepConfig(gwp_min=gwp_min, gwp_max=gwp_max, n_points=n_points).validate()
    return np.linspace(gwp_min, gwp_max, n_points)


def sweep_adjusted_gross(net: float, epa_methane: float, methane_trials, gwp) -> np.ndarray:
    """adjusted[g, t] = net - epa_methane + gwp[g] * methane_trials[t]."""
    methane_trials = np.asarray(methane_trials, dtype=float)
    gwp = np.asarray(gwp, dtype=float)
    return (net - epa_methane) + gwp[:, None] * methane_trials[None, :]


def run_gwp_sweep(
    result: SimulationResult,
    series: EmissionsSeries,
    sweep: SweepConfig | None = None,
) -> SweepResult:
    """
    Adjusted gross emissions vs. GWP for ``sweep.year`` (latest year if None).
    """
    if sweep is None:
        sweep = SweepConfig()
    sweep.validate()
    if len(series) == 0:
        raise InputShapeError("cannot sweep an empty series")
    if result.methane_emissions.shape[0] != len(series):
        raise InputShapeError(
            f"simulation has {result.methane_emissions.shape[0]} years, series has {len(series)}"
        )

    idx = len(series) - 1 if sweep.year is None else series.index_of(sweep.year)
    grid = gwp_grid(sweep.gwp_min, sweep.gwp_max, sweep.n_points)

    adjusted = sweep_adjusted_gross(
        float(series.net_emissions[idx]),
        float(series.epa_methane_co2e[idx]),
        result.methane_row(idx),
        grid,
    )
    return SweepResult(
        year=int(series.year[idx]),
        gwp=grid,
        adjusted_gross=adjusted,
        gwp100_summary=summarize(result.gwp100),
        gwp20_summary=summarize(result.gwp20),
    )


__all__ = ["SweepResult", "gwp_grid", "sweep_adjusted_gross", "run_gwp_sweep"]
