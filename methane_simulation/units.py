"""
units.py
--------

Gas-volume to methane-mass conversion and CO2-equivalent scaling.

Volumes are in billion ft^3/a; with density in lb/ft^3 and 2205 lb per
tonne, mass comes out in Gt/a CH4.
"""

from __future__ import annotations

import numpy as np

from .types import GAS_DENSITY_LB_PER_FT3, LB_PER_TONNE


def volume_to_mass(volume, density: float = GAS_DENSITY_LB_PER_FT3, lb_per_tonne: float = LB_PER_TONNE):
    """Volumetric gas flow -> methane mass flow. No range checks; NaN propagates."""
    return np.asarray(volume, dtype=float) * density / lb_per_tonne


def to_co2e(mass, gwp):
    """
    CO2-equivalent flow = mass * GWP, with numpy broadcasting.

    A per-year mass of shape (ny,) and a per-trial GWP of shape (n,) give a
    (ny, n) matrix. A (ny, n) mass and an (n,) GWP apply each trial's GWP to
    every year of that trial.
    """
    mass = np.asarray(mass, dtype=float)
    gwp = np.asarray(gwp, dtype=float)
    if mass.ndim == 1 and gwp.ndim == 1:
        return mass[:, None] * gwp[None, :]
    return mass * gwp


__all__ = ["volume_to_mass", "to_co2e"]
