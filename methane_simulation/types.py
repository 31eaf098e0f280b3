from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

import numpy as np

from .errors import InputShapeError, InvalidParameterError, PreconditionError

Z_95 = 1.96  # two-sided 95% normal quantile
REGIME_CHANGE_YEAR = 2008


@dataclass(frozen=True)
class NormalSpec:
    """Normal distribution given by its mean and standard deviation."""
    mean: float
    std: float

    @classmethod
    def from_half_width(cls, mean: float, half_width_95: float) -> "NormalSpec":
        """Build a spec from a 95% confidence half-width (std = hw / 1.96)."""
        return cls(mean=mean, std=half_width_95 / Z_95)

    def scaled(self, factor: float) -> "NormalSpec":
        return NormalSpec(mean=self.mean * factor, std=self.std * factor)

    def validate(self, name: str = "distribution"):
        if not np.isfinite(self.mean):
            raise InvalidParameterError(f"{name}: mean must be finite, got {self.mean}")
        if not np.isfinite(self.std) or self.std < 0:
            raise InvalidParameterError(f"{name}: std must be finite and >= 0, got {self.std}")


@dataclass(frozen=True)
class RegimeParameter:
    """
    Distribution parameter that switches at a policy-change year.

    Years strictly before ``boundary_year`` use ``pre``; the boundary year
    itself and later years use ``post``.
    """
    pre: NormalSpec
    post: NormalSpec
    boundary_year: int = REGIME_CHANGE_YEAR

    def resolve(self, year: int) -> NormalSpec:
        return self.pre if year < self.boundary_year else self.post

    def resolve_series(self, years) -> tuple[np.ndarray, np.ndarray]:
        """Per-year (mean, std) arrays for a sequence of years."""
        years = np.asarray(years)
        is_pre = years < self.boundary_year
        means = np.where(is_pre, self.pre.mean, self.post.mean).astype(float)
        stds = np.where(is_pre, self.pre.std, self.post.std).astype(float)
        return means, stds

    def validate(self, name: str = "regime"):
        self.pre.validate(f"{name} (pre-{self.boundary_year})")
        self.post.validate(f"{name} ({self.boundary_year}+)")


# Emission rates are quoted in percent of throughput; stored as fractions.
UPSTREAM_PRE_2008 = NormalSpec.from_half_width(1.32, 0.285).scaled(0.01)  # Alvarez 2018
UPSTREAM_POST_2008 = NormalSpec(2.95, 0.087).scaled(0.01)                 # Sherwin 2024
DOWNSTREAM = NormalSpec(2.48, 0.388).scaled(0.01)  # Sargent 2021, McKain 2015, Wunch 2016, Lamb 2016

# IEA Methane Tracker 2021
GWP100 = NormalSpec.from_half_width(29.8, 11.0)
GWP20 = NormalSpec.from_half_width(82.5, 25.8)

GAS_DENSITY_LB_PER_FT3 = 0.051  # natural gas at standard temperature and pressure
LB_PER_TONNE = 2205.0


def _default_upstream() -> RegimeParameter:
    return RegimeParameter(pre=UPSTREAM_PRE_2008, post=UPSTREAM_POST_2008)


@dataclass
class SimulationConfig:
    n_trials: int = 1_000_000
    seed: Optional[int] = None
    upstream: RegimeParameter = field(default_factory=_default_upstream)
    downstream: NormalSpec = DOWNSTREAM
    gwp100: NormalSpec = GWP100
    gwp20: NormalSpec = GWP20
    gas_density: float = GAS_DENSITY_LB_PER_FT3
    lb_per_tonne: float = LB_PER_TONNE
    keep_rate_draws: bool = False

    def validate(self):
        n = self.n_trials
        if isinstance(n, bool) or not isinstance(n, (int, np.integer)):
            raise InvalidParameterError(f"n_trials must be an integer, got {n!r}")
        if n < 0:
            raise InvalidParameterError(f"n_trials must be >= 0, got {n}")
        if n == 0:
            raise PreconditionError("n_trials is 0: the trial axis would be empty")
        self.upstream.validate("upstream rate")
        self.downstream.validate("downstream rate")
        self.gwp100.validate("GWP100")
        self.gwp20.validate("GWP20")
        if not np.isfinite(self.gas_density) or not np.isfinite(self.lb_per_tonne) or self.lb_per_tonne == 0:
            raise InvalidParameterError("gas_density and lb_per_tonne must be finite; lb_per_tonne non-zero")


@dataclass
class SweepConfig:
    gwp_min: float = 10.0
    gwp_max: float = 115.0
    n_points: int = 100
    year: Optional[int] = None  # None -> latest year in the series

    def validate(self):
        if isinstance(self.n_points, bool) or not isinstance(self.n_points, (int, np.integer)) or self.n_points < 1:
            raise InvalidParameterError(f"n_points must be a positive integer, got {self.n_points!r}")
        if not (np.isfinite(self.gwp_min) and np.isfinite(self.gwp_max)):
            raise InvalidParameterError("GWP sweep bounds must be finite")
        if self.gwp_min >= self.gwp_max:
            raise InvalidParameterError(
                f"gwp_min must be < gwp_max, got [{self.gwp_min}, {self.gwp_max}]"
            )


@dataclass(frozen=True)
class EmissionsSeries:
    """
    Annual inventory inputs, one entry per year.

    Units: volumes in billion ft^3/a, emissions in Gt/a CO2e. Values are
    trusted as given; only shapes and year ordering are checked.
    """
    year: np.ndarray
    gas_production_volume: np.ndarray
    gas_downstream_volume: np.ndarray
    epa_methane_co2e: np.ndarray
    net_emissions: np.ndarray

    def __post_init__(self):
        year = np.asarray(self.year)
        if year.ndim != 1:
            raise InputShapeError(f"year must be 1-D, got shape {year.shape}")
        ny = year.shape[0]
        for name in ("gas_production_volume", "gas_downstream_volume", "epa_methane_co2e", "net_emissions"):
            arr = np.array(getattr(self, name), dtype=float)
            if arr.ndim != 1 or arr.shape[0] != ny:
                raise InputShapeError(f"{name} has shape {arr.shape}, expected ({ny},)")
            arr.flags.writeable = False
            object.__setattr__(self, name, arr)
        if ny > 1 and not np.all(np.diff(year) > 0):
            raise InputShapeError("years must be strictly increasing")
        year = np.array(year, dtype=int)
        year.flags.writeable = False
        object.__setattr__(self, "year", year)

    def __len__(self) -> int:
        return int(self.year.shape[0])

    def index_of(self, year: int) -> int:
        hits = np.flatnonzero(self.year == year)
        if hits.size == 0:
            raise InputShapeError(f"year {year} not in series years {self.year.tolist()}")
        return int(hits[0])


__all__ = [
    "NormalSpec",
    "RegimeParameter",
    "SimulationConfig",
    "SweepConfig",
    "EmissionsSeries",
    "UPSTREAM_PRE_2008",
    "UPSTREAM_POST_2008",
    "DOWNSTREAM",
    "GWP100",
    "GWP20",
    "GAS_DENSITY_LB_PER_FT3",
    "LB_PER_TONNE",
    "REGIME_CHANGE_YEAR",
    "Z_95",
]
