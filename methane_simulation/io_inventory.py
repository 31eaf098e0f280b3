"""
io_inventory.py
---------------

Loader for the annual US inventory table.

Expected CSV layout (one header line, columns by position):
    0 : year
    1 : US natural gas production [million ft^3/a]
    2 : US residential + commercial gas consumption [million ft^3/a]
    3 : (unused)
    4 : EPA natural gas system methane emissions [Mt/a CO2e]
    5 : net (gross - removals) US GHG emissions [Mt/a CO2e]

Columns 1, 2, 4 and 5 are divided by 1000 on load, giving billion ft^3/a
and Gt/a.
"""
from __future__ import annotations

import os
from pathlib import Path

import pandas as pd

from .types import EmissionsSeries

DEFAULT_INVENTORY_PATH = Path(os.getenv("METHANE_DATA_PATH", "US-methane-data.csv"))

YEAR_COL = 0
PRODUCTION_COL = 1
DOWNSTREAM_COL = 2
EPA_METHANE_COL = 4
NET_EMISSIONS_COL = 5

UNIT_SCALE = 1000.0


def series_from_frame(df: pd.DataFrame) -> EmissionsSeries:
    """Build an EmissionsSeries from a positional-column DataFrame."""
    if df.shape[1] <= NET_EMISSIONS_COL:
        raise KeyError(
            f"inventory table needs at least {NET_EMISSIONS_COL + 1} columns, got {df.shape[1]}"
        )

    def col(i):
        return df.iloc[:, i].to_numpy(dtype=float)

    return EmissionsSeries(
        year=df.iloc[:, YEAR_COL].to_numpy(dtype=int),
        gas_production_volume=col(PRODUCTION_COL) / UNIT_SCALE,
        gas_downstream_volume=col(DOWNSTREAM_COL) / UNIT_SCALE,
        epa_methane_co2e=col(EPA_METHANE_COL) / UNIT_SCALE,
        net_emissions=col(NET_EMISSIONS_COL) / UNIT_SCALE,
    )


def load_inventory(path: Path = DEFAULT_INVENTORY_PATH, num_header_lines: int = 1) -> EmissionsSeries:
    """
    Read the inventory CSV. Values are taken literally (no range checks).
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Inventory file not found: {path}")

    df = pd.read_csv(path, skiprows=num_header_lines, header=None)
    df = df.dropna(how="all")
    series = series_from_frame(df)
    print(f"[io] Loaded {len(series)} years ({series.year[0]}-{series.year[-1]}) from {path}")
    return series


__all__ = [
    "DEFAULT_INVENTORY_PATH",
    "series_from_frame",
    "load_inventory",
]
