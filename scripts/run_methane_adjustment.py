import argparse
import sys
from pathlib import Path

# Ensure repo root is on sys.path when invoked as a script
ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from methane_simulation.io_inventory import DEFAULT_INVENTORY_PATH, load_inventory
from methane_simulation.main import run_analysis
from methane_simulation.report import (
    DEFAULT_REFERENCE_GT,
    DEFAULT_REFERENCE_YEAR,
    print_report,
    reference_year_value,
)
from methane_simulation.types import SimulationConfig, SweepConfig
from methane_simulation.writer import write_results_to_csv


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Adjust US GHG emissions for measured natural-gas methane.")
    parser.add_argument("--data", type=Path, default=DEFAULT_INVENTORY_PATH, help="Inventory CSV")
    parser.add_argument("--n-trials", type=int, default=1_000_000, help="Monte Carlo trials")
    parser.add_argument("--seed", type=int, default=None, help="RNG seed for reproducible runs")
    parser.add_argument("--sweep-min", type=float, default=10.0, help="Lowest swept GWP")
    parser.add_argument("--sweep-max", type=float, default=115.0, help="Highest swept GWP")
    parser.add_argument("--sweep-points", type=int, default=100, help="Number of swept GWP values")
    parser.add_argument("--sweep-year", type=int, default=None, help="Sweep year (default: latest)")
    parser.add_argument("--reference", type=float, default=DEFAULT_REFERENCE_GT,
                        help="Reference total for percent changes [Gt/a CO2e]")
    parser.add_argument("--out-dir", type=Path, default=Path("results_methane"), help="Output directory for CSVs")
    args = parser.parse_args()

    series = load_inventory(args.data)

    analysis = run_analysis(
        series,
        config=SimulationConfig(n_trials=args.n_trials, seed=args.seed),
        sweep_config=SweepConfig(
            gwp_min=args.sweep_min,
            gwp_max=args.sweep_max,
            n_points=args.sweep_points,
            year=args.sweep_year,
        ),
    )

    write_results_to_csv(analysis, args.out_dir)

    if DEFAULT_REFERENCE_YEAR in series.year:
        v = reference_year_value(series, DEFAULT_REFERENCE_YEAR)
        print(f"[main] Net emissions in {DEFAULT_REFERENCE_YEAR}: {round(10 * v) / 10:.2g} Gt/a")
    print_report(analysis, reference=args.reference)
