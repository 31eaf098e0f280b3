"""
writer.py
---------

Write analysis summaries to CSV.

Output:
    <out_dir>/adjusted_emissions_by_year.csv   one row per year
    <out_dir>/gwp_sweep_<year>.csv             one row per swept GWP
"""

from pathlib import Path

import pandas as pd


def _interval_columns(prefix, summary):
    return {
        f"{prefix}_mean": summary.mean,
        f"{prefix}_q025": summary.q025,
        f"{prefix}_q975": summary.q975,
    }


def summary_to_dataframe(analysis):
    """
    Per-year table: inputs plus mean/95% interval of every simulated quantity.

    Parameters
    ----------
    analysis : AnalysisResult
        Result produced by run_analysis().
    """
    series = analysis.series
    cols = {
        "year": series.year,
        "net_emissions": series.net_emissions,
        "epa_methane_co2e": series.epa_methane_co2e,
    }
    cols.update(_interval_columns("adjusted_gross100", analysis.adjusted_gross100))
    cols.update(_interval_columns("adjusted_gross20", analysis.adjusted_gross20))
    cols.update(_interval_columns("methane_co2e100", analysis.methane_co2e100))
    cols.update(_interval_columns("methane_co2e20", analysis.methane_co2e20))
    return pd.DataFrame(cols)


def sweep_to_dataframe(analysis):
    """One row per GWP grid point for the sweep year."""
    df = pd.DataFrame({"gwp": analysis.sweep.gwp})
    for key, values in _interval_columns("adjusted_gross", analysis.sweep_summary).items():
        df[key] = values
    df.insert(0, "year", analysis.sweep.year)
    return df


def write_results_to_csv(analysis, out_dir):
    """
    Write the per-year and sweep tables under ``out_dir``.
    Returns (per_year_df, sweep_df).
    """
    out_dir = Path(out_dir)
    out_dir.mkdir(parents=True, exist_ok=True)

    df_years = summary_to_dataframe(analysis)
    years_path = out_dir / "adjusted_emissions_by_year.csv"
    df_years.to_csv(years_path, index=False)
    print(f"[writer] Results saved to {years_path}")

    df_sweep = sweep_to_dataframe(analysis)
    sweep_path = out_dir / f"gwp_sweep_{analysis.sweep.year}.csv"
    df_sweep.to_csv(sweep_path, index=False)
    print(f"[writer] GWP sweep saved to {sweep_path}")

    return df_years, df_sweep
