"""
Inventory loading, CSV output and console report.
"""

import numpy as np
import pandas as pd
import pytest

from methane_simulation.io_inventory import load_inventory, series_from_frame
from methane_simulation.main import run_analysis
from methane_simulation.report import (
    format_report,
    latest_year_estimates,
    percent_decrease,
    percent_increase,
    print_report,
    reference_year_value,
)
from methane_simulation.types import SimulationConfig, SweepConfig
from methane_simulation.writer import summary_to_dataframe, sweep_to_dataframe, write_results_to_csv

CSV_TEXT = """US methane inventory export
Year,Production,ResCom,Other,EPA gas CH4,Net
2021,34518000,9034000,0,180.2,5582.1
2022,36351000,9514000,0,181.7,5489.0
"""


@pytest.fixture(scope="module")
def small_analysis(boundary_series):
    return run_analysis(
        boundary_series,
        SimulationConfig(n_trials=2000, seed=11),
        SweepConfig(n_points=7),
    )


class TestInventoryLoader:
    def test_load_scales_columns(self, tmp_path):
        path = tmp_path / "inventory.csv"
        path.write_text(CSV_TEXT)
        series = load_inventory(path, num_header_lines=2)
        np.testing.assert_array_equal(series.year, [2021, 2022])
        np.testing.assert_allclose(series.gas_production_volume, [34518.0, 36351.0])
        np.testing.assert_allclose(series.gas_downstream_volume, [9034.0, 9514.0])
        np.testing.assert_allclose(series.epa_methane_co2e, [0.1802, 0.1817])
        np.testing.assert_allclose(series.net_emissions, [5.5821, 5.489])

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_inventory(tmp_path / "nope.csv")

    def test_too_few_columns(self):
        with pytest.raises(KeyError):
            series_from_frame(pd.DataFrame([[2020, 1.0, 2.0]]))


class TestWriter:
    def test_summary_table(self, small_analysis, boundary_series):
        df = summary_to_dataframe(small_analysis)
        assert len(df) == len(boundary_series)
        assert list(df["year"]) == list(boundary_series.year)
        for col in ("adjusted_gross100_mean", "adjusted_gross20_q025", "methane_co2e20_q975"):
            assert col in df.columns
        assert (df["adjusted_gross100_q025"] <= df["adjusted_gross100_q975"]).all()

    def test_sweep_table(self, small_analysis):
        df = sweep_to_dataframe(small_analysis)
        assert len(df) == 7
        assert (df["year"] == 2010).all()
        assert df["gwp"].iloc[0] == 10.0

    def test_write_csv(self, small_analysis, tmp_path):
        write_results_to_csv(small_analysis, tmp_path / "out")
        assert (tmp_path / "out" / "adjusted_emissions_by_year.csv").exists()
        back = pd.read_csv(tmp_path / "out" / "gwp_sweep_2010.csv")
        assert len(back) == 7


class TestReport:
    def test_percent_changes(self):
        assert percent_decrease(5.94, 6.6) == pytest.approx(10.0)
        assert percent_increase(7.26, 6.6) == pytest.approx(10.0)

    def test_latest_year_estimates(self, small_analysis):
        est = latest_year_estimates(small_analysis, reference=6.6)
        assert est["year"] == 2010
        assert est["adjusted100"].mean == pytest.approx(small_analysis.adjusted_gross100.mean[-1])
        assert est["change100"][0] == pytest.approx(percent_decrease(est["adjusted100"].mean, 6.6))
        assert est["change20"][2] == pytest.approx(percent_increase(est["adjusted20"].q975, 6.6))

    def test_reference_year_value(self, boundary_series):
        assert reference_year_value(boundary_series) == pytest.approx(6.64)

    def test_format_report_layout(self, small_analysis):
        lines = format_report(small_analysis)
        assert lines[0].startswith("----------------------- 2010 US net emission estimates")
        assert lines[1].startswith("GWP100: ") and lines[1].endswith("percent decrease.")
        assert lines[2].startswith("GWP20: ") and lines[2].endswith("percent increase.")
        assert lines[4].endswith("Gt CO2e/a.")
        assert len(lines) == 9

    def test_print_report(self, small_analysis, capsys):
        print_report(small_analysis)
        out = capsys.readouterr().out
        assert "US methane from natural gas" in out
