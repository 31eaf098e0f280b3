"""
report.py
---------

Console summary of the latest-year estimates.

Percent changes are taken against a fixed reference total (6.6 Gt/a CO2e
by default). GWP100 results are phrased as a decrease and GWP20 results as
an increase relative to that reference.
"""

from __future__ import annotations

from .stats import SummaryInterval

DEFAULT_REFERENCE_GT = 6.6
DEFAULT_REFERENCE_YEAR = 2005


def percent_decrease(value: float, reference: float) -> float:
    return 100.0 * (1.0 - value / reference)


def percent_increase(value: float, reference: float) -> float:
    return 100.0 * (value / reference - 1.0)


def reference_year_value(series, year: int = DEFAULT_REFERENCE_YEAR) -> float:
    """Net emissions in the reference year (Gt/a CO2e)."""
    return float(series.net_emissions[series.index_of(year)])


def latest_year_estimates(analysis, reference: float = DEFAULT_REFERENCE_GT) -> dict:
    """
    Scalar summaries for the last year of the series.

    Returns a dict with ``year``, ``adjusted100``/``adjusted20``/
    ``methane100``/``methane20`` (SummaryInterval rows) and
    ``change100``/``change20`` (percent, as (mean, from q025, from q975)).
    """
    last = len(analysis.series) - 1
    adj100 = analysis.adjusted_gross100.row(last)
    adj20 = analysis.adjusted_gross20.row(last)
    return {
        "year": int(analysis.series.year[last]),
        "reference": reference,
        "adjusted100": adj100,
        "adjusted20": adj20,
        "change100": tuple(percent_decrease(v, reference) for v in adj100.as_tuple()),
        "change20": tuple(percent_increase(v, reference) for v in adj20.as_tuple()),
        "methane100": analysis.methane_co2e100.row(last),
        "methane20": analysis.methane_co2e20.row(last),
    }


def _triple(s: SummaryInterval) -> str:
    return f"{s.mean:.3g} ({s.q025:.3g} to {s.q975:.3g})"


def format_report(analysis, reference: float = DEFAULT_REFERENCE_GT) -> list[str]:
    est = latest_year_estimates(analysis, reference)
    year = est["year"]
    c100 = est["change100"]
    c20 = est["change20"]
    return [
        f"----------------------- {year} US net emission estimates -----------------------",
        f"GWP100: {_triple(est['adjusted100'])} Gt/a, "
        f"{c100[0]:.3g} ({c100[1]:.3g} to {c100[2]:.3g}) percent decrease.",
        f"GWP20: {_triple(est['adjusted20'])} Gt/a, "
        f"{c20[0]:.3g} ({c20[1]:.3g} to {c20[2]:.3g}) percent increase.",
        f"----------------------- {year} US methane from natural gas -----------------------",
        f"GWP100: {_triple(est['methane100'])} Gt CO2e/a.",
        f"GWP20: {_triple(est['methane20'])} Gt CO2e/a.",
        "----------------------- methane GWP samples -----------------------",
        f"GWP100: {_triple(analysis.sweep.gwp100_summary)}.",
        f"GWP20: {_triple(analysis.sweep.gwp20_summary)}.",
    ]


def print_report(analysis, reference: float = DEFAULT_REFERENCE_GT):
    for line in format_report(analysis, reference):
        print(line)
