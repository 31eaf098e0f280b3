"""
stats.py
--------

Trial-axis summaries: mean and 95% interval.

Every interval in the package goes through ``summarize`` so that all
reported bounds use the same estimator, numpy's "linear" quantile
(Hyndman & Fan type 7).
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from .errors import PreconditionError

LOWER_Q = 0.025
UPPER_Q = 0.975
QUANTILE_METHOD = "linear"


@dataclass(frozen=True)
class SummaryInterval:
    mean: np.ndarray
    q025: np.ndarray
    q975: np.ndarray

    def row(self, index: int) -> "SummaryInterval":
        """Scalar triple for one year (or sweep point)."""
        return SummaryInterval(
            mean=float(self.mean[index]),
            q025=float(self.q025[index]),
            q975=float(self.q975[index]),
        )

    def as_tuple(self):
        return self.mean, self.q025, self.q975


def summarize(array, axis: int = -1) -> SummaryInterval:
    """
    Reduce ``array`` along the trial ``axis`` to (mean, q025, q975).

    1-D input yields scalars; (year x trial) input yields per-year arrays.
    """
    arr = np.asarray(array, dtype=float)
    if arr.ndim == 0:
        raise PreconditionError("cannot summarize a scalar; expected a trial axis")
    if arr.shape[axis] == 0:
        raise PreconditionError("cannot summarize an empty trial axis")

    mean = np.mean(arr, axis=axis)
    q025, q975 = np.quantile(arr, [LOWER_Q, UPPER_Q], axis=axis, method=QUANTILE_METHOD)
    if arr.ndim == 1:
        return SummaryInterval(mean=float(mean), q025=float(q025), q975=float(q975))
    return SummaryInterval(mean=mean, q025=q025, q975=q975)


__all__ = ["SummaryInterval", "summarize", "LOWER_Q", "UPPER_Q", "QUANTILE_METHOD"]
