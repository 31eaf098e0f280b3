import numpy as np

from .types import NormalSpec


def make_rng(seed: int | None = None, rng: np.random.Generator | None = None) -> np.random.Generator:
    """Return ``rng`` if given, otherwise a fresh generator seeded with ``seed``."""
    if rng is not None:
        return rng
    return np.random.default_rng(seed)


def sample_normal(rng: np.random.Generator, spec: NormalSpec, size):
    """Independent draws from N(spec.mean, spec.std)."""
    return spec.mean + spec.std * rng.standard_normal(size)


def draw_yearly_trials(rng: np.random.Generator, means, stds, n: int) -> np.ndarray:
    """
    Draw a (year x trial) matrix where every cell is independent.

    Row i follows N(means[i], stds[i]); used for emission rates, which
    vary by year as well as by trial.
    """
    means = np.asarray(means, dtype=float)
    stds = np.asarray(stds, dtype=float)
    z = rng.standard_normal((means.shape[0], n))
    return means[:, None] + stds[:, None] * z


def draw_run_constant(rng: np.random.Generator, spec: NormalSpec, n: int) -> np.ndarray:
    """
    Draw one value per trial, to be shared by every year of that trial.

    Used for GWP: a single uncertain physical constant over the whole
    horizon. Never call this per year.
    """
    return sample_normal(rng, spec, n)


__all__ = ["make_rng", "sample_normal", "draw_yearly_trials", "draw_run_constant"]
