"""YIN fundamental frequency estimation stages.

Each stage is a total function over numpy arrays and keeps the dtype of the
buffer it was given. "No pitch" travels through the pipeline as lag 0 and
comes out as an infinite frequency; only the estimator turns that into an
exception.

Reference: de Cheveigne & Kawahara, "YIN, a fundamental frequency estimator
for speech and music" (JASA, 2002).
"""

from __future__ import annotations

import logging

import numpy as np

from .dsp import SampleBuffer, as_samples, lag_to_hz

logger = logging.getLogger(__name__)


def difference_function(x: np.ndarray, tau_max: int) -> np.ndarray:
    """Squared difference of the buffer against itself for each lag in [1, tau_max).

    Only the first min(len(x), tau_max) samples take part, so a short buffer
    leaves the tail of the result at zero instead of failing.
    """
    diff = np.zeros(tau_max, dtype=x.dtype)
    effective_max = min(x.size, tau_max)
    for tau in range(1, effective_max):
        delta = x[: effective_max - tau] - x[tau:effective_max]
        diff[tau] = np.dot(delta, delta)
    return diff


def cmndf(diff: np.ndarray) -> np.ndarray:
    """Cumulative mean normalized difference function.

    Index 0 stays zero. Lags whose running sum is still zero are reported as
    zero rather than dividing by it.
    """
    normalized = np.zeros_like(diff)
    if diff.size < 2:
        return normalized

    tail = diff[1:]
    running_sum = np.cumsum(tail)
    lags = np.arange(1, diff.size, dtype=diff.dtype)
    np.divide(tail * lags, running_sum, out=normalized[1:], where=running_sum != 0)
    return normalized


def find_period(normalized: np.ndarray, tau_min: int, tau_max: int, threshold: float) -> int:
    """First lag in [tau_min, tau_max) under threshold, walked down to its local minimum.

    Returns 0 when nothing in the window drops below the threshold.
    """
    window = normalized[tau_min:tau_max]
    below = np.flatnonzero(window < threshold)
    if below.size == 0:
        return 0

    tau = tau_min + int(below[0])
    # strict descent only, a plateau ends the walk
    while tau + 1 < tau_max and normalized[tau + 1] < normalized[tau]:
        tau += 1
    return tau


def compute_sample_frequency(
    sample: SampleBuffer,
    tau_min: int,
    tau_max: int,
    sample_rate: int,
    threshold: float,
) -> np.floating:
    x = as_samples(sample)
    diff = difference_function(x, tau_max)
    normalized = cmndf(diff)

    if diff.any():
        # lags past the populated prefix were never scored
        sample_period = find_period(normalized, tau_min, min(x.size, tau_max), threshold)
    else:
        sample_period = 0

    logger.debug(
        "Selected lag %d in window [%d, %d) for %d samples",
        sample_period,
        tau_min,
        tau_max,
        x.size,
    )
    return lag_to_hz(sample_period, sample_rate, x.dtype)
