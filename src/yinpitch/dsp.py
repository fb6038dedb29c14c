from typing import Sequence, Union

import numpy as np

SampleBuffer = Union[np.ndarray, Sequence[float]]


def as_samples(sample: SampleBuffer) -> np.ndarray:
    x = np.asarray(sample)
    if x.ndim != 1:
        raise ValueError(f"expected a mono 1-D sample buffer, got shape {x.shape}")
    if not np.issubdtype(x.dtype, np.floating):
        x = x.astype(np.float64)
    return x


def lag_to_hz(sample_period: int, sample_rate: int, dtype=np.float64) -> np.floating:
    rate = np.asarray(sample_rate, dtype=dtype)
    period = np.asarray(sample_period, dtype=dtype)
    # period 0 is the "no pitch" sentinel and must come out as +inf
    with np.errstate(divide="ignore"):
        return (rate / period)[()]
