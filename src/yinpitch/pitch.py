from __future__ import annotations

import logging
from typing import Iterable, List, Optional

import numpy as np

from .config import YinConfig
from .dsp import SampleBuffer
from .errors import UnknownPitchError
from .yin import compute_sample_frequency

logger = logging.getLogger(__name__)


class Yin:
    """Monophonic pitch estimator using the YIN algorithm.

    The estimator only holds a frozen :class:`YinConfig`, so a single
    instance can be shared between threads and reused for any number of
    buffers.

    Args:
        threshold: Absolute threshold on the normalized difference function
        freq_min: Lowest detectable frequency in Hz
        freq_max: Highest detectable frequency in Hz
        sample_rate: Sample rate of the buffers in Hz

    Raises:
        ConfigurationError: If the frequency range gives an empty lag window
    """

    __slots__ = ("_config",)

    def __init__(self, threshold: float, freq_min: float, freq_max: float, sample_rate: int):
        config = YinConfig(
            threshold=threshold,
            min_freq=freq_min,
            max_freq=freq_max,
            sample_rate=sample_rate,
        ).validate()
        object.__setattr__(self, "_config", config)
        logger.debug(
            "Yin estimator: lags [%d, %d) at %d Hz, threshold %s",
            config.tau_min,
            config.tau_max,
            config.sample_rate,
            config.threshold,
        )

    @classmethod
    def from_config(cls, config: YinConfig) -> "Yin":
        return cls(
            threshold=config.threshold,
            freq_min=config.min_freq,
            freq_max=config.max_freq,
            sample_rate=config.sample_rate,
        )

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __repr__(self) -> str:
        return (
            f"Yin(threshold={self.threshold}, tau_min={self.tau_min}, "
            f"tau_max={self.tau_max}, sample_rate={self.sample_rate})"
        )

    @property
    def config(self) -> YinConfig:
        return self._config

    @property
    def threshold(self) -> float:
        return self._config.threshold

    @property
    def tau_min(self) -> int:
        return self._config.tau_min

    @property
    def tau_max(self) -> int:
        return self._config.tau_max

    @property
    def sample_rate(self) -> int:
        return self._config.sample_rate

    def estimate_freq(self, sample: SampleBuffer) -> np.floating:
        """Estimate the fundamental frequency of a buffer.

        The result has the floating precision of the buffer (float64 for
        non-floating input).

        Raises:
            UnknownPitchError: If no period is found between freq_min and freq_max
            ValueError: If the buffer is not one-dimensional
        """
        sample_frequency = compute_sample_frequency(
            sample,
            self.tau_min,
            self.tau_max,
            self.sample_rate,
            self.threshold,
        )
        if np.isinf(sample_frequency):
            raise UnknownPitchError(
                f"No periodicity detected between {self._config.min_freq} "
                f"and {self._config.max_freq} Hz"
            )
        return sample_frequency

    def estimate_frames(self, frames: Iterable[SampleBuffer]) -> List[Optional[float]]:
        estimates: List[Optional[float]] = []
        for frame in frames:
            try:
                estimates.append(self.estimate_freq(frame))
            except UnknownPitchError:
                estimates.append(None)
        return estimates
