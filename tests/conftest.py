"""
Pytest configuration and shared fixtures for yinpitch tests.
"""
from typing import Callable

import numpy as np
import pytest


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "unit: Unit tests for a single pipeline stage"
    )
    config.addinivalue_line(
        "markers", "integration: Full estimator runs on synthetic buffers"
    )


@pytest.fixture
def sine_wave() -> Callable[..., np.ndarray]:
    """Factory for noiseless sine tones starting at phase zero."""
    def _make(frequency: float, sample_rate: int, num_samples: int = None,
              dtype=np.float64) -> np.ndarray:
        if num_samples is None:
            num_samples = sample_rate
        t = np.arange(num_samples) / sample_rate
        return np.sin(2 * np.pi * frequency * t).astype(dtype)
    return _make


@pytest.fixture
def alternating_wave() -> np.ndarray:
    """80 samples of 1, 0, -1, 0, ... (period of four samples)."""
    example = []
    prev_value = -1.0
    for i in range(80):
        if i % 2 != 0:
            example.append(0.0)
        else:
            prev_value *= -1.0
            example.append(prev_value)
    return np.array(example)
