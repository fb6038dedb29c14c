from __future__ import annotations

from dataclasses import dataclass

from .errors import ConfigurationError


@dataclass(frozen=True)
class YinConfig:
    threshold: float = 0.1
    min_freq: float = 80.0
    max_freq: float = 900.0
    sample_rate: int = 44100

    @property
    def tau_min(self) -> int:
        return int(self.sample_rate // self.max_freq)

    @property
    def tau_max(self) -> int:
        return int(self.sample_rate // self.min_freq)

    def validate(self) -> "YinConfig":
        if self.sample_rate <= 0:
            raise ConfigurationError(f"sample_rate must be positive, got {self.sample_rate}")
        if self.min_freq <= 0:
            raise ConfigurationError(f"min_freq must be positive, got {self.min_freq}")
        if self.max_freq <= self.min_freq:
            raise ConfigurationError(
                f"max_freq ({self.max_freq}) must be greater than min_freq ({self.min_freq})"
            )
        if self.threshold <= 0:
            raise ConfigurationError(f"threshold must be positive, got {self.threshold}")
        # max_freq above the sample rate truncates the shortest lag to zero
        if self.tau_min < 1:
            raise ConfigurationError(
                f"max_freq {self.max_freq} Hz is too high for a {self.sample_rate} Hz sample rate"
            )
        if self.tau_min >= self.tau_max:
            raise ConfigurationError(
                f"empty lag window [{self.tau_min}, {self.tau_max}) for "
                f"{self.min_freq}-{self.max_freq} Hz at {self.sample_rate} Hz"
            )
        return self
