"""Tests for estimator configuration"""

import pytest

from yinpitch.config import YinConfig
from yinpitch.errors import ConfigurationError


@pytest.mark.unit
class TestYinConfig:

    def test_defaults(self):
        config = YinConfig()
        assert config.threshold == 0.1
        assert config.sample_rate == 44100
        assert config.tau_min == 49
        assert config.tau_max == 551

    @pytest.mark.parametrize('min_freq,max_freq,sample_rate,tau_min,tau_max', [
        (2.0, 5.0, 12, 2, 6),
        (10.0, 100.0, 44100, 441, 4410),
        (3000.0, 5000.0, 44100, 8, 14),
        (10.0, 30.0, 80, 2, 8),
    ])
    def test_lag_bounds_truncate(self, min_freq, max_freq, sample_rate, tau_min, tau_max):
        config = YinConfig(0.1, min_freq, max_freq, sample_rate)
        assert config.tau_min == tau_min
        assert config.tau_max == tau_max

    def test_validate_returns_self(self):
        config = YinConfig()
        assert config.validate() is config

    @pytest.mark.parametrize('kwargs', [
        dict(sample_rate=0),
        dict(min_freq=0.0),
        dict(min_freq=-10.0),
        dict(min_freq=500.0, max_freq=500.0),
        dict(min_freq=900.0, max_freq=80.0),
        dict(threshold=0.0),
        dict(max_freq=50000.0),
        dict(min_freq=4400.0, max_freq=4410.0),
    ])
    def test_rejects_unusable_configuration(self, kwargs):
        with pytest.raises(ConfigurationError):
            YinConfig(**kwargs).validate()

    def test_configuration_error_is_value_error(self):
        with pytest.raises(ValueError):
            YinConfig(sample_rate=-1).validate()

    def test_is_frozen(self):
        config = YinConfig()
        with pytest.raises(AttributeError):
            config.threshold = 0.2
