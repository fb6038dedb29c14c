class PitchError(Exception):
    """Base exception for pitch estimation errors"""
    pass


class UnknownPitchError(PitchError):
    """Raised when no periodicity is detected inside the configured range"""
    pass


class ConfigurationError(PitchError, ValueError):
    """Raised when an estimator configuration yields no usable lag window"""
    pass
