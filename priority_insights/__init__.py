"""Priority scoring and productivity insights engine."""

__version__ = "0.1.0"
