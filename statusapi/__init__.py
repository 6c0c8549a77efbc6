"""Instance status and health-check HTTP service."""

__version__ = "1.0.0"
