"""Data models (configuration and results)."""

from .config import NAFFConfig
from .results import FrequencyComponent, NAFFResult

__all__ = ["NAFFConfig", "NAFFResult", "FrequencyComponent"]
