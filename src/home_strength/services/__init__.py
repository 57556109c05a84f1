"""Services built on top of stored workout data."""

from .progress_stats import ProgressStats

__all__ = ["ProgressStats"]
