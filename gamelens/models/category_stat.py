"""
Category statistic data model.

Per-label summary produced by the categorical aggregator.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class CategoryStat:
    """
    Mean and median of one metric for a single category label.
    Recomputed on every run, never persisted.
    """
    label: str
    mean: float
    median: float
    count: int = 0  # Number of values in the bucket

    def format_line(self, rank: int) -> str:
        """Render as a 1-based ranked report line."""
        return f"{rank}: {self.label} -> mean: {self.mean:.2f}, median: {self.median:.2f}"
