"""
Scatter plot rendering.

Draws coordinate pairs supplied by the orchestrator into PNG images.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt

logger = logging.getLogger(__name__)


@dataclass
class ScatterRequest:
    """
    Coordinates and labels for a single scatter chart.
    """
    xs: List[float]
    ys: List[float]
    output_path: str
    x_label: str
    y_label: str
    caption: str = field(default="")

    def __post_init__(self):
        if len(self.xs) != len(self.ys):
            raise ValueError(
                f"Coordinate length mismatch: {len(self.xs)} x-values, {len(self.ys)} y-values"
            )
        if not self.caption:
            self.caption = f"{self.x_label} vs {self.y_label}"

    @property
    def is_empty(self) -> bool:
        return len(self.xs) == 0


class ScatterPlotter:
    """
    Renders ScatterRequests to image files with matplotlib.
    """

    def __init__(
        self,
        width_px: int = 1024,
        height_px: int = 768,
        dpi: int = 100,
        marker_size: float = 9,
        color: str = "blue"
    ):
        """
        Initialize plotter.

        Args:
            width_px: Image width in pixels
            height_px: Image height in pixels
            dpi: Resolution used to convert pixels to figure inches
            marker_size: Marker area in points^2
            color: Marker fill colour
        """
        self.width_px = width_px
        self.height_px = height_px
        self.dpi = dpi
        self.marker_size = marker_size
        self.color = color

    def render(self, request: ScatterRequest) -> Optional[str]:
        """
        Draw the chart and save it.

        Args:
            request: Coordinates, labels and output path

        Returns:
            Path of the written image, or None for an empty request
        """
        if request.is_empty:
            logger.info(f"No points for {request.caption}, skipping {request.output_path}")
            return None

        min_x, max_x = min(request.xs), max(request.xs)
        min_y, max_y = min(request.ys), max(request.ys)

        output_path = Path(request.output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)

        fig, ax = plt.subplots(
            figsize=(self.width_px / self.dpi, self.height_px / self.dpi),
            dpi=self.dpi
        )
        try:
            fig.patch.set_facecolor("white")
            ax.set_title(request.caption, fontsize=20)
            ax.set_xlabel(request.x_label)
            ax.set_ylabel(request.y_label)
            # Single-valued axes still need a non-zero span
            ax.set_xlim(*_span(min_x, max_x))
            ax.set_ylim(*_span(min_y, max_y))
            ax.grid(True, alpha=0.3)
            ax.scatter(request.xs, request.ys, s=self.marker_size, c=self.color)
            fig.savefig(output_path, dpi=self.dpi, facecolor="white")
        finally:
            plt.close(fig)

        logger.debug(f"Rendered {len(request.xs)} points to {output_path}")
        return str(output_path)


def _span(low: float, high: float):
    if low == high:
        return low - 0.5, high + 0.5
    return low, high


# Design Rationale and Trade-offs:
#
# 1. Why force the Agg backend?
#    - Charts are only written to PNG files, never shown
#    - Runs the same on servers and CI without a display
#    - Trade-off: no interactive window, and the backend is fixed for the
#      whole process once this module is imported
