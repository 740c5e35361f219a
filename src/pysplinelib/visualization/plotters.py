import logging
import re
from pathlib import Path
from typing import Optional, Sequence

import matplotlib.pyplot as plt
import numpy as np

from pysplinelib.algorithms.interpolation import evaluate_array
from pysplinelib.core.models import Point, Segment
from pysplinelib.data.constants import ProcessingConstants

logger = logging.getLogger(__name__)


class SplineVisualizer:
    """Handles visualization of fitted splines."""

    def __init__(self, plot_directory: Path) -> None:
        self.plot_directory = Path(plot_directory)
        self.is_enabled = True
        self.setup_style()
        logger.debug("SplineVisualizer initialized, plots go to: %s", self.plot_directory)

    @staticmethod
    def setup_style() -> None:
        plt.rcParams.update({
            'font.size': 10,
            'font.family': 'sans-serif',
            'font.sans-serif': ['DejaVu Sans', 'Arial', 'Helvetica', 'Liberation Sans'],
            'axes.titlesize': 12,
            'axes.labelsize': 10,
            'legend.fontsize': 9,
            'axes.grid': True,
            'grid.alpha': 0.3,
            'grid.linestyle': '--',
            'axes.axisbelow': True,
            'figure.facecolor': 'white',
            'savefig.facecolor': 'white',
            'savefig.dpi': 150,
        })

    def plot_spline(self, segments: Sequence[Segment], points: Sequence[Point], name: str,
                    queries: Optional[Sequence] = None,
                    num_points: int = ProcessingConstants.DEFAULT_VISUALIZATION_POINTS) -> Optional[Path]:
        """
        Plot every segment over its own range together with the input points.
        Args:
            segments: Fitted segments
            points: Points the spline was fitted through
            name: Title of the plot, also used for the file name
            queries: Optional abscissas to mark with their evaluated value
            num_points: Samples per segment
        Returns:
            Path of the saved PNG, or None when visualization is disabled
        """
        if not self.is_enabled:
            logger.debug("Visualization disabled, skipping plot for '%s'", name)
            return None
        logger.info("Plotting spline '%s' with %d segments", name, len(segments))
        self.plot_directory.mkdir(parents=True, exist_ok=True)
        fig, ax = plt.subplots(figsize=(10, 6))
        try:
            colors = plt.cm.viridis(np.linspace(0, 1, max(len(segments), 1)))
            for i, (segment, color) in enumerate(zip(segments, colors)):
                xs = np.linspace(float(segment.range.x_min), float(segment.range.x_max), num_points)
                ax.plot(xs, evaluate_array([segment], xs), color=color, linewidth=2,
                        label=f"segment {i}" if len(segments) <= 10 else None)
            ax.scatter([float(p.x) for p in points], [float(p.y) for p in points],
                       color='black', zorder=5, label='data points')
            if queries:
                qx = np.asarray([float(q) for q in queries], dtype=np.float64)
                qy = evaluate_array(segments, qx)
                inside = ~np.isnan(qy)
                ax.scatter(qx[inside], qy[inside], marker='x', color='red', s=60, zorder=6, label='queries')
                for x_value in qx[~inside]:
                    ax.axvline(x_value, color='red', linestyle=':', alpha=0.6)
            ax.set_title(name)
            ax.set_xlabel('x')
            ax.set_ylabel('y')
            ax.legend(loc='best')
            filepath = self.plot_directory / f"{self._safe_filename(name)}.png"
            fig.savefig(str(filepath), bbox_inches='tight')
            logger.info("Saved spline plot: %s", filepath)
            return filepath
        finally:
            plt.close(fig)

    @staticmethod
    def _safe_filename(name: str) -> str:
        return re.sub(r'[^A-Za-z0-9_.-]+', '_', name).strip('_') or 'spline'
