"""
Legend strip: evenly spaced samples of the color scale's interpolator.
"""

import numpy as np

from heatmap.config import (
    LEGEND_HEIGHT,
    LEGEND_LABELS,
    LEGEND_SAMPLES,
    LEGEND_STRIP_WIDTH,
    LEGEND_STRIP_X,
    LEGEND_WIDTH,
)
from heatmap.engine.scales import SequentialColorScale
from heatmap.models.heatmap import Legend, LegendLabel, LegendSwatch


def build_legend(color_scale: SequentialColorScale, samples: int = LEGEND_SAMPLES) -> Legend:
    """
    Build the legend swatches and the static min/max labels.

    Swatch i samples the interpolator at t = i / (samples - 1) and sits at
    x = strip_x + i * strip_width / samples.
    """
    swatch_width = LEGEND_STRIP_WIDTH / samples
    positions = np.linspace(0.0, 1.0, samples)

    swatches = [
        LegendSwatch(
            x=round(LEGEND_STRIP_X + i * swatch_width, 4),
            width=round(swatch_width, 4),
            height=LEGEND_HEIGHT,
            fill=color_scale.interpolate(float(t)),
            position=round(float(t), 2),
        )
        for i, t in enumerate(positions)
    ]
    labels = [LegendLabel(x=x, y=y, text=text) for x, y, text in LEGEND_LABELS]

    return Legend(
        width=LEGEND_WIDTH,
        height=LEGEND_HEIGHT,
        swatches=swatches,
        labels=labels,
    )
