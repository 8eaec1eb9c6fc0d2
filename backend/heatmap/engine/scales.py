"""
Scale builder.

Two band scales place years along x and months along y, partitioning the plot
into equal bands (no padding) in ascending domain order. A sequential color
scale maps variance onto a matplotlib colormap over [min, max] of the dataset.
"""

import math
from dataclasses import dataclass
from typing import Optional, Sequence

import matplotlib
from matplotlib.colors import to_hex

from heatmap.config import COLOR_INTERPOLATOR, MAP_HEIGHT, MAP_WIDTH
from heatmap.engine.loader import DataUnavailable
from heatmap.models.dataset import Dataset

# In band units, far above float error and far below a pixel
_INVERT_EPSILON = 1e-9


class BandScale:
    """Discrete domain → pixel offset of the start of each equal-width band."""

    def __init__(self, domain: Sequence[int], range_start: float, range_end: float):
        self.domain = list(domain)
        self.range_start = float(range_start)
        self.range_end = float(range_end)
        self._index = {value: i for i, value in enumerate(self.domain)}

    @property
    def step(self) -> float:
        if not self.domain:
            return 0.0
        return (self.range_end - self.range_start) / len(self.domain)

    @property
    def bandwidth(self) -> float:
        return self.step

    def __call__(self, value: int) -> Optional[float]:
        i = self._index.get(value)
        if i is None:
            return None
        return self.range_start + i * self.step

    def center(self, value: int) -> Optional[float]:
        start = self(value)
        if start is None:
            return None
        return start + self.bandwidth / 2.0

    def invert(self, offset: float) -> Optional[int]:
        """
        Domain value whose band contains the pixel offset.

        invert(scale(v)) == v for every domain value; the epsilon absorbs the
        float drift of start + i * step.
        """
        if not self.domain or self.step <= 0:
            return None
        i = math.floor((offset - self.range_start) / self.step + _INVERT_EPSILON)
        if 0 <= i < len(self.domain):
            return self.domain[i]
        return None


class SequentialColorScale:
    """
    Continuous domain [lo, hi] → hex color via a sequential colormap.

    Values are normalized to t = (v - lo) / (hi - lo) and clamped to [0, 1].
    A zero-width domain maps every value to the colormap midpoint.
    """

    def __init__(self, domain: tuple[float, float], interpolator: str = COLOR_INTERPOLATOR):
        self.domain = (float(domain[0]), float(domain[1]))
        self.interpolator = interpolator
        self._cmap = matplotlib.colormaps[interpolator]

    def normalize(self, value: float) -> float:
        lo, hi = self.domain
        if hi == lo:
            return 0.5
        return (float(value) - lo) / (hi - lo)

    def interpolate(self, t: float) -> str:
        t = min(1.0, max(0.0, float(t)))
        return to_hex(self._cmap(t))

    def __call__(self, value: float) -> str:
        return self.interpolate(self.normalize(value))


@dataclass(frozen=True)
class Scales:
    year: BandScale
    month: BandScale
    color: SequentialColorScale


def build_scales(
    dataset: Dataset,
    width: float = MAP_WIDTH,
    height: float = MAP_HEIGHT,
    interpolator: str = COLOR_INTERPOLATOR,
) -> Scales:
    """Derive the year, month and color scales for one render pass."""
    if not dataset.records:
        raise DataUnavailable("Cannot build scales from an empty dataset")

    return Scales(
        year=BandScale(dataset.years(), 0.0, width),
        month=BandScale(dataset.months(), 0.0, height),
        color=SequentialColorScale(dataset.variance_extent(), interpolator),
    )
