"""
Heat map renderer.

render_heatmap() is a pure function from a Dataset to a VisualTree:
- x axis: one band per distinct year, labelled every 5th year
- y axis: one band per distinct month, labelled with all 12 month names
- one cell per record, filled from the variance color scale
- the legend strip sampled from the same color scale

Mounting the tree (and clearing whatever was there before) is the display
surface's job, not the renderer's.
"""

import math

from heatmap.config import (
    DESCRIPTION,
    MAP_HEIGHT,
    MAP_MARGIN,
    MAP_WIDTH,
    MONTH_NAMES,
    TITLE,
    X_TICK_EVERY,
    AxisOrientation,
)
from heatmap.engine.legend import build_legend
from heatmap.engine.loader import DataUnavailable
from heatmap.engine.scales import BandScale, Scales, build_scales
from heatmap.models.dataset import Dataset
from heatmap.models.heatmap import Axis, Cell, Tick, VisualTree


def display_temperature(variance: float, base_temperature: float) -> float:
    """Absolute temperature rounded to 3 decimals, halves rounded up."""
    return math.floor((variance + base_temperature) * 1000 + 0.5) / 1000


def format_temperature(value: float) -> str:
    """Shortest decimal text; integral values drop the trailing '.0'."""
    text = repr(float(value))
    if text.endswith(".0"):
        text = text[:-2]
    return text


def build_x_axis(year_scale: BandScale, every: int = X_TICK_EVERY) -> Axis:
    """Bottom axis with a tick on every `every`-th distinct year."""
    years = year_scale.domain[::every]
    return Axis(
        id="x-axis",
        orientation=AxisOrientation.BOTTOM,
        transform=f"translate(0,{MAP_HEIGHT})",
        ticks=[
            Tick(value=year, label=str(year), offset=year_scale.center(year))
            for year in years
        ],
    )


def month_tick_offsets(month_scale: BandScale) -> dict[int, float]:
    """
    Tick offset for every calendar month, ascending in month order.

    Months with a band sit at the band center. Months missing from the data
    are interpolated between the nearest banded neighbours, with the plot
    edges standing in as month 0 and month 13.
    """
    anchors = [(0, month_scale.range_start)]
    anchors += [(m, month_scale.center(m)) for m in month_scale.domain]
    anchors.append((13, month_scale.range_end))

    offsets = {}
    for month in range(1, 13):
        center = month_scale.center(month)
        if center is not None:
            offsets[month] = center
            continue
        lower = max(a for a in anchors if a[0] < month)
        upper = min(a for a in anchors if a[0] > month)
        fraction = (month - lower[0]) / (upper[0] - lower[0])
        offsets[month] = lower[1] + (upper[1] - lower[1]) * fraction
    return offsets


def build_y_axis(month_scale: BandScale) -> Axis:
    """Left axis with all twelve month names in calendar order."""
    offsets = month_tick_offsets(month_scale)
    return Axis(
        id="y-axis",
        orientation=AxisOrientation.LEFT,
        ticks=[
            Tick(value=month, label=MONTH_NAMES[month - 1], offset=offsets[month])
            for month in range(1, 13)
        ],
    )


def build_cells(dataset: Dataset, scales: Scales) -> list[Cell]:
    width = scales.year.bandwidth
    height = scales.month.bandwidth

    cells = []
    for record in dataset.records:
        cells.append(Cell(
            x=scales.year(record.year),
            y=scales.month(record.month),
            width=width,
            height=height,
            fill=scales.color(record.variance),
            year=record.year,
            month=record.month,
            data_month=record.month - 1,
            variance=record.variance,
            temperature=display_temperature(record.variance, dataset.base_temperature),
        ))
    return cells


def render_heatmap(dataset: Dataset) -> VisualTree:
    """
    Build the complete visual tree for one dataset.

    Raises DataUnavailable for a dataset with no records; nothing is drawn.
    """
    if not dataset.records:
        raise DataUnavailable("Nothing to render: dataset has no records")

    scales = build_scales(dataset, MAP_WIDTH, MAP_HEIGHT)

    return VisualTree(
        title=TITLE,
        description=DESCRIPTION,
        width=MAP_WIDTH + MAP_MARGIN["left"] + MAP_MARGIN["right"],
        height=MAP_HEIGHT + MAP_MARGIN["top"] + MAP_MARGIN["bottom"],
        margin=dict(MAP_MARGIN),
        plot_width=MAP_WIDTH,
        plot_height=MAP_HEIGHT,
        band_width=scales.year.bandwidth,
        band_height=scales.month.bandwidth,
        base_temperature=dataset.base_temperature,
        color_domain=scales.color.domain,
        x_axis=build_x_axis(scales.year),
        y_axis=build_y_axis(scales.month),
        cells=build_cells(dataset, scales),
        legend=build_legend(scales.color),
    )
