"""
SVG markup for a mounted visual tree.

Produces the heat map surface (axes + cells, with the data-* attributes the
front end reads for its tooltip) and the separate legend surface.
"""

from html import escape

from heatmap.config import SVG_CLASS, SVG_MARGIN, AxisOrientation
from heatmap.models.heatmap import Axis, Legend, VisualTree

_TICK_SIZE = 6


def _num(value: float) -> str:
    """Compact number text for attributes: 12.0 -> '12', 1.50 -> '1.5'."""
    text = f"{float(value):.4f}".rstrip("0").rstrip(".")
    return "0" if text in ("", "-0") else text


def _axis_svg(axis: Axis) -> str:
    parts = []
    for tick in axis.ticks:
        label = escape(tick.label)
        if axis.orientation == AxisOrientation.BOTTOM:
            parts.append(
                f'<g class="tick" transform="translate({_num(tick.offset)},0)">'
                f'<line stroke="currentColor" y2="{_TICK_SIZE}"/>'
                f'<text fill="currentColor" y="9" dy="0.71em" text-anchor="middle">{label}</text>'
                f'</g>'
            )
        else:
            parts.append(
                f'<g class="tick" transform="translate(0,{_num(tick.offset)})">'
                f'<line stroke="currentColor" x2="-{_TICK_SIZE}"/>'
                f'<text fill="currentColor" x="-9" dy="0.32em" text-anchor="end">{label}</text>'
                f'</g>'
            )

    transform = f' transform="{axis.transform}"' if axis.transform else ""
    return f'<g id="{axis.id}" class="axis"{transform}>' + "".join(parts) + "</g>"


def render_svg(tree: VisualTree) -> str:
    """Heat map surface: title, description, both axes and every cell."""
    margin = tree.margin
    style = (
        f"margin:{SVG_MARGIN['top']}px {SVG_MARGIN['right']}px "
        f"{SVG_MARGIN['bottom']}px {SVG_MARGIN['left']}px;"
    )

    cells = []
    for cell in tree.cells:
        cells.append(
            f'<rect class="cell" x="{_num(cell.x)}" y="{_num(cell.y)}" '
            f'width="{_num(cell.width)}" height="{_num(cell.height)}" '
            f'fill="{cell.fill}" data-month="{cell.data_month}" '
            f'data-year="{cell.year}" data-temp="{_num(cell.temperature)}"/>'
        )

    return (
        f'<svg xmlns="http://www.w3.org/2000/svg" class="{SVG_CLASS}" '
        f'width="{tree.width}" height="{tree.height}" style="{style}" '
        f'role="img" aria-label="{escape(tree.title)}">'
        f'<title id="title">{escape(tree.title)}</title>'
        f'<desc id="description">{escape(tree.description)}</desc>'
        f'<g transform="translate({margin["left"]},{margin["top"]})">'
        + _axis_svg(tree.x_axis)
        + _axis_svg(tree.y_axis)
        + "".join(cells)
        + "</g></svg>"
    )


def render_legend_svg(legend: Legend) -> str:
    """Legend surface: color swatches plus the min/max labels."""
    swatches = "".join(
        f'<rect x="{_num(s.x)}" width="{_num(s.width)}" height="{_num(s.height)}" fill="{s.fill}"/>'
        for s in legend.swatches
    )
    labels = "".join(
        f'<text x="{_num(lb.x)}" y="{_num(lb.y)}" text-anchor="{lb.anchor}">{escape(lb.text)}</text>'
        for lb in legend.labels
    )
    return (
        f'<svg xmlns="http://www.w3.org/2000/svg" id="legend" '
        f'width="{legend.width}" height="{legend.height}">'
        + swatches
        + labels
        + "</svg>"
    )
