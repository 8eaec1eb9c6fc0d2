"""
Pydantic models for the rendered heat map (the visual tree).
"""

from pydantic import BaseModel, Field

from heatmap.config import AxisOrientation


class Cell(BaseModel):
    """One variance record drawn as a rectangle in plot coordinates."""

    x: float
    y: float
    width: float
    height: float
    fill: str = Field(..., description="Hex color from the color scale")
    year: int
    month: int
    data_month: int = Field(..., description="Zero-based month index (month - 1)")
    variance: float
    temperature: float = Field(..., description="Base + variance, rounded to 3 decimals")


class Tick(BaseModel):
    value: int
    label: str
    offset: float = Field(..., description="Tick position along the axis in plot pixels")


class Axis(BaseModel):
    id: str
    orientation: AxisOrientation
    transform: str = ""
    ticks: list[Tick]


class LegendSwatch(BaseModel):
    x: float
    width: float
    height: float
    fill: str
    position: float = Field(..., description="Normalized sample position in [0, 1]")


class LegendLabel(BaseModel):
    x: float
    y: float
    text: str
    anchor: str = "middle"


class Legend(BaseModel):
    width: int
    height: int
    swatches: list[LegendSwatch]
    labels: list[LegendLabel]


class VisualTree(BaseModel):
    """Everything needed to draw one heat map, derived from one dataset."""

    title: str
    description: str

    # Outer SVG size and the plot area inside it
    width: int
    height: int
    margin: dict[str, int]
    plot_width: int
    plot_height: int
    band_width: float
    band_height: float

    base_temperature: float
    color_domain: tuple[float, float]

    x_axis: Axis
    y_axis: Axis
    cells: list[Cell]
    legend: Legend
