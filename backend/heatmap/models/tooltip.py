"""
Pydantic models for tooltip state and pointer events.
"""

from enum import Enum

from pydantic import BaseModel, Field

from heatmap.config import TooltipPhase, TOOLTIP_FADE_IN_MS


class PointerEventType(str, Enum):
    ENTER = "enter"
    LEAVE = "leave"


class PointerEvent(BaseModel):
    """Pointer event forwarded from the display surface."""

    event: PointerEventType
    x: float = Field(0.0, description="Pointer x in plot coordinates")
    y: float = Field(0.0, description="Pointer y in plot coordinates")
    page_x: float = Field(0.0, description="Pointer x in page coordinates")
    page_y: float = Field(0.0, description="Pointer y in page coordinates")


class TooltipState(BaseModel):
    """Snapshot of the single floating label."""

    state: TooltipPhase = TooltipPhase.HIDDEN
    text: str = ""
    left: float = 0.0
    top: float = 0.0
    opacity: float = 0.0
    hidden: bool = True
    data_year: str = ""
    fade_in_ms: int = TOOLTIP_FADE_IN_MS
