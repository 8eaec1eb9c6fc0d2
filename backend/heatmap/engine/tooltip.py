"""
Tooltip controller.

A single floating label driven by pointer events, modelled as a two-state
machine:

    HIDDEN  --pointer_enter(cell)-->  VISIBLE   (text/position set, opacity
                                                 fades in over 500 ms)
    VISIBLE --pointer_enter(cell)-->  VISIBLE   (retarget; fade continues from
                                                 the current opacity)
    VISIBLE --pointer_leave()------>  HIDDEN    (immediate; pending fade dropped)

Time comes from an injectable clock (seconds), so fades can be stepped in tests.
"""

import time
from typing import Callable, Optional

from heatmap.config import (
    TOOLTIP_FADE_IN_MS,
    TOOLTIP_OFFSET_PX,
    TOOLTIP_OPACITY,
    TooltipPhase,
)
from heatmap.engine.renderer import format_temperature
from heatmap.models.heatmap import Cell
from heatmap.models.tooltip import TooltipState


def tooltip_text(cell: Cell) -> str:
    return (
        f"Year: {cell.year}, Month: {cell.month}, "
        f"Temp: {format_temperature(cell.temperature)}"
    )


class TooltipController:
    def __init__(
        self,
        clock: Callable[[], float] = time.monotonic,
        fade_in_ms: int = TOOLTIP_FADE_IN_MS,
        target_opacity: float = TOOLTIP_OPACITY,
        offset_px: float = TOOLTIP_OFFSET_PX,
    ) -> None:
        self._clock = clock
        self.fade_in_ms = fade_in_ms
        self.target_opacity = target_opacity
        self.offset_px = offset_px
        self._reset()

    def _reset(self) -> None:
        self.phase = TooltipPhase.HIDDEN
        self.text = ""
        self.left = 0.0
        self.top = 0.0
        self.data_year = ""
        self._fade_from = 0.0
        self._fade_started: Optional[float] = None

    def fade_progress(self) -> float:
        """Fraction of the current fade-in completed, 0.0 while hidden."""
        if self.phase is TooltipPhase.HIDDEN or self._fade_started is None:
            return 0.0
        if self.fade_in_ms <= 0:
            return 1.0
        elapsed_ms = (self._clock() - self._fade_started) * 1000.0
        return min(1.0, max(0.0, elapsed_ms / self.fade_in_ms))

    def opacity(self) -> float:
        if self.phase is TooltipPhase.HIDDEN:
            return 0.0
        progress = self.fade_progress()
        if progress >= 1.0:
            return self.target_opacity
        return self._fade_from + (self.target_opacity - self._fade_from) * progress

    def is_shown(self) -> bool:
        """True once the label is visible and fully faded in."""
        return self.phase is TooltipPhase.VISIBLE and self.fade_progress() >= 1.0

    def pointer_enter(self, cell: Cell, page_x: float, page_y: float) -> TooltipState:
        current = self.opacity()
        self.phase = TooltipPhase.VISIBLE
        self.left = page_x + self.offset_px
        self.top = page_y + self.offset_px
        self.text = tooltip_text(cell)
        self.data_year = str(cell.year)
        self._fade_from = current
        self._fade_started = self._clock()
        return self.snapshot()

    def pointer_leave(self) -> TooltipState:
        self._reset()
        return self.snapshot()

    def snapshot(self) -> TooltipState:
        opacity = self.opacity()
        return TooltipState(
            state=self.phase,
            text=self.text,
            left=self.left,
            top=self.top,
            opacity=round(opacity, 4),
            hidden=self.phase is TooltipPhase.HIDDEN,
            data_year=self.data_year,
            fade_in_ms=self.fade_in_ms,
        )
